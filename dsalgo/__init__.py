"""Linked lists, dynamic arrays, stacks, queues, graphs, spanning trees and sorting, with small command-line tools."""

__version__ = "0.1.0"