import dataclasses

import pytest

from dsalgo.traversal import Color, Edge, Result


def test_edge_reversed_swaps_endpoints_and_keeps_weight():
    edge = Edge(2, 7, 0.25)
    back = edge.reversed()
    assert (back.source, back.destination, back.weight) == (7, 2, 0.25)


def test_edge_reversed_twice_is_identity():
    edge = Edge(4, 1, 3.5)
    assert edge.reversed().reversed() == edge


def test_edge_is_immutable():
    edge = Edge(0, 1, 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        edge.weight = 2.0  # type: ignore[misc]
    assert edge.weight == 1.0
    changed = dataclasses.replace(edge, weight=2.0)
    assert (changed.source, changed.destination, changed.weight) == (0, 1, 2.0)


def test_edge_default_weight_and_hashing():
    edges = {Edge(0, 1), Edge(0, 1, 0.0), Edge(1, 0)}
    assert len(edges) == 2
    assert Edge(0, 1).weight == 0.0


def test_colors_order_like_integers():
    assert sorted([Color(4), Color(0), Color(1)]) == [
        Color.WHITE,
        Color.GRAY,
        Color.RED,
    ]
    assert Color(2) is Color.BLACK


def test_result_lookup_by_value():
    assert Result(Result.FINISH.value) is Result.FINISH
    with pytest.raises(ValueError):
        Result(99)