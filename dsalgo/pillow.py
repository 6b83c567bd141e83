"""The pillow passing game: players in a ring pass a pillow after their reflex time."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence

from dsalgo.linked_list import Cursor, LinkedList

_WORD_PATTERN = re.compile(r"\d+|\S")


@dataclass
class Player:
    """A player in the ring; players are equal when their ids are."""

    player_id: int
    reflex_time: int = field(compare=False)
    is_active: bool = field(default=False, compare=False)
    time_elapsed: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f"Player ID: {self.player_id} :: Reflex Time: {self.reflex_time}\n"


class PillowPassingGame:
    """Tracks who holds the pillow as time advances."""

    def __init__(self) -> None:
        self._players: LinkedList[Player] = LinkedList()
        self._cursor: Optional[Cursor[Player]] = None
        self._current_time = 0
        self._reversed = False

    @property
    def forward(self) -> bool:
        """True while the pillow travels in the order players joined."""
        return not self._reversed

    def add(self, player_id: int, reflex_time: int) -> None:
        """Add a player at the end of the ring."""
        self._players.append(Player(player_id, reflex_time))

    def _step(self, cursor: Cursor[Player]) -> Cursor[Player]:
        if not self._reversed and cursor == self._players.last():
            return self._players.first()
        if self._reversed and cursor == self._players.first():
            return self._players.last()
        moved = Cursor(cursor.node)
        if self._reversed:
            moved.retreat()
        else:
            moved.advance()
        return moved

    def _require_started(self) -> Cursor[Player]:
        if self._cursor is None:
            raise RuntimeError("The game has not started")
        return self._cursor

    def eliminate(self) -> None:
        """Remove the player holding the pillow; the next player gets it."""
        cursor = self._require_started()
        removed = cursor.value
        self._cursor = self._step(cursor)
        self._players.remove(removed)

    def current_player(self, time: int) -> int:
        """Advance the game to ``time`` and return the id holding the pillow."""
        if self._current_time == 0:
            self._cursor = self._players.first()
        cursor = self._require_started()
        player = cursor.value
        remaining = time - self._current_time
        if player.is_active:
            remaining -= player.reflex_time - player.time_elapsed
        else:
            remaining -= player.reflex_time
        while remaining > 0:
            player.is_active = False
            player.time_elapsed = 0
            cursor = self._step(cursor)
            player = cursor.value
            remaining -= player.reflex_time
        self._cursor = cursor
        player.time_elapsed = remaining + player.reflex_time
        player.is_active = True
        self._current_time = time
        return player.player_id

    def change_direction(self) -> None:
        """Reverse the direction the pillow travels."""
        self._reversed = not self._reversed

    def possible_sequence(self) -> List[int]:
        """Ids in passing order, starting from the current holder."""
        start = self._require_started()
        ids = []
        cursor = start
        while True:
            ids.append(cursor.value.player_id)
            cursor = self._step(cursor)
            if cursor == start:
                return ids

    def __len__(self) -> int:
        return len(self._players)

    def __str__(self) -> str:
        return str(self._players)


class _EndOfInput(Exception):
    pass


def _words(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from _WORD_PATTERN.findall(line)


def run_game(lines: Iterable[str]) -> Iterator[str]:
    """Play a game described by whitespace-separated commands; yield its output.

    Input: the player count, each player's reflex time, then commands of the
    form ``<time> <option>`` with options M (eliminate), R (reverse),
    I <reflex> (insert player), P (print holder) and F (finish).
    """
    words = _words(lines)

    def take() -> str:
        word = next(words, None)
        if word is None:
            raise _EndOfInput
        return word

    game = PillowPassingGame()
    try:
        player_count = int(take())
        for player_id in range(1, player_count + 1):
            game.add(player_id, int(take()))

        while True:
            time = int(take())
            option = take()
            if option == "M":
                holder = game.current_player(time)
                yield f"Player {holder} has been eliminated at t={time}"
                game.eliminate()
                if len(game) == 1:
                    yield f"Game over : Player {game.current_player(time)} wins!!"
                    return
            elif option == "R":
                game.current_player(time)
                game.change_direction()
            elif option == "I":
                if len(game) == 1:
                    continue
                reflex_time = int(take())
                player_count += 1
                game.add(player_count, reflex_time)
            elif option == "P":
                holder = game.current_player(time)
                yield f"Player {holder} is holding the pillow at t={time}"
            elif option == "F":
                holder = game.current_player(time)
                if len(game) == 1:
                    yield f"Game over : Player {holder} wins!!"
                else:
                    sequence = ", ".join(str(i) for i in game.possible_sequence())
                    yield (
                        f"Game over : Player {holder} is holding the pillow at t={time}"
                        f", pillow passing sequence = Player {sequence}"
                    )
                return
    except _EndOfInput:
        return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a game read from standard input."""
    for line in run_game(sys.stdin):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())