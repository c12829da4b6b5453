# src/othello/types.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional

Side = Literal["B", "W"]   # B = dark (moves first), W = light
Cell = Optional[Side]

SIDE_NAMES = {"B": "Black", "W": "White"}


def other(side: Side) -> Side:
    return "W" if side == "B" else "B"


@dataclass(frozen=True, slots=True)
class Move:
    row: int
    col: int

    @property
    def label(self) -> str:
        return f"{self.row}{chr(ord('A') + self.col)}"

    @classmethod
    def parse(cls, raw: str, size: int = 8) -> "Move":
        """
        Parse the "{row}{column-letter}" form used by the move log, e.g. "3A".
        The letter may come first ("A3") and case does not matter.
        """
        s = raw.strip().upper()
        if len(s) != 2:
            raise ValueError(f"Invalid coordinate {raw!r}. Use row digit + column letter, e.g. 2D.")

        if s[0].isalpha():
            s = s[1] + s[0]

        digit, letter = s[0], s[1]
        if not digit.isdigit() or not letter.isalpha():
            raise ValueError(f"Invalid coordinate {raw!r}. Use row digit + column letter, e.g. 2D.")

        row = int(digit)
        col = ord(letter) - ord("A")
        if not (0 <= row < size and 0 <= col < size):
            last = chr(ord("A") + size - 1)
            raise ValueError(f"Coordinate out of range: rows 0-{size - 1}, columns A-{last}.")
        return cls(row, col)

    def __str__(self) -> str:
        return self.label
