# src/othello/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence, Tuple

from othello.config import SIZE
from othello.types import Cell, Side

Coord = Tuple[int, int]  # (row, col)

# King-move deltas, never mutated
DIRECTIONS: Tuple[Coord, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

_CHAR_TO_CELL: Dict[str, Cell] = {".": None, "B": "B", "W": "W"}


@dataclass(slots=True)
class Board:
    size: int = SIZE
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.size)] for _ in range(self.size)]

    @classmethod
    def start(cls, size: int = SIZE) -> "Board":
        """Standard 4-disk setup: light on the main diagonal of the centre."""
        b = cls(size)
        m = size // 2 - 1
        b.grid[m][m] = "W"
        b.grid[m + 1][m + 1] = "W"
        b.grid[m][m + 1] = "B"
        b.grid[m + 1][m] = "B"
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from text rows of '.', 'B' and 'W' (spaces ignored).
        Handy for tests and for reproducing positions.
        """
        cleaned = [r.replace(" ", "") for r in rows]
        size = len(cleaned)
        if any(len(r) != size for r in cleaned):
            raise ValueError("Board rows must form a square.")
        try:
            grid = [[_CHAR_TO_CELL[ch] for ch in r.upper()] for r in cleaned]
        except KeyError as e:
            raise ValueError(f"Unknown cell character: {e.args[0]!r}") from None
        return cls(size, grid)

    def copy(self) -> "Board":
        b = Board(self.size)
        b.grid = [row[:] for row in self.grid]
        return b

    def swapped(self) -> "Board":
        """Same position with every disk's colour inverted."""
        swap = {"B": "W", "W": "B", None: None}
        b = Board(self.size)
        b.grid = [[swap[cell] for cell in row] for row in self.grid]
        return b

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def get(self, r: int, c: int) -> Cell:
        return self.grid[r][c]

    def ray(self, r: int, c: int, dr: int, dc: int) -> Iterator[Coord]:
        """Cells outward from (r, c) in one direction, excluding the origin."""
        r += dr
        c += dc
        while 0 <= r < self.size and 0 <= c < self.size:
            yield r, c
            r += dr
            c += dc

    def cells(self) -> Iterator[Coord]:
        for r in range(self.size):
            for c in range(self.size):
                yield r, c

    def count(self, side: Side) -> int:
        return sum(row.count(side) for row in self.grid)

    def empties(self) -> int:
        return sum(row.count(None) for row in self.grid)

    def total_disks(self) -> int:
        return self.size * self.size - self.empties()

    def to_rows(self) -> List[str]:
        return ["".join(cell or "." for cell in row) for row in self.grid]
