from __future__ import annotations

from typing import Iterator, Sequence

from boggle.errors import InvalidArgumentError

QU = "qu"

# W, NW, N, NE, E, SE, S, SW
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, -1), (-1, -1), (-1, 0), (-1, 1),
    (0, 1), (1, 1), (1, 0), (1, -1),
)


class Board:
    """Square Boggle board.

    Letters are given row-major as one string. Every cell is stored
    lowercase; a 'q' becomes the two-letter cell "qu".
    """

    def __init__(self, dimension: int, letters: str, reject_duplicates: bool = False):
        if not isinstance(letters, str) or not letters.strip():
            raise InvalidArgumentError("The board passed in is empty or consists only of whitespace")
        if dimension < 1:
            raise InvalidArgumentError(f"Board dimension must be positive, got {dimension}")
        if dimension * dimension != len(letters):
            raise InvalidArgumentError(
                f"Board dimension ({dimension}) and board ({letters!r}) don't match up in length: "
                f"expected {dimension * dimension} letters, got {len(letters)}"
            )

        self.dimension = dimension
        lowered = letters.lower()
        seen: set[str] = set()
        cells: list[list[str]] = []
        for r in range(dimension):
            row = []
            for c in range(dimension):
                ch = lowered[r * dimension + c]
                if not ch.isalpha():
                    raise InvalidArgumentError(f"Non-alphabetic character {ch!r} found in board {letters!r}")
                if reject_duplicates:
                    if ch in seen:
                        raise InvalidArgumentError(f"Duplicate letter {ch!r} found in board {letters!r}")
                    seen.add(ch)
                row.append(QU if ch == "q" else ch)
            cells.append(row)
        self._cells = cells

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]], reject_duplicates: bool = False) -> Board:
        """Build a board from a 2-D grid; "qu" and "q" cells are both accepted."""
        letters = "".join("q" if cell.lower() == QU else cell for row in rows for cell in row)
        return cls(len(rows), letters, reject_duplicates)

    @property
    def rows(self) -> list[list[str]]:
        return [list(row) for row in self._cells]

    def __getitem__(self, pos: tuple[int, int]) -> str:
        row, col = pos
        return self.cell_at(row, col)

    def __len__(self) -> int:
        return self.dimension * self.dimension

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        letters = "".join("q" if cell == QU else cell for row in self._cells for cell in row)
        return f"Board({self.dimension}, {letters!r})"

    def cell_at(self, row: int, col: int) -> str:
        if not (0 <= row < self.dimension and 0 <= col < self.dimension):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.dimension}x{self.dimension} board")
        return self._cells[row][col]

    def positions(self) -> Iterator[tuple[int, int]]:
        for r in range(self.dimension):
            for c in range(self.dimension):
                yield r, c

    def neighbors(self, row: int, col: int) -> list[tuple[int, int]]:
        adj = []
        for dr, dc in DIRECTIONS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self.dimension and 0 <= nc < self.dimension:
                adj.append((nr, nc))
        return adj

    def render(self) -> str:
        width = 2 if any(cell == QU for row in self._cells for cell in row) else 1
        return "\n".join(
            "| " + " ".join(cell.ljust(width) for cell in row) + " |"
            for row in self._cells
        )
