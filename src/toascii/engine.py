from __future__ import annotations


class CharGrid:
    """Character cells for one frame, filled in layers.

    Each cell starts unset (None). A write fills an unset cell or replaces a
    space; a cell holding any other glyph keeps it, so whichever layer writes
    a glyph first wins.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._cells: list[list[str | None]] = [[None] * width for _ in range(height)]

    def write(self, row: int, col: int, glyph: str) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"cell ({row}, {col}) outside {self.width}x{self.height} grid")
        target = self._cells[row][col]
        if target is None or target == " ":
            self._cells[row][col] = glyph

    def cell(self, row: int, col: int) -> str | None:
        return self._cells[row][col]

    @property
    def text(self) -> list[str]:
        """Rows as written so far; unset cells are left out."""
        return ["".join(c for c in row if c is not None) for row in self._cells]

    def rows(self) -> list[str]:
        """Final frame: one string of ``width`` characters per row, unset cells as spaces."""
        return ["".join(" " if c is None else c for c in row) for row in self._cells]
