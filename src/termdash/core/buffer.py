"""Character-cell buffer the renderer paints into.

The buffer is the host-display boundary: the host translates rows of cells
into terminal output. Nothing here knows about terminals.

// [LAW:single-enforcer] set_cell is the only path that mutates a cell;
//   bounds clipping and write accounting happen there.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from rich.style import Style

from termdash.core.geometry import Region

BLANK_SYMBOL = " "
NULL_STYLE = Style.null()


@dataclass(frozen=True)
class Cell:
    """One grid position: a single-column glyph plus its style."""

    symbol: str = BLANK_SYMBOL
    style: Style = NULL_STYLE


BLANK = Cell()


class CellBuffer:
    """Fixed-size grid of Cells with clipping writes.

    `writes` counts every set_cell call that landed inside the buffer, so
    callers can measure how much a frame repainted. Call reset_writes()
    between frames when measuring.
    """

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"Buffer size must be non-negative: {width}x{height}")
        self.width = width
        self.height = height
        self._rows: list[list[Cell]] = [[BLANK] * width for _ in range(height)]
        self.writes = 0

    @property
    def region(self) -> Region:
        return Region(0, 0, self.width, self.height)

    def reset_writes(self) -> None:
        self.writes = 0

    def get(self, x: int, y: int) -> Cell:
        return self._rows[y][x]

    def set_cell(self, x: int, y: int, symbol: str, style: Style = NULL_STYLE, clip: Region | None = None) -> bool:
        """Write one cell. Returns False when the position was clipped."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        if clip is not None and not clip.contains(x, y):
            return False
        # Multi-character symbols would desync columns; keep the first glyph.
        glyph = symbol[:1] if symbol else BLANK_SYMBOL
        self._rows[y][x] = Cell(glyph, style)
        self.writes += 1
        return True

    def set_string(
        self,
        x: int,
        y: int,
        text: str,
        style: Style = NULL_STYLE,
        clip: Region | None = None,
    ) -> int:
        """Write text left to right starting at (x, y). Returns cells written."""
        written = 0
        for offset, ch in enumerate(text):
            if ch == "\n":
                break
            if self.set_cell(x + offset, y, ch, style, clip):
                written += 1
        return written

    def fill(self, region: Region, symbol: str = BLANK_SYMBOL, style: Style = NULL_STYLE) -> None:
        """Paint every cell of region (clipped to the buffer)."""
        target = region.intersection(self.region)
        for row in target.rows():
            for col in range(target.x, target.right):
                self.set_cell(col, row, symbol, style)

    def clear(self, region: Region | None = None) -> None:
        self.fill(region if region is not None else self.region)

    def resize(self, width: int, height: int) -> None:
        """Reallocate to a new size; all content is dropped."""
        if width < 0 or height < 0:
            raise ValueError(f"Buffer size must be non-negative: {width}x{height}")
        self.width = width
        self.height = height
        self._rows = [[BLANK] * width for _ in range(height)]

    def row(self, y: int) -> list[Cell]:
        return list(self._rows[y])

    def iter_rows(self) -> Iterator[list[Cell]]:
        for row in self._rows:
            yield list(row)

    def row_text(self, y: int) -> str:
        return "".join(cell.symbol for cell in self._rows[y])

    def to_text(self) -> str:
        """Plain-text dump of the buffer, one line per row, trailing blanks kept."""
        return "\n".join(self.row_text(y) for y in range(self.height))
