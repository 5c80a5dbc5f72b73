"""CellBuffer rows -> Textual Strips.

Adjacent cells sharing a style are merged into one Segment.
"""

from __future__ import annotations

from rich.segment import Segment
from textual.strip import Strip

from termdash.core.buffer import Cell, CellBuffer


def row_segments(cells: list[Cell]) -> list[Segment]:
    segments: list[Segment] = []
    run: list[str] = []
    run_style = None
    for cell in cells:
        if run and cell.style != run_style:
            segments.append(Segment("".join(run), run_style))
            run = []
        if not run:
            run_style = cell.style
        run.append(cell.symbol)
    if run:
        segments.append(Segment("".join(run), run_style))
    return segments


def row_strip(buffer: CellBuffer, y: int, width: int | None = None) -> Strip:
    """One buffer row as a Strip, padded or cropped to width when given."""
    if not 0 <= y < buffer.height:
        return Strip.blank(width if width is not None else buffer.width)
    strip = Strip(row_segments(buffer.row(y)), buffer.width)
    if width is not None and width != buffer.width:
        strip = strip.adjust_cell_length(width)
    return strip
