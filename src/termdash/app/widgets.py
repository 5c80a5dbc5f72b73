"""Leaf widgets used by the dashboard views.

Every widget is a frozen dataclass (ValueWidget), so two frames producing
equal widgets let the renderer skip the repaint. Widgets clip all writes to
the region they are given and degrade to partial output in small regions.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style

from termdash.core.buffer import NULL_STYLE, CellBuffer
from termdash.core.element import ValueWidget
from termdash.core.geometry import Region

ELLIPSIS = "…"


def fit(text: str, width: int) -> str:
    """Truncate text to width columns, marking the cut with an ellipsis."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width == 1:
        return text[:1]
    return text[: width - 1] + ELLIPSIS


def pad(text: str, width: int) -> str:
    return fit(text, width).ljust(max(0, width))


@dataclass(frozen=True)
class Paragraph(ValueWidget):
    lines: tuple[str, ...]
    style: Style = NULL_STYLE
    offset: int = 0

    def preferred_height(self) -> int | None:
        return len(self.lines)

    def first_visible(self, height: int) -> int:
        # The last page stays full: never scroll past the final line.
        return max(0, min(self.offset, len(self.lines) - height))

    def paint(self, region: Region, buffer: CellBuffer) -> None:
        buffer.fill(region, " ", self.style)
        start = self.first_visible(region.height)
        for row, line in zip(region.rows(), self.lines[start:]):
            buffer.set_string(region.x, row, fit(line, region.width), self.style, clip=region)


@dataclass(frozen=True)
class Rule(ValueWidget):
    char: str = "─"
    style: Style = NULL_STYLE

    def preferred_height(self) -> int | None:
        return 1

    def paint(self, region: Region, buffer: CellBuffer) -> None:
        buffer.fill(region, self.char, self.style)


@dataclass(frozen=True)
class TabBar(ValueWidget):
    labels: tuple[str, ...]
    active: int
    focused: bool = True
    style: Style = NULL_STYLE
    active_style: Style = NULL_STYLE

    def preferred_height(self) -> int | None:
        return 1

    def paint(self, region: Region, buffer: CellBuffer) -> None:
        buffer.fill(region, " ", self.style)
        highlight = self.active_style if self.focused else self.active_style + Style(dim=True)
        x = region.x + 1
        for index, label in enumerate(self.labels):
            if index:
                x += buffer.set_string(x, region.y, " │ ", self.style, clip=region)
            text = f" {label} "
            buffer.set_string(x, region.y, text, highlight if index == self.active else self.style, clip=region)
            x += len(text)
            if x >= region.right:
                break


@dataclass(frozen=True)
class ListView(ValueWidget):
    rows: tuple[str, ...]
    selected: int | None = None
    style: Style = NULL_STYLE
    highlight: Style = NULL_STYLE
    empty_text: str = ""
    empty_style: Style = NULL_STYLE

    def scroll_offset(self, height: int) -> int:
        """First visible row such that the selection stays on screen."""
        if self.selected is None or height <= 0 or self.selected < height:
            return 0
        return self.selected - height + 1

    def paint(self, region: Region, buffer: CellBuffer) -> None:
        buffer.fill(region, " ", self.style)
        if not self.rows:
            buffer.set_string(region.x + 1, region.y, fit(self.empty_text, region.width - 1), self.empty_style, clip=region)
            return
        start = self.scroll_offset(region.height)
        for row, index in zip(region.rows(), range(start, len(self.rows))):
            style = self.highlight if index == self.selected else self.style
            buffer.set_string(region.x, row, pad(self.rows[index], region.width), style, clip=region)


@dataclass(frozen=True)
class Table(ValueWidget):
    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    style: Style = NULL_STYLE
    header_style: Style = NULL_STYLE
    gap: int = 2

    def column_widths(self) -> list[int]:
        widths = [len(h) for h in self.headers]
        for row in self.rows:
            for index, cell in enumerate(row[: len(widths)]):
                widths[index] = max(widths[index], len(cell))
        return widths

    def preferred_height(self) -> int | None:
        return len(self.rows) + 1

    def _paint_row(self, cells, y: int, style: Style, region: Region, buffer: CellBuffer, widths) -> None:
        x = region.x
        for cell, width in zip(cells, widths):
            buffer.set_string(x, y, pad(cell, width), style, clip=region)
            x += width + self.gap

    def paint(self, region: Region, buffer: CellBuffer) -> None:
        buffer.fill(region, " ", self.style)
        if region.is_empty():
            return
        widths = self.column_widths()
        self._paint_row(self.headers, region.y, self.header_style, region, buffer, widths)
        for y, row in zip(range(region.y + 1, region.bottom), self.rows):
            self._paint_row(row, y, self.style, region, buffer, widths)


@dataclass(frozen=True)
class StatusBar(ValueWidget):
    left: str
    right: str = ""
    is_error: bool = False
    style: Style = NULL_STYLE
    error_style: Style = NULL_STYLE

    def preferred_height(self) -> int | None:
        return 1

    def paint(self, region: Region, buffer: CellBuffer) -> None:
        style = self.error_style if self.is_error else self.style
        buffer.fill(region, " ", style)
        right = fit(self.right, max(0, region.width // 2))
        if right:
            buffer.set_string(region.right - len(right) - 1, region.y, right, self.style, clip=region)
        room = region.width - len(right) - 3
        buffer.set_string(region.x + 1, region.y, fit(self.left, room), style, clip=region)


@dataclass(frozen=True)
class Breadcrumb(ValueWidget):
    """One-row trail of labels, e.g. "Feed ▸ Entry e1", with a trailing hint."""

    trail: tuple[str, ...]
    hint: str = ""
    separator: str = " ▸ "
    style: Style = NULL_STYLE
    label_style: Style = NULL_STYLE

    def preferred_height(self) -> int | None:
        return 1

    def paint(self, region: Region, buffer: CellBuffer) -> None:
        buffer.fill(region, " ", self.style)
        x = region.x + 1
        for index, label in enumerate(self.trail):
            if index:
                x += buffer.set_string(x, region.y, self.separator, self.style, clip=region)
            x += buffer.set_string(x, region.y, label, self.label_style, clip=region)
        if self.hint:
            buffer.set_string(x + 2, region.y, self.hint, self.style, clip=region)


@dataclass(frozen=True)
class Modal(ValueWidget):
    """Bordered box centered in its region, with a title in the top edge."""

    title: str
    lines: tuple[str, ...]
    style: Style = NULL_STYLE
    border_style: Style = NULL_STYLE

    def box(self, region: Region) -> Region:
        inner = max([len(self.title) + 2, *(len(line) for line in self.lines)])
        return region.centered(inner + 4, len(self.lines) + 2)

    def paint(self, region: Region, buffer: CellBuffer) -> None:
        box = self.box(region)
        if box.width < 2 or box.height < 2:
            return
        buffer.fill(box, " ", self.style)
        top, bottom = box.y, box.bottom - 1
        left, right = box.x, box.right - 1
        for x in range(left + 1, right):
            buffer.set_cell(x, top, "─", self.border_style, clip=box)
            buffer.set_cell(x, bottom, "─", self.border_style, clip=box)
        for y in range(top + 1, bottom):
            buffer.set_cell(left, y, "│", self.border_style, clip=box)
            buffer.set_cell(right, y, "│", self.border_style, clip=box)
        for x, y, corner in ((left, top, "╭"), (right, top, "╮"), (left, bottom, "╰"), (right, bottom, "╯")):
            buffer.set_cell(x, y, corner, self.border_style, clip=box)
        title = fit(f" {self.title} ", box.width - 4)
        buffer.set_string(left + 2, top, title, self.border_style, clip=box)
        body = box.inset(2, 1, 2, 1)
        for y, line in zip(body.rows(), self.lines):
            buffer.set_string(body.x, y, fit(line, body.width), self.style, clip=body)
