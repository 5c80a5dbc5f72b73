"""Element tree -> CellBuffer painter with single-frame diffing.

// [LAW:one-source-of-truth] The renderer exclusively owns the previous frame's
//   tree; views never see it.

render() always repaints the whole region. render_with_diff() compares the
new tree against the one painted last time into the same region: identical
subtrees are skipped with zero cell writes, a mismatched subtree is cleared
and repainted, and siblings of a mismatch are still compared individually
when the enclosing container kept its layout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from termdash.core.buffer import CellBuffer
from termdash.core.element import Container, Element, Empty, Overlay, Widget, count_nodes, trees_equal
from termdash.core.geometry import Region
from termdash.core.layout import split

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderStats:
    """What one render call did."""

    repainted: int = 0
    skipped: int = 0
    writes: int = 0


class Renderer:
    def __init__(self):
        self._prev_tree: Element | None = None
        self._prev_region: Region | None = None
        self._repainted = 0
        self._skipped = 0

    @property
    def prev_tree(self) -> Element | None:
        return self._prev_tree

    def reset(self) -> None:
        """Forget the previous frame; the next diff render repaints everything."""
        self._prev_tree = None
        self._prev_region = None

    def render(self, element: Element, region: Region, buffer: CellBuffer) -> RenderStats:
        """Paint element into region unconditionally."""
        self._begin()
        start = buffer.writes
        buffer.clear(region)
        self._paint(element, region, buffer)
        self._remember(element, region)
        return self._finish(buffer.writes - start)

    def render_with_diff(self, element: Element, region: Region, buffer: CellBuffer) -> RenderStats:
        """Paint only what changed since the previous call."""
        self._begin()
        start = buffer.writes
        previous = self._prev_tree if self._prev_region == region else None
        if previous is None:
            buffer.clear(region)
            self._paint(element, region, buffer)
        else:
            self._diff(element, previous, region, buffer)
        self._remember(element, region)
        stats = self._finish(buffer.writes - start)
        logger.debug(
            "render_with_diff: nodes=%d repainted=%d skipped=%d writes=%d",
            count_nodes(element),
            stats.repainted,
            stats.skipped,
            stats.writes,
        )
        return stats

    # ─── internals ────────────────────────────────────────────────────

    def _begin(self) -> None:
        self._repainted = 0
        self._skipped = 0

    def _finish(self, writes: int) -> RenderStats:
        return RenderStats(repainted=self._repainted, skipped=self._skipped, writes=writes)

    def _remember(self, element: Element, region: Region) -> None:
        # Exactly one frame of history.
        self._prev_tree = element
        self._prev_region = region

    def _diff(self, new: Element, old: Element, region: Region, buffer: CellBuffer) -> None:
        if trees_equal(new, old):
            self._skipped += 1
            return
        if (
            isinstance(new, Container)
            and isinstance(old, Container)
            and new.direction is old.direction
            and new.constraints == old.constraints
            and len(new.children) == len(old.children)
        ):
            # Same layout -> same child regions; compare child by child.
            regions = split(region, new.direction, new.constraints, len(new.children))
            for child, prev_child, sub in zip(new.children, old.children, regions):
                self._diff(child, prev_child, sub, buffer)
            return
        # Overlays repaint whole: a changed top may have covered any part of base.
        buffer.clear(region)
        self._paint(new, region, buffer)

    def _paint(self, element: Element, region: Region, buffer: CellBuffer) -> None:
        self._repainted += 1
        if region.is_empty():
            return
        if isinstance(element, Widget):
            element.widget.paint(region, buffer)
        elif isinstance(element, Container):
            regions = split(region, element.direction, element.constraints, len(element.children))
            for child, sub in zip(element.children, regions):
                self._paint(child, sub, buffer)
        elif isinstance(element, Overlay):
            self._paint(element.base, region, buffer)
            self._paint(element.top, region, buffer)
        elif isinstance(element, Empty):
            pass
        else:
            raise TypeError(f"Unknown element type: {type(element).__name__}")
