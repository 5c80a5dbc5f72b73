"""Tests for the diffing renderer."""

import pytest

from termdash.app.action import RefreshData
from termdash.app.provider import FixtureProvider
from termdash.app.widgets import Paragraph
from termdash.app.wiring import make_runtime
from termdash.core.buffer import CellBuffer
from termdash.core.element import EMPTY, Element, ElementWidget, leaf, overlay, vertical
from termdash.core.geometry import Region
from termdash.core.layout import Fixed, Min
from termdash.core.renderer import Renderer
from termdash.io.settings import Config


def _two_rows(top: str, bottom: str):
    return vertical([Fixed(1), Fixed(1)], [leaf(Paragraph((top,))), leaf(Paragraph((bottom,)))])


class TestDiffIdempotence:
    def test_same_tree_twice_writes_nothing(self, buffer, renderer):
        tree = _two_rows("alpha", "beta")
        first = renderer.render_with_diff(tree, buffer.region, buffer)
        assert first.writes > 0
        second = renderer.render_with_diff(_two_rows("alpha", "beta"), buffer.region, buffer)
        assert second.writes == 0
        assert second.repainted == 0

    def test_two_builds_without_dispatch_write_zero_cells(self):
        with make_runtime(Config(), FixtureProvider(count=8), save_config=lambda c: None) as runtime:
            runtime.dispatch(RefreshData())
            runtime.settle()
            buf = CellBuffer(80, 24)
            renderer = Renderer()
            renderer.render_with_diff(runtime.build(), buf.region, buf)
            buf.reset_writes()
            stats = renderer.render_with_diff(runtime.build(), buf.region, buf)
        assert stats.writes == 0
        assert buf.writes == 0


class TestDiffRepaint:
    def test_only_changed_sibling_is_repainted(self, buffer, renderer):
        renderer.render_with_diff(_two_rows("alpha", "beta"), buffer.region, buffer)
        stats = renderer.render_with_diff(_two_rows("alpha", "gamma"), buffer.region, buffer)
        assert stats.repainted == 1
        assert stats.skipped == 1
        assert buffer.row_text(0).startswith("alpha")
        assert buffer.row_text(1).startswith("gamma")

    def test_changed_text_leaves_no_stale_cells(self, buffer, renderer):
        renderer.render_with_diff(_two_rows("a long line here", "x"), buffer.region, buffer)
        renderer.render_with_diff(_two_rows("short", "x"), buffer.region, buffer)
        assert buffer.row_text(0).rstrip() == "short"

    def test_structural_change_repaints_whole_region(self, buffer, renderer):
        renderer.render_with_diff(_two_rows("a", "b"), buffer.region, buffer)
        other = vertical([Fixed(3), Min(0)], [leaf(Paragraph(("a",))), leaf(Paragraph(("b",)))])
        stats = renderer.render_with_diff(other, buffer.region, buffer)
        assert stats.writes >= buffer.width * buffer.height
        assert buffer.row_text(3).startswith("b")

    def test_region_change_forces_full_paint(self, buffer, renderer):
        tree = _two_rows("a", "b")
        renderer.render_with_diff(tree, buffer.region, buffer)
        stats = renderer.render_with_diff(tree, Region(0, 0, 20, 5), buffer)
        assert stats.writes > 0

    def test_overlay_change_repaints(self, buffer, renderer):
        base = _two_rows("a", "b")
        renderer.render_with_diff(overlay(base, leaf(Paragraph(("top",)))), buffer.region, buffer)
        stats = renderer.render_with_diff(base, buffer.region, buffer)
        assert stats.writes > 0
        assert buffer.row_text(0).startswith("a")

    def test_reset_forgets_previous_frame(self, buffer, renderer):
        tree = _two_rows("a", "b")
        renderer.render_with_diff(tree, buffer.region, buffer)
        renderer.reset()
        assert renderer.prev_tree is None
        assert renderer.render_with_diff(tree, buffer.region, buffer).writes > 0


def test_render_always_repaints(buffer, renderer):
    tree = _two_rows("a", "b")
    renderer.render(tree, buffer.region, buffer)
    assert renderer.render(tree, buffer.region, buffer).writes > 0


def test_widgets_never_write_outside_their_region(renderer):
    buf = CellBuffer(20, 6)
    long_text = ("x" * 50,) * 10
    tree = vertical([Fixed(2), Fixed(2), Min(0)], [EMPTY, leaf(Paragraph(long_text)), EMPTY])
    renderer.render(tree, buf.region, buf)
    assert buf.row_text(0).strip() == ""
    assert buf.row_text(1).strip() == ""
    assert buf.row_text(2).startswith("x" * 19)
    assert buf.row_text(4).strip() == ""


def test_tiny_regions_do_not_raise(renderer):
    buf = CellBuffer(1, 1)
    tree = vertical([Fixed(1), Min(0), Fixed(1)], [leaf(Paragraph(("abc",))), EMPTY, leaf(Paragraph(("d",)))])
    renderer.render_with_diff(tree, buf.region, buf)
    assert buf.row_text(0) == "a"


def test_unknown_element_type_raises(buffer, renderer):
    class Mystery(Element):
        pass

    with pytest.raises(TypeError):
        renderer.render(Mystery(), buffer.region, buffer)


def test_opaque_leaf_is_repainted_every_frame(buffer, renderer):
    painted = []

    class Counter(ElementWidget):
        def paint(self, region, buffer):
            painted.append(region)

    tree = leaf(Counter())
    renderer.render_with_diff(tree, buffer.region, buffer)
    renderer.render_with_diff(tree, buffer.region, buffer)
    assert len(painted) == 2
