"""Tests for components and the component store."""

from termdash.app.components.detail_panel import DETAIL_PATH, DetailPanel, DetailScroll, ScrollBy, ScrollTo
from termdash.core.component import Component, ComponentStore
from termdash.core.effect import NONE
from termdash.core.element import EMPTY


class TestComponentStore:
    def test_with_state_returns_new_store(self):
        empty = ComponentStore()
        one = empty.with_state("a", 1)
        assert "a" not in empty
        assert one.get("a") == 1
        assert len(one) == 1

    def test_without_missing_path_is_identity(self):
        store = ComponentStore({"a": 1})
        assert store.without("b") is store
        assert store.without("a") == ComponentStore()

    def test_equality_and_enumeration(self):
        assert ComponentStore({"b": 2, "a": 1}) == ComponentStore({"a": 1, "b": 2})
        assert ComponentStore({"b": 2, "a": 1}).paths() == ("a", "b")
        assert hash(ComponentStore({"a": 1})) == hash(ComponentStore({"a": 1}))


class Echo(Component):
    path = "test/echo"

    def init(self):
        return "initial"

    def view(self, props, local):
        return (props, local)


def test_reading_local_state_never_inserts():
    store = ComponentStore()
    assert Echo().render("p", store) == ("p", "initial")
    assert len(store) == 0


def test_render_uses_stored_slice():
    store = ComponentStore({"test/echo": "stored"})
    assert Echo().render("p", store) == ("p", "stored")


def test_default_update_is_identity():
    class Plain(Component):
        def view(self, props, local):
            return EMPTY

    assert Plain().update("x", "msg") == ("x", NONE)


class TestDetailPanel:
    def test_scroll_is_clamped(self):
        panel = DetailPanel()
        local, effect = panel.update(DetailScroll(), ScrollBy(-3, limit=10))
        assert local == DetailScroll(0)
        assert effect == NONE
        local, _ = panel.update(DetailScroll(8), ScrollBy(5, limit=10))
        assert local == DetailScroll(10)
        local, _ = panel.update(DetailScroll(4), ScrollTo(99, limit=-1))
        assert local == DetailScroll(0)

    def test_unknown_message_keeps_state(self):
        local = DetailScroll(3)
        assert DetailPanel().update(local, "noise") == (local, NONE)

    def test_path(self):
        assert DetailPanel.path == DETAIL_PATH == "app/detail_panel"
