"""Declarative UI tree: the per-frame Element values views produce.

// [LAW:one-source-of-truth] The Element subclasses below are the closed set of
//   shapes. The renderer and trees_equal() branch on exactly these.

Elements carry no identity across frames. The renderer compares a new tree
with the previous one structurally (trees_equal) to decide what to repaint.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from termdash.core.buffer import CellBuffer
from termdash.core.geometry import Region
from termdash.core.layout import Constraint, Direction, Fixed, Proportional


class ElementWidget:
    """Opaque, self-painting leaf.

    Subclasses implement paint(); they must only write inside the region
    they are handed (pass it as `clip=` to the buffer helpers).

    same_as() is the diffing hook. The default is conservative: a leaf is
    never considered unchanged, so it is repainted every frame it is reached.
    """

    def paint(self, region: Region, buffer: CellBuffer) -> None:
        raise NotImplementedError

    def preferred_width(self) -> int | None:
        return None

    def preferred_height(self) -> int | None:
        return None

    def same_as(self, other: "ElementWidget") -> bool:
        return False


class ValueWidget(ElementWidget):
    """Leaf whose dataclass fields fully determine its output.

    Declare subclasses as frozen dataclasses; two instances of the same class
    with equal fields paint identically, so the renderer may skip them.
    """

    def same_as(self, other: ElementWidget) -> bool:
        return type(self) is type(other) and self == other


@dataclass(frozen=True)
class Element:
    """Base class for all tree nodes."""


@dataclass(frozen=True)
class Widget(Element):
    widget: ElementWidget


@dataclass(frozen=True)
class Container(Element):
    children: tuple[Element, ...]
    direction: Direction
    constraints: tuple[Constraint, ...]


@dataclass(frozen=True)
class Overlay(Element):
    """`top` painted over `base`, both in the same region."""

    base: Element
    top: Element


@dataclass(frozen=True)
class Empty(Element):
    """Paints nothing."""


EMPTY = Empty()


def leaf(widget: ElementWidget) -> Widget:
    return Widget(widget)


def _preferred(child: Element, direction: Direction) -> Constraint:
    if isinstance(child, Widget):
        size = (
            child.widget.preferred_height()
            if direction is Direction.VERTICAL
            else child.widget.preferred_width()
        )
        if size is not None:
            return Fixed(size)
    return Proportional(1)


def container(
    direction: Direction,
    constraints: Sequence[Constraint | None],
    children: Sequence[Element],
) -> Container:
    """Build a Container; a None constraint means "the child's preferred size"."""
    children = tuple(children)
    resolved = []
    for index, constraint in enumerate(constraints):
        if constraint is None:
            child = children[index] if index < len(children) else EMPTY
            constraint = _preferred(child, direction)
        resolved.append(constraint)
    return Container(children, direction, tuple(resolved))


def vertical(constraints: Sequence[Constraint | None], children: Sequence[Element]) -> Container:
    return container(Direction.VERTICAL, constraints, children)


def horizontal(constraints: Sequence[Constraint | None], children: Sequence[Element]) -> Container:
    return container(Direction.HORIZONTAL, constraints, children)


def overlay(base: Element, top: Element) -> Element:
    """Overlay top on base; an empty top collapses to base."""
    if isinstance(top, Empty):
        return base
    return Overlay(base, top)


def trees_equal(a: Element | None, b: Element | None) -> bool:
    """Structural equality used for diffing.

    Same shape, same layout, and every leaf pair equal under same_as().
    """
    if a is None or b is None:
        return a is None and b is None
    if type(a) is not type(b):
        return False
    if isinstance(a, Widget):
        return a.widget.same_as(b.widget)
    if isinstance(a, Container):
        return (
            a.direction is b.direction
            and a.constraints == b.constraints
            and len(a.children) == len(b.children)
            and all(trees_equal(x, y) for x, y in zip(a.children, b.children))
        )
    if isinstance(a, Overlay):
        return trees_equal(a.base, b.base) and trees_equal(a.top, b.top)
    return isinstance(a, Empty)


def count_nodes(element: Element) -> int:
    if isinstance(element, Container):
        return 1 + sum(count_nodes(child) for child in element.children)
    if isinstance(element, Overlay):
        return 1 + count_nodes(element.base) + count_nodes(element.top)
    return 1
