"""Container layout: sizing constraints and the stacking-axis solver.

Resolution is deterministic and conserving: the computed extents always sum
to exactly the available extent, for any mix of constraint kinds.

Resolution order:
1. Every constraint gets its base size (Fixed/Min: n, Percentage/Ratio: share
   of the total rounded down, Max/Proportional: 0). When the bases exceed the
   total, earlier children keep their base and later ones are truncated.
2. Leftover space goes to Proportional children by weight (largest
   remainder, ties to the earlier child).
3. Still leftover: Max children grow up to their cap, in order.
4. Still leftover: Min children share it equally (largest remainder).
5. Anything left is absorbed by the last child.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from termdash.core.geometry import Region


class Direction(Enum):
    """Stacking axis of a container."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Constraint:
    """Base class for sizing constraints."""


@dataclass(frozen=True)
class Fixed(Constraint):
    """Exactly `size` cells (less only when space runs out)."""

    size: int

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"Fixed size must be non-negative: {self.size}")


@dataclass(frozen=True)
class Min(Constraint):
    """At least `size` cells; shares leftover space when nothing else takes it."""

    size: int

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"Min size must be non-negative: {self.size}")


@dataclass(frozen=True)
class Max(Constraint):
    """Up to `size` cells of leftover space."""

    size: int

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"Max size must be non-negative: {self.size}")


@dataclass(frozen=True)
class Percentage(Constraint):
    """`percent` of the total extent, rounded down."""

    percent: int

    def __post_init__(self):
        if not 0 <= self.percent <= 100:
            raise ValueError(f"Percentage must be within 0..100: {self.percent}")


@dataclass(frozen=True)
class Ratio(Constraint):
    """`numerator / denominator` of the total extent, rounded down."""

    numerator: int
    denominator: int

    def __post_init__(self):
        if self.denominator <= 0 or self.numerator < 0:
            raise ValueError(f"Invalid ratio: {self.numerator}/{self.denominator}")


@dataclass(frozen=True)
class Proportional(Constraint):
    """Share of the leftover space proportional to `weight`."""

    weight: int = 1

    def __post_init__(self):
        if self.weight < 0:
            raise ValueError(f"Proportional weight must be non-negative: {self.weight}")


def _base_size(constraint: Constraint, total: int) -> int:
    if isinstance(constraint, (Fixed, Min)):
        return constraint.size
    if isinstance(constraint, Percentage):
        return total * constraint.percent // 100
    if isinstance(constraint, Ratio):
        return min(total, total * constraint.numerator // constraint.denominator)
    return 0


def _distribute(sizes: list[int], weighted: list[tuple[int, int]], amount: int) -> None:
    """Split `amount` over (index, weight) pairs by largest remainder, in place."""
    total_weight = sum(weight for _, weight in weighted)
    if total_weight <= 0 or amount <= 0:
        return
    shares = []
    handed_out = 0
    for order, (index, weight) in enumerate(weighted):
        quota, remainder = divmod(amount * weight, total_weight)
        sizes[index] += quota
        handed_out += quota
        shares.append((-remainder, order, index))
    for _, _, index in sorted(shares)[: amount - handed_out]:
        sizes[index] += 1


def resolve(total: int, constraints: Sequence[Constraint]) -> list[int]:
    """Compute the extent of each slot along the stacking axis."""
    if not constraints:
        return []
    total = max(0, total)

    sizes: list[int] = []
    remaining = total
    for constraint in constraints:
        take = min(_base_size(constraint, total), remaining)
        sizes.append(take)
        remaining -= take

    if remaining:
        weighted = [
            (i, c.weight)
            for i, c in enumerate(constraints)
            if isinstance(c, Proportional) and c.weight > 0
        ]
        if weighted:
            _distribute(sizes, weighted, remaining)
            remaining = 0

    if remaining:
        for i, c in enumerate(constraints):
            if isinstance(c, Max) and remaining:
                grow = min(c.size - sizes[i], remaining)
                sizes[i] += grow
                remaining -= grow

    if remaining:
        mins = [(i, 1) for i, c in enumerate(constraints) if isinstance(c, Min)]
        if mins:
            _distribute(sizes, mins, remaining)
            remaining = 0

    if remaining:
        sizes[-1] += remaining
    return sizes


def normalize(constraints: Sequence[Constraint], count: int) -> tuple[Constraint, ...]:
    """Match the constraint list to the child count.

    Missing constraints become Proportional(1); surplus constraints are
    dropped, so every child owns exactly one slot.
    """
    padded = tuple(constraints[:count])
    return padded + (Proportional(1),) * (count - len(padded))


def split(
    region: Region,
    direction: Direction,
    constraints: Sequence[Constraint],
    count: int | None = None,
) -> list[Region]:
    """Split region into consecutive, non-overlapping sub-regions."""
    if count is not None:
        constraints = normalize(constraints, count)
    vertical = direction is Direction.VERTICAL
    extents = resolve(region.height if vertical else region.width, constraints)

    regions = []
    cursor = region.y if vertical else region.x
    for extent in extents:
        if vertical:
            regions.append(Region(region.x, cursor, region.width, extent))
        else:
            regions.append(Region(cursor, region.y, extent, region.height))
        cursor += extent
    return regions
