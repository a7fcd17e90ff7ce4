"""
tribucket core data model for series samples.

This module contains the point type shared by every downsampling entry point.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["DataPoint", "as_points"]


@dataclass(frozen=True, slots=True, eq=False)
class DataPoint:
    """A single (x, y) sample of a series.

    Coordinates are any real numbers (``float`` by default; ``Decimal``,
    ``Fraction`` and NumPy scalars work as well). Equality compares each
    coordinate with ``==``, so a point holding NaN never equals another
    point, itself included.
    """

    x: Any
    y: Any

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataPoint):
            return NotImplemented
        return bool(self.x == other.x) and bool(self.y == other.y)

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def as_points(series: Iterable[DataPoint | Iterable[Any]]) -> list[DataPoint]:
    """Coerce a series of points or ``(x, y)`` pairs to a list of DataPoint.

    DataPoint instances are kept as they are; anything else must unpack to
    exactly two values.

    Raises:
        ValueError: If an item is not an (x, y) pair
    """
    points: list[DataPoint] = []
    for item in series:
        if isinstance(item, DataPoint):
            points.append(item)
            continue
        try:
            x, y = item
        except (TypeError, ValueError) as e:
            raise ValueError(f"Expected an (x, y) pair, got {item!r}") from e
        points.append(DataPoint(x, y))
    return points
