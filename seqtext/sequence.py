"""
The ``SequenceData`` value object produced by the parser.

A ``SequenceData`` is an ordered, immutable series of ``(x, y)`` points
plus the two axis labels. All X values share one representation, recorded
in ``x_kind``:

- ``XKind.INDEX``: implicit zero-based ``int`` row index (one-column input).
- ``XKind.NUMBER``: ``float`` values from the first column.
- ``XKind.DATETIME``: timezone-aware ``datetime`` instants in UTC.

Y values are always finite floats. The invariants are checked on
construction, so a ``SequenceData`` that exists is always well-formed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Iterator, Union

XValue = Union[int, float, datetime]
DataPoint = tuple[XValue, float]


class XKind(str, Enum):
    """Representation shared by every X value in a sequence."""

    INDEX = "index"
    NUMBER = "number"
    DATETIME = "datetime"


def _x_matches_kind(x: object, kind: XKind) -> bool:
    if kind is XKind.INDEX:
        return isinstance(x, int) and not isinstance(x, bool)
    if kind is XKind.NUMBER:
        return isinstance(x, float) and math.isfinite(x)
    return isinstance(x, datetime) and x.utcoffset() == timedelta(0)


def format_x(x: XValue) -> str:
    if isinstance(x, datetime):
        return x.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return repr(x) if isinstance(x, float) else str(x)


@dataclass(frozen=True)
class SequenceData:
    """Parsed time/value series.

    Attributes:
        time_axis_name: Label for the independent variable.
        value_axis_name: Label for the dependent variable.
        data_points: Points in input row order.
        x_kind: How every X value in ``data_points`` is represented.
    """

    time_axis_name: str
    value_axis_name: str
    data_points: tuple[DataPoint, ...]
    x_kind: XKind

    def __post_init__(self) -> None:
        # Accept any iterable of pairs but always store a tuple of tuples.
        points = tuple((x, y) for x, y in self.data_points)
        object.__setattr__(self, "data_points", points)

        if not points:
            raise ValueError("SequenceData requires at least one data point")
        for i, (x, y) in enumerate(points):
            if not _x_matches_kind(x, self.x_kind):
                raise ValueError(
                    f"Point {i}: x={x!r} is not a valid {self.x_kind.value} value"
                )
            if not isinstance(y, float) or not math.isfinite(y):
                raise ValueError(f"Point {i}: y={y!r} is not a finite float")

    def __len__(self) -> int:
        return len(self.data_points)

    def __iter__(self) -> Iterator[DataPoint]:
        return iter(self.data_points)

    @property
    def xs(self) -> tuple[XValue, ...]:
        return tuple(x for x, _ in self.data_points)

    @property
    def ys(self) -> tuple[float, ...]:
        return tuple(y for _, y in self.data_points)

    @property
    def is_datetime(self) -> bool:
        """True when X values are instants (time axis should format dates)."""
        return self.x_kind is XKind.DATETIME

    def to_rows(self) -> list[tuple[str, str]]:
        """Return the points as display strings, one tuple per row.

        Instants are rendered as ISO-8601 with millisecond precision and a
        ``Z`` suffix, e.g. ``2024-01-01T00:00:00.000Z``.
        """
        return [(format_x(x), repr(y)) for x, y in self.data_points]
