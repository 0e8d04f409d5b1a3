"""
Field classifiers for seqtext.

Two pure predicates (plus their parsing counterparts) used throughout
the parse pipeline:

1. **Finite number**: a plain signed decimal or scientific-notation
   string that converts to a finite ``float``. Python's ``float()``
   alone is too lenient (it accepts ``"nan"``, ``"inf"``, ``"1_000"``
   and surrounding whitespace), so the text must first match
   ``_NUMBER_RE`` exactly.
2. **ISO date/time**: ``YYYY-MM-DD`` with an optional ``HH:MM[:SS[.fff]]``
   time part and optional ``Z`` / ``+HH:MM`` designator, converted to a
   timezone-aware UTC ``datetime``.

Conversion rules for ISO strings:
- Date only -> midnight UTC.
- Time without designator -> the wall-clock time is taken as UTC.
- Explicit offset -> wall-clock fields minus the offset
  (``10:00+02:00`` -> ``08:00Z``).
- Out-of-range calendar or clock fields (Feb 30, hour 24) do not match.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta, timezone

_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_ISO_RE = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"(?:[T ](?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})"
    r"(?::(?P<second>[0-9]{2})(?:\.(?P<fraction>[0-9]{1,3}))?)?"
    r"(?P<tz>Z|[+-][0-9]{2}:[0-9]{2})?)?"
)


def parse_finite_number(text: str) -> float | None:
    """Return the finite float value of *text*, or ``None``.

    ``"1e999"`` matches the pattern but overflows to infinity, so it is
    rejected like ``"NaN"`` and ``"Infinity"``.
    """
    if not _NUMBER_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def is_finite_number(text: str) -> bool:
    """True if *text* is a plain decimal/scientific number with a finite value."""
    return parse_finite_number(text) is not None


def parse_iso_datetime(text: str) -> datetime | None:
    """Convert an ISO date/time string to an aware UTC ``datetime``.

    Returns ``None`` when the text does not match the pattern or names an
    impossible date or time.
    """
    m = _ISO_RE.fullmatch(text)
    if m is None:
        return None

    fraction = m.group("fraction")
    microsecond = int(fraction.ljust(3, "0")) * 1000 if fraction else 0
    try:
        value = datetime(
            int(m.group("year")),
            int(m.group("month")),
            int(m.group("day")),
            int(m.group("hour") or 0),
            int(m.group("minute") or 0),
            int(m.group("second") or 0),
            microsecond,
            tzinfo=timezone.utc,
        )
    except ValueError:
        return None

    tz = m.group("tz")
    if tz and tz != "Z":
        sign = -1 if tz[0] == "-" else 1
        hours, minutes = (int(part) for part in tz[1:].split(":"))
        offset = timedelta(minutes=sign * (hours * 60 + minutes))
        try:
            value = value - offset
        except OverflowError:
            return None
    return value


def is_iso_datetime(text: str) -> bool:
    """True if *text* is a valid ISO date or date/time string."""
    return parse_iso_datetime(text) is not None
