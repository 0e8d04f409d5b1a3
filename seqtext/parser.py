"""
TextSequenceParser: raw CSV/TSV text -> ``SequenceData``.

The pipeline is a single forward pass:

1. Normalize line endings, trim, drop blank lines.
2. Detect the delimiter (comma / tab / none).
3. Tokenize and validate the column shape (1 or 2 columns).
4. Decide whether row 1 is a header.
5. Validate the data region.
6. Resolve the X column kind once for the whole column.
7. Coerce every row in order.
8. Freeze the points into a ``SequenceData``.

Any failure raises a ``ParsingError`` subclass and aborts the parse;
there is no partial result and no per-row fallback.
"""

from __future__ import annotations

import logging

from seqtext.classify import is_iso_datetime, parse_finite_number, parse_iso_datetime
from seqtext.config import ParseRules
from seqtext.detect import detect_delimiter, detect_header, normalize_lines, tokenize
from seqtext.exceptions import (
    EmptyDataRegionError,
    InvalidXError,
    InvalidYError,
    RowShapeMismatchError,
)
from seqtext.sequence import DataPoint, SequenceData, XKind

logger = logging.getLogger(__name__)


def resolve_x_kind(data_rows: list[list[str]], columns: int) -> XKind:
    """Pick the representation for the whole X column.

    Two-column data is ``DATETIME`` only if *every* first token is an ISO
    date/time; a single non-date value makes the column ``NUMBER`` and
    leaves that value to fail numeric validation.
    """
    if columns == 1:
        return XKind.INDEX
    if all(is_iso_datetime(row[0]) for row in data_rows):
        return XKind.DATETIME
    return XKind.NUMBER


class TextSequenceParser:
    """Parser for one- or two-column delimited text.

    The parser holds only its (frozen) rules, so one instance can serve
    any number of callers; each ``parse()`` call works on local state.
    """

    def __init__(self, rules: ParseRules | None = None) -> None:
        self.rules = rules or ParseRules()

    def parse(self, text: str) -> SequenceData:
        """Parse *text* into a ``SequenceData``.

        Raises:
            TypeError: If *text* is not a ``str``.
            ParsingError: On any structural or value error (see
                ``seqtext.exceptions`` for the full list).
        """
        if not isinstance(text, str):
            raise TypeError(f"Input must be a string, got {type(text).__name__}")

        lines = normalize_lines(text)
        delimiter = detect_delimiter(lines)
        rows = tokenize(lines, delimiter)
        columns = len(rows[0])
        logger.debug(
            "Detected delimiter=%r, columns=%d, lines=%d", delimiter, columns, len(lines)
        )

        header = detect_header(rows[0], self.rules)
        start = 1 if header.has_header else 0
        data_rows = rows[start:]
        if not data_rows:
            raise EmptyDataRegionError("No data rows after header detection")

        for offset, row in enumerate(data_rows):
            if len(row) != columns:
                raise RowShapeMismatchError(start + offset + 1, columns, len(row))

        x_kind = resolve_x_kind(data_rows, columns)
        logger.debug("X column kind: %s", x_kind.value)

        points = self._coerce_rows(data_rows, x_kind, first_row_number=start + 1)

        seq = SequenceData(
            time_axis_name=header.time_axis_name,
            value_axis_name=header.value_axis_name,
            data_points=tuple(points),
            x_kind=x_kind,
        )
        logger.info(
            "Parsed %d point(s): %s=%s, %s, header=%s",
            len(seq),
            seq.time_axis_name,
            x_kind.value,
            seq.value_axis_name,
            header.has_header,
        )
        return seq

    # -----------------------------------------------------------------
    # Row coercion
    # -----------------------------------------------------------------

    @staticmethod
    def _coerce_rows(
        data_rows: list[list[str]],
        x_kind: XKind,
        first_row_number: int,
    ) -> list[DataPoint]:
        points: list[DataPoint] = []
        for i, row in enumerate(data_rows):
            row_number = first_row_number + i

            if x_kind is XKind.INDEX:
                x = i
                y_raw = row[0]
            elif x_kind is XKind.DATETIME:
                x = parse_iso_datetime(row[0])
                if x is None:
                    raise InvalidXError(row_number, row[0])
                y_raw = row[1]
            else:
                x = parse_finite_number(row[0])
                if x is None:
                    raise InvalidXError(row_number, row[0])
                y_raw = row[1]

            y = parse_finite_number(y_raw)
            if y is None:
                raise InvalidYError(row_number, y_raw)
            points.append((x, y))
        return points
