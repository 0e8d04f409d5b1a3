"""
Structure detection for seqtext.

Everything the parser needs to decide *before* looking at individual
values:

1. ``normalize_lines()``: unify line endings, trim, drop blank lines.
2. ``detect_delimiter()``: comma, tab, or none. Mixed use is an error.
3. ``tokenize()``: split lines and validate the column shape.
4. ``detect_header()``: a single lookahead on row 1 deciding whether it
   is a header. The decision is never revised once the data region is
   chosen.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from seqtext.classify import is_finite_number, is_iso_datetime
from seqtext.config import COMMA, MAX_COLUMNS, TAB, ParseRules
from seqtext.exceptions import (
    DelimiterColumnMismatchError,
    EmptyInputError,
    InconsistentColumnCountError,
    MixedDelimiterAcrossLinesError,
    MixedDelimiterInLineError,
    UnsupportedColumnCountError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeaderDecision:
    """Outcome of header detection on the first row.

    Attributes:
        has_header: Whether row 1 is a header (data starts at row 2).
        time_axis_name: Label for the X axis.
        value_axis_name: Label for the Y axis.
    """

    has_header: bool
    time_axis_name: str
    value_axis_name: str


def normalize_lines(text: str) -> list[str]:
    """Split *text* into trimmed, non-blank lines.

    CRLF and lone CR are treated as LF.

    Raises:
        EmptyInputError: If no non-blank lines remain.
    """
    unified = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = [line.strip() for line in unified.split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        raise EmptyInputError("No data lines found")
    return lines


def detect_delimiter(lines: list[str]) -> str | None:
    """Return ``","``, ``"\\t"`` or ``None`` for the given lines.

    Every line is scanned; the first line holding both a comma and a tab
    fails immediately, otherwise comma and tab lines may not coexist.

    Raises:
        MixedDelimiterInLineError: A line contains both a comma and a tab.
        MixedDelimiterAcrossLinesError: Some lines use commas, others tabs.
    """
    comma_lines = 0
    tab_lines = 0
    for lineno, line in enumerate(lines, start=1):
        has_comma = COMMA in line
        has_tab = TAB in line
        if has_comma and has_tab:
            raise MixedDelimiterInLineError(lineno)
        comma_lines += has_comma
        tab_lines += has_tab

    if comma_lines and tab_lines:
        raise MixedDelimiterAcrossLinesError(
            "Mixed delimiters across lines "
            f"({comma_lines} with comma, {tab_lines} with tab)"
        )
    if comma_lines:
        return COMMA
    if tab_lines:
        return TAB
    return None


def tokenize(lines: list[str], delimiter: str | None) -> list[list[str]]:
    """Split lines into stripped tokens and validate the column shape.

    Returns:
        One token list per line, all with the same length (1 or 2).

    Raises:
        InconsistentColumnCountError: Lines yield different token counts.
        UnsupportedColumnCountError: The shared count is not 1 or 2.
        DelimiterColumnMismatchError: A delimiter was found but only one
            column resulted.
    """
    if delimiter is None:
        rows = [[line] for line in lines]
    else:
        rows = [[cell.strip() for cell in line.split(delimiter)] for line in lines]

    counts = sorted({len(row) for row in rows})
    if len(counts) > 1:
        raise InconsistentColumnCountError(counts)

    columns = counts[0]
    if columns < 1 or columns > MAX_COLUMNS:
        raise UnsupportedColumnCountError(columns)
    if delimiter is not None and columns != 2:
        raise DelimiterColumnMismatchError(
            "A delimiter was detected, but the data does not have exactly two columns"
        )
    return rows


def looks_like_data(row: list[str]) -> bool:
    """True if *row* reads as a data row rather than column labels.

    One column: the token must be a finite number. Two columns: the first
    token must be a finite number or ISO date/time and the second a
    finite number.
    """
    if len(row) == 1:
        return is_finite_number(row[0])
    x_ok = is_finite_number(row[0]) or is_iso_datetime(row[0])
    return x_ok and is_finite_number(row[1])


def detect_header(first_row: list[str], rules: ParseRules) -> HeaderDecision:
    """Decide whether *first_row* is a header and resolve the axis labels."""
    columns = len(first_row)
    default_time = rules.index_label if columns == 1 else rules.x_label

    if looks_like_data(first_row):
        logger.debug("Row 1 looks like data; using default labels")
        return HeaderDecision(False, default_time, rules.value_label)

    if columns == 1:
        time_name, value_name = rules.index_label, first_row[0] or rules.value_label
    else:
        time_name = first_row[0] or rules.x_label
        value_name = first_row[1] or rules.value_label
    logger.debug("Row 1 is a header: %r / %r", time_name, value_name)
    return HeaderDecision(True, time_name, value_name)
