"""
Custom exception hierarchy for seqtext.

Why a custom hierarchy:
- Callers can catch a whole family (``ParsingError``) to show a single
  message to the user, or a specific failure (e.g.,
  ``MixedDelimiterInLineError``) when they want to react to it.
- Row-level failures carry the 1-based row number and offending text as
  attributes, so a UI can highlight the line without parsing the message.
"""

from __future__ import annotations


class SeqTextError(Exception):
    """Base exception for all seqtext errors."""


# ---------------------------------------------------------------------------
# Parsing failures
# ---------------------------------------------------------------------------

class ParsingError(SeqTextError):
    """Raised when raw text cannot be turned into a ``SequenceData``.

    Every subclass is terminal: the parse is aborted and no partial
    result is returned.
    """


class EmptyInputError(ParsingError):
    """Raised when the text contains no non-blank lines."""


class MixedDelimiterInLineError(ParsingError):
    """Raised when a single line contains both a comma and a tab."""

    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__(
            f"Mixed delimiters in a single line (comma and tab) at line {line}"
        )


class MixedDelimiterAcrossLinesError(ParsingError):
    """Raised when some lines use commas and others use tabs."""


class InconsistentColumnCountError(ParsingError):
    """Raised when rows disagree on their token count."""

    def __init__(self, counts: list[int]) -> None:
        self.counts = counts
        super().__init__(
            f"Inconsistent column counts across rows: found {counts}"
        )


class UnsupportedColumnCountError(ParsingError):
    """Raised when the data has a column count other than one or two."""

    def __init__(self, columns: int) -> None:
        self.columns = columns
        super().__init__(
            f"Only one or two columns are supported, found {columns}"
        )


class DelimiterColumnMismatchError(ParsingError):
    """Raised when a delimiter was detected but only one column resulted."""


class EmptyDataRegionError(ParsingError):
    """Raised when no data rows remain after the header row is removed."""


class RowShapeMismatchError(ParsingError):
    """Raised when a data row's column count differs from the detected one."""

    def __init__(self, row: int, expected: int, actual: int) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row} has {actual} column(s), expected {expected}"
        )


class InvalidXError(ParsingError):
    """Raised when an X field is not a finite number."""

    def __init__(self, row: int, text: str) -> None:
        self.row = row
        self.text = text
        super().__init__(f'Invalid X at row {row}: "{text}"')


class InvalidYError(ParsingError):
    """Raised when a Y field is not a finite number."""

    def __init__(self, row: int, text: str) -> None:
        self.row = row
        self.text = text
        super().__init__(f'Invalid Y at row {row}: "{text}"')


# ---------------------------------------------------------------------------
# Ambient failures
# ---------------------------------------------------------------------------

class ConfigValidationError(SeqTextError):
    """Raised when a parse-rules YAML file is empty or fails validation."""


class UnsupportedFileError(SeqTextError):
    """Raised when the reader refuses a file.

    This happens if the suffix is not one of the allowed extensions or
    the bytes cannot be decoded with the configured encoding.
    """


class ExportError(SeqTextError):
    """Raised when the exporter fails to write an output file.

    For example, permission errors, disk full, or unsupported format.
    """
