"""
seqtext: parse small CSV/TSV payloads into typed time/value sequences.

Public API surface:

- ``parse(text, rules=None)`` -- **core entry point**. Turns raw text
  (one or two columns, comma- or tab-separated) into a ``SequenceData``
  or raises a ``ParsingError`` subclass.

- ``open(path, rules=None)`` -- convenience wrapper: reads a ``.csv`` /
  ``.tsv`` file with ``reader.read_text()`` and parses it.

- ``SequenceData`` / ``XKind`` -- the immutable result and its X
  representation (implicit index, number, or UTC instant).

- ``to_frame()`` / ``export_sequence()`` -- hand the result to pandas
  or write it to CSV/Parquet.
"""

from __future__ import annotations

import logging
from pathlib import Path

from seqtext.config import ParseRules, load_rules, save_rules
from seqtext.exceptions import ParsingError, SeqTextError
from seqtext.export import export_sequence, to_frame
from seqtext.parser import TextSequenceParser
from seqtext.reader import read_text
from seqtext.sequence import SequenceData, XKind

__all__ = [
    "open",
    "parse",
    "ParseRules",
    "ParsingError",
    "SeqTextError",
    "SequenceData",
    "TextSequenceParser",
    "XKind",
    "export_sequence",
    "load_rules",
    "save_rules",
    "to_frame",
]

logger = logging.getLogger(__name__)


def parse(text: str, rules: ParseRules | None = None) -> SequenceData:
    """Parse CSV/TSV text into a ``SequenceData``.

    Examples::

        seq = seqtext.parse("Time,Temp\\n2024-01-01,10\\n2024-01-02,12")
        seq.time_axis_name   # "Time"
        seq.x_kind           # XKind.DATETIME

    Raises:
        TypeError: If *text* is not a string.
        ParsingError: If the text is empty, ambiguous, or malformed.
    """
    return TextSequenceParser(rules).parse(text)


def open(path: str | Path, rules: ParseRules | None = None) -> SequenceData:
    """Read a ``.csv`` / ``.tsv`` file and parse its contents.

    Raises:
        FileNotFoundError: If *path* does not exist.
        UnsupportedFileError: If the file type is not accepted or cannot
            be decoded.
        ParsingError: If the contents fail validation.
    """
    logger.info("open() -- path=%s", path)
    text = read_text(path, rules)
    return parse(text, rules)
