"""
File acquisition for seqtext.

The parser works on text only. This module is the thin collaborator that
turns a user-picked ``.csv`` / ``.tsv`` file into that text:

- Refuses suffixes not listed in ``ParseRules.allowed_extensions``.
- Decodes with ``ParseRules.encoding`` (``utf-8-sig`` by default, so an
  Excel-style BOM does not end up in the first header label).
"""

from __future__ import annotations

import logging
from pathlib import Path

from seqtext.config import ParseRules
from seqtext.exceptions import UnsupportedFileError

logger = logging.getLogger(__name__)


def read_text(path: str | Path, rules: ParseRules | None = None) -> str:
    """Read a delimited-text file and return its decoded contents.

    Args:
        path: Path to the ``.csv`` / ``.tsv`` file.
        rules: Reader settings; defaults to ``ParseRules()``.

    Returns:
        The full file contents as a string.

    Raises:
        FileNotFoundError: If *path* does not exist.
        UnsupportedFileError: If the suffix is not allowed or the bytes
            cannot be decoded.
    """
    rules = rules or ParseRules()
    path = Path(path)

    suffix = path.suffix.lower()
    if suffix not in rules.allowed_extensions:
        raise UnsupportedFileError(
            f"Unsupported file type '{path.suffix or '(none)'}' for {path.name}. "
            f"Supported: {rules.allowed_extensions}"
        )
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    try:
        text = path.read_text(encoding=rules.encoding)
    except UnicodeDecodeError as exc:
        raise UnsupportedFileError(
            f"Could not decode {path.name} as {rules.encoding}: {exc}"
        ) from exc

    logger.info("Read %s (%d chars)", path, len(text))
    return text
