"""
Parse rules and YAML I/O for seqtext.

The parser itself runs on a fixed rule set: the delimiters (comma, tab)
and the one-or-two column limit are constants of the format. What *is*
configurable lives in ``ParseRules``:

- The default axis labels used when no header row is present, or when a
  header cell is empty.
- Which file suffixes the reader accepts and how it decodes them.

Why Pydantic + YAML:
- Pydantic gives strict validation and clear error messages for a
  hand-edited rules file.
- YAML keeps the file readable; ``load -> save`` round-trips cleanly.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from seqtext.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

COMMA = ","
TAB = "\t"
MAX_COLUMNS = 2


class ParseRules(BaseModel):
    """Settings shared by the parser and the file reader.

    Instances are frozen so a single ``TextSequenceParser`` can be
    shared between callers.
    """

    model_config = ConfigDict(frozen=True)

    index_label: str = Field(
        "Index", description="Time-axis label for single-column input"
    )
    x_label: str = Field(
        "X", description="Time-axis label for two-column input without a header"
    )
    value_label: str = Field("Value", description="Default value-axis label")
    allowed_extensions: tuple[str, ...] = Field(
        (".csv", ".tsv", ".txt"),
        description="File suffixes accepted by the reader",
    )
    encoding: str = Field(
        "utf-8-sig", description="Text encoding used by the reader (BOM-tolerant)"
    )

    @field_validator("index_label", "x_label", "value_label")
    @classmethod
    def _label_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Default axis labels must not be blank")
        return value

    @field_validator("allowed_extensions")
    @classmethod
    def _normalize_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        normalized: list[str] = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                raise ValueError("Empty file extension in allowed_extensions")
            if not ext.startswith("."):
                ext = "." + ext
            normalized.append(ext)
        return tuple(normalized)


def load_rules(path: str | Path) -> ParseRules:
    """Load and validate a rules YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the file is empty or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Rules file is empty: {path}")
    try:
        rules = ParseRules.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid rules file {path}:\n{exc}") from exc
    logger.info("Loaded parse rules from %s", path)
    return rules


def save_rules(rules: ParseRules, path: str | Path) -> None:
    """Serialize ``ParseRules`` to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = rules.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# seqtext parse rules\n")
        f.write("# Edit default labels or accepted file types here.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved parse rules to %s", path)
