"""
Presentation hand-off and export for seqtext.

Charting and table components consume a ``SequenceData`` read-only.
Most of them speak pandas, so ``to_frame()`` converts a sequence into a
two-column DataFrame with dtypes that follow ``x_kind``:

  INDEX    -> int64
  NUMBER   -> float64
  DATETIME -> datetime64[us, UTC]

Microsecond resolution covers every instant the parser can produce
(years 0001-9999); nanosecond columns stop at 1677-2262.

``export_sequence()`` writes that frame to disk as CSV or Parquet.

Why Parquet is the default:
- Preserves the X dtype (instants stay instants, no re-parsing on load).

CSV is supported for interoperability; instants are written as ISO-8601
strings in UTC with a ``Z`` suffix (``2300-01-01T00:00:00.000Z``).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import numpy as np
import pandas as pd

from seqtext.exceptions import ExportError
from seqtext.sequence import SequenceData, XKind, format_x

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def _column_names(seq: SequenceData) -> tuple[str, str]:
    """Axis labels as column names, suffixed if the two labels collide."""
    x_name, y_name = seq.time_axis_name, seq.value_axis_name
    if x_name == y_name:
        return f"{x_name}_x", f"{y_name}_y"
    return x_name, y_name


def to_frame(seq: SequenceData) -> pd.DataFrame:
    """Convert a ``SequenceData`` into a pandas DataFrame.

    Row order matches ``seq.data_points``. ``df.attrs["x_kind"]`` holds
    the ``XKind`` value string so consumers can pick axis formatting.
    """
    x_name, y_name = _column_names(seq)

    if seq.x_kind is XKind.DATETIME:
        # Built at "us" in numpy; pandas never sees a nanosecond value.
        naive = np.array([x.replace(tzinfo=None) for x in seq.xs], dtype="datetime64[us]")
        x_col = pd.Series(naive).dt.tz_localize("UTC")
    elif seq.x_kind is XKind.INDEX:
        x_col = pd.Series(seq.xs, dtype="int64")
    else:
        x_col = pd.Series(seq.xs, dtype="float64")

    df = pd.DataFrame({
        x_name: x_col,
        y_name: pd.Series(seq.ys, dtype="float64"),
    })
    df.attrs["x_kind"] = seq.x_kind.value
    return df


def export_sequence(
    seq: SequenceData,
    path: str | Path,
    output_format: Literal["csv", "parquet"] = "parquet",
) -> str:
    """Write a sequence to *path* in the given format.

    The parent directory is created if it does not exist. CSV files are
    written with ``utf-8-sig`` encoding (BOM) so labels display correctly
    when opened in Excel.

    Returns:
        The written file path as a string.

    Raises:
        ExportError: If *output_format* is unsupported, or the conversion
            or write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        df = to_frame(seq)
        if output_format == "csv":
            if seq.is_datetime:
                df[df.columns[0]] = [format_x(x) for x in seq.xs]
            df.to_csv(path, index=False, encoding="utf-8-sig")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc

    logger.info(
        "Exported sequence -> %s (%d rows, x_kind=%s)",
        path.name,
        len(df),
        seq.x_kind.value,
    )
    return str(path)
