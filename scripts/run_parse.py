"""
Demo script: parse CSV/TSV files via the public API and log a summary.

Usage:
    uv run python scripts/run_parse.py data/temps.csv data/series.tsv
    uv run python scripts/run_parse.py data/temps.csv --export outputs/

Each file is parsed with ``seqtext.open()``. Parse failures are logged
and the script moves on to the next file, the same way a UI would show
the message and keep its previous state. With ``--export DIR`` every
successful parse is also written to ``DIR/<stem>.parquet``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_parse")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import seqtext
    from seqtext.exceptions import SeqTextError

    args = sys.argv[1:]
    export_dir: Path | None = None
    if "--export" in args:
        idx = args.index("--export")
        if idx + 1 >= len(args):
            log.error("--export requires a directory argument")
            return 2
        export_dir = Path(args[idx + 1])
        del args[idx:idx + 2]

    if not args:
        log.error("Usage: run_parse.py FILE [FILE ...] [--export DIR]")
        return 2

    failures = 0
    for input_path in args:
        log.info("=" * 70)
        log.info("Processing: %s", input_path)
        try:
            seq = seqtext.open(input_path)
        except (SeqTextError, FileNotFoundError) as exc:
            log.error("FAILED  %s: %s", input_path, exc)
            failures += 1
            continue

        log.info("  axes   : %s (%s) / %s", seq.time_axis_name, seq.x_kind.value, seq.value_axis_name)
        log.info("  points : %d", len(seq))
        for x, y in seq.to_rows()[:5]:
            log.info("    %s  %s", x, y)

        if export_dir is not None:
            out = export_dir / f"{Path(input_path).stem}.parquet"
            seqtext.export_sequence(seq, out)

    log.info("Done: %d file(s), %d failure(s)", len(args), failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
