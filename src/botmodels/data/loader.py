import io
import warnings
import pandas as pd
from pathlib import Path
from typing import List, Optional, Union

from ..config import DATA_DIR
from ..dialog.record import Record
from ..logger import get_logger

logger = get_logger("data.loader")

COMMENT_PREFIX = "#"
QUOTE = '"'
COLUMNS = ("Query", "Response", "States", "NewState")


def bot_csv_path(bot_name: str, data_dir: Optional[Union[str, Path]] = None) -> Path:
    return Path(data_dir or DATA_DIR) / f"{bot_name}.csv"


def _strip_comments(text: str) -> str:
    """Drop comment lines, i.e. lines starting with '#' at the start of a row.

    A line inside an open quoted cell is a continuation of that cell and kept
    as is, even when it starts with '#'. Escaped quotes ("") keep the parity.
    """
    kept = []
    in_quotes = False
    for line in text.splitlines(keepends=True):
        if not in_quotes and line.startswith(COMMENT_PREFIX):
            continue
        kept.append(line)
        if line.count(QUOTE) % 2:
            in_quotes = not in_quotes
    return "".join(kept)


def read_dialog_frame(path: Union[str, Path]) -> pd.DataFrame:
    """Read a dialog CSV into a string-typed DataFrame.

    Header row required, comma delimited, blank and comment lines skipped.
    Empty cells stay "", cells missing from short rows come back as None.
    Rows with more cells than the header are cut down to the header width.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Dialog CSV not found: {p}")

    with open(p, "r", encoding="utf-8-sig") as f:
        text = _strip_comments(f.read())

    if not text.strip():
        logger.warning(f"Dialog CSV {p} has no header or rows")
        return pd.DataFrame(columns=list(COLUMNS))

    width = len(pd.read_csv(io.StringIO(text), sep=",", nrows=0).columns)

    def _truncate(bad: List[str]) -> List[str]:
        logger.warning(f"{p}: row with {len(bad)} cells cut to {width}: {bad!r}")
        return bad[:width]

    with warnings.catch_warnings():
        # truncated rows are reported through _truncate
        warnings.simplefilter("ignore", pd.errors.ParserWarning)
        df = pd.read_csv(
            io.StringIO(text),
            sep=",",
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
            engine="python",
            on_bad_lines=_truncate,
        )
    return df.astype(object).where(df.notna(), None)


def load_dialog_records(path: Union[str, Path]) -> List[Record]:
    """Parse a bot's dialog CSV into Records, in file order."""
    df = read_dialog_frame(path)
    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        logger.debug(f"{path}: columns {missing} not present, treated as absent")

    records = [
        Record(
            Query=row.get("Query"),
            Response=row.get("Response"),
            States=row.get("States"),
            NewState=row.get("NewState"),
        )
        for row in df.to_dict(orient="records")
    ]
    logger.info(f"Loaded {len(records)} dialog rows from {path}")
    return records
