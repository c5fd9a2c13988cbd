"""Training tables from CSV/TSV/TXT files.

Empty cells are read as missing values, numeric-looking columns as numbers and
everything else as text, which is what the encoders expect from an in-memory
frame.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

import pandas as pd

from crossframe.contracts.run_config import DataModel
from crossframe.errors import ConfigurationError, DataError

WHITESPACE = "whitespace"

_SEPARATOR_CANDIDATES = ("\t", ",", ";", "|")
_SEPARATOR_ALIASES = {"\\t": "\t", "tab": "\t", "space": WHITESPACE}


def sniff_separator(header_line: str) -> str:
    """The candidate separator occurring most often in ``header_line``."""
    counts = {sep: header_line.count(sep) for sep in _SEPARATOR_CANDIDATES}
    best = max(counts, key=counts.get)
    return best if counts[best] else WHITESPACE


def _resolve_separator(path: Path, delimiter: Optional[str], encoding: str) -> str:
    if delimiter is not None:
        return _SEPARATOR_ALIASES.get(delimiter, delimiter)
    with path.open("r", encoding=encoding, errors="replace") as f:
        return sniff_separator(f.readline().rstrip("\r\n"))


def load_table(
    file_path: Union[str, Path],
    *,
    delimiter: Optional[str] = None,
    has_header: Optional[bool] = None,
    encoding: Optional[str] = None,
    columns: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """Read a delimited table.

    Parameters
    ----------
    delimiter
        Separator, ``"\\t"``/``"tab"``, or ``"whitespace"``. Sniffed from the
        first line when omitted.
    has_header
        Defaults to True. Header-less tables get columns ``c0, c1, ...``.
    columns
        When given, only these columns are returned (in this order); a
        missing one raises :class:`DataError`.
    """

    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Table file not found: {path}")

    enc = encoding or "utf-8"
    sep = _resolve_separator(path, delimiter, enc)
    header = has_header is None or bool(has_header)

    df = pd.read_csv(
        path.as_posix(),
        sep=r"\s+" if sep == WHITESPACE else sep,
        header=0 if header else None,
        encoding=enc,
        engine="python",
    )
    df.columns = [str(c) for c in df.columns] if header else [f"c{i}" for i in range(df.shape[1])]

    if columns is not None:
        missing = [c for c in columns if c not in df.columns]
        if missing:
            raise DataError(f"{path.name}: missing column(s) {missing}; found {list(df.columns)}")
        df = df.loc[:, list(dict.fromkeys(columns))]
    if df.empty:
        raise DataError(f"{path.name}: table has no data rows")
    return df


def load_from_data_model(data: DataModel, *, columns: Optional[Sequence[str]] = None) -> pd.DataFrame:
    if not data.path:
        raise ConfigurationError("data.path is required to load a dataset")
    return load_table(
        data.path,
        delimiter=data.delimiter,
        has_header=data.has_header,
        encoding=data.encoding,
        columns=columns,
    )
