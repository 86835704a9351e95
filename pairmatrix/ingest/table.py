"""
Table Loader

Tab-separated table → FeatureTable.

Input layout:
    line 1      header, col + 2 names
    line 2..N   <id> <label> <feature_1> ... <feature_col>

The first two fields of every data row are labels and never enter the
metrics. The remaining fields must all parse as numbers.

Usage:
    from pairmatrix.ingest import load_table

    table = load_table("data/iris.txt")
    table.row, table.col        # (15, 4)
    table.values                # (row, col) float64, read-only
"""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

import numpy as np
import pandas as pd

from pairmatrix.errors import (
    EmptyTableError,
    InputNotFoundError,
    TableFormatError,
    TableParseError,
)

logger = logging.getLogger(__name__)

# Number of leading label columns stripped from every row
N_LABEL_COLUMNS = 2

# Tokens that legitimately parse to NaN (anything else that coerces to NaN is junk)
_NAN_TOKENS = {"nan", "+nan", "-nan"}


@dataclass(frozen=True)
class FeatureTable:
    """Header plus numeric feature rows. Immutable after load."""
    header: Tuple[str, ...]
    labels: Tuple[Tuple[str, str], ...]
    values: np.ndarray

    def __post_init__(self):
        if len(self.header) < N_LABEL_COLUMNS:
            raise TableFormatError(
                f"header has {len(self.header)} field(s), "
                f"expected at least {N_LABEL_COLUMNS} label columns"
            )
        if self.values.ndim != 2 or self.values.shape[1] != self.col:
            raise TableFormatError(
                f"feature block has shape {self.values.shape}, "
                f"expected (row, {self.col})"
            )
        if len(self.labels) != self.values.shape[0]:
            raise TableFormatError(
                f"{len(self.labels)} label pairs for {self.values.shape[0]} rows"
            )

    @property
    def row(self) -> int:
        return int(self.values.shape[0])

    @property
    def col(self) -> int:
        return len(self.header) - N_LABEL_COLUMNS

    @property
    def feature_names(self) -> Tuple[str, ...]:
        return self.header[N_LABEL_COLUMNS:]


def _read_raw(path: Path) -> pd.DataFrame:
    """Read every field as verbatim text. Blank lines are skipped."""
    try:
        return pd.read_csv(
            path,
            sep="\t",
            header=None,
            dtype=str,
            keep_default_na=False,
            quoting=csv.QUOTE_NONE,
            skip_blank_lines=True,
            encoding="utf-8",
        )
    except FileNotFoundError:
        raise InputNotFoundError(path) from None
    except IsADirectoryError:
        raise InputNotFoundError(path, reason="is a directory") from None
    except PermissionError:
        raise InputNotFoundError(path, reason="is not readable") from None
    except pd.errors.EmptyDataError:
        raise EmptyTableError(path) from None
    except pd.errors.ParserError as exc:
        # Ragged rows: pandas reports the physical line number
        raise TableFormatError(f"{path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise TableFormatError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        # ENAMETOOLONG, ENOTDIR, ELOOP, ...
        raise InputNotFoundError(path, reason=exc.strerror or str(exc)) from None


def _parse_features(path: Path, body: pd.DataFrame, header: Tuple[str, ...]) -> np.ndarray:
    """Convert the feature block to float64, failing on the first bad field."""
    n_rows, n_cols = body.shape[0], len(header) - N_LABEL_COLUMNS
    if n_rows == 0 or n_cols == 0:
        return np.empty((n_rows, n_cols), dtype=np.float64)

    raw = body.iloc[:, N_LABEL_COLUMNS:]
    bad = np.zeros((n_rows, n_cols), dtype=bool)

    # to_numeric only screens: its fast parser can be 1 ulp off past 15 digits
    for j in range(n_cols):
        texts = raw.iloc[:, j]
        parsed = pd.to_numeric(texts, errors="coerce")
        nan_token = texts.str.strip().str.lower().isin(_NAN_TOKENS)
        bad[:, j] = (parsed.isna() & ~nan_token).to_numpy()

    if bad.any():
        # Row-major order: report what a reader scanning the file hits first
        i, j = np.argwhere(bad)[0]
        raise TableParseError(
            path,
            data_row=int(i) + 1,
            column=header[N_LABEL_COLUMNS + j],
            text=raw.iat[i, j],
            label=body.iat[i, 0],
        )

    # Correctly rounded conversion, same as float(text)
    return raw.astype(np.float64).to_numpy(dtype=np.float64, copy=True)


def load_table(path: Union[str, Path]) -> FeatureTable:
    """
    Load a tab-separated table into a FeatureTable.

    Args:
        path: TSV file, UTF-8. First line is the header.

    Returns:
        FeatureTable with row = number of data lines, col = len(header) - 2.

    Raises:
        InputNotFoundError: path missing or unreadable.
        EmptyTableError: file has no header line.
        TableFormatError: header too short, or a data row with the wrong
            number of fields.
        TableParseError: a feature field is not a number.
    """
    path = Path(path)
    frame = _read_raw(path)

    header = tuple(frame.iloc[0].fillna("").tolist())
    if len(header) < N_LABEL_COLUMNS:
        raise TableFormatError(
            f"{path}: header has {len(header)} field(s), "
            f"expected at least {N_LABEL_COLUMNS} label columns"
        )

    body = frame.iloc[1:].reset_index(drop=True)

    # Short rows come back padded with NaN
    missing = body.isna().to_numpy()
    if missing.any():
        i = int(np.flatnonzero(missing.any(axis=1))[0])
        n_fields = int((~missing[i]).sum())
        raise TableFormatError(
            f"{path}: data row {i + 1} has {n_fields} field(s), "
            f"expected {len(header)}"
        )

    values = _parse_features(path, body, header)
    values.setflags(write=False)

    labels = tuple(
        (str(ident), str(label))
        for ident, label in zip(body.iloc[:, 0], body.iloc[:, 1])
    )

    logger.debug("Loaded %s: %d rows × %d features", path, values.shape[0], values.shape[1])

    return FeatureTable(header=header, labels=labels, values=values)
