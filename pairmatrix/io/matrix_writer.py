"""
Matrix Writer

Square matrix ↔ tab-separated text.

    one matrix row per line, values in column order
    tab between values, no trailing tab
    os.linesep after every row, UTF-8
    shortest round-trip float repr ("7.0710678118654755", "1.0", "nan")

Writes are atomic: the matrix goes to a hidden sibling temp file that is
renamed over the destination only after it is fully written. A failed
run never leaves a truncated matrix behind.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd

from pairmatrix.errors import OutputWriteError

logger = logging.getLogger(__name__)

NA_REP = "nan"


def _target_file_mode(path: Path) -> int:
    """Keep an existing file's permission bits, else what a plain open() would give."""
    if path.is_file():
        return stat.S_IMODE(path.stat().st_mode)
    # Reading the umask means setting it; safe only while the process is single-threaded
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_matrix(matrix: np.ndarray, path: Union[str, Path]) -> Path:
    """
    Write a square matrix as TSV, replacing any existing file.

    Args:
        matrix: (n, n) array. n may be 0 (empty file).
        path: Destination file.

    Returns:
        The destination path.

    Raises:
        ValueError: matrix is not square.
        OutputWriteError: destination cannot be created or written.
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"expected a square matrix, got shape {matrix.shape}")

    path = Path(path)
    tmp_path = None

    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = Path(tmp.name)
            if matrix.shape[0] > 0:
                pd.DataFrame(matrix).to_csv(
                    tmp,
                    sep="\t",
                    header=False,
                    index=False,
                    na_rep=NA_REP,
                    lineterminator=os.linesep,
                )
        os.chmod(tmp_path, _target_file_mode(path))
        os.replace(tmp_path, path)
    except OSError as exc:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc

    logger.debug("Wrote %d × %d matrix to %s", matrix.shape[0], matrix.shape[1], path)
    return path


def read_matrix(path: Union[str, Path]) -> np.ndarray:
    """Read a matrix written by write_matrix. An empty file gives a (0, 0) array."""
    try:
        frame = pd.read_csv(
            path, sep="\t", header=None, dtype=np.float64,
            float_precision="round_trip",
        )
    except pd.errors.EmptyDataError:
        return np.empty((0, 0), dtype=np.float64)
    return frame.to_numpy()
