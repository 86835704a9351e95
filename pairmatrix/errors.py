"""
Error taxonomy for a pairmatrix run.

Every fatal condition is a PairMatrixError subclass carrying the process
exit code the CLI uses for it. Each also subclasses the matching builtin,
so callers that only know FileNotFoundError / ValueError / OSError still
catch them.

    1  input file missing
    2  (argparse usage error)
    3  malformed table
    4  output not writable
"""

from pathlib import Path
from typing import Optional


class PairMatrixError(Exception):
    """Base class for fatal pairmatrix errors."""

    exit_code = 1


class InputNotFoundError(PairMatrixError, FileNotFoundError):
    """Input table does not exist or cannot be opened."""

    exit_code = 1

    def __init__(self, path: Path, reason: str = "not found"):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"input file {reason}: {self.path}")


class TableFormatError(PairMatrixError, ValueError):
    """Input table is structurally invalid (no header, ragged rows)."""

    exit_code = 3


class EmptyTableError(TableFormatError):
    """Input file has no header line."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"{self.path}: empty file, expected a header line")


class TableParseError(TableFormatError):
    """A feature field could not be converted to a float."""

    def __init__(
        self,
        path: Path,
        data_row: int,
        column: str,
        text: str,
        label: Optional[str] = None,
    ):
        self.path = Path(path)
        self.data_row = data_row
        self.column = column
        self.text = text
        self.label = label

        where = f"data row {data_row}"
        if label:
            where += f" ({label})"
        super().__init__(
            f"{self.path}: {where}, column '{column}': "
            f"cannot parse {text!r} as a number"
        )


class OutputWriteError(PairMatrixError, OSError):
    """Output matrix file cannot be created or written."""

    exit_code = 4

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot write {self.path}: {reason}")
