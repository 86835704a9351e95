"""
Run Configuration

Default paths for a zero-argument run. Outputs land in the working
directory; the sample input ships with the project under data/.

    from pairmatrix.config import RunConfig

    config = RunConfig.from_args()                  # data/iris.txt
    config = RunConfig.from_args("measurements.tsv")
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

DEFAULT_INPUT_PATH = Path("data") / "iris.txt"
DEFAULT_DISTANCE_PATH = Path("distance.txt")
DEFAULT_CORRELATION_PATH = Path("correlation.txt")


@dataclass(frozen=True)
class RunConfig:
    """Where to read the table and where to write the two matrices."""
    input_path: Path = DEFAULT_INPUT_PATH
    distance_output_path: Path = DEFAULT_DISTANCE_PATH
    correlation_output_path: Path = DEFAULT_CORRELATION_PATH

    @classmethod
    def from_args(cls, input_path: Optional[Union[str, Path]] = None) -> "RunConfig":
        """Build the config once at startup. None keeps the default input."""
        if input_path is None:
            return cls()
        return cls(input_path=Path(input_path).expanduser())
