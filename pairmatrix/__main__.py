"""
pairmatrix — one command.

    pairmatrix                          Use the bundled data/iris.txt
    pairmatrix ~/tables/samples.tsv     Any tab-separated table

Writes distance.txt and correlation.txt to the working directory.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pairmatrix.config import DEFAULT_INPUT_PATH, RunConfig
from pairmatrix.errors import PairMatrixError


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='pairmatrix',
        description='Euclidean distance and Pearson correlation between every pair of table rows.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
input format:
  tab-separated, UTF-8, header line first
  columns 1-2 are labels (ignored), the rest must be numeric

exit codes:
  0  success
  1  input file missing or unreadable
  2  bad command line
  3  malformed table (ragged row, non-numeric field, empty file)
  4  output file not writable
""",
    )
    parser.add_argument('input', nargs='?', default=None,
                        help=f'Input table (default: {DEFAULT_INPUT_PATH})')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    config = RunConfig.from_args(args.input)

    from pairmatrix.pipeline import run_pipeline
    try:
        run_pipeline(config)
    except PairMatrixError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return exc.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())
