"""
Full pipeline: table in, two matrices out.
Every run is fresh. Existing output files are replaced.
"""

from pathlib import Path
from typing import Optional

from pairmatrix.config import RunConfig
from pairmatrix.ingest.table import FeatureTable, load_table
from pairmatrix.io.matrix_writer import write_matrix
from pairmatrix.pairwise.matrix import PairwiseMatrices, compute_pairwise_matrices


def print_table_summary(table: FeatureTable) -> None:
    """Dimensions, then every header name on its own line."""
    print(f"Row: {table.row}, Col: {table.col}")
    for name in table.header:
        print(name)


def run_pipeline(config: Optional[RunConfig] = None) -> PairwiseMatrices:
    """
    Run load → compute → write.

    Both matrices are computed before either file is written, so a load
    or compute failure leaves no output behind.

    Args:
        config: Paths for this run. Defaults to RunConfig().

    Returns:
        The computed matrices.
    """
    if config is None:
        config = RunConfig()

    # ----------------------------------------------------------
    # Step 1: LOAD — TSV → FeatureTable
    # ----------------------------------------------------------
    table = load_table(config.input_path)
    print_table_summary(table)

    # ----------------------------------------------------------
    # Step 2: COMPUTE — all row pairs, both metrics
    # ----------------------------------------------------------
    matrices = compute_pairwise_matrices(table)

    # ----------------------------------------------------------
    # Step 3: WRITE — distance.txt, correlation.txt
    # ----------------------------------------------------------
    for matrix, out_path in (
        (matrices.distance, config.distance_output_path),
        (matrices.correlation, config.correlation_output_path),
    ):
        written = write_matrix(matrix, Path(out_path))
        print(f"  → {written}")

    print("finish!")
    return matrices
