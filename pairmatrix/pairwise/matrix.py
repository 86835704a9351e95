"""
All-pairs matrix computation.

Takes the feature block (row × col) and evaluates every pair of rows,
self-pairs included: row·(row+1)/2 evaluations, each O(col). The
result is mirrored into [k, i] so both matrices are exactly symmetric.

For 150 rows → 11,325 evaluations, two 150 × 150 matrices.
"""

import logging
from dataclasses import dataclass
from itertools import combinations_with_replacement
from typing import List, Optional, Sequence, Union

import numpy as np

from pairmatrix.ingest.table import FeatureTable
from pairmatrix.pairwise.metrics import compute_pair_metrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairwiseMatrices:
    """Distance and correlation matrices, both row × row."""
    distance: np.ndarray
    correlation: np.ndarray

    @property
    def size(self) -> int:
        return int(self.distance.shape[0])

    def degenerate_rows(self) -> List[int]:
        """Rows whose self-correlation is undefined (zero variance or NaN input)."""
        return np.flatnonzero(np.isnan(np.diag(self.correlation))).tolist()


def compute_pairwise_matrices(
    table: Union[FeatureTable, np.ndarray],
    labels: Optional[Sequence[str]] = None,
) -> PairwiseMatrices:
    """
    Compute Euclidean distance and Pearson correlation for all row pairs.

    Parameters
    ----------
    table : FeatureTable or np.ndarray
        Feature rows. An array must be 2D (n_rows, n_features).
    labels : sequence of str, optional
        Row names used in log messages. Defaults to the table's ID column.

    Returns
    -------
    PairwiseMatrices with matrix[i][k] = metric(row i, row k).
    """
    if isinstance(table, FeatureTable):
        values = table.values
        if labels is None:
            labels = [ident for ident, _ in table.labels]
    else:
        values = np.asarray(table, dtype=np.float64)
        if values.ndim != 2:
            raise ValueError(f"expected a 2D feature block, got shape {values.shape}")

    N = values.shape[0]
    distance = np.zeros((N, N), dtype=np.float64)
    correlation = np.full((N, N), np.nan, dtype=np.float64)

    for i, k in combinations_with_replacement(range(N), 2):
        pair = compute_pair_metrics(values[i], values[k])
        distance[i, k] = distance[k, i] = pair['distance']
        correlation[i, k] = correlation[k, i] = pair['correlation']

    result = PairwiseMatrices(distance=distance, correlation=correlation)

    degenerate = result.degenerate_rows()
    if degenerate:
        names = [labels[i] if labels is not None else str(i) for i in degenerate]
        shown = ", ".join(names[:10])
        if len(names) > 10:
            shown += f", ... and {len(names) - 10} more"
        logger.warning(
            "%d row(s) with zero variance, correlation is NaN: %s",
            len(degenerate), shown,
        )

    return result
