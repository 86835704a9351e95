"""
Pairwise row metrics.

Computes Euclidean distance and Pearson correlation between every
pair of feature rows, self-pairs included.

N rows → N·(N+1)/2 evaluations, mirrored into two N × N matrices.
"""

from pairmatrix.pairwise.metrics import (
    compute_pair_metrics,
    euclidean_distance,
    pearson_correlation,
)
from pairmatrix.pairwise.matrix import (
    PairwiseMatrices,
    compute_pairwise_matrices,
)

__all__ = [
    'compute_pair_metrics',
    'euclidean_distance',
    'pearson_correlation',
    'PairwiseMatrices',
    'compute_pairwise_matrices',
]
