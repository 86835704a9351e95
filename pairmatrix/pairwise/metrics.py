"""
Core pairwise metrics between two feature rows.

Both metrics read the same pair of vectors, so compute_pair_metrics
extracts them once and feeds both formulas.

Zero-variance rows make the Pearson denominator 0. That is reported as
NaN rather than raised: one constant row should not sink the whole matrix.
"""

import numpy as np
from typing import Dict


def _is_constant(x: np.ndarray) -> bool:
    """True when every entry equals the first (exact zero variance)."""
    return bool(np.all(x == x[0]))


def euclidean_distance(x: np.ndarray, y: np.ndarray) -> float:
    """Euclidean distance."""
    return float(np.sqrt(np.sum((x - y) ** 2)))


def pearson_correlation(x: np.ndarray, y: np.ndarray) -> float:
    """Pearson correlation. NaN when either vector has zero variance."""
    if x.size == 0 or _is_constant(x) or _is_constant(y):
        return float("nan")

    xc = x - np.mean(x)
    yc = y - np.mean(y)
    denom = np.sqrt(np.sum(xc * xc)) * np.sqrt(np.sum(yc * yc))
    if denom == 0.0:
        # Non-constant but underflowed deviations
        return float("nan")

    r = np.sum(xc * yc) / denom
    # Rounding can push |r| one ulp past 1
    return float(np.clip(r, -1.0, 1.0))


def compute_pair_metrics(
    vec_a: np.ndarray,
    vec_b: np.ndarray,
) -> Dict[str, float]:
    """
    Compute both metrics between two feature rows.

    Parameters
    ----------
    vec_a, vec_b : np.ndarray
        1D feature vectors of the same length.

    Returns
    -------
    dict with:
        distance : float — Euclidean distance, >= 0
        correlation : float — Pearson correlation in [-1, 1], or NaN
    """
    vec_a = np.asarray(vec_a, dtype=np.float64).ravel()
    vec_b = np.asarray(vec_b, dtype=np.float64).ravel()

    if vec_a.shape != vec_b.shape:
        raise ValueError(
            f"feature rows differ in length: {vec_a.size} vs {vec_b.size}"
        )

    return {
        'distance': euclidean_distance(vec_a, vec_b),
        'correlation': pearson_correlation(vec_a, vec_b),
    }
