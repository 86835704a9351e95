"""
pairmatrix - All-pairs row similarity for tab-separated tables

Pipeline:
- Load a TSV table (first two columns are labels, the rest are features)
- Euclidean distance and Pearson correlation between every pair of rows
- Write both row × row matrices as TSV
"""

__version__ = "0.1.0"

# Use: from pairmatrix.ingest import load_table
# Use: from pairmatrix.pairwise import compute_pairwise_matrices
# Use: from pairmatrix.io import write_matrix
# Use: from pairmatrix.pipeline import run_pipeline

__all__ = [
    '__version__',
]
