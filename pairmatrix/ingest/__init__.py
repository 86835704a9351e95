"""Table ingest: TSV → FeatureTable."""

from .table import (
    FeatureTable,
    N_LABEL_COLUMNS,
    load_table,
)

__all__ = [
    "FeatureTable",
    "N_LABEL_COLUMNS",
    "load_table",
]
