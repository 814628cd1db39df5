# Core components for sentiment method comparison

from .categorize import LABEL_UNIVERSES, categorize, categorize_all, label_universe
from .cross_validation import StratifiedKFold, make_folds, train_test_split_for
from .metrics import (
    METRIC_NAMES,
    FoldMetrics,
    confusion_matrix,
    compute_metrics,
    metrics_to_rows,
    classification_report,
)

__all__ = [
    "LABEL_UNIVERSES",
    "categorize",
    "categorize_all",
    "label_universe",
    "StratifiedKFold",
    "make_folds",
    "train_test_split_for",
    "METRIC_NAMES",
    "FoldMetrics",
    "confusion_matrix",
    "compute_metrics",
    "metrics_to_rows",
    "classification_report",
]
