#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Confusion Matrix and Per-Fold Metrics

This module builds confusion matrices over an explicit label universe and
derives the per-fold evaluation metrics:
- Precision and recall per class
- Macro-F1 (from class-averaged precision and recall)
- Accuracy
- Balanced accuracy (mean per-class recall)

Division policy:
- A zero row or column sum makes the affected value NaN
- NaN propagates through the class means instead of raising
"""

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
import pandas as pd

METRIC_NAMES = ("precision", "recall", "macro_f1", "accuracy", "bal_accuracy")


@dataclass(frozen=True)
class FoldMetrics:
    precision: np.ndarray
    recall: np.ndarray
    macro_f1: float
    accuracy: float
    bal_accuracy: float


def confusion_matrix(
    y_true: Sequence, y_pred: Sequence, labels: Sequence
) -> np.ndarray:
    """
    Cross-tabulate actual vs. predicted labels.

    Args:
        y_true: Ground truth labels
        y_pred: Predicted labels, index-paired with y_true
        labels: Full ordered label universe; both axes always span it

    Returns:
        Square int matrix of shape (len(labels), len(labels)),
        rows = actual, columns = predicted
    """
    y_true = list(y_true)
    y_pred = list(y_pred)
    if len(y_true) != len(y_pred):
        raise ValueError("y_true and y_pred must have the same length")

    labels = list(labels)
    label_to_idx = {label: i for i, label in enumerate(labels)}
    n_labels = len(labels)

    cm = np.zeros((n_labels, n_labels), dtype=int)
    for true_label, pred_label in zip(y_true, y_pred):
        try:
            true_idx = label_to_idx[true_label]
            pred_idx = label_to_idx[pred_label]
        except KeyError as e:
            raise ValueError(f"Label {e.args[0]!r} is not in label universe {labels}") from None
        cm[true_idx, pred_idx] += 1

    return cm


def _safe_ratio(num, den):
    num = np.asarray(num, dtype=float)
    den = np.asarray(den, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        out = np.where(den == 0, np.nan, num / np.where(den == 0, 1.0, den))
    return out


def compute_metrics(cm: np.ndarray) -> FoldMetrics:
    """
    Derive per-class precision/recall and scalar metrics from a confusion matrix.

    Zero denominators give NaN; nothing here raises on empty classes.
    """
    cm = np.asarray(cm, dtype=float)
    if cm.ndim != 2 or cm.shape[0] != cm.shape[1]:
        raise ValueError(f"Confusion matrix must be square, got shape {cm.shape}")

    diag = np.diag(cm)
    precision = _safe_ratio(diag, cm.sum(axis=0))
    recall = _safe_ratio(diag, cm.sum(axis=1))
    accuracy = float(_safe_ratio(np.trace(cm), cm.sum()))

    # plain means: a NaN class makes the average NaN
    mean_p = float(np.mean(precision)) if precision.size else np.nan
    mean_r = float(np.mean(recall)) if recall.size else np.nan
    macro_f1 = float(_safe_ratio(2 * mean_p * mean_r, mean_p + mean_r))

    return FoldMetrics(
        precision=precision,
        recall=recall,
        macro_f1=macro_f1,
        accuracy=accuracy,
        bal_accuracy=mean_r,
    )


def metrics_to_rows(
    metrics: FoldMetrics, labels: Sequence, method: str, fold: int
) -> pd.DataFrame:
    """
    Flatten one fold's metrics into long form (class, metric, value, method, fold).

    Scalar metrics are repeated on every class row, as a class-by-metric table
    would carry them before flattening.
    """
    rows: List[dict] = []
    for i, label in enumerate(labels):
        per_class = {
            "precision": float(metrics.precision[i]),
            "recall": float(metrics.recall[i]),
            "macro_f1": metrics.macro_f1,
            "accuracy": metrics.accuracy,
            "bal_accuracy": metrics.bal_accuracy,
        }
        for name in METRIC_NAMES:
            rows.append(
                {
                    "class": label,
                    "metric": name,
                    "value": per_class[name],
                    "method": method,
                    "fold": fold,
                }
            )
    return pd.DataFrame(rows, columns=["class", "metric", "value", "method", "fold"])


def classification_report(
    cm: np.ndarray,
    labels: Sequence,
    target_names: List[str] = None,
    digits: int = 2,
) -> str:
    """
    Text report of per-class precision/recall/support plus the scalar metrics.

    Args:
        cm: Confusion matrix over labels
        labels: Label universe the matrix is indexed by
        target_names: Display names (defaults to str(label))
        digits: Number of decimal places to show

    Returns:
        Formatted report string; undefined values print as nan
    """
    if target_names is None:
        target_names = [str(label) for label in labels]
    if len(target_names) != len(labels):
        raise ValueError("target_names length must match number of labels")

    m = compute_metrics(cm)
    support = np.asarray(cm).sum(axis=1)

    width = max(len(name) for name in target_names)
    width = max(width, len("bal_accuracy"))

    report = f"{'':>{width}} {'precision':>9} {'recall':>9} {'support':>9}\n"
    report += "\n"
    for name, p, r, s in zip(target_names, m.precision, m.recall, support):
        report += f"{name:>{width}} {p:>9.{digits}f} {r:>9.{digits}f} {s:>9}\n"
    report += "\n"
    report += f"{'macro_f1':>{width}} {m.macro_f1:>9.{digits}f}\n"
    report += f"{'accuracy':>{width}} {m.accuracy:>9.{digits}f} {'':>9} {int(support.sum()):>9}\n"
    report += f"{'bal_accuracy':>{width}} {m.bal_accuracy:>9.{digits}f}\n"

    return report
