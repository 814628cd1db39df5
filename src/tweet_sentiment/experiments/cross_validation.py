#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Cross-Validation Driver

Runs every (method, fold) unit over one shared, precomputed feature matrix:
- Folds are stratified and computed once
- Each unit returns its own confusion matrix and long-form metrics batch
- Batches are concatenated at the end; no state is shared between units
- A unit whose method raises is recorded as a failure; the sweep continues
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from joblib import Parallel, delayed

from ..core.cross_validation import StratifiedKFold
from ..core.metrics import compute_metrics, confusion_matrix, metrics_to_rows
from ..features import DocumentFeatureMatrix
from ..models.base import SentimentMethod

METRIC_COLUMNS = ["class", "metric", "value", "method", "fold"]
FAILURE_COLUMNS = ["method", "fold", "error"]


@dataclass(frozen=True)
class UnitResult:
    method: str
    fold: int
    rows: Optional[pd.DataFrame] = None
    confusion: Optional[np.ndarray] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class CrossValidationResult:
    metrics: pd.DataFrame
    failures: pd.DataFrame
    confusion: Dict[Tuple[str, int], np.ndarray] = field(default_factory=dict)
    folds: List[List[int]] = field(default_factory=list)
    labels: tuple = ()

    def pooled_confusion(self, method: str) -> np.ndarray:
        """Sum of a method's per-fold confusion matrices."""
        mats = [cm for (m, _), cm in self.confusion.items() if m == method]
        if not mats:
            n = len(self.labels)
            return np.zeros((n, n), dtype=int)
        return np.sum(mats, axis=0)

    def summary(self) -> pd.DataFrame:
        """Mean and std over folds per method for the scalar metrics."""
        scalar = self.metrics[self.metrics["metric"].isin(["macro_f1", "accuracy", "bal_accuracy"])]
        # scalars are repeated on every class row; one per (method, fold) is enough
        scalar = scalar.drop_duplicates(subset=["method", "fold", "metric"])
        if scalar.empty:
            return pd.DataFrame(columns=["method", "metric", "mean", "std", "n_folds"])
        return (
            scalar.groupby(["method", "metric"])["value"]
            .agg(mean="mean", std="std", n_folds="count")
            .reset_index()
        )


def evaluate_unit(
    method_name: str,
    method: SentimentMethod,
    fold: int,
    train_idx: Sequence[int],
    test_idx: Sequence[int],
    dfm: DocumentFeatureMatrix,
    labels: Sequence[int],
) -> UnitResult:
    """Fit/predict one method on one fold and score it over the full label universe."""
    try:
        pred = method.fit_predict(train_idx, test_idx, dfm)
        actual = dfm.labels[np.asarray(test_idx, dtype=int)]
        cm = confusion_matrix(actual.tolist(), np.asarray(pred).tolist(), labels)
    except Exception as e:
        return UnitResult(method_name, fold, error=f"{type(e).__name__}: {e}")

    rows = metrics_to_rows(compute_metrics(cm), labels, method_name, fold)
    return UnitResult(method_name, fold, rows=rows, confusion=cm)


def run_cross_validation(
    dfm: DocumentFeatureMatrix,
    methods: Dict[str, SentimentMethod],
    k: int = 5,
    seed: int = 42,
    labels: Optional[Sequence[int]] = None,
    n_jobs: int = 1,
) -> CrossValidationResult:
    """
    Evaluate each method on each of k stratified folds.

    Args:
        dfm: Feature matrix with row-aligned labels and texts
        methods: Method name -> adapter
        k: Number of folds (2 <= k <= number of rows)
        seed: Seed for fold assignment
        labels: Label universe; defaults to the DFM's
        n_jobs: joblib workers; 1 runs in-process

    Returns:
        CrossValidationResult with long-form metrics and failed units
    """
    labels = tuple(labels) if labels is not None else tuple(dfm.label_universe)
    splits = list(StratifiedKFold(n_splits=k, random_state=seed).split(dfm.labels.tolist()))
    folds = [test_idx for _, test_idx in splits]

    units = []
    for name, method in methods.items():
        for fold, (train_idx, test_idx) in enumerate(splits, 1):
            units.append((name, method, fold, train_idx, test_idx))

    print(f"[cv] {len(methods)} methods x {k} folds = {len(units)} units (n_jobs={n_jobs})")
    if n_jobs == 1:
        results = [evaluate_unit(n, m, f, tr, te, dfm, labels) for n, m, f, tr, te in units]
    else:
        results = Parallel(n_jobs=n_jobs)(
            delayed(evaluate_unit)(n, m, f, tr, te, dfm, labels) for n, m, f, tr, te in units
        )

    batches, failures, confusion = [], [], {}
    for r in results:
        if r.ok:
            batches.append(r.rows)
            confusion[(r.method, r.fold)] = r.confusion
        else:
            print(f"[warn] {r.method} fold {r.fold} failed: {r.error}")
            failures.append({"method": r.method, "fold": r.fold, "error": r.error})

    metrics = (
        pd.concat(batches, ignore_index=True)
        if batches
        else pd.DataFrame(columns=METRIC_COLUMNS)
    )
    print(f"[cv] completed {len(results) - len(failures)}/{len(results)} units")
    return CrossValidationResult(
        metrics=metrics,
        failures=pd.DataFrame(failures, columns=FAILURE_COLUMNS),
        confusion=confusion,
        folds=folds,
        labels=labels,
    )
