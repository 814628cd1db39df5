"""
Unit tests for paired and one-sample significance tests.
"""

import math

import numpy as np
import pandas as pd
import pytest
from scipy import stats

from tweet_sentiment.experiments.significance import descriptive_tests, paired_tests


def _long(values_by_method, metric="accuracy", cls=1):
    rows = []
    for method, values in values_by_method.items():
        for fold, v in enumerate(values, 1):
            rows.append({"class": cls, "metric": metric, "value": v, "method": method, "fold": fold})
    return pd.DataFrame(rows)


A = [0.70, 0.72, 0.68, 0.75, 0.71]
B = [0.60, 0.66, 0.61, 0.64, 0.63]


def test_paired_matches_scipy():
    out = paired_tests(_long({"bayes": A, "svm": B}))
    assert len(out) == 1
    row = out.iloc[0]
    expected = stats.ttest_rel(A, B)
    assert row["method_a"] == "bayes" and row["method_b"] == "svm"
    assert row["n_pairs"] == 5
    assert row["statistic"] == pytest.approx(expected.statistic)
    assert row["p_value"] == pytest.approx(expected.pvalue)
    assert row["mean_diff"] == pytest.approx(np.mean(np.subtract(A, B)))


def test_paired_drops_nan_folds():
    a = A[:2] + [math.nan] + A[3:]
    out = paired_tests(_long({"bayes": a, "svm": B}))
    row = out.iloc[0]
    assert row["n_pairs"] == 4
    expected = stats.ttest_rel([A[0], A[1], A[3], A[4]], [B[0], B[1], B[3], B[4]])
    assert row["p_value"] == pytest.approx(expected.pvalue)


def test_paired_all_pairs_per_group():
    df = pd.concat(
        [
            _long({"lexicon": B, "bayes": A, "svm": B}, metric="precision", cls=-1),
            _long({"lexicon": B, "bayes": A, "svm": B}, metric="recall", cls=0),
        ]
    )
    out = paired_tests(df)
    assert len(out) == 2 * 3
    pairs = set(zip(out["method_a"], out["method_b"]))
    assert pairs == {("bayes", "lexicon"), ("bayes", "svm"), ("lexicon", "svm")}


def test_paired_too_few_pairs_is_nan():
    out = paired_tests(_long({"bayes": [0.5, math.nan], "svm": [0.4, 0.3]}))
    row = out.iloc[0]
    assert row["n_pairs"] == 1
    assert math.isnan(row["statistic"]) and math.isnan(row["p_value"])


def test_descriptive_stats():
    out = descriptive_tests(_long({"bayes": A, "svm": B + [math.nan]}))
    bayes = out[out["method"] == "bayes"].iloc[0]
    assert bayes["n"] == 5
    assert bayes["mean"] == pytest.approx(np.mean(A))
    assert bayes["std"] == pytest.approx(np.std(A, ddof=1))
    assert bayes["p_value"] == pytest.approx(stats.ttest_1samp(A, 0.0).pvalue)

    svm = out[out["method"] == "svm"].iloc[0]
    assert svm["n"] == 5


def test_empty_input():
    empty = pd.DataFrame(columns=["class", "metric", "value", "method", "fold"])
    assert paired_tests(empty).empty
    assert descriptive_tests(empty).empty
