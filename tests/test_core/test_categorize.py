"""
Unit tests for the score -> label categorizer.
"""

import math

import numpy as np
import pytest

from tweet_sentiment.core.categorize import categorize, categorize_all, label_universe


def test_three_class_boundaries():
    assert categorize(0.05, 3) == 0
    assert categorize(-0.05, 3) == 0
    assert categorize(0.050001, 3) == 1
    assert categorize(-0.050001, 3) == -1
    assert categorize(0.0, 3) == 0


def test_five_class_boundaries():
    assert categorize(0.46, 5) == 2
    assert categorize(0.45, 5) == 1
    assert categorize(0.050001, 5) == 1
    assert categorize(0.05, 5) == 0
    assert categorize(-0.05, 5) == 0
    assert categorize(-0.050001, 5) == -1
    assert categorize(-0.45, 5) == -1
    assert categorize(-0.450001, 5) == -2


@pytest.mark.parametrize("scheme", [3, 5])
def test_output_in_universe_and_monotonic(scheme):
    scores = np.linspace(-3, 3, 2001)
    labels = categorize_all(scores, scheme)
    assert set(labels) <= set(label_universe(scheme))
    assert all(a <= b for a, b in zip(labels, labels[1:]))


def test_nan_is_undefined():
    assert categorize(math.nan, 3) is None
    assert categorize(float("nan"), 5) is None


def test_unknown_scheme():
    with pytest.raises(ValueError):
        categorize(0.3, 4)
    with pytest.raises(ValueError):
        label_universe(7)


def test_repeat_calls_identical():
    scores = [-0.9, -0.2, 0.0, 0.05, 0.3, 0.8]
    assert categorize_all(scores, 5) == categorize_all(scores, 5)
