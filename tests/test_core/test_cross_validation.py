"""
Unit tests for stratified fold partitioning.
"""

import random
from collections import Counter

import pytest

from tweet_sentiment.core.cross_validation import (
    StratifiedKFold,
    make_folds,
    train_test_split_for,
)


@pytest.mark.parametrize("n,k,seed", [(5, 5, 0), (10, 3, 1), (47, 5, 42), (100, 10, 7), (12, 2, 3)])
def test_folds_are_disjoint_and_cover_all(n, k, seed):
    rng = random.Random(seed)
    labels = [rng.choice([-1, 0, 1]) for _ in range(n)]
    folds = make_folds(labels, k, seed)

    assert len(folds) == k
    flat = [i for f in folds for i in f]
    assert len(flat) == n
    assert sorted(flat) == list(range(n))
    assert all(len(f) > 0 for f in folds)


def test_fold_sizes_balanced_and_stratified():
    labels = [1] * 30 + [0] * 20 + [-1] * 10
    folds = make_folds(labels, 5, seed=42)

    sizes = [len(f) for f in folds]
    assert max(sizes) - min(sizes) <= 1
    for f in folds:
        counts = Counter(labels[i] for i in f)
        assert counts[1] == 6
        assert counts[0] == 4
        assert counts[-1] == 2


def test_same_seed_same_folds():
    labels = [0, 1, 1, -1, 0, 1, -1, -1, 0, 1, 0]
    assert make_folds(labels, 3, seed=5) == make_folds(labels, 3, seed=5)


def test_one_row_per_fold_when_k_equals_n():
    folds = make_folds([-1, -1, 0, 1, 1], 5, seed=42)
    assert all(len(f) == 1 for f in folds)


@pytest.mark.parametrize("k", [0, 1, 6])
def test_degenerate_k_rejected(k):
    with pytest.raises(ValueError):
        make_folds([0, 1, 1, 0, -1], k)


def test_train_is_complement_of_test():
    folds = make_folds([0, 1] * 10, 4, seed=1)
    for j in range(4):
        train, test = train_test_split_for(folds, j)
        assert set(train).isdisjoint(test)
        assert sorted(train + test) == list(range(20))


def test_splitter_yields_k_pairs():
    labels = [0, 1, -1] * 4
    splits = list(StratifiedKFold(n_splits=4, random_state=3).split(labels))
    assert len(splits) == 4
    tests = sorted(i for _, te in splits for i in te)
    assert tests == list(range(12))
