# cross_validation.py
import random
from typing import Iterator, List, Sequence, Tuple


def make_folds(labels: Sequence[int], k: int, seed: int = 42) -> List[List[int]]:
    """
    Split row indices into k disjoint, label-stratified test folds.

    Indices are bucketed by label and each bucket is shuffled. The buckets are
    then laid end to end (sorted label order) and dealt round-robin, so every
    fold gets a share of each class and fold sizes differ by at most one.
    """
    n = len(labels)
    if k < 2:
        raise ValueError(f"k must be at least 2, got {k}")
    if k > n:
        raise ValueError(f"k={k} folds requested but only {n} rows available")

    rng = random.Random(seed)
    # bucket by label
    buckets = {}
    for i, yi in enumerate(labels):
        buckets.setdefault(int(yi), []).append(i)
    for b in buckets.values():
        rng.shuffle(b)

    folds: List[List[int]] = [[] for _ in range(k)]
    pos = 0
    for label in sorted(buckets):
        for idx in buckets[label]:
            folds[pos % k].append(idx)
            pos += 1
    return [sorted(f) for f in folds]


def train_test_split_for(folds: List[List[int]], j: int) -> Tuple[List[int], List[int]]:
    """Test = fold j, train = every other fold."""
    test_idx = folds[j]
    train_idx = sorted(i for fi, f in enumerate(folds) if fi != j for i in f)
    return train_idx, test_idx


class StratifiedKFold:
    """Seeded stratified k-fold splitter yielding (train_idx, test_idx)."""

    def __init__(self, n_splits: int = 5, random_state: int = 42):
        self.n_splits = n_splits
        self.random_state = random_state

    def folds(self, labels: Sequence[int]) -> List[List[int]]:
        return make_folds(labels, self.n_splits, self.random_state)

    def split(self, labels: Sequence[int]) -> Iterator[Tuple[List[int], List[int]]]:
        folds = self.folds(labels)
        for j in range(len(folds)):
            yield train_test_split_for(folds, j)
