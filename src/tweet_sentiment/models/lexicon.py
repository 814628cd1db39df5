# lexicon.py
from typing import List

import numpy as np
from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from ..core.categorize import categorize
from .base import SentimentMethod


class VaderLexiconScorer(SentimentMethod):
    """VADER compound score per raw text, bucketed with the categorizer.

    Needs no training data; train_idx is accepted and ignored.
    """

    name = "lexicon"
    uses_training = False

    def __init__(self, scheme: int = 3, **params):
        self.scheme = scheme
        self.p = params
        self._analyzer = None

    @property
    def analyzer(self) -> SentimentIntensityAnalyzer:
        if self._analyzer is None:
            self._analyzer = SentimentIntensityAnalyzer()
        return self._analyzer

    def scores(self, texts: List[str]) -> np.ndarray:
        return np.array([self.analyzer.polarity_scores(t)["compound"] for t in texts], dtype=float)

    def _fit_predict(self, train, test) -> np.ndarray:
        labels = [categorize(s, self.scheme) for s in self.scores(test.texts)]
        # VADER never returns NaN, so every score has a label
        return np.array(labels, dtype=int)
