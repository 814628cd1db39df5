# naive_bayes.py
from typing import Any, Dict

import numpy as np
from sklearn.naive_bayes import MultinomialNB

from .base import SentimentMethod


class NaiveBayesClassifier(SentimentMethod):
    """Multinomial naive Bayes on DFM term counts.

    params:
      - alpha: additive (Laplace) smoothing, default 1.0
      - fit_prior: learn class priors from training rows, default True

    Classes missing from the training rows are unknown to the model, so they
    have zero probability and are never predicted.
    """

    name = "bayes"

    def __init__(self, **params: Dict[str, Any]):
        self.p = params

    def _fit_predict(self, train, test) -> np.ndarray:
        model = MultinomialNB(
            alpha=self.p.get("alpha", 1.0),
            fit_prior=self.p.get("fit_prior", True),
        )
        model.fit(train.matrix, train.labels)
        return model.predict(test.matrix)
