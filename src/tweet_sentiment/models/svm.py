# svm.py
from typing import Any, Dict

import numpy as np
from sklearn.svm import LinearSVC

from .base import SentimentMethod


class LinearSVMClassifier(SentimentMethod):
    """One-vs-rest linear SVM on DFM term counts; predicts the max-margin class.

    params:
      - C: inverse regularization strength, default 1.0
      - loss: "squared_hinge" (default) or "hinge"
      - max_iter: liblinear iteration cap, default 10000
      - random_state: seed for liblinear's coordinate descent, default 42
    """

    name = "svm"

    def __init__(self, **params: Dict[str, Any]):
        self.p = params

    def _fit_predict(self, train, test) -> np.ndarray:
        model = LinearSVC(
            C=self.p.get("C", 1.0),
            loss=self.p.get("loss", "squared_hinge"),
            max_iter=self.p.get("max_iter", 10000),
            random_state=self.p.get("random_state", 42),
        )
        model.fit(train.matrix, train.labels)
        return model.predict(test.matrix)
