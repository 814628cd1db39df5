# base.py
from typing import Sequence

import numpy as np

from ..features import DocumentFeatureMatrix


class SentimentMethod:
    """Shared fit_predict contract: train rows -> predicted labels for test rows.

    Subclasses implement _fit_predict on DFM subsets. A training partition
    holding one label only predicts that label; predictions are checked
    against the label universe.
    """

    name = "method"
    uses_training = True

    def fit_predict(
        self,
        train_idx: Sequence[int],
        test_idx: Sequence[int],
        dfm: DocumentFeatureMatrix,
    ) -> np.ndarray:
        test = dfm.subset(test_idx)
        if len(test_idx) == 0:
            return np.array([], dtype=int)

        if self.uses_training:
            if len(train_idx) == 0:
                raise ValueError(f"{self.name}: empty training partition")
            train = dfm.subset(train_idx)
            classes = np.unique(train.labels)
            if len(classes) == 1:
                pred = np.full(len(test_idx), classes[0], dtype=int)
            else:
                pred = self._fit_predict(train, test)
        else:
            pred = self._fit_predict(None, test)

        return self._check_universe(np.asarray(pred, dtype=int), dfm.label_universe)

    def _fit_predict(self, train, test) -> np.ndarray:
        raise NotImplementedError

    def _check_universe(self, pred: np.ndarray, universe) -> np.ndarray:
        bad = set(pred.tolist()) - set(universe)
        if bad:
            raise ValueError(f"{self.name}: predicted labels {sorted(bad)} outside {list(universe)}")
        return pred
