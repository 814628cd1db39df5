# categorize.py
import math
from typing import Iterable, List, Optional, Tuple

LABEL_UNIVERSES = {
    3: (-1, 0, 1),
    5: (-2, -1, 0, 1, 2),
}

NEUTRAL_BAND = 0.05
STRONG_BAND = 0.45


def label_universe(scheme: int = 3) -> Tuple[int, ...]:
    """Ordered labels for a 3- or 5-class scheme."""
    try:
        return LABEL_UNIVERSES[scheme]
    except KeyError:
        raise ValueError(f"Unknown scheme: {scheme} (expected 3 or 5)") from None


def categorize(score: float, scheme: int = 3) -> Optional[int]:
    """
    Map a continuous sentiment score to a discrete label.

    3-class: > 0.05 -> 1, < -0.05 -> -1, otherwise 0.
    5-class: > 0.45 -> 2, (0.05, 0.45] -> 1, [-0.05, 0.05] -> 0,
             [-0.45, -0.05) -> -1, otherwise -2.

    NaN has no class and returns None.
    """
    label_universe(scheme)
    score = float(score)
    if math.isnan(score):
        return None

    if scheme == 3:
        if score > NEUTRAL_BAND:
            return 1
        if score < -NEUTRAL_BAND:
            return -1
        return 0

    if score > STRONG_BAND:
        return 2
    if score > NEUTRAL_BAND:
        return 1
    if score >= -NEUTRAL_BAND:
        return 0
    if score >= -STRONG_BAND:
        return -1
    return -2


def categorize_all(scores: Iterable[float], scheme: int = 3) -> List[Optional[int]]:
    return [categorize(s, scheme) for s in scores]
