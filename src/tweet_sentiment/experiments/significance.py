# significance.py
from itertools import combinations

import numpy as np
import pandas as pd
from scipy import stats

PAIRED_COLUMNS = [
    "class", "metric", "method_a", "method_b", "n_pairs",
    "mean_a", "mean_b", "mean_diff", "statistic", "p_value",
]
DESCRIPTIVE_COLUMNS = ["class", "metric", "method", "n", "mean", "std", "statistic", "p_value"]


def _ttest_rel(a: np.ndarray, b: np.ndarray):
    if len(a) < 2:
        return np.nan, np.nan
    with np.errstate(divide="ignore", invalid="ignore"):
        res = stats.ttest_rel(a, b)
    return float(res.statistic), float(res.pvalue)


def _ttest_1samp(x: np.ndarray, popmean: float):
    if len(x) < 2:
        return np.nan, np.nan
    with np.errstate(divide="ignore", invalid="ignore"):
        res = stats.ttest_1samp(x, popmean)
    return float(res.statistic), float(res.pvalue)


def paired_tests(metrics: pd.DataFrame) -> pd.DataFrame:
    """
    Paired t-tests between every pair of methods, per (class, metric).

    Values are matched on fold; a fold with NaN on either side is left out.
    """
    rows = []
    for (cls, metric), g in metrics.groupby(["class", "metric"], sort=True):
        wide = g.pivot(index="fold", columns="method", values="value")
        for a, b in combinations(sorted(wide.columns), 2):
            pair = wide[[a, b]].dropna()
            va, vb = pair[a].to_numpy(float), pair[b].to_numpy(float)
            stat, p = _ttest_rel(va, vb)
            rows.append(
                {
                    "class": cls,
                    "metric": metric,
                    "method_a": a,
                    "method_b": b,
                    "n_pairs": len(pair),
                    "mean_a": float(va.mean()) if len(va) else np.nan,
                    "mean_b": float(vb.mean()) if len(vb) else np.nan,
                    "mean_diff": float((va - vb).mean()) if len(va) else np.nan,
                    "statistic": stat,
                    "p_value": p,
                }
            )
    return pd.DataFrame(rows, columns=PAIRED_COLUMNS)


def descriptive_tests(metrics: pd.DataFrame, popmean: float = 0.0) -> pd.DataFrame:
    """Mean, std and a one-sample t-test against popmean, per method and (class, metric)."""
    rows = []
    for (cls, metric, method), g in metrics.groupby(["class", "metric", "method"], sort=True):
        x = g["value"].dropna().to_numpy(float)
        stat, p = _ttest_1samp(x, popmean)
        rows.append(
            {
                "class": cls,
                "metric": metric,
                "method": method,
                "n": len(x),
                "mean": float(x.mean()) if len(x) else np.nan,
                "std": float(x.std(ddof=1)) if len(x) > 1 else np.nan,
                "statistic": stat,
                "p_value": p,
            }
        )
    return pd.DataFrame(rows, columns=DESCRIPTIVE_COLUMNS)
