#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Unified runner for the tweet sentiment method comparison.

- Run from project root after `pip install -e .`.
- Compares lexicon / bayes / svm (or a subset) with stratified k-fold CV.
- Writes long-form metrics, failed units and significance tables to --results-dir.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict

from tweet_sentiment.experiments import ExperimentalPipeline
from tweet_sentiment.features import DEFAULT_MIN_DOCFREQ
from tweet_sentiment.models.models_registry import METHOD_NAMES


def _method_params(args: argparse.Namespace) -> Dict[str, Dict[str, Any]]:
    """Override registry defaults from CLI flags."""
    params: Dict[str, Dict[str, Any]] = {}
    if args.alpha is not None:
        params["bayes"] = {"alpha": float(args.alpha)}
    if args.C is not None:
        params["svm"] = {"C": float(args.C)}
    return params


def main() -> None:
    ap = argparse.ArgumentParser(description="Compare sentiment methods with k-fold CV")
    ap.add_argument("--data", type=Path, required=True, help="Tab-separated ground-truth file (id, sentiment, text)")
    ap.add_argument("--results-dir", type=Path, default=Path("results"))
    ap.add_argument("--methods", nargs="+", choices=list(METHOD_NAMES), default=list(METHOD_NAMES))
    ap.add_argument("--k", type=int, default=5)
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("--scheme", type=int, choices=[3, 5], default=3)
    ap.add_argument("--min-docfreq", type=int, default=DEFAULT_MIN_DOCFREQ)
    ap.add_argument("--n-jobs", type=int, default=1, help="Parallel workers for the (method, fold) sweep")
    ap.add_argument("--skip-header", action="store_true", help="First line of --data is a header")

    # Optional overrides
    ap.add_argument("--alpha", type=float, default=None, help="Naive Bayes smoothing (default 1.0)")
    ap.add_argument("--C", type=float, default=None, help="Linear SVM regularization (default 1.0)")

    args = ap.parse_args()

    pipeline = ExperimentalPipeline(
        data_path=args.data,
        results_dir=args.results_dir,
        k=args.k,
        random_state=args.seed,
        scheme=args.scheme,
        min_docfreq=args.min_docfreq,
        methods=args.methods,
        method_params=_method_params(args),
        n_jobs=args.n_jobs,
        skip_header=args.skip_header,
    )
    out = pipeline.run_complete_pipeline()
    print(f"Saved summary: {out}")


if __name__ == "__main__":
    main()
