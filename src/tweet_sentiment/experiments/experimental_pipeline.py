#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Main Experimental Pipeline for Tweet Sentiment Method Comparison

This module orchestrates the comparison of three sentiment approaches
(VADER lexicon, multinomial naive Bayes, linear SVM) on a labeled tweet corpus.

The pipeline coordinates:
1. Ground-truth loading and normalization
2. Document-feature matrix construction
3. Stratified k-fold cross-validation of every method
4. Paired and one-sample significance tests
5. Results export
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from ..core.categorize import label_universe
from ..core.metrics import classification_report
from ..features import DEFAULT_MIN_DOCFREQ, DocumentFeatureMatrix, build_dfm
from ..models.base import SentimentMethod
from ..models.models_registry import get_methods
from ..prepare_dataset import LoadResult, load_ground_truth
from .cross_validation import CrossValidationResult, run_cross_validation
from .significance import descriptive_tests, paired_tests


class ExperimentalPipeline:
    """
    Main experimental pipeline for the sentiment method comparison.

    This class orchestrates the complete workflow from corpus loading to
    exported metric and significance tables.
    """

    def __init__(
        self,
        data_path: str,
        results_dir: str = "results",
        k: int = 5,
        random_state: int = 42,
        scheme: int = 3,
        min_docfreq: int = DEFAULT_MIN_DOCFREQ,
        methods: Optional[List[str]] = None,
        method_params: Optional[Dict[str, Dict[str, Any]]] = None,
        n_jobs: int = 1,
        skip_header: bool = False,
    ):
        """
        Initialize experimental pipeline.

        Args:
            data_path: Tab-separated ground-truth file
            results_dir: Directory to save results
            k: Number of cross-validation folds
            random_state: Seed for fold assignment and the SVM
            scheme: 3- or 5-class labelling
            min_docfreq: Minimum document frequency for DFM terms
            methods: Subset of "lexicon", "bayes", "svm" (all by default)
            method_params: Per-method hyperparameter overrides
            n_jobs: Parallel workers for the CV sweep
            skip_header: Whether the data file starts with a header line
        """
        self.data_path = Path(data_path)
        self.results_dir = Path(results_dir)
        self.k = k
        self.random_state = random_state
        self.scheme = scheme
        self.labels = label_universe(scheme)
        self.min_docfreq = min_docfreq
        self.method_names = methods
        self.method_params = {m: dict(p) for m, p in (method_params or {}).items()}
        self.method_params.setdefault("svm", {}).setdefault("random_state", random_state)
        self.n_jobs = n_jobs
        self.skip_header = skip_header

        self.corpus: Optional[LoadResult] = None
        self.dfm: Optional[DocumentFeatureMatrix] = None
        self.methods: Dict[str, SentimentMethod] = {}
        self.cv: Optional[CrossValidationResult] = None
        self.results: Dict[str, Any] = {}

    def load_data(self):
        """Load and normalize the ground-truth corpus."""
        print("=" * 60)
        print("STEP 1: Loading Ground Truth")
        print("=" * 60)

        self.corpus = load_ground_truth(self.data_path, skip_header=self.skip_header)
        n = len(self.corpus.records)
        print(f"[data] rows={n}, rejected={self.corpus.n_rejected}")
        if self.k > n:
            raise ValueError(f"k={self.k} folds requested but only {n} valid rows loaded")

    def build_features(self):
        """Build the document-feature matrix once for all folds."""
        print("\n" + "=" * 60)
        print("STEP 2: Building Document-Feature Matrix")
        print("=" * 60)

        assert self.corpus is not None
        self.dfm = build_dfm(self.corpus.records, scheme=self.scheme, min_docfreq=self.min_docfreq)
        balance = pd.Series(self.dfm.labels).value_counts().sort_index().to_dict()
        print(f"[data] {self.scheme}-class balance={balance}")

    def run_cross_validation(self) -> CrossValidationResult:
        """Evaluate every method on every fold."""
        print("\n" + "=" * 60)
        print(f"STEP 3: {self.k}-Fold Cross-Validation")
        print("=" * 60)

        assert self.dfm is not None
        self.methods = get_methods(self.method_names, self.method_params, scheme=self.scheme)
        self.cv = run_cross_validation(
            self.dfm,
            self.methods,
            k=self.k,
            seed=self.random_state,
            labels=self.labels,
            n_jobs=self.n_jobs,
        )

        for name in self.methods:
            print(f"\n[{name}] pooled over folds:")
            print(classification_report(self.cv.pooled_confusion(name), self.labels, digits=4))

        self.results["summary"] = self.cv.summary()
        print(self.results["summary"].round(4).to_string(index=False))
        return self.cv

    def run_significance_tests(self):
        """Paired comparisons between methods and per-method descriptive tests."""
        print("\n" + "=" * 60)
        print("STEP 4: Significance Tests")
        print("=" * 60)

        assert self.cv is not None
        self.results["paired"] = paired_tests(self.cv.metrics)
        self.results["descriptive"] = descriptive_tests(self.cv.metrics)

        paired = self.results["paired"]
        scalar = paired[paired["metric"].isin(["macro_f1", "accuracy", "bal_accuracy"])]
        scalar = scalar.drop_duplicates(subset=["metric", "method_a", "method_b"])
        if not scalar.empty:
            cols = ["metric", "method_a", "method_b", "n_pairs", "mean_diff", "statistic", "p_value"]
            print(scalar[cols].round(4).to_string(index=False))

    def save_results(self) -> Path:
        """Write all tables to results_dir."""
        print("\n" + "=" * 60)
        print("STEP 5: Saving Results")
        print("=" * 60)

        assert self.cv is not None
        out = self.results_dir
        out.mkdir(parents=True, exist_ok=True)

        self.cv.metrics.to_csv(out / "cv_metrics.csv", index=False)
        self.cv.failures.to_csv(out / "cv_failures.csv", index=False)
        self.results.get("paired", pd.DataFrame()).to_csv(out / "paired_tests.csv", index=False)
        self.results.get("descriptive", pd.DataFrame()).to_csv(out / "descriptive_tests.csv", index=False)

        summary = self.results.get("summary", pd.DataFrame())
        (out / "method_summary.md").write_text(
            summary.to_markdown(index=False, floatfmt=".4f"), encoding="utf-8"
        )

        meta = {
            "timestamp": datetime.now().strftime("%Y%m%d_%H%M%S"),
            "data_path": str(self.data_path),
            "rows": len(self.corpus.records) if self.corpus else 0,
            "rejected_rows": self.corpus.n_rejected if self.corpus else 0,
            "terms": len(self.dfm.terms) if self.dfm else 0,
            "k": self.k,
            "seed": self.random_state,
            "scheme": self.scheme,
            "labels": list(self.labels),
            "min_docfreq": self.min_docfreq,
            "params": {name: dict(method.p) for name, method in self.methods.items()},
            "failed_units": self.cv.failures.to_dict(orient="records"),
            "summary": summary.to_dict(orient="records"),
        }
        path = out / "experiment_summary.json"
        with open(path, "w", encoding="utf-8") as f:
            json.dump(meta, f, indent=2, ensure_ascii=False, default=str)

        print(f"Results saved to: {out}")
        return path

    def run_complete_pipeline(self):
        """Run the complete experimental pipeline."""
        self.load_data()
        self.build_features()
        self.run_cross_validation()
        self.run_significance_tests()
        return self.save_results()
