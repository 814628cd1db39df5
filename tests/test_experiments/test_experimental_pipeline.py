"""
End-to-end test of the experimental pipeline on a small ground-truth file.
"""

import json

import pandas as pd
import pytest

from tweet_sentiment.experiments import ExperimentalPipeline


def test_complete_pipeline_writes_outputs(ground_truth_file, tmp_path):
    out_dir = tmp_path / "results"
    pipeline = ExperimentalPipeline(
        data_path=ground_truth_file,
        results_dir=out_dir,
        k=3,
        min_docfreq=2,
        method_params={"bayes": {"alpha": 0.5}},
    )
    summary_path = pipeline.run_complete_pipeline()

    for name in [
        "cv_metrics.csv",
        "cv_failures.csv",
        "paired_tests.csv",
        "descriptive_tests.csv",
        "method_summary.md",
        "experiment_summary.json",
    ]:
        assert (out_dir / name).exists(), name

    metrics = pd.read_csv(out_dir / "cv_metrics.csv")
    assert len(metrics) == 3 * 3 * 3 * 5

    meta = json.loads(summary_path.read_text(encoding="utf-8"))
    assert meta["rejected_rows"] == 1
    assert meta["rows"] == 45
    assert meta["params"]["bayes"]["alpha"] == 0.5
    assert meta["failed_units"] == []

    paired = pd.read_csv(out_dir / "paired_tests.csv")
    assert {"method_a", "method_b", "statistic", "p_value"} <= set(paired.columns)


def test_too_many_folds_is_fatal(ground_truth_file, tmp_path):
    pipeline = ExperimentalPipeline(data_path=ground_truth_file, results_dir=tmp_path, k=100)
    with pytest.raises(ValueError):
        pipeline.load_data()


def test_lexicon_only_run_survives_empty_vocabulary(tmp_path):
    # no term reaches the default document frequency of 7 in five rows
    path = tmp_path / "tiny.tsv"
    path.write_text(
        "1\t-4\tawful day\n2\t-2\tbad bus\n3\t0\tbus at noon\n4\t2\tnice one\n5\t4\tsuperb show\n",
        encoding="utf-8",
    )
    pipeline = ExperimentalPipeline(
        data_path=path, results_dir=tmp_path / "results", k=5, methods=["lexicon"]
    )
    summary_path = pipeline.run_complete_pipeline()

    meta = json.loads(summary_path.read_text(encoding="utf-8"))
    assert meta["terms"] == 0
    assert meta["failed_units"] == []
    assert set(meta["params"]) == {"lexicon"}
    metrics = pd.read_csv(tmp_path / "results" / "cv_metrics.csv")
    assert set(metrics["method"]) == {"lexicon"}
    assert sorted(metrics["fold"].unique()) == [1, 2, 3, 4, 5]


def test_params_cover_only_requested_methods(ground_truth_file, tmp_path):
    pipeline = ExperimentalPipeline(
        data_path=ground_truth_file,
        results_dir=tmp_path,
        k=3,
        min_docfreq=2,
        methods=["vader", "svm"],
        method_params={"svm": {"C": 0.1}},
    )
    meta = json.loads(pipeline.run_complete_pipeline().read_text(encoding="utf-8"))
    assert set(meta["params"]) == {"lexicon", "svm"}
    assert meta["params"]["svm"]["C"] == 0.1
    assert meta["params"]["svm"]["random_state"] == 42
