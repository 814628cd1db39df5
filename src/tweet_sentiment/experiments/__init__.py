# Experimental components for the sentiment method comparison

from .cross_validation import CrossValidationResult, evaluate_unit, run_cross_validation
from .significance import descriptive_tests, paired_tests
from .experimental_pipeline import ExperimentalPipeline

__all__ = [
    "CrossValidationResult",
    "evaluate_unit",
    "run_cross_validation",
    "descriptive_tests",
    "paired_tests",
    "ExperimentalPipeline",
]
