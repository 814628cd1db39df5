# Sentiment method adapters sharing the fit_predict contract

from .base import SentimentMethod
from .lexicon import VaderLexiconScorer
from .naive_bayes import NaiveBayesClassifier
from .svm import LinearSVMClassifier
from .models_registry import (
    DEFAULT_PARAMS,
    METHOD_NAMES,
    create_method_factory,
    get_methods,
)

__all__ = [
    "SentimentMethod",
    "VaderLexiconScorer",
    "NaiveBayesClassifier",
    "LinearSVMClassifier",
    "DEFAULT_PARAMS",
    "METHOD_NAMES",
    "create_method_factory",
    "get_methods",
]
