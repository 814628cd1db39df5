# models_registry.py
from typing import Any, Callable, Dict, List, Optional

from .base import SentimentMethod
from .lexicon import VaderLexiconScorer
from .naive_bayes import NaiveBayesClassifier
from .svm import LinearSVMClassifier

METHOD_NAMES = ("lexicon", "bayes", "svm")

# Explicit defaults so results do not depend on library defaults drifting.
DEFAULT_PARAMS: Dict[str, Dict[str, Any]] = {
    "lexicon": {},
    "bayes": {
        "alpha": 1.0,  # Laplace smoothing
        "fit_prior": True,
    },
    "svm": {
        "C": 1.0,
        "loss": "squared_hinge",
        "max_iter": 10000,
        "random_state": 42,
    },
}

_ALIASES = {
    "lexicon": "lexicon",
    "vader": "lexicon",
    "bayes": "bayes",
    "nb": "bayes",
    "naive_bayes": "bayes",
    "svm": "svm",
    "linear_svm": "svm",
}


def canonical_name(method: str) -> str:
    try:
        return _ALIASES[method.lower()]
    except KeyError:
        raise ValueError(f"Unknown method: {method}") from None


def create_method_factory(method: str, defaults: Optional[Dict[str, Any]] = None) -> Callable:
    """
    Return factory(params) -> SentimentMethod, with params layered over defaults.
    """
    name = canonical_name(method)
    base = {**DEFAULT_PARAMS[name], **(defaults or {})}

    def factory(params: Optional[Dict[str, Any]] = None, scheme: int = 3) -> SentimentMethod:
        cfg = {**base, **(params or {})}
        if name == "lexicon":
            return VaderLexiconScorer(scheme=scheme, **cfg)
        if name == "bayes":
            return NaiveBayesClassifier(**cfg)
        return LinearSVMClassifier(**cfg)

    return factory


def get_methods(
    names: Optional[List[str]] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
    scheme: int = 3,
) -> Dict[str, SentimentMethod]:
    """Instantiate the requested methods (all three by default), keyed by canonical name."""
    names = list(names) if names else list(METHOD_NAMES)
    overrides = overrides or {}
    methods: Dict[str, SentimentMethod] = {}
    for n in names:
        name = canonical_name(n)
        methods[name] = create_method_factory(name)(overrides.get(name), scheme=scheme)
    return methods
