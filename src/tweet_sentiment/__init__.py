"""
This package compares three sentiment classification approaches on a labeled
tweet corpus using stratified k-fold cross-validation and paired significance
tests.

Key modules:
- prepare_dataset: Ground-truth loading and sentiment normalization
- features: Document-feature matrix construction
- core: Categorizer, fold partitioner, confusion matrix and metrics
- models: Method adapters (VADER lexicon, naive Bayes, linear SVM)
- experiments: Cross-validation driver, significance tests, pipeline
"""

__version__ = "0.1.0"
