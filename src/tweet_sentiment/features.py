# -*- coding: utf-8 -*-
# features.py
# Turns loaded records into a document-feature matrix (term counts) whose rows
# stay aligned with the record order, along with labels and raw texts.
from __future__ import annotations

import html
import re
import unicodedata
from dataclasses import dataclass
from typing import FrozenSet, List, Sequence

import numpy as np
from scipy.sparse import csr_matrix
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS, CountVectorizer

from .core.categorize import categorize_all, label_universe
from .prepare_dataset import Record

DEFAULT_MIN_DOCFREQ = 7

TAG_RE = re.compile(r"<[^>]+>")
URL_RE = re.compile(r"(https?://\S+|www\.\S+)")
EMAIL_RE = re.compile(r"\b[\w\.-]+@[\w\.-]+\.\w+\b")
USER_RE = re.compile(r"(^|[^A-Za-z0-9_])@([A-Za-z0-9_]{1,15})")
DIGIT_RE = re.compile(r"\d+")
# keeps hashtags and the placeholder tokens below as single terms
TOKEN_PATTERN = r"(?u)#?\b\w\w+\b"


def strip_control_chars(s: str) -> str:
    return "".join(ch for ch in s if ch.isprintable())


def normalize_text(text: str) -> str:
    s = str(text)
    s = html.unescape(s)
    s = TAG_RE.sub(" ", s)
    s = unicodedata.normalize("NFKC", s)
    s = URL_RE.sub(" urltoken ", s)
    s = EMAIL_RE.sub(" emailtoken ", s)
    s = USER_RE.sub(r"\1 usertoken ", s)
    s = DIGIT_RE.sub("0", s)
    s = s.lower()
    s = strip_control_chars(s)
    s = re.sub(r"\s+", " ", s).strip()
    return s


@dataclass(frozen=True)
class DocumentFeatureMatrix:
    matrix: csr_matrix
    terms: List[str]
    labels: np.ndarray
    texts: List[str]
    label_universe: tuple

    @property
    def n_docs(self) -> int:
        return self.matrix.shape[0]

    def subset(self, rows: Sequence[int]) -> "DocumentFeatureMatrix":
        rows = np.asarray(rows, dtype=int)
        return DocumentFeatureMatrix(
            matrix=self.matrix[rows],
            terms=self.terms,
            labels=self.labels[rows],
            texts=[self.texts[i] for i in rows],
            label_universe=self.label_universe,
        )


def build_dfm(
    records: Sequence[Record],
    scheme: int = 3,
    min_docfreq: int = DEFAULT_MIN_DOCFREQ,
    stop_words: FrozenSet[str] = ENGLISH_STOP_WORDS,
) -> DocumentFeatureMatrix:
    """
    Build the sparse term-count matrix for a corpus.

    Args:
        records: Loaded records; matrix row i is records[i]
        scheme: 3 or 5 class labelling of the normalized sentiment
        min_docfreq: Drop terms appearing in fewer documents than this
        stop_words: Terms removed before counting

    Returns:
        DocumentFeatureMatrix with labels and raw texts aligned to rows
    """
    if not records:
        raise ValueError("Cannot build a feature matrix from zero records")

    labels = categorize_all([r.sentiment for r in records], scheme)
    if any(lab is None for lab in labels):
        raise ValueError("Some records have an undefined sentiment label")

    texts = [r.text for r in records]
    vec = CountVectorizer(
        preprocessor=normalize_text,
        token_pattern=TOKEN_PATTERN,
        stop_words=list(stop_words),
        min_df=min_docfreq,
    )
    try:
        X = vec.fit_transform(texts)
        terms = [str(t) for t in vec.get_feature_names_out()]
    except ValueError as e:
        # min_df above the corpus size or nothing but stopwords
        print(
            f"[warn] no terms left after trimming (min_docfreq={min_docfreq}): {e}; "
            "feature-based methods will fail"
        )
        X = csr_matrix((len(texts), 0), dtype=np.int64)
        terms = []

    print(f"[features] DFM {X.shape[0]} docs x {X.shape[1]} terms (min_docfreq={min_docfreq})")
    return DocumentFeatureMatrix(
        matrix=csr_matrix(X),
        terms=terms,
        labels=np.asarray(labels, dtype=int),
        texts=texts,
        label_universe=label_universe(scheme),
    )
