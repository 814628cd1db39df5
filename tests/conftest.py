"""
Shared fixtures: a small synthetic tweet corpus with clearly separated classes.
"""

import pytest

from tweet_sentiment.features import build_dfm
from tweet_sentiment.prepare_dataset import Record

POSITIVE = [
    "I love this great phone, so happy with it",
    "what a wonderful day, love the sunshine",
    "amazing service and great people, happy customer",
    "best concert ever, love love love",
    "great news today, feeling happy and excited",
]
NEGATIVE = [
    "I hate this awful phone, so angry",
    "terrible day, hate the rain and the traffic",
    "worst service ever, awful rude people",
    "sad and angry about the terrible news",
    "awful experience, hate waiting, worst airline",
]
NEUTRAL = [
    "the train leaves from platform four at noon",
    "meeting moved to the second floor room",
    "the store opens at nine on weekdays",
    "bus route schedule posted on the website",
    "the report is due on thursday afternoon",
]


def _make_records(repeats: int = 3):
    records = []
    rid = 1
    for _ in range(repeats):
        for texts, sent in ((POSITIVE, 3.0), (NEGATIVE, -3.0), (NEUTRAL, 0.0)):
            for t in texts:
                records.append(Record(id=rid, sentiment=sent / 4.0, text=t))
                rid += 1
    return records


@pytest.fixture
def sample_records():
    return _make_records()


@pytest.fixture
def sample_dfm(sample_records):
    return build_dfm(sample_records, scheme=3, min_docfreq=2)


@pytest.fixture
def ground_truth_file(tmp_path):
    """Tab-separated ground truth on the raw [-4, 4] scale plus one malformed line."""
    lines = []
    for r in _make_records():
        lines.append(f"{r.id}\t{r.sentiment * 4:g}\t{r.text}")
    lines.insert(3, "not-an-id\t2\tbroken row")
    path = tmp_path / "ground_truth.tsv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
