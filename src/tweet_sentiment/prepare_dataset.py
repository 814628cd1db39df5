#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Load the ground-truth tweet corpus (tab-separated: id, sentiment, text):
- Read the file with pandas and split each line on its first two tabs
- Validate columns with vectorized masks; malformed rows are rejected with a reason
- Normalize sentiment from [-4, 4] into [-1, 1]

This module provides functions to load the corpus programmatically.
"""
from __future__ import annotations

import csv
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd

SENTIMENT_SCALE = 4.0

# Lines are read whole and split on tabs afterwards, so text keeps its own tabs.
LINE_SEP = "\x1f"


@dataclass(frozen=True)
class Record:
    id: int
    sentiment: float
    text: str


@dataclass(frozen=True)
class RejectedRow:
    line_no: int
    raw: str
    reason: str


@dataclass
class LoadResult:
    records: List[Record] = field(default_factory=list)
    rejected: List[RejectedRow] = field(default_factory=list)

    @property
    def n_rejected(self) -> int:
        return len(self.rejected)


def read_lines(src: Path, skip_header: bool = False) -> pd.Series:
    """Raw lines of the file, blank lines included, indexed from 0."""
    try:
        df = pd.read_csv(
            src,
            sep=LINE_SEP,
            header=None,
            names=["raw"],
            dtype=str,
            quoting=csv.QUOTE_NONE,
            engine="python",
            skiprows=1 if skip_header else 0,
            skip_blank_lines=False,
            keep_default_na=False,
            on_bad_lines=lambda fields: [LINE_SEP.join(fields)],
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError:
        return pd.Series([], dtype=object, name="raw")
    return df["raw"].fillna("").astype(str).str.rstrip("\r").reset_index(drop=True)


def split_columns(raw: pd.Series) -> pd.DataFrame:
    """Split lines into id/sentiment/text on the first two tabs."""
    parts = raw.str.split("\t", n=2, expand=True).reindex(columns=[0, 1, 2])
    parts.columns = ["id", "sentiment", "text"]
    return parts


def validate_rows(parts: pd.DataFrame, raw: pd.Series, scale: float = SENTIMENT_SCALE):
    """
    Check every row at once.

    Returns:
        (reason, ids, sentiment, text): reason is "" for a valid row, otherwise
        the first failed check in order
    """
    missing = parts["text"].isna()
    cols = parts.fillna("").astype(str)
    ids = cols["id"].str.strip()
    sent = pd.to_numeric(cols["sentiment"].str.strip(), errors="coerce")
    text = cols["text"].str.strip()

    checks = [
        (raw.str.strip() == "", "empty line"),
        (missing, "expected 3 tab-separated columns"),
        (~ids.str.fullmatch(r"[+-]?\d+"), "id is not an integer"),
        (sent.isna(), "sentiment is not a number"),
        (~np.isfinite(sent), "sentiment is not finite"),
        (sent.abs() > scale, f"sentiment outside [-{scale:g}, {scale:g}]"),
        (text == "", "empty text"),
    ]
    reason = np.select(
        [np.asarray(mask, dtype=bool) for mask, _ in checks],
        [why for _, why in checks],
        default="",
    )
    return reason, ids, sent, text


def load_ground_truth(
    path: str | Path,
    skip_header: bool = False,
    scale: float = SENTIMENT_SCALE,
) -> LoadResult:
    """
    Read a ground-truth file into normalized Records.

    Args:
        path: Tab-separated file, one record per line
        skip_header: Whether the first line is a header
        scale: Absolute bound of the raw sentiment range

    Returns:
        LoadResult with accepted records and rejected rows
    """
    src = Path(path)
    if not src.exists():
        raise FileNotFoundError(f"Ground-truth file not found: {src}")

    raw = read_lines(src, skip_header)
    line_no = np.arange(len(raw)) + 1 + int(skip_header)
    reason, ids, sent, text = validate_rows(split_columns(raw), raw, scale)
    ok = reason == ""

    df = pd.DataFrame(
        {
            "id": pd.to_numeric(ids[ok]).astype(int),
            "sentiment": sent[ok] / scale,
            "text": text[ok],
        }
    )
    result = LoadResult(
        records=[
            Record(id=int(i), sentiment=float(s), text=t)
            for i, s, t in df.itertuples(index=False)
        ],
        rejected=[
            RejectedRow(int(n), r, str(why))
            for n, r, why in zip(line_no[~ok], raw[~ok], reason[~ok])
        ],
    )

    if result.n_rejected:
        print(f"[warn] rejected {result.n_rejected} malformed rows from {src.name}")
        for r in result.rejected[:5]:
            print(f"  line {r.line_no}: {r.reason}")
    if not result.records:
        raise ValueError(f"No valid records in {src}")

    return result


def records_to_frame(records: List[Record]) -> pd.DataFrame:
    return pd.DataFrame(
        [(r.id, r.sentiment, r.text) for r in records],
        columns=["id", "sentiment", "text"],
    )


def main():
    """CLI: summarize a ground-truth file."""
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument("--src", required=True, help="Path to tab-separated ground-truth file")
    parser.add_argument("--skip-header", action="store_true")
    args = parser.parse_args()

    res = load_ground_truth(args.src, skip_header=args.skip_header)
    df = records_to_frame(res.records)
    meta = {
        "src": str(args.src),
        "final_rows": int(len(df)),
        "rejected_rows": res.n_rejected,
        "sentiment_mean": float(df["sentiment"].mean()),
    }
    print(json.dumps(meta, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
