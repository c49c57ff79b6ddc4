"""Corpus-level statistics about entity extraction and placeholder survival.

`summarize` turns a batch of annotated source lines and their transformed
counterparts into a per-line table; `aggregate` condenses that table into
the handful of numbers worth watching when tuning a transformation model
that must keep placeholders intact:

1.  **Parse failures**: lines whose markup was rejected and passed through.
2.  **Entity load**: how many entities a line carries (median and p95).
3.  **Mismatches**: lines where the placeholder count after transformation
    differs from the entity count, i.e. where restoration is unreliable.
"""
from __future__ import annotations
from typing import Any, Dict, List, Sequence

import numpy as np
import pandas as pd

from .data_validation import count_placeholders, validate
from .types import AnnotatedLine

__all__ = ["summarize", "aggregate"]

COLUMNS = ["line_num", "parsed", "error", "entities", "placeholders", "issues"]

def summarize(
    annotations: Sequence[AnnotatedLine],
    transformed_lines: Sequence[str],
    sentinel: str = "$",
) -> pd.DataFrame:
    """
    Builds one row per line describing its entities and placeholders.

    Raises:
        ValueError: If the two sequences differ in length.
    """
    if len(annotations) != len(transformed_lines):
        raise ValueError(
            f"Got {len(annotations)} annotated lines but {len(transformed_lines)} transformed lines."
        )

    rows: List[Dict[str, Any]] = []
    for annotated, transformed in zip(annotations, transformed_lines):
        report = validate(annotated, transformed, sentinel)
        rows.append({
            "line_num": annotated.line_num,
            "parsed": annotated.parsed,
            "error": annotated.error,
            "entities": len(annotated.entities),
            "placeholders": count_placeholders(transformed, sentinel),
            "issues": report["issue_count"],
        })
    return pd.DataFrame(rows, columns=COLUMNS)

def aggregate(df: pd.DataFrame) -> Dict[str, Any]:
    """Reduces a `summarize` table to corpus totals."""
    if df.empty:
        return {
            "lines": 0,
            "parse_failures": 0,
            "entities": 0,
            "placeholders": 0,
            "mismatched_lines": 0,
            "entities_per_line_median": None,
            "entities_per_line_p95": None,
        }

    def percentile(p: float) -> float:
        return float(np.percentile(df["entities"].to_numpy(), p))

    mismatched = df["entities"] != df["placeholders"]
    return {
        "lines": int(len(df)),
        "parse_failures": int((~df["parsed"].astype(bool)).sum()),
        "entities": int(df["entities"].sum()),
        "placeholders": int(df["placeholders"].sum()),
        "mismatched_lines": int(mismatched.sum()),
        "entities_per_line_median": percentile(50),
        "entities_per_line_p95": percentile(95),
    }
