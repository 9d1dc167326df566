"""Recitation check: compare a recited text against its reference word by word.

The engine tokenizes both texts, aligns them with a similarity-weighted edit
distance and classifies every row as correct, near-miss, error, missing or
extra. It holds no state and performs no I/O.
"""

from .models.aligned_token import (
    AlignedToken,
    ComparisonResult,
    ErrorType,
    Severity,
    Statistics,
    Status,
    TextError,
)
from .scorer.comparison import compare_texts

__all__ = [
    "compare_texts",
    "AlignedToken",
    "ComparisonResult",
    "ErrorType",
    "Severity",
    "Statistics",
    "Status",
    "TextError",
]
