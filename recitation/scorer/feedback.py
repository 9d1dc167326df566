"""Human-readable feedback derived from a comparison result."""
from __future__ import annotations

import math
from typing import List

from recitation.config import HIGH_ACCURACY_BAND, MEDIUM_ACCURACY_BAND
from recitation.models.aligned_token import AlignedToken, ComparisonResult, Status


def percent(ratio: float) -> int:
    """Whole percent of a ratio in [0, 1], halves rounded up (0.625 -> 63)."""
    return math.floor(ratio * 100 + 0.5)


def accuracy_band(accuracy: float) -> str:
    """Map accuracy in [0, 1] to "high", "medium" or "low"."""
    if accuracy >= HIGH_ACCURACY_BAND:
        return "high"
    if accuracy >= MEDIUM_ACCURACY_BAND:
        return "medium"
    return "low"


def display_text(token: AlignedToken, show_reference: bool = True) -> str:
    """Surface text for highlighting, falling back to the other side when empty."""
    if show_reference:
        return token.reference or token.recognized
    return token.recognized or token.reference


def describe_token(token: AlignedToken) -> str:
    """One-line description of an alignment row, e.g. for a tooltip."""
    status = token.status
    if status is Status.CORRECT:
        return f'Correct: "{token.reference}"'
    if status is Status.ERROR:
        return f'Expected: "{token.reference}" | Recognized: "{token.recognized}"'
    if status is Status.NEAR_MISS:
        return (
            f"Close match ({percent(token.confidence)}%): "
            f'"{token.reference}" ≈ "{token.recognized}"'
        )
    if status is Status.MISSING:
        return f'Missing word: "{token.reference}"'
    if status is Status.EXTRA:
        return f'Extra word: "{token.recognized}"'
    raise ValueError(f"Unknown status {status!r}")


def summary_lines(result: ComparisonResult) -> List[str]:
    """Plain-text report of a comparison: accuracy, counts and numbered errors."""
    stats = result.statistics
    lines = [
        f"Accuracy: {percent(result.accuracy)}%",
        "Statistics:",
        f"  Total Words: {stats.total_words}",
        f"  Correct Words: {stats.correct_words}",
        f"  Errors: {stats.error_count}",
        f"  Near Misses: {stats.near_miss_count}",
    ]
    if result.errors:
        lines.append("Errors Found:")
        for idx, error in enumerate(result.errors, start=1):
            lines.append(f'  {idx}. Expected: "{error.expected}" | Actual: "{error.actual}"')
    return lines
