"""Token similarity derived from character edit distance."""
from __future__ import annotations


def levenshtein_distance(a: str, b: str) -> int:
    """Character-level edit distance with unit costs."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            current[j] = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + (0 if ca == cb else 1),  # substitution
            )
        previous = current
    return previous[len(b)]


def similarity(a: str, b: str) -> float:
    """Normalized similarity in [0, 1] derived from the Levenshtein distance.

    Identical strings score 1.0 and an empty side scores 0.0; otherwise the
    score is (L - d) / L where L is the longer length.

    Example: similarity("testing", "test") == 4 / 7
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    longest = max(len(a), len(b))
    return max(0.0, (longest - levenshtein_distance(a, b)) / longest)
