"""Statistics and error aggregation over classified alignments."""
from __future__ import annotations

from typing import List, Sequence

from jiwer import wer

from recitation.models.aligned_token import AlignedToken, Statistics, Status, TextError
from .classifier import error_type_for, severity_from_confidence


def calculate_statistics(aligned: Sequence[AlignedToken]) -> Statistics:
    """Count rows by status.

    total_words counts every row with a reference token (all but extra rows).
    error_count covers ERROR rows only; near-misses are reported separately.
    """
    return Statistics(
        total_words=sum(1 for t in aligned if t.reference),
        correct_words=sum(1 for t in aligned if t.status is Status.CORRECT),
        error_count=sum(1 for t in aligned if t.status is Status.ERROR),
        near_miss_count=sum(1 for t in aligned if t.status is Status.NEAR_MISS),
    )


def accuracy_from(stats: Statistics) -> float:
    if stats.total_words > 0:
        return stats.correct_words / stats.total_words
    return 0.0


def extract_errors(aligned: Sequence[AlignedToken]) -> List[TextError]:
    """Convert every non-correct row, in alignment order, into a TextError."""
    return [
        TextError(
            type=error_type_for(t.status),
            expected=t.reference,
            actual=t.recognized,
            position=t.position,
            severity=severity_from_confidence(t.confidence),
        )
        for t in aligned
        if t.status is not Status.CORRECT
    ]


def word_error_rate(reference: Sequence[str], recognized: Sequence[str]) -> float:
    """Exact-match word error rate over normalized tokens, clamped to [0, 1].

    Unlike accuracy, near-misses count as substitutions here.
    """
    if not reference:
        return 1.0 if recognized else 0.0
    if not recognized:
        return 1.0
    v = wer(" ".join(reference), " ".join(recognized))
    if v < 0.0:
        return 0.0
    if v > 1.0:
        return 1.0
    return v


def word_error_rate_from(aligned: Sequence[AlignedToken]) -> float:
    """Word error rate over the token sequences already held by an alignment.

    Every reference token appears in exactly one row, in order, and so does
    every recognized token, so the two sides are rebuilt without tokenizing again.
    """
    reference = [t.reference for t in aligned if t.reference]
    recognized = [t.recognized for t in aligned if t.recognized]
    return word_error_rate(reference, recognized)
