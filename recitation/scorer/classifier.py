"""Status and severity classification for aligned tokens."""
from __future__ import annotations

from typing import Tuple

from recitation.config import (
    HIGH_SEVERITY_BELOW,
    MEDIUM_SEVERITY_BELOW,
    NEAR_MISS_THRESHOLD,
    SIMILARITY_THRESHOLD,
)
from recitation.models.aligned_token import ErrorType, Severity, Status
from recitation.similarity import similarity


def classify_pair(reference: str, recognized: str) -> Tuple[Status, float]:
    """Classify a reference/recognized pair consumed by one match or substitute step.

    Returns:
        (status, confidence): correct pairs carry 1.0, near-miss and error
        pairs carry their similarity
    """
    score = similarity(reference, recognized)
    if score > SIMILARITY_THRESHOLD:
        return Status.CORRECT, 1.0
    if score > NEAR_MISS_THRESHOLD:
        return Status.NEAR_MISS, score
    return Status.ERROR, score


def severity_from_confidence(confidence: float) -> Severity:
    if confidence < HIGH_SEVERITY_BELOW:
        return Severity.HIGH
    if confidence < MEDIUM_SEVERITY_BELOW:
        return Severity.MEDIUM
    return Severity.LOW


def error_type_for(status: Status) -> ErrorType:
    """Map a non-correct row status to the reported error type."""
    if status is Status.MISSING:
        return ErrorType.MISSING
    if status is Status.EXTRA:
        return ErrorType.EXTRA
    if status in (Status.NEAR_MISS, Status.ERROR):
        return ErrorType.SUBSTITUTION
    raise ValueError(f"No error type for status {status!r}")
