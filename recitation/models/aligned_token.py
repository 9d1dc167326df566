"""Data model for aligned tokens between reference text and recognized speech."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class Status(str, Enum):
    """Classification of one alignment row."""

    CORRECT = "correct"
    NEAR_MISS = "near-miss"
    ERROR = "error"
    MISSING = "missing"
    EXTRA = "extra"


class ErrorType(str, Enum):
    MISSING = "missing"
    EXTRA = "extra"
    SUBSTITUTION = "substitution"


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class AlignedToken:
    """Represents one row of the alignment between reference and recognized tokens.

    Attributes:
        reference: Token from the reference text ("" for extra rows)
        recognized: Token from the recognized text ("" for missing rows)
        status: Row classification
        confidence: Similarity in [0, 1]; 1.0 for correct, 0.0 for missing/extra
        position: Index into the reference tokens, or -1 for extra rows
    """
    reference: str
    recognized: str
    status: Status
    confidence: float
    position: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reference": self.reference,
            "recognized": self.recognized,
            "status": self.status.value,
            "confidence": self.confidence,
            "position": self.position,
        }


@dataclass(frozen=True)
class TextError:
    """A non-correct alignment row reported for review.

    Attributes:
        type: missing, extra or substitution (near-miss and error rows)
        expected: Reference token ("" for extra words)
        actual: Recognized token ("" for missing words)
        position: Copied from the source row
        severity: Bucket derived from the row confidence
    """
    type: ErrorType
    expected: str
    actual: str
    position: int
    severity: Severity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "expected": self.expected,
            "actual": self.actual,
            "position": self.position,
            "severity": self.severity.value,
        }


@dataclass(frozen=True)
class Statistics:
    total_words: int = 0
    correct_words: int = 0
    error_count: int = 0  # near-misses are counted separately
    near_miss_count: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "totalWords": self.total_words,
            "correctWords": self.correct_words,
            "errorCount": self.error_count,
            "nearMissCount": self.near_miss_count,
        }


@dataclass(frozen=True)
class ComparisonResult:
    """Output of a single comparison call."""
    accuracy: float
    aligned_tokens: List[AlignedToken] = field(default_factory=list)
    errors: List[TextError] = field(default_factory=list)
    statistics: Statistics = field(default_factory=Statistics)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "accuracy": self.accuracy,
            "alignedTokens": [t.to_dict() for t in self.aligned_tokens],
            "errors": [e.to_dict() for e in self.errors],
            "statistics": self.statistics.to_dict(),
        }
