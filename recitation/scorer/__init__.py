"""Word-level classification and scoring of aligned recitations."""
from .classifier import classify_pair, severity_from_confidence
from .comparison import compare_texts
from .feedback import accuracy_band, describe_token, display_text, summary_lines
from .statistics import (
    calculate_statistics,
    extract_errors,
    word_error_rate,
    word_error_rate_from,
)

__all__ = [
    "accuracy_band",
    "calculate_statistics",
    "classify_pair",
    "compare_texts",
    "describe_token",
    "display_text",
    "extract_errors",
    "severity_from_confidence",
    "summary_lines",
    "word_error_rate",
    "word_error_rate_from",
]
