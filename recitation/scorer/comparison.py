"""Reference-vs-recognized comparison entry point."""
from __future__ import annotations

import logging
from typing import Optional, Union

from recitation.alignment.aligner import align
from recitation.alignment.normalizer import Language
from recitation.alignment.tokenizer import tokenize
from recitation.config import DEFAULT_LANGUAGE
from recitation.models.aligned_token import ComparisonResult
from .statistics import accuracy_from, calculate_statistics, extract_errors

logger = logging.getLogger(__name__)


def compare_texts(
    reference_text: Optional[str],
    recognized_text: Optional[str],
    language: Optional[Union[str, Language]] = DEFAULT_LANGUAGE,
) -> ComparisonResult:
    """Compare a reference text with a recited/transcribed text.

    Both texts are tokenized with the same language rules, aligned word by word
    and scored. The call is pure: identical inputs give identical results.

    Args:
        reference_text: The text that should have been recited
        recognized_text: What was recognized (speech-to-text output, typed text, ...)
        language: "latin", "turkish" or "arabic"; anything else uses the Latin rules

    Returns:
        ComparisonResult with accuracy, aligned rows, errors and statistics
    """
    reference = tokenize(reference_text, language)
    recognized = tokenize(recognized_text, language)

    aligned = align(reference, recognized)
    stats = calculate_statistics(aligned)
    result = ComparisonResult(
        accuracy=accuracy_from(stats),
        aligned_tokens=aligned,
        errors=extract_errors(aligned),
        statistics=stats,
    )
    logger.debug(
        "Compared %d/%d tokens: %d correct, %d near-miss, %d error",
        len(reference), len(recognized),
        stats.correct_words, stats.near_miss_count, stats.error_count,
    )
    return result
