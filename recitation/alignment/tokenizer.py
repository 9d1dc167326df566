"""Text tokenization for alignment."""
from __future__ import annotations

import re
from typing import List, Optional, Union

from .normalizer import Language, normalize_token, resolve_language, strip_punctuation


def tokenize(text: Optional[str], language: Optional[Union[str, Language]] = None) -> List[str]:
    """Tokenize text into normalized word tokens.

    Punctuation is replaced by whitespace, so it never produces tokens of its own.

    Example: "Hello, world." -> ["hello", "world"]

    Args:
        text: The text to tokenize (reference or recognized)
        language: Language tag ("latin", "turkish", "arabic"); others use the Latin path

    Returns:
        List of normalized tokens, empty for blank or punctuation-only text
    """
    if not text:
        return []
    family = resolve_language(language)

    raw = re.split(r"\s+", strip_punctuation(text.strip(), family))

    tokens = []
    for word in raw:
        if not word:
            continue
        normalized = normalize_token(word, family)
        if normalized:
            tokens.append(normalized)
    return tokens
