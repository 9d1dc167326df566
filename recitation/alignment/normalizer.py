"""Token normalization utilities for alignment."""
from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Optional, Union

logger = logging.getLogger(__name__)


class Language(str, Enum):
    """Tokenizer families. Turkish shares the Latin path."""

    LATIN = "latin"
    ARABIC = "arabic"


# Language tags accepted from callers
LANGUAGE_TAGS = {
    "latin": Language.LATIN,
    "turkish": Language.LATIN,
    "arabic": Language.ARABIC,
}

# Sentence/clause punctuation replaced by a space before splitting
LATIN_PUNCTUATION = {".", ",", ";", ":", "!", "?"}
ARABIC_PUNCTUATION = {".", "،", "؛", ":", "!", "؟"}


def _char_class(chars):
    return re.compile("[" + "".join(re.escape(c) for c in sorted(chars)) + "]")


_LATIN_PUNCT_RE = _char_class(LATIN_PUNCTUATION)
_ARABIC_PUNCT_RE = _char_class(ARABIC_PUNCTUATION)

# Tanwin (fathatan, dammatan, kasratan), fatha, damma, kasra, shadda, sukun
_ARABIC_DIACRITICS_RE = re.compile("[\u064b-\u0652]")

# Letter variants collapsed to a base form
_ARABIC_LETTER_MAP = str.maketrans({
    "أ": "ا",  # alef with hamza above -> alef
    "إ": "ا",  # alef with hamza below -> alef
    "آ": "ا",  # alef with madda -> alef
    "ؤ": "و",  # waw with hamza -> waw
    "ئ": "ي",  # yaa with hamza -> yaa
    "ة": "ه",  # taa marbuta -> haa
})


def resolve_language(tag: Optional[Union[str, Language]]) -> Language:
    """Map a caller language tag to a tokenizer family.

    Unknown or missing tags fall back to the Latin family.
    """
    if isinstance(tag, Language):
        return tag
    family = LANGUAGE_TAGS.get(tag) if isinstance(tag, str) else None
    if family is None:
        logger.debug("Unknown language tag %r, using latin tokenizer", tag)
        return Language.LATIN
    return family


def strip_punctuation(text: str, language: Language) -> str:
    """Replace clause punctuation for the given family with spaces."""
    pattern = _ARABIC_PUNCT_RE if language is Language.ARABIC else _LATIN_PUNCT_RE
    return pattern.sub(" ", text)


def normalize_arabic(token: str) -> str:
    """Strip diacritics and collapse letter variants so surface forms compare equal.

    Example: "الْحَمْد" -> "الحمد", "أحمد" -> "احمد", "مدرسة" -> "مدرسه"
    """
    token = _ARABIC_DIACRITICS_RE.sub("", token)
    return token.translate(_ARABIC_LETTER_MAP)


def normalize_token(token: str, language: Language) -> str:
    """Normalize a single whitespace-delimited token for comparison.

    Args:
        token: Raw token with punctuation already removed
        language: Tokenizer family

    Returns:
        Lowercased token for the Latin family, Arabic-normalized token otherwise
    """
    if language is Language.ARABIC:
        return normalize_arabic(token)
    return token.lower()
