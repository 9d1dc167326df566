"""Alignment utilities for matching reference text to recognized text."""
from .aligner import align
from .normalizer import Language, normalize_arabic, resolve_language
from .tokenizer import tokenize

__all__ = ["align", "tokenize", "Language", "normalize_arabic", "resolve_language"]
