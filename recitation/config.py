"""Configuration constants for recitation scoring."""
from __future__ import annotations

import os

# Substitution counts as a zero-cost match above this similarity
SIMILARITY_THRESHOLD = 0.7

# Substitutions above this similarity are near-misses rather than errors
NEAR_MISS_THRESHOLD = 0.5

# Error severity buckets on confidence: < 0.3 high, < 0.6 medium, else low
HIGH_SEVERITY_BELOW = 0.3
MEDIUM_SEVERITY_BELOW = 0.6

# Accuracy bands used by the results indicator
HIGH_ACCURACY_BAND = 0.9
MEDIUM_ACCURACY_BAND = 0.7

DEFAULT_LANGUAGE = "latin"

# Upper bound on input length accepted by the HTTP layer (characters per text)
MAX_TEXT_CHARS = int(os.getenv("RECITATION_MAX_TEXT_CHARS", "20000"))

API_HOST = os.getenv("RECITATION_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("RECITATION_API_PORT", "5000"))
