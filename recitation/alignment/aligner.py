"""Alignment orchestration between reference and recognized token sequences."""
from __future__ import annotations

import logging
from typing import List, Sequence

from recitation.models.aligned_token import AlignedToken, Status
from recitation.scorer.classifier import classify_pair
from .edit_distance import Operation, align_sequences

logger = logging.getLogger(__name__)


def align(reference: Sequence[str], recognized: Sequence[str]) -> List[AlignedToken]:
    """Align reference tokens to recognized tokens and classify every row.

    Every token of both sequences appears in exactly one row. Rows carrying a
    reference token keep reference order; extra rows sit where they were spoken.

    Args:
        reference: Normalized reference tokens
        recognized: Normalized recognized tokens

    Returns:
        List of AlignedToken objects representing the alignment
    """
    steps = align_sequences(reference, recognized)
    aligned: List[AlignedToken] = []
    for op, ri, hj in steps:
        if op in (Operation.MATCH, Operation.SUBSTITUTE):
            status, confidence = classify_pair(reference[ri], recognized[hj])
            aligned.append(AlignedToken(reference[ri], recognized[hj], status, confidence, ri))
        elif op is Operation.DELETE:
            aligned.append(AlignedToken(reference[ri], "", Status.MISSING, 0.0, ri))
        elif op is Operation.INSERT:
            aligned.append(AlignedToken("", recognized[hj], Status.EXTRA, 0.0, -1))
        else:
            raise ValueError(f"Unknown alignment operation {op!r}")

    logger.debug(
        "Aligned %d reference and %d recognized tokens into %d rows",
        len(reference), len(recognized), len(aligned),
    )
    return aligned
