"""Edit distance alignment algorithm for sequence matching."""
from __future__ import annotations

from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple

from recitation.config import SIMILARITY_THRESHOLD
from recitation.similarity import similarity


class Operation(str, Enum):
    DELETE = "del"
    INSERT = "ins"
    MATCH = "match"
    SUBSTITUTE = "sub"


class Cell(NamedTuple):
    """One entry of the alignment grid: accumulated cost and the step that produced it."""
    cost: int
    op: Optional[Operation]


Step = Tuple[Operation, Optional[int], Optional[int]]


def align_sequences(
    ref: Sequence[str], hyp: Sequence[str], threshold: float = SIMILARITY_THRESHOLD
) -> List[Step]:
    """Edit-distance alignment with a similarity-weighted substitution cost.

    A pair costs 0 when similarity(ref, hyp) > threshold and 1 otherwise;
    deletions and insertions cost 1. On equal cost the first of
    delete, insert, substitute wins.

    Returns list of tuples: (op, ref_index, hyp_index)
      match -> pair within threshold
      sub   -> pair outside threshold
      del   -> ref token with no counterpart (ref_index only)
      ins   -> hyp token with no counterpart (hyp_index only)

    Args:
        ref: Reference sequence (list of tokens)
        hyp: Hypothesis sequence (list of recognized tokens)
        threshold: Similarity above which a pair is a zero-cost match

    Returns:
        Ordered list of (operation, ref_index, hyp_index)
    """
    n, m = len(ref), len(hyp)
    grid = [[Cell(0, None)] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        grid[i][0] = Cell(i, Operation.DELETE)
    for j in range(1, m + 1):
        grid[0][j] = Cell(j, Operation.INSERT)

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            is_match = similarity(ref[i - 1], hyp[j - 1]) > threshold
            candidates = [
                (grid[i - 1][j].cost + 1, Operation.DELETE),
                (grid[i][j - 1].cost + 1, Operation.INSERT),
                (
                    grid[i - 1][j - 1].cost + (0 if is_match else 1),
                    Operation.MATCH if is_match else Operation.SUBSTITUTE,
                ),
            ]
            # min() keeps the first candidate on ties
            best_cost, best_op = min(candidates, key=lambda x: x[0])
            grid[i][j] = Cell(best_cost, best_op)

    # backtrack
    steps: List[Step] = []
    i, j = n, m
    while i > 0 or j > 0:
        op = grid[i][j].op
        if op in (Operation.MATCH, Operation.SUBSTITUTE):
            steps.append((op, i - 1, j - 1))
            i -= 1
            j -= 1
        elif op is Operation.DELETE:
            steps.append((op, i - 1, None))
            i -= 1
        elif op is Operation.INSERT:
            steps.append((op, None, j - 1))
            j -= 1
        else:
            raise ValueError(f"Unreachable alignment cell at ({i}, {j})")
    steps.reverse()
    return steps
