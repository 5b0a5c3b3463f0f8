import itertools
from typing import Sequence

import torch as t
from jaxtyping import Integer


def perm_parity(verts: Sequence[int]) -> int:
    """
    Return the sign of the permutation that puts `verts` in ascending order: 1 if
    the permutation is even, -1 if it is odd, and 0 if `verts` has a repeated
    vertex.
    """
    parity = 1
    for idx1, idx2 in itertools.combinations(verts, 2):
        parity *= (idx2 > idx1) - (idx2 < idx1)
    return parity


def compute_lex_rel_orient(
    simps: Integer[t.LongTensor, "simp vert"],
) -> Integer[t.LongTensor, " simp"]:
    """
    Batched version of `perm_parity()`: the orientation of each row of `simps`
    relative to the lex-ordered version of the same simplex.
    """
    parity = t.ones(simps.size(0), dtype=simps.dtype, device=simps.device)
    for col1, col2 in itertools.combinations(range(simps.size(-1)), 2):
        parity.mul_(t.sign(simps[:, col2] - simps[:, col1]))

    return parity
