import itertools

import torch as t
from jaxtyping import Integer


def enumerate_faces(
    simp_dim: int, face_dim: int, device: str | t.device | None = None
) -> Integer[t.LongTensor, "face vert"]:
    """
    For a simplex of dimension `simp_dim`, enumerate all faces of dimension
    `face_dim` in lex order. Each face is given by the positions of its vertices
    within the simplex (not by the vertex indices themselves), so the result can
    be used to index into any tensor of simplices of dimension `simp_dim`.
    """
    if simp_dim < 0 or face_dim < 0:
        raise ValueError("Simplex and face dimensions must be non-negative.")

    if face_dim > simp_dim:
        raise ValueError(
            f"A {simp_dim}-simplex has no faces of dimension {face_dim}."
        )

    return t.tensor(
        list(itertools.combinations(range(simp_dim + 1), face_dim + 1)),
        dtype=t.long,
        device=device,
    )
