from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Iterable, Iterator

import torch as t
from jaxtyping import Integer

from ..utils.faces import enumerate_faces
from ..utils.perm_parity import perm_parity


class SimplexError(ValueError):
    """
    Base class for the errors raised when a vertex sequence does not describe a
    valid simplex.
    """

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class EmptySimplexError(SimplexError):
    def __init__(self):
        super().__init__("simplex must have at least one vertex")


class DuplicateVertexError(SimplexError):
    def __init__(self, vertex: int):
        super().__init__(f"simplex has duplicate vertex {vertex}")
        self.vertex = vertex


def _as_vertex(vert) -> int:
    # operator.index() accepts python ints as well as integer numpy/torch scalars,
    # and rejects floats.
    idx = operator.index(vert)
    if idx < 0:
        raise ValueError(f"Vertex indices must be non-negative, got {idx}.")
    return idx


def _find_adjacent_duplicate(verts: tuple[int, ...]) -> int | None:
    for v0, v1 in zip(verts, verts[1:]):
        if v0 == v1:
            return v0
    return None


@dataclass(frozen=True, order=True)
class Simplex:
    """
    A k-simplex, stored as a strictly increasing tuple of k + 1 vertex indices.

    Equality, ordering, and hashing are all derived from the vertex tuple, so two
    simplices spanning the same vertex set are interchangeable regardless of the
    order in which the vertices were supplied. Use `Simplex.new_checked()` when the
    vertices are already sorted, and `Simplex.new_canonical()` otherwise.
    """

    vertices: tuple[int, ...]

    def __post_init__(self):
        verts = tuple(_as_vertex(v) for v in self.vertices)

        if len(verts) == 0:
            raise EmptySimplexError()

        duplicate = _find_adjacent_duplicate(verts)
        if duplicate is not None:
            raise DuplicateVertexError(duplicate)

        # Sorted input is the caller's contract; not checked under `python -O`.
        assert all(v0 < v1 for v0, v1 in zip(verts, verts[1:])), (
            "new_checked() requires strictly increasing vertices."
        )

        object.__setattr__(self, "vertices", verts)

    @classmethod
    def new_checked(cls, vertices: Iterable[int]) -> Simplex:
        """
        Construct a simplex from a strictly increasing vertex sequence.

        Raises `EmptySimplexError` for an empty sequence and `DuplicateVertexError`
        if two adjacent vertices are equal. The sequence is stored as-is; an
        unsorted input without adjacent duplicates is a contract violation that
        is only caught by an assertion.
        """
        return cls(tuple(vertices))

    @classmethod
    def new_canonical(cls, vertices: Iterable[int]) -> Simplex:
        """
        Construct a simplex from vertices in any order by sorting them.

        Repeated vertices are rejected with `DuplicateVertexError` rather than
        collapsed; e.g., `[2, 1, 2]` is an error and not the edge `(1, 2)`.
        """
        verts = tuple(sorted(_as_vertex(v) for v in vertices))

        if len(verts) == 0:
            raise EmptySimplexError()

        duplicate = _find_adjacent_duplicate(verts)
        if duplicate is not None:
            raise DuplicateVertexError(duplicate)

        return cls(verts)

    @property
    def dim(self) -> int:
        return len(self.vertices) - 1

    @property
    def n_verts(self) -> int:
        return len(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices)

    def __contains__(self, vert) -> bool:
        return vert in self.vertices

    def boundary(self) -> list[tuple[int, Simplex]]:
        """
        Return the codimension-1 faces of the simplex with their orientation signs.

        For the simplex `v_0 < v_1 < ... < v_n`, the i-th entry is `((-1)^i, f_i)`,
        where `f_i` is the face obtained by deleting `v_i`; the faces are therefore
        listed starting from the one opposite to the lowest vertex. A 0-simplex
        has an empty boundary.
        """
        if self.dim == 0:
            return []

        # Deleting one vertex from a strictly increasing tuple leaves a strictly
        # increasing tuple, so the faces need no re-sorting.
        return [
            (
                1 if i % 2 == 0 else -1,
                Simplex(self.vertices[:i] + self.vertices[i + 1 :]),
            )
            for i in range(len(self.vertices))
        ]

    def faces(self, face_dim: int) -> list[Simplex]:
        """
        Enumerate all faces of dimension `face_dim` in lex order.
        """
        face_vert_idx = enumerate_faces(self.dim, face_dim)
        face_verts = self.to_tensor()[face_vert_idx]
        return [Simplex(tuple(face)) for face in face_verts.tolist()]

    def to_tensor(
        self, device: str | t.device | None = None
    ) -> Integer[t.LongTensor, " vert"]:
        return t.tensor(self.vertices, dtype=t.long, device=device)


def orient(vertices: Iterable[int]) -> tuple[int, Simplex]:
    """
    Canonicalize an ordered vertex sequence, keeping track of its orientation.

    An oriented simplex `[v_0, ..., v_k]` equals `sign * Simplex(sorted(v))`, where
    `sign` is the parity of the permutation that sorts the vertices. Returns
    `(sign, simplex)`.
    """
    verts = [_as_vertex(v) for v in vertices]
    simplex = Simplex.new_canonical(verts)
    return perm_parity(verts), simplex
