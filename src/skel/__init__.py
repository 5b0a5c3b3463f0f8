from .flow import CohomologicalFlow
from .manifold import Manifold
from .topology.simplex import (
    DuplicateVertexError,
    EmptySimplexError,
    Simplex,
    SimplexError,
    orient,
)
