import warnings

from ..manifold import Manifold

# Manifold used to live here; keep the old import path working.
warnings.warn(
    "'skel.locus.manifold' is deprecated; use 'from skel import Manifold' instead.",
    DeprecationWarning,
    stacklevel=2,
)

__all__ = ["Manifold"]
