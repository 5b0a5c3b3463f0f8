from abc import ABC, abstractmethod

import torch as t
from jaxtyping import Float


class Manifold(ABC):
    """
    Minimal manifold interface shared by the geometry-aware algorithms built on
    top of this package.

    Concrete manifolds (e.g., hyperbolic space) live outside this package; an
    implementation is expected to satisfy, up to numerical tolerance,

    * `log_map(x, exp_map(x, v)) == v` for tangent vectors `v` within the
    injectivity radius at `x`, and
    * `parallel_transport(x, y, .)` preserves the inner product between tangent
    vectors when the manifold is Riemannian.
    """

    @abstractmethod
    def exp_map(
        self, x: Float[t.Tensor, " dim"], v: Float[t.Tensor, " dim"]
    ) -> Float[t.Tensor, " dim"]:
        """
        Map a tangent vector `v ∈ T_x M` to the manifold point `exp_x(v)`.
        """

    @abstractmethod
    def log_map(
        self, x: Float[t.Tensor, " dim"], y: Float[t.Tensor, " dim"]
    ) -> Float[t.Tensor, " dim"]:
        """
        Map a manifold point `y ∈ M` to the tangent vector `log_x(y) ∈ T_x M`.
        """

    @abstractmethod
    def parallel_transport(
        self,
        x: Float[t.Tensor, " dim"],
        y: Float[t.Tensor, " dim"],
        v: Float[t.Tensor, " dim"],
    ) -> Float[t.Tensor, " dim"]:
        """
        Parallel transport a tangent vector `v ∈ T_x M` to `T_y M` along the
        geodesic from `x` to `y`.
        """
