"""
Permutation orbit polytopes.

The orbit of a point x in R^4 under coordinate permutation is the 24 points
(x_sigma(1), ..., x_sigma(4)). All of them share the same coordinate sum, so
they lie in a hyperplane parallel to {x : sum(x) = 0}; projecting onto an
orthonormal basis of that hyperplane puts the polytope in R^3.

Repeated seed coordinates give repeated orbit points; they are kept, and the
hull reducer only references one copy of each. Seed (1, 2, 3, 4) gives the
permutahedron, (1, 2, 2, 3) the cuboctahedron, (0, 0, 0, 1) a tetrahedron.
"""

from typing import Any, Dict, List

import jax.numpy as jnp

from .combinatorics import permutations
from .family import ParameterSpec, PolytopeFamily
from .linear_algebra import project_points, sum_zero_hyperplane_basis


DEFAULT_POINT = (1.0, 2.0, 2.0, 3.0)


def permutation_orbit(point) -> jnp.ndarray:
    """All coordinate permutations of point, duplicates kept; (n!, n) array."""
    return jnp.asarray(permutations(tuple(point)), dtype=jnp.float64)


def orbit_polytope_vertices(point=DEFAULT_POINT) -> jnp.ndarray:
    """Permutation orbit of a 4-D point projected to R^3."""
    orbit = permutation_orbit(point)
    basis = sum_zero_hyperplane_basis(orbit.shape[1])[:3]
    return project_points(orbit, basis)


class OrbitPolytope(PolytopeFamily):
    """Convex hull of the permutation orbit of a 4-D seed point."""

    family_id = "orbit"
    name = "Orbit Polytope"

    def family_parameters(self) -> List[ParameterSpec]:
        return [
            ParameterSpec(f"point{i + 1}", f"Point X{i + 1}", "number", value,
                          minimum=-5.0, maximum=5.0, step=0.5)
            for i, value in enumerate(DEFAULT_POINT)
        ]

    def build_vertices(self, parameters: Dict[str, Any]) -> jnp.ndarray:
        point = [parameters[f"point{i + 1}"] for i in range(len(DEFAULT_POINT))]
        return orbit_polytope_vertices(point)
