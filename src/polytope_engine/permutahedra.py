"""
Permutahedra of Coxeter types A3 and B3/C3.

Type A3: the 24 permutations of (1, 2, 3, 4) lie in the hyperplane
sum(x) = 10 of R^4. Projecting onto an orthonormal basis of the direction
space {e1 - e2, e2 - e3, e3 - e4} gives the truncated octahedron (6 squares,
8 hexagons), centered at the origin.

Type B3/C3: the 48 signed permutations of (1, 2, 3), already in R^3, give the
omnitruncated cube (12 squares, 8 hexagons, 6 octagons). They are recentered
at their centroid.
"""

from typing import Any, Dict, List

import jax.numpy as jnp

from .combinatorics import permutations, signed_permutations
from .family import ParameterSpec, PolytopeFamily
from .linear_algebra import center_points, difference_vectors, gram_schmidt, project_points


def type_a_vertices(values=(1, 2, 3, 4)) -> jnp.ndarray:
    """Permutations of a 4-tuple projected to R^3; (24, 3) array."""
    points = jnp.asarray(permutations(values), dtype=jnp.float64)
    basis = gram_schmidt(difference_vectors(4, 3))
    return project_points(points, basis)


def type_bc_vertices(values=(1, 2, 3)) -> jnp.ndarray:
    """Signed permutations of a 3-tuple, centered; (48, 3) array."""
    points = jnp.asarray(signed_permutations(values), dtype=jnp.float64)
    return center_points(points)


class Permutahedron(PolytopeFamily):
    """Permutahedron of type A3 or B3/C3."""

    family_id = "permutahedron"
    name = "Permutahedron"

    types = (
        ("A3", "Type A₃"),
        ("B3/C3", "Type B₃/C₃"),
    )

    def family_parameters(self) -> List[ParameterSpec]:
        return [ParameterSpec("permutahedron_type", "Coxeter Type", "choice", "A3", options=self.types)]

    def build_vertices(self, parameters: Dict[str, Any]) -> jnp.ndarray:
        if parameters["permutahedron_type"] == "B3/C3":
            return type_bc_vertices()
        return type_a_vertices()
