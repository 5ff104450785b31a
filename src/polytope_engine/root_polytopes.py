"""
Root polytopes: convex hulls of the rank-3 root systems.

- A3: the 12 roots +-(e_i - e_j) of R^4, projected into R^3 (cuboctahedron)
- B3: short roots +-e_i and long roots +-e_i +- e_j
- C3: long roots +-2e_i and roots +-e_i +- e_j, plus +-e_i
- D3: +-e_i +- e_j (cuboctahedron, D3 = A3)
- H3: the 30 edge midpoints of the icosahedron (icosidodecahedron)
"""

from itertools import combinations, product
from typing import Any, Dict, List

import jax.numpy as jnp

from .family import ParameterSpec, PolytopeFamily
from .linear_algebra import difference_vectors, gram_schmidt, project_points
from .platonic_solids import icosahedron_vertices


def _unit_roots(scale: float = 1.0) -> List[List[float]]:
    """+-scale * e_i in R^3."""
    roots = []
    for i in range(3):
        v = [0.0, 0.0, 0.0]
        v[i] = scale
        roots.append(list(v))
        roots.append([-x for x in v])
    return roots


def _pair_roots() -> List[List[float]]:
    """+-e_i +- e_j in R^3, i < j."""
    roots = []
    for i, j in combinations(range(3), 2):
        for si, sj in product((-1.0, 1.0), repeat=2):
            v = [0.0, 0.0, 0.0]
            v[i] = si
            v[j] = sj
            roots.append(v)
    return roots


def type_a3_roots() -> jnp.ndarray:
    eye = jnp.eye(4)
    roots = []
    for i, j in combinations(range(4), 2):
        v = eye[i] - eye[j]
        roots.extend([v, -v])
    basis = gram_schmidt(difference_vectors(4, 3))
    return project_points(jnp.stack(roots), basis)


def type_b3_roots() -> jnp.ndarray:
    return jnp.asarray(_unit_roots() + _pair_roots())


def type_c3_roots() -> jnp.ndarray:
    return jnp.asarray(_unit_roots(2.0) + _pair_roots() + _unit_roots())


def type_d3_roots() -> jnp.ndarray:
    return jnp.asarray(_pair_roots())


def type_h3_roots() -> jnp.ndarray:
    """Midpoints of the icosahedron's 30 edges."""
    vertices = icosahedron_vertices()
    distances = jnp.linalg.norm(vertices[:, None, :] - vertices[None, :, :], axis=-1)
    edge_length = float(jnp.min(jnp.where(distances > 1e-6, distances, jnp.inf)))

    midpoints = []
    for i, j in combinations(range(vertices.shape[0]), 2):
        if abs(float(distances[i, j]) - edge_length) < 1e-6:
            midpoints.append((vertices[i] + vertices[j]) / 2)
    return jnp.stack(midpoints)


_BUILDERS = {
    "A3": type_a3_roots,
    "B3": type_b3_roots,
    "C3": type_c3_roots,
    "D3": type_d3_roots,
    "H3": type_h3_roots,
}


class RootPolytope(PolytopeFamily):
    """Convex hull of a rank-3 root system."""

    family_id = "root"
    name = "Root Polytope"

    types = (
        ("A3", "Type A₃"),
        ("B3", "Type B₃"),
        ("C3", "Type C₃"),
        ("D3", "Type D₃"),
        ("H3", "Type H₃"),
    )

    def family_parameters(self) -> List[ParameterSpec]:
        return [ParameterSpec("root_system_type", "Root System", "choice", "A3", options=self.types)]

    def build_vertices(self, parameters: Dict[str, Any]) -> jnp.ndarray:
        return _BUILDERS[parameters["root_system_type"]]()
