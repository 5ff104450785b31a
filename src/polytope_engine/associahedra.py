"""
Associahedron and cyclohedron in R^3.

Associahedron (Loday-style realization from triangulation areas):

1. Place the vertices of a regular hexagon on the unit circle.
2. Enumerate its 14 triangulations.
3. For each triangulation build a weight vector in R^6: every triangle adds
   its area to each of its three corner slots.
4. Center the 14 weight vectors at their centroid and project them onto the
   orthonormalized differences e_i - e_{i+1}, i = 0..2.

The hull has 9 faces (3 squares, 6 pentagons), the combinatorics of K5.

Cyclohedron: a fixed table of 20 tubing vectors of the 4-cycle in R^4,
each centered by its own mean and projected onto the orthonormalized
{e1 - e2, e2 - e3, e3 - e4}.
"""

from typing import Any, Dict, List

import jax.numpy as jnp

from .combinatorics import triangulations
from .family import ParameterSpec, PolytopeFamily
from .linear_algebra import center_points, difference_vectors, gram_schmidt, project_points


# Hexagon -> 3-dimensional associahedron
POLYGON_SIZE = 6

CYCLOHEDRON_TUBINGS = (
    (0, 1, 2, 3), (0, 1, 3, 2), (0, 2, 1, 2), (0, 2, 3, 1), (0, 3, 2, 1),
    (1, 0, 2, 3), (1, 0, 3, 2), (1, 2, 0, 2), (1, 2, 3, 0), (1, 3, 2, 0),
    (2, 0, 1, 3), (2, 0, 2, 1), (2, 1, 0, 3), (2, 1, 2, 0), (2, 3, 0, 1),
    (2, 3, 1, 0), (3, 0, 1, 2), (3, 1, 0, 2), (3, 2, 0, 1), (3, 2, 1, 0),
)


def regular_polygon(n: int) -> jnp.ndarray:
    """(n, 2) vertices of the regular n-gon on the unit circle."""
    angles = 2 * jnp.pi * jnp.arange(n) / n
    return jnp.stack([jnp.cos(angles), jnp.sin(angles)], axis=-1)


def triangle_area(a: jnp.ndarray, b: jnp.ndarray, c: jnp.ndarray) -> float:
    """Unsigned area of a planar triangle."""
    cross = (b[0] - a[0]) * (c[1] - a[1]) - (c[0] - a[0]) * (b[1] - a[1])
    return float(jnp.abs(cross)) / 2


def area_weight_vectors(n: int = POLYGON_SIZE) -> jnp.ndarray:
    """One area-weight vector in R^n per triangulation of the n-gon."""
    polygon = regular_polygon(n)
    weights = []
    for triangulation in triangulations(0, n - 1):
        w = [0.0] * n
        for i, k, j in triangulation:
            area = triangle_area(polygon[i], polygon[k], polygon[j])
            for corner in (i, k, j):
                w[corner] += area
        weights.append(w)
    return jnp.asarray(weights, dtype=jnp.float64)


def associahedron_vertices(n: int = POLYGON_SIZE) -> jnp.ndarray:
    """Associahedron vertices from triangulations of the n-gon, in R^(n-3)."""
    centered = center_points(area_weight_vectors(n))
    basis = gram_schmidt(difference_vectors(n, n - 3))
    return project_points(centered, basis)


def cyclohedron_vertices() -> jnp.ndarray:
    """The 20 cyclohedron vertices in R^3."""
    raw = jnp.asarray(CYCLOHEDRON_TUBINGS, dtype=jnp.float64)
    # Each tubing is moved into the hyperplane sum(x) = 0
    centered = raw - jnp.mean(raw, axis=1, keepdims=True)
    basis = gram_schmidt(difference_vectors(4, 3))
    return project_points(centered, basis)


class Associahedron(PolytopeFamily):
    """Three-dimensional associahedron; only the shared size parameter."""

    family_id = "associahedron"
    name = "Associahedron"

    def family_parameters(self) -> List[ParameterSpec]:
        return []

    def build_vertices(self, parameters: Dict[str, Any]) -> jnp.ndarray:
        return associahedron_vertices()


class Cyclohedron(PolytopeFamily):
    """Cyclohedron from 4-cycle tubings; only the shared size parameter."""

    family_id = "cyclohedron"
    name = "Cyclohedron"

    def family_parameters(self) -> List[ParameterSpec]:
        return []

    def build_vertices(self, parameters: Dict[str, Any]) -> jnp.ndarray:
        return cyclohedron_vertices()
