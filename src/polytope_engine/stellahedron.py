"""
Stellahedron as a Minkowski sum of 0/1 point sets in R^3.

The three summands are the unit simplex, the simplex together with the sums
of pairs of unit vectors, and the full unit cube. Every pairwise sum is kept
(4 * 7 * 8 = 224 points); the hull reducer discards the interior ones.
"""

from typing import Any, Dict, List

import jax.numpy as jnp

from .family import ParameterSpec, PolytopeFamily


# The raw sum spans [0, 3]^3
STELLAHEDRON_SCALE = 0.1

_SIMPLEX = [[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]]
_SIMPLEX_WITH_PAIRS = _SIMPLEX + [[1, 1, 0], [1, 0, 1], [0, 1, 1]]
_CUBE = _SIMPLEX_WITH_PAIRS + [[1, 1, 1]]


def minkowski_sum(a: jnp.ndarray, b: jnp.ndarray) -> jnp.ndarray:
    """All pairwise sums a_i + b_j, ordered by i then j."""
    return (a[:, None, :] + b[None, :, :]).reshape(-1, a.shape[1])


def stellahedron_vertices() -> jnp.ndarray:
    summands = [jnp.asarray(s, dtype=jnp.float64) for s in (_SIMPLEX, _SIMPLEX_WITH_PAIRS, _CUBE)]
    points = minkowski_sum(minkowski_sum(summands[0], summands[1]), summands[2])
    return points * STELLAHEDRON_SCALE


class Stellahedron(PolytopeFamily):
    """Stellahedron; only the shared size parameter."""

    family_id = "stellahedron"
    name = "Stellahedron"

    def family_parameters(self) -> List[ParameterSpec]:
        return []

    def build_vertices(self, parameters: Dict[str, Any]) -> jnp.ndarray:
        return stellahedron_vertices()
