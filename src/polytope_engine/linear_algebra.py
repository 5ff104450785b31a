"""
Vector arithmetic, Gram-Schmidt orthonormalization and basis projection.

Every generator that starts from a higher-dimensional construction (permutation
orbits in R^4, triangulation weight vectors in R^6) lands in R^3 through the
same two steps implemented here:

1. Build an orthonormal basis of the hyperplane that contains the point set
   with `gram_schmidt`, which silently drops linearly dependent inputs.
2. Map each point onto that basis with `project_to` / `project_points`.

All functions are pure and return fresh arrays.
"""

import jax
import jax.numpy as jnp
from typing import Sequence

from .config import DEGENERATE_EPS


@jax.jit
def dot(u: jnp.ndarray, v: jnp.ndarray) -> jnp.ndarray:
    """Euclidean inner product of two vectors of equal length."""
    return jnp.sum(u * v)


@jax.jit
def subtract(u: jnp.ndarray, v: jnp.ndarray) -> jnp.ndarray:
    """Coordinate-wise difference u - v."""
    return u - v


@jax.jit
def scale(v: jnp.ndarray, s: float) -> jnp.ndarray:
    """Multiply every coordinate of v by s."""
    return v * s


@jax.jit
def norm(v: jnp.ndarray) -> jnp.ndarray:
    """Euclidean length, computed as the square root of the sum of squares."""
    return jnp.sqrt(jnp.sum(v * v))


def gram_schmidt(vectors: Sequence, eps: float = DEGENERATE_EPS) -> jnp.ndarray:
    """Orthonormalize vectors in the given order.

    Each candidate has its projection onto every previously accepted vector
    removed. Candidates whose residual norm is <= eps are discarded, so the
    output may be shorter than the input and is ordered by acceptance.

    Args:
        vectors: Sequence of vectors, all of the same dimension n
        eps: Residual norm at or below which a candidate is dropped

    Returns:
        (k, n) array of orthonormal rows, k <= len(vectors)
    """
    candidates = jnp.asarray(vectors, dtype=jnp.float64)
    dimension = candidates.shape[-1] if candidates.ndim == 2 else 0

    basis = []
    for candidate in candidates:
        residual = candidate
        for accepted in basis:
            residual = subtract(residual, scale(accepted, dot(residual, accepted)))
        length = float(norm(residual))
        if length > eps:
            basis.append(residual / length)

    if not basis:
        return jnp.zeros((0, dimension))
    return jnp.stack(basis)


@jax.jit
def project_to(point: jnp.ndarray, basis: jnp.ndarray) -> jnp.ndarray:
    """Coordinates of an n-D point along each basis row, in basis order."""
    return basis @ point


@jax.jit
def project_points(points: jnp.ndarray, basis: jnp.ndarray) -> jnp.ndarray:
    """Apply `project_to` to every row of a (N, n) point array.

    Returns:
        (N, k) array for a (k, n) basis
    """
    return points @ basis.T


def centroid(points: jnp.ndarray) -> jnp.ndarray:
    """Mean of the rows of a (N, d) array; the origin when N == 0."""
    points = jnp.asarray(points, dtype=jnp.float64)
    if points.shape[0] == 0:
        return jnp.zeros(points.shape[1:])
    return jnp.mean(points, axis=0)


def center_points(points: jnp.ndarray) -> jnp.ndarray:
    """Translate a point set so its centroid sits at the origin."""
    points = jnp.asarray(points, dtype=jnp.float64)
    return points - centroid(points)[None, :]


def difference_vectors(dimension: int, count: int) -> jnp.ndarray:
    """Raw difference vectors e_i - e_{i+1} for i = 0..count-1 in R^dimension."""
    eye = jnp.eye(dimension)
    return jnp.stack([eye[i] - eye[i + 1] for i in range(count)])


def sum_zero_hyperplane_basis(dimension: int) -> jnp.ndarray:
    """Orthonormal basis of the hyperplane {x : sum(x) = 0} in R^dimension.

    Built from e_i - e_n for i < n, which spans the hyperplane; the result has
    dimension - 1 rows.
    """
    eye = jnp.eye(dimension)
    raw = [eye[i] - eye[dimension - 1] for i in range(dimension - 1)]
    return gram_schmidt(raw)
