"""
Weyl group reflections and orbits for the rank-2 root systems.

A root alpha defines the reflection

    s_alpha(x) = x - 2 (x . alpha) / (alpha . alpha) * alpha

across the hyperplane through the origin orthogonal to alpha. The Weyl group
of a root system is generated by these reflections; the orbit of a point is
its closure under repeated reflection, found here by breadth-first search.

Floating point images reached along different reflection paths differ in the
last bits, so visited points are keyed by their coordinates rounded to a fixed
number of decimals (as integer tuples, independent of any string formatting).

Root systems:
- A2: 6 roots of equal length (regular hexagon), Weyl group S3 of order 6
- B2: 4 short + 4 long roots, Weyl group D4 of order 8
- G2: 6 short + 6 long roots, Weyl group D6 of order 12
"""

import logging
from collections import deque
from typing import Dict, List, NamedTuple, Optional, Tuple

import jax
import jax.numpy as jnp
import numpy as np
from scipy.spatial import ConvexHull, QhullError

from .config import ORBIT_DECIMALS

logger = logging.getLogger(__name__)


class RootSystem(NamedTuple):
    """A planar root system.

    Attributes:
        name: Cartan type ('A2', 'B2', 'G2')
        roots: (R, 2) array of all roots
        simple_roots: (2, 2) array of simple roots
        description: Short human readable summary
    """
    name: str
    roots: jnp.ndarray
    simple_roots: jnp.ndarray
    description: str


class WeylGroupInfo(NamedTuple):
    """Display metadata for a Weyl group; not used by any computation."""
    order: int
    description: str


_S3 = jnp.sqrt(3.0)

ROOT_SYSTEMS: Dict[str, RootSystem] = {
    "A2": RootSystem(
        name="A2",
        roots=jnp.array([
            [1.0, 0.0],
            [-0.5, _S3 / 2],
            [-0.5, -_S3 / 2],
            [-1.0, 0.0],
            [0.5, -_S3 / 2],
            [0.5, _S3 / 2]
        ]),
        simple_roots=jnp.array([
            [1.0, 0.0],
            [-0.5, _S3 / 2]
        ]),
        description="A2 root system - Uniform length roots"
    ),
    "B2": RootSystem(
        name="B2",
        roots=jnp.array([
            # Short roots (length 1)
            [0.0, 1.0], [0.0, -1.0], [1.0, 0.0], [-1.0, 0.0],
            # Long roots (length sqrt 2)
            [1.0, 1.0], [1.0, -1.0], [-1.0, 1.0], [-1.0, -1.0]
        ]),
        simple_roots=jnp.array([
            [1.0, 0.0],
            [0.0, 1.0]
        ]),
        description="B2 root system - Mixed length roots"
    ),
    "G2": RootSystem(
        name="G2",
        roots=jnp.array([
            # Short roots (length 1)
            [1.0, 0.0], [-1.0, 0.0],
            [0.5, _S3 / 2], [-0.5, -_S3 / 2],
            [-0.5, _S3 / 2], [0.5, -_S3 / 2],
            # Long roots (length sqrt 3)
            [-1.5, _S3 / 2], [1.5, -_S3 / 2],
            [0.0, _S3], [0.0, -_S3],
            [-1.5, -_S3 / 2], [1.5, _S3 / 2]
        ]),
        simple_roots=jnp.array([
            [1.0, 0.0],
            [-1.5, _S3 / 2]
        ]),
        description="G2 exceptional root system"
    ),
}

WEYL_GROUPS: Dict[str, WeylGroupInfo] = {
    "A2": WeylGroupInfo(6, "S₃ (symmetric group on 3 elements, dihedral group of order 6)"),
    "B2": WeylGroupInfo(8, "D₄ (dihedral group of order 8)"),
    "G2": WeylGroupInfo(12, "D₆ (dihedral group of order 12)"),
}


def root_system(name: str) -> Optional[RootSystem]:
    """Root system by Cartan type, None if unknown."""
    return ROOT_SYSTEMS.get(name)


def get_roots(name: str) -> jnp.ndarray:
    """All roots of a named root system; an empty (0, 2) array if unknown."""
    system = ROOT_SYSTEMS.get(name)
    if system is None:
        logger.warning("Unknown root system type: %s", name)
        return jnp.zeros((0, 2))
    return system.roots


def get_simple_roots(name: str) -> jnp.ndarray:
    """Simple roots of a named root system; an empty (0, 2) array if unknown."""
    system = ROOT_SYSTEMS.get(name)
    if system is None:
        logger.warning("Unknown root system type: %s", name)
        return jnp.zeros((0, 2))
    return system.simple_roots


def weyl_group_order(name: str) -> int:
    """Order of the Weyl group of a root system type, 0 if unknown."""
    info = WEYL_GROUPS.get(name)
    return info.order if info is not None else 0


def weyl_group_description(name: str) -> str:
    """Human readable description of the Weyl group of a root system type."""
    info = WEYL_GROUPS.get(name)
    return info.description if info is not None else "Unknown"


@jax.jit
def reflect(point: jnp.ndarray, root: jnp.ndarray) -> jnp.ndarray:
    """Reflect point across the hyperplane orthogonal to root.

    Precondition: root is non-zero. A zero root divides by zero and yields
    non-finite coordinates; it is not checked.
    """
    coefficient = 2.0 * jnp.dot(point, root) / jnp.dot(root, root)
    return point - coefficient * root


def orbit_key(point, decimals: int = ORBIT_DECIMALS) -> Tuple[int, ...]:
    """Fixed-point key of a point: coordinates scaled by 10^decimals and rounded."""
    scaled = np.rint(np.asarray(point, dtype=np.float64) * (10 ** decimals))
    return tuple(int(x) for x in scaled)


def orbit(seed, roots, decimals: int = ORBIT_DECIMALS) -> jnp.ndarray:
    """Closure of seed under reflection in every root, by breadth-first search.

    Terminates only if the roots generate a finite reflection group, which is
    the caller's responsibility.

    Args:
        seed: Starting point
        roots: (R, d) array of non-zero roots
        decimals: Precision of the visited-point keys

    Returns:
        (M, d) array of orbit points in discovery order, seed first
    """
    seed = jnp.asarray(seed, dtype=jnp.float64)
    roots = jnp.asarray(roots, dtype=jnp.float64)

    visited = {orbit_key(seed, decimals): seed}
    queue = deque([seed])

    while queue:
        current = queue.popleft()
        for root in roots:
            image = reflect(current, root)
            key = orbit_key(image, decimals)
            if key not in visited:
                visited[key] = image
                queue.append(image)

    logger.debug("Orbit of %s has %d points", np.asarray(seed).tolist(), len(visited))
    return jnp.stack(list(visited.values()))


def orbit_polygon(points) -> List[int]:
    """Indices of the planar convex hull of an orbit, counter-clockwise.

    Returns an empty list for fewer than three points or collinear input.
    """
    points = np.asarray(points, dtype=np.float64)
    if points.shape[0] < 3:
        return []
    try:
        hull = ConvexHull(points)
    except QhullError:
        logger.debug("Orbit of %d points is degenerate; no polygon", points.shape[0])
        return []
    # For 2-D input Qhull reports hull vertices in counter-clockwise order
    return [int(i) for i in hull.vertices]
