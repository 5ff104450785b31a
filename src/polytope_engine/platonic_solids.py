"""
The five Platonic solids as a polytope family.

Vertex coordinates are closed-form:
- Tetrahedron: alternating corners of the cube (+-1, +-1, +-1)
- Cube: the eight sign combinations of (+-a, +-a, +-a), a = 1/2
- Octahedron: the six unit axis points
- Dodecahedron: cube corners plus golden-ratio rectangles, (0, +-phi, +-1/phi) and cyclic shifts
- Icosahedron: three orthogonal golden rectangles, (0, +-1, +-phi) and cyclic shifts

All five are already convex, but they still go through the hull reducer so that
faces and edges come from the same code path as every other family.
"""

import jax
import jax.numpy as jnp
from typing import Any, Dict, List, NamedTuple, Tuple

from .family import ParameterSpec, PolytopeFamily


class PlatonicSolid(NamedTuple):
    """Immutable data structure representing a Platonic solid.

    Attributes:
        name: Name of the solid
        vertices: (N, 3) array of vertex coordinates
        edges: Sorted (min, max) vertex index pairs
        faces: Vertex index polygons, counter-clockwise seen from outside
        symmetry_group: Name of the rotation group (e.g., 'A4', 'S4', 'A5')
        dual_name: Name of the dual solid
    """
    name: str
    vertices: jnp.ndarray
    edges: List[Tuple[int, int]]
    faces: List[List[int]]
    symmetry_group: str
    dual_name: str


# Golden ratio constant
PHI = (1 + jnp.sqrt(5.0)) / 2

# name -> (symmetry group, dual)
SOLID_METADATA: Dict[str, Tuple[str, str]] = {
    "tetrahedron": ("A4", "tetrahedron"),  # Self-dual
    "cube": ("S4", "octahedron"),
    "octahedron": ("S4", "cube"),
    "dodecahedron": ("A5", "icosahedron"),
    "icosahedron": ("A5", "dodecahedron"),
}


@jax.jit
def tetrahedron_vertices() -> jnp.ndarray:
    """Regular tetrahedron centered at origin, 4 vertices."""
    # Vertices at alternating corners of a cube
    return jnp.array([
        [1.0, 1.0, 1.0],
        [-1.0, -1.0, 1.0],
        [-1.0, 1.0, -1.0],
        [1.0, -1.0, -1.0]
    ])


@jax.jit
def cube_vertices() -> jnp.ndarray:
    """Cube of edge length 1 centered at origin, 8 vertices."""
    a = 0.5
    return jnp.array([
        [-a, -a, -a],
        [a, -a, -a],
        [a, a, -a],
        [-a, a, -a],
        [-a, -a, a],
        [a, -a, a],
        [a, a, a],
        [-a, a, a]
    ])


@jax.jit
def octahedron_vertices() -> jnp.ndarray:
    """Regular octahedron with vertices on the unit axes, 6 vertices."""
    return jnp.array([
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
        [-1.0, 0.0, 0.0],
        [0.0, -1.0, 0.0],
        [0.0, 0.0, -1.0]
    ])


@jax.jit
def dodecahedron_vertices() -> jnp.ndarray:
    """Regular dodecahedron centered at origin, 20 vertices.

    The cube (+-a, +-a, +-a) plus three golden rectangles, all scaled by a = 1/2.
    """
    a = 0.5
    b = 0.5 * PHI
    c = a / PHI

    # Cube vertices, bit i of the index selects the sign of coordinate i
    cube_verts = jnp.array([
        [a if (i & 1) else -a, a if (i & 2) else -a, a if (i & 4) else -a]
        for i in range(8)
    ])

    axis_verts = jnp.array([
        # (0, +-phi, +-1/phi)
        [0.0, b, c],
        [0.0, b, -c],
        [0.0, -b, c],
        [0.0, -b, -c],
        # (+-1/phi, 0, +-phi)
        [c, 0.0, b],
        [-c, 0.0, b],
        [c, 0.0, -b],
        [-c, 0.0, -b],
        # (+-phi, +-1/phi, 0)
        [b, c, 0.0],
        [b, -c, 0.0],
        [-b, c, 0.0],
        [-b, -c, 0.0]
    ])

    return jnp.concatenate([cube_verts, axis_verts])


@jax.jit
def icosahedron_vertices() -> jnp.ndarray:
    """Regular icosahedron using the golden ratio, 12 vertices."""
    return jnp.array([
        # (0, +-1, +-phi)
        [0.0, 1.0, PHI],
        [0.0, 1.0, -PHI],
        [0.0, -1.0, PHI],
        [0.0, -1.0, -PHI],
        # (+-1, +-phi, 0)
        [1.0, PHI, 0.0],
        [1.0, -PHI, 0.0],
        [-1.0, PHI, 0.0],
        [-1.0, -PHI, 0.0],
        # (+-phi, 0, +-1)
        [PHI, 0.0, 1.0],
        [-PHI, 0.0, 1.0],
        [PHI, 0.0, -1.0],
        [-PHI, 0.0, -1.0]
    ])


_BUILDERS = {
    "tetrahedron": tetrahedron_vertices,
    "cube": cube_vertices,
    "octahedron": octahedron_vertices,
    "dodecahedron": dodecahedron_vertices,
    "icosahedron": icosahedron_vertices,
}


class PlatonicSolids(PolytopeFamily):
    """Tetrahedron, cube, octahedron, dodecahedron and icosahedron."""

    family_id = "platonic"
    name = "Platonic Solids"

    solid_types = (
        ("tetrahedron", "Tetrahedron"),
        ("cube", "Cube"),
        ("octahedron", "Octahedron"),
        ("dodecahedron", "Dodecahedron"),
        ("icosahedron", "Icosahedron"),
    )

    def family_parameters(self) -> List[ParameterSpec]:
        return [ParameterSpec("solid_type", "Solid Type", "choice", "tetrahedron", options=self.solid_types)]

    def build_vertices(self, parameters: Dict[str, Any]) -> jnp.ndarray:
        return _BUILDERS[parameters["solid_type"]]()


def create_platonic_solid(name: str, size: float = 1.0) -> PlatonicSolid:
    """Build a named Platonic solid with hull-derived faces and edges."""
    polytope = PlatonicSolids().create_polytope({"solid_type": name}, size)
    symmetry_group, dual_name = SOLID_METADATA[name]
    return PlatonicSolid(
        name=name,
        vertices=polytope.vertices,
        edges=polytope.edges,
        faces=polytope.faces,
        symmetry_group=symmetry_group,
        dual_name=dual_name
    )


def create_all_platonic_solids() -> Dict[str, PlatonicSolid]:
    """Create all five Platonic solids.

    Returns:
        Dictionary mapping solid names to PlatonicSolid instances
    """
    return {name: create_platonic_solid(name) for name in _BUILDERS}
