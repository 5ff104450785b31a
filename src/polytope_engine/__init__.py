"""Polytope geometry engine: vertices, polygonal faces and edges of polytope families."""

import jax

# Tolerances of 1e-8 (Gram-Schmidt) and 1e-6 (orbit keys) need float64
jax.config.update("jax_enable_x64", True)

from .linear_algebra import (
    dot,
    subtract,
    scale,
    norm,
    gram_schmidt,
    project_to,
    project_points,
    centroid,
    center_points,
    difference_vectors,
    sum_zero_hyperplane_basis
)

from .combinatorics import (
    permutations,
    signed_permutations,
    triangulations
)

from .weyl_orbit import (
    RootSystem,
    WeylGroupInfo,
    ROOT_SYSTEMS,
    root_system,
    get_roots,
    get_simple_roots,
    weyl_group_order,
    weyl_group_description,
    reflect,
    orbit,
    orbit_polygon
)

from .convex_hull import (
    HullResult,
    compute_hull,
    edges_from_faces,
    polygonal_hull_faces
)

from .family import (
    ParameterSpec,
    Polytope,
    PolytopeFamily
)

from .platonic_solids import (
    PlatonicSolid,
    PlatonicSolids,
    create_platonic_solid,
    create_all_platonic_solids
)

from .archimedean_solids import (
    ArchimedeanSolids,
    load_archimedean_table
)

from .permutahedra import Permutahedron
from .associahedra import Associahedron, Cyclohedron
from .orbit_polytope import OrbitPolytope
from .root_polytopes import RootPolytope
from .stellahedron import Stellahedron

from .registry import (
    FAMILIES,
    get_family,
    list_families,
    create_polytope
)

__all__ = [
    # Linear algebra
    'dot',
    'subtract',
    'scale',
    'norm',
    'gram_schmidt',
    'project_to',
    'project_points',
    'centroid',
    'center_points',
    'difference_vectors',
    'sum_zero_hyperplane_basis',

    # Combinatorics
    'permutations',
    'signed_permutations',
    'triangulations',

    # Weyl orbits
    'RootSystem',
    'WeylGroupInfo',
    'ROOT_SYSTEMS',
    'root_system',
    'get_roots',
    'get_simple_roots',
    'weyl_group_order',
    'weyl_group_description',
    'reflect',
    'orbit',
    'orbit_polygon',

    # Hull reduction
    'HullResult',
    'compute_hull',
    'edges_from_faces',
    'polygonal_hull_faces',

    # Families
    'ParameterSpec',
    'Polytope',
    'PolytopeFamily',
    'PlatonicSolid',
    'PlatonicSolids',
    'create_platonic_solid',
    'create_all_platonic_solids',
    'ArchimedeanSolids',
    'load_archimedean_table',
    'Permutahedron',
    'Associahedron',
    'Cyclohedron',
    'OrbitPolytope',
    'RootPolytope',
    'Stellahedron',

    # Registry
    'FAMILIES',
    'get_family',
    'list_families',
    'create_polytope'
]
