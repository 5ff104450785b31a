"""
Family lookup and the engine's top-level entry point.

`create_polytope("permutahedron", {"permutahedron_type": "B3/C3"}, size=2.0)`
builds the family, resolves parameters, and returns the reduced `Polytope`.
"""

from typing import Any, Dict, List, Mapping, Optional, Type

from .archimedean_solids import ArchimedeanSolids
from .associahedra import Associahedron, Cyclohedron
from .convex_hull import HullFunction, polygonal_hull_faces
from .family import Polytope, PolytopeFamily
from .orbit_polytope import OrbitPolytope
from .permutahedra import Permutahedron
from .platonic_solids import PlatonicSolids
from .root_polytopes import RootPolytope
from .stellahedron import Stellahedron


FAMILIES: Dict[str, Type[PolytopeFamily]] = {
    family.family_id: family
    for family in (
        PlatonicSolids,
        ArchimedeanSolids,
        Permutahedron,
        Associahedron,
        Cyclohedron,
        OrbitPolytope,
        RootPolytope,
        Stellahedron,
    )
}


def list_families() -> List[str]:
    return list(FAMILIES)


def get_family(family_id: str, **kwargs) -> PolytopeFamily:
    """Instantiate a family by id; keyword arguments go to its constructor.

    Raises:
        KeyError: family_id is not registered
    """
    try:
        family_class = FAMILIES[family_id]
    except KeyError:
        raise KeyError(f"Unknown polytope family {family_id!r}; known: {', '.join(FAMILIES)}") from None
    return family_class(**kwargs)


def create_polytope(family_id: str, parameters: Optional[Mapping[str, Any]] = None,
                    size: Optional[float] = None,
                    hull_function: HullFunction = polygonal_hull_faces) -> Polytope:
    """Vertices, faces and edges of one polytope of a registered family."""
    family = get_family(family_id, hull_function=hull_function)
    return family.create_polytope(parameters, size)
