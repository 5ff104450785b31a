"""
Uniform contract shared by every polytope family, and the pipeline that ties a
family's vertices to the hull reducer.

A family is a construction rule: from a small parameter mapping it produces a
raw vertex set. `create_polytope` then

1. resolves the parameters against the family's declared schema (missing
   values fall back to declared defaults),
2. builds the vertices at unit size and multiplies every coordinate by size,
3. reduces the vertex set to polygonal faces and edges.

Each call builds a fresh, immutable `Polytope`; nothing is cached between calls.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Tuple

import jax.numpy as jnp
import numpy as np

from .config import DEFAULT_SIZE
from .convex_hull import HullFunction, compute_hull, polygonal_hull_faces
from .linear_algebra import centroid

logger = logging.getLogger(__name__)


class ParameterSpec(NamedTuple):
    """Declaration of one family parameter, for parameter UIs and validation.

    Attributes:
        name: Key in the parameter mapping
        label: Display label
        kind: 'number' or 'choice'
        default: Value used when the parameter is missing
        minimum: Lower bound of a numeric control
        maximum: Upper bound of a numeric control
        step: Increment of a numeric control
        options: (value, label) pairs of a choice parameter
    """
    name: str
    label: str
    kind: str
    default: Any
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    step: Optional[float] = None
    options: Tuple[Tuple[str, str], ...] = ()


SIZE_PARAMETER = ParameterSpec("size", "Size", "number", DEFAULT_SIZE, minimum=0.1, maximum=5.0, step=0.1)


class Polytope(NamedTuple):
    """Result of one pipeline run.

    Attributes:
        name: Display name of the generating family
        vertices: (N, 3) array of vertex coordinates
        faces: Vertex index polygons, counter-clockwise seen from outside
        edges: Sorted unique (min, max) vertex index pairs
        center: (3,) centroid of the vertices
    """
    name: str
    vertices: jnp.ndarray
    faces: List[List[int]]
    edges: List[Tuple[int, int]]
    center: jnp.ndarray

    def to_dict(self) -> Dict[str, list]:
        """Plain-list form: {vertices, faces, edges}."""
        return {
            "vertices": np.asarray(self.vertices).tolist(),
            "faces": [list(face) for face in self.faces],
            "edges": [list(edge) for edge in self.edges],
        }


def _choice_values(spec: ParameterSpec) -> List[str]:
    return [value for value, _label in spec.options]


class PolytopeFamily(ABC):
    """Base class of every polytope family.

    Subclasses declare their parameters in `family_parameters` and build
    unit-size vertices in `build_vertices`; scaling and hull reduction are
    shared.
    """

    family_id: str = ""
    name: str = "Unnamed Polytope"

    def __init__(self, hull_function: HullFunction = polygonal_hull_faces):
        self.hull_function = hull_function

    @abstractmethod
    def family_parameters(self) -> List[ParameterSpec]:
        """Parameters this family consumes, besides the shared size."""

    @abstractmethod
    def build_vertices(self, parameters: Dict[str, Any]) -> jnp.ndarray:
        """Vertices at unit size from fully resolved parameters."""

    def parameters(self) -> List[ParameterSpec]:
        """Full parameter schema: family parameters followed by size."""
        return self.family_parameters() + [SIZE_PARAMETER]

    def _resolve_value(self, spec: ParameterSpec, value: Any) -> Any:
        if value is None:
            return spec.default
        if spec.kind == "choice":
            if value in _choice_values(spec):
                return value
            logger.warning("%s: unknown %s %r, using %r", self.name, spec.name, value, spec.default)
            return spec.default
        try:
            number = float(value)
        except (TypeError, ValueError):
            logger.warning("%s: non-numeric %s %r, using %r", self.name, spec.name, value, spec.default)
            return spec.default
        if not math.isfinite(number):
            logger.warning("%s: non-finite %s %r, using %r", self.name, spec.name, value, spec.default)
            return spec.default
        return number

    def resolve_parameters(self, parameters: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Fill in declared defaults for missing, None or unusable values."""
        parameters = parameters or {}
        return {spec.name: self._resolve_value(spec, parameters.get(spec.name))
                for spec in self.family_parameters()}

    def resolve_size(self, parameters: Optional[Mapping[str, Any]] = None,
                     size: Optional[Any] = None) -> float:
        """Scale factor: the size argument, else parameters['size'], else the default."""
        if size is None:
            size = (parameters or {}).get(SIZE_PARAMETER.name)
        return self._resolve_value(SIZE_PARAMETER, size)

    def calculate_vertices(self, parameters: Optional[Mapping[str, Any]] = None,
                           size: Optional[float] = None) -> jnp.ndarray:
        """Vertex set for the given parameters, every coordinate multiplied by size.

        Returns:
            (N, 3) array; N may be 0 when the family has no data for the request
        """
        scale = self.resolve_size(parameters, size)
        resolved = self.resolve_parameters(parameters)
        vertices = jnp.asarray(self.build_vertices(resolved), dtype=jnp.float64).reshape(-1, 3)
        logger.debug("%s: %d vertices for %s", self.name, vertices.shape[0], resolved)
        return vertices * scale

    def create_polytope(self, parameters: Optional[Mapping[str, Any]] = None,
                        size: Optional[float] = None) -> Polytope:
        """Vertices, polygonal faces and edges for the given parameters."""
        vertices = self.calculate_vertices(parameters, size)
        hull = compute_hull(vertices, self.hull_function)
        return Polytope(
            name=self.name,
            vertices=vertices,
            faces=hull.faces,
            edges=hull.edges,
            center=centroid(vertices)
        )
