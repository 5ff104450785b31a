"""
Archimedean solids from a precomputed vertex table.

The table is a JSON object mapping solid type to ``{"vertices": [[x, y, z], ...]}``
(unit circumradius in the bundled copy). The family itself only scales the
stored coordinates; the hull reducer recovers the faces.

Loading is fail-soft: an unreadable table behaves like an empty one, and an
unknown or missing solid type produces an empty vertex set, which in turn
yields an empty hull.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import jax.numpy as jnp

from . import config
from .convex_hull import HullFunction, polygonal_hull_faces
from .family import ParameterSpec, PolytopeFamily

logger = logging.getLogger(__name__)


ArchimedeanTable = Mapping[str, Mapping[str, Any]]


def load_archimedean_table(path: Optional[Union[str, Path]] = None) -> Dict[str, Dict[str, Any]]:
    """Read the Archimedean vertex table.

    Args:
        path: JSON file to read; defaults to the configured data path

    Returns:
        The decoded table, or an empty dict if it cannot be read
    """
    if path is None:
        path = config.archimedean_data_path()
    try:
        with open(path, encoding="utf-8") as handle:
            table = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Failed to load Archimedean solids data from %s: %s", path, exc)
        return {}

    if not isinstance(table, dict):
        logger.warning("Archimedean solids data in %s is not an object", path)
        return {}

    logger.debug("Loaded data for %d Archimedean solids", len(table))
    return table


class ArchimedeanSolids(PolytopeFamily):
    """The 13 Archimedean solids, looked up by type."""

    family_id = "archimedean"
    name = "Archimedean Solids"

    solid_types = (
        ("truncatedTetrahedron", "Truncated Tetrahedron"),
        ("cuboctahedron", "Cuboctahedron"),
        ("truncatedCube", "Truncated Cube"),
        ("truncatedOctahedron", "Truncated Octahedron"),
        ("rhombicuboctahedron", "Rhombicuboctahedron"),
        ("truncatedCuboctahedron", "Truncated Cuboctahedron"),
        ("snubCube", "Snub Cube"),
        ("icosidodecahedron", "Icosidodecahedron"),
        ("truncatedDodecahedron", "Truncated Dodecahedron"),
        ("truncatedIcosahedron", "Truncated Icosahedron"),
        ("rhombicosidodecahedron", "Rhombicosidodecahedron"),
        ("truncatedIcosidodecahedron", "Truncated Icosidodecahedron"),
        ("snubDodecahedron", "Snub Dodecahedron"),
    )

    def __init__(self, table: Optional[ArchimedeanTable] = None,
                 hull_function: HullFunction = polygonal_hull_faces):
        super().__init__(hull_function)
        self._table = table

    @property
    def table(self) -> ArchimedeanTable:
        """The vertex table, read from the configured path on first use."""
        if self._table is None:
            self._table = load_archimedean_table()
        return self._table

    def family_parameters(self) -> List[ParameterSpec]:
        return [ParameterSpec("solid_type", "Solid Type", "choice", "truncatedTetrahedron",
                              options=self.solid_types)]

    def build_vertices(self, parameters: Dict[str, Any]) -> jnp.ndarray:
        solid_type = parameters["solid_type"]
        entry = self.table.get(solid_type)
        if not isinstance(entry, Mapping) or not entry.get("vertices"):
            logger.warning("No Archimedean data for %s", solid_type)
            return jnp.zeros((0, 3))
        return jnp.asarray(entry["vertices"], dtype=jnp.float64)
