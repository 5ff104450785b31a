"""
Configuration & path management for the polytope engine.

Central registry for numeric tolerances, parameter defaults and the location
of bundled data files. Nothing here is read from disk; all values are module
level constants so that every call to the engine sees the same configuration.

Exports:
    DEGENERATE_EPS (float): Residual norm at or below which Gram-Schmidt drops a vector.
    ORBIT_DECIMALS (int): Decimal digits kept when keying orbit points.
    PLANE_TOLERANCE (float): Relative tolerance for merging coplanar hull facets.
    DEFAULT_SIZE (float): Default uniform scale applied to generated vertices.
"""
import os
from pathlib import Path


# Numeric tolerances
DEGENERATE_EPS: float = 1e-8
ORBIT_DECIMALS: int = 6
PLANE_TOLERANCE: float = 1e-6

# Parameter defaults
DEFAULT_SIZE: float = 1.0

# Environment override for the Archimedean data source
ARCHIMEDEAN_DATA_ENV: str = "POLYTOPE_ENGINE_ARCHIMEDEAN_DATA"


def get_resource_path(relative_path: str) -> Path:
    """
    Get absolute path to a resource bundled inside the package.
    """
    # config.py is in src/polytope_engine/
    package_root: Path = Path(__file__).resolve().parent
    return package_root / relative_path


def archimedean_data_path() -> Path:
    """Path of the Archimedean vertex table, honouring the environment override."""
    override = os.environ.get(ARCHIMEDEAN_DATA_ENV)
    if override:
        return Path(override)
    return get_resource_path(os.path.join("data", "archimedean_solids.json"))
