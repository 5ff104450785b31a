"""
Convex hull reduction: polygonal faces and the induced edge set of a 3-D point set.

Qhull (via `scipy.spatial.ConvexHull`) returns a triangulated hull. Polytopes
such as the cube, the permutahedron or the associahedron have square,
pentagonal and hexagonal faces, so the triangles are merged back into polygons:

1. Facets are grouped by their plane equation (unit normal and offset, the
   offset scaled by the point cloud's radius so the tolerance is relative).
2. The vertices of each group are ordered counter-clockwise around the
   outward normal, so every face's winding gives an outward normal under the
   right-hand rule.
3. Edges are the consecutive vertex pairs of every face, canonicalized as
   (min, max) and deduplicated.

Degenerate input (fewer than four points, coplanar or collinear points, or
non-finite coordinates) yields an empty result instead of an exception.
"""

import logging
from itertools import combinations
from typing import Callable, List, NamedTuple, Sequence, Tuple

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from .config import PLANE_TOLERANCE

logger = logging.getLogger(__name__)


Face = List[int]
Edge = Tuple[int, int]
HullFunction = Callable[[np.ndarray], List[Face]]


class HullResult(NamedTuple):
    """Faces and edges of a convex hull, indexed into the input point set.

    Attributes:
        faces: Polygons as vertex index lists, counter-clockwise seen from outside
        edges: Sorted unique (min, max) vertex index pairs
    """
    faces: List[Face]
    edges: List[Edge]


EMPTY_HULL = HullResult(faces=[], edges=[])


def edges_from_faces(faces: Sequence[Sequence[int]]) -> List[Edge]:
    """Unique undirected edges on the boundaries of the given faces."""
    edges = set()
    for face in faces:
        n = len(face)
        for i in range(n):
            a, b = int(face[i]), int(face[(i + 1) % n])
            edges.add((a, b) if a < b else (b, a))
    return sorted(edges)


def affine_rank(points: np.ndarray) -> int:
    """Dimension of the affine span of a point set (0 for a single point)."""
    if points.shape[0] < 2:
        return 0
    centered = points - points.mean(axis=0)
    scale = float(np.max(np.abs(centered)))
    if scale == 0.0:
        return 0
    return int(np.linalg.matrix_rank(centered / scale, tol=PLANE_TOLERANCE))


def _order_face(points: np.ndarray, indices: List[int], normal: np.ndarray) -> Face:
    """Sort coplanar vertex indices counter-clockwise around normal."""
    face_points = points[indices]
    center = face_points.mean(axis=0)

    n = normal / np.linalg.norm(normal)
    ref = np.array([1.0, 0.0, 0.0])
    if abs(float(np.dot(n, ref))) > 0.9:
        ref = np.array([0.0, 1.0, 0.0])
    u = np.cross(n, ref)
    u = u / np.linalg.norm(u)
    w = np.cross(n, u)

    rel = face_points - center
    angles = np.arctan2(rel @ w, rel @ u)
    ordered = [int(indices[i]) for i in np.argsort(angles)]

    # Start at the smallest index so the output is stable
    start = ordered.index(min(ordered))
    return ordered[start:] + ordered[:start]


def tetrahedron_faces(points: np.ndarray) -> List[Face]:
    """Outward oriented triangles of a non-degenerate four point set."""
    faces = []
    for face in combinations(range(4), 3):
        apex = ({0, 1, 2, 3} - set(face)).pop()
        a, b, c = (points[i] for i in face)
        normal = np.cross(b - a, c - a)
        if np.dot(normal, points[apex] - a) > 0:
            face = (face[0], face[2], face[1])
        faces.append(list(face))
    return faces


def polygonal_hull_faces(points: np.ndarray, tolerance: float = PLANE_TOLERANCE) -> List[Face]:
    """Polygonal (un-triangulated) hull faces of a full-dimensional 3-D point set.

    Raises:
        QhullError: If Qhull rejects the input
    """
    hull = ConvexHull(points)

    center = points.mean(axis=0)
    radius = float(np.max(np.linalg.norm(points - center, axis=1))) or 1.0

    planes = []  # (normalized equation, vertex index set)
    for equation, simplex in zip(hull.equations, hull.simplices):
        normal = equation[:3] / np.linalg.norm(equation[:3])
        offset = equation[3] / np.linalg.norm(equation[:3]) / radius
        key = np.append(normal, offset)
        for plane_key, members in planes:
            if np.allclose(key, plane_key, atol=tolerance):
                members.update(int(i) for i in simplex)
                break
        else:
            planes.append((key, {int(i) for i in simplex}))

    return [_order_face(points, sorted(members), key[:3]) for key, members in planes]


def compute_hull(vertices, hull_function: HullFunction = polygonal_hull_faces) -> HullResult:
    """Faces and edges of the convex hull of a vertex set.

    Faces index into vertices as given, whatever order the hull algorithm
    visits them in. Exactly four affinely independent points are handled
    directly as a tetrahedron; larger sets go to hull_function.

    Args:
        vertices: (N, 3) array-like of points
        hull_function: Maps an (N, 3) numpy array to polygonal faces

    Returns:
        HullResult, empty for degenerate input
    """
    points = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)

    if points.shape[0] < 4:
        logger.debug("Hull skipped: %d points are too few", points.shape[0])
        return EMPTY_HULL
    if not np.isfinite(points).all():
        logger.debug("Hull skipped: non-finite coordinates")
        return EMPTY_HULL
    if affine_rank(points) < 3:
        logger.debug("Hull skipped: %d points are coplanar or collinear", points.shape[0])
        return EMPTY_HULL

    if points.shape[0] == 4:
        faces = tetrahedron_faces(points)
    else:
        try:
            faces = hull_function(points)
        except QhullError as exc:
            logger.debug("Hull skipped: Qhull rejected input (%s)", exc)
            return EMPTY_HULL

    edges = edges_from_faces(faces)
    logger.debug("Hull of %d points: %d faces, %d edges", points.shape[0], len(faces), len(edges))
    return HullResult(faces=faces, edges=edges)
