import numpy as np
import pytest


def euler_characteristic(faces, edges):
    """V - E + F over the vertices actually used by the faces."""
    used = {i for face in faces for i in face}
    return len(used) - len(edges) + len(faces)


def face_normal(points, face):
    """Newell normal of a polygon; points outward for counter-clockwise winding."""
    polygon = np.asarray(points)[list(face)]
    shifted = np.roll(polygon, -1, axis=0)
    return np.sum(np.cross(polygon, shifted), axis=0)


@pytest.fixture
def archimedean_table_file(tmp_path):
    path = tmp_path / "archimedean.json"
    path.write_text('{"cuboctahedron": {"vertices": [[1, 1, 0], [1, -1, 0], [-1, 1, 0], [-1, -1, 0], '
                    '[1, 0, 1], [1, 0, -1], [-1, 0, 1], [-1, 0, -1], '
                    '[0, 1, 1], [0, 1, -1], [0, -1, 1], [0, -1, -1]]}}',
                    encoding="utf-8")
    return path
