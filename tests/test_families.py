import json
import logging

import numpy as np
import pytest

from conftest import euler_characteristic, face_normal
from polytope_engine.archimedean_solids import ArchimedeanSolids, load_archimedean_table
from polytope_engine.associahedra import Associahedron, Cyclohedron
from polytope_engine.family import SIZE_PARAMETER
from polytope_engine.orbit_polytope import OrbitPolytope
from polytope_engine.permutahedra import Permutahedron
from polytope_engine.platonic_solids import PlatonicSolids, create_all_platonic_solids
from polytope_engine.registry import FAMILIES, get_family
from polytope_engine.root_polytopes import RootPolytope
from polytope_engine.stellahedron import Stellahedron

# family id, parameters, vertices, faces, edges
POLYTOPE_EXPECTATIONS = [
    ("platonic", {"solid_type": "tetrahedron"}, 4, 4, 6),
    ("platonic", {"solid_type": "cube"}, 8, 6, 12),
    ("platonic", {"solid_type": "octahedron"}, 6, 8, 12),
    ("platonic", {"solid_type": "dodecahedron"}, 20, 12, 30),
    ("platonic", {"solid_type": "icosahedron"}, 12, 20, 30),
    ("permutahedron", {"permutahedron_type": "A3"}, 24, 14, 36),
    ("permutahedron", {"permutahedron_type": "B3/C3"}, 48, 26, 72),
    ("associahedron", {}, 14, 9, 21),
    ("orbit", {}, 24, 14, 24),
    ("orbit", {"point1": 1, "point2": 2, "point3": 3, "point4": 4}, 24, 14, 36),
    ("orbit", {"point1": 0, "point2": 0, "point3": 0, "point4": 1}, 24, 4, 6),
    ("root", {"root_system_type": "A3"}, 12, 14, 24),
    ("root", {"root_system_type": "D3"}, 12, 14, 24),
    ("root", {"root_system_type": "H3"}, 30, 32, 60),
]

ARCHIMEDEAN_EXPECTATIONS = [
    ("truncatedTetrahedron", 12, 18),
    ("cuboctahedron", 12, 24),
    ("truncatedCube", 24, 36),
    ("truncatedOctahedron", 24, 36),
    ("rhombicuboctahedron", 24, 48),
    ("truncatedCuboctahedron", 48, 72),
    ("snubCube", 24, 60),
    ("icosidodecahedron", 30, 60),
    ("truncatedDodecahedron", 60, 90),
    ("truncatedIcosahedron", 60, 90),
    ("rhombicosidodecahedron", 60, 120),
    ("truncatedIcosidodecahedron", 120, 180),
    ("snubDodecahedron", 60, 150),
]

DEFAULT_VERTEX_COUNTS = [
    ("platonic", 4),
    ("archimedean", 12),
    ("permutahedron", 24),
    ("associahedron", 14),
    ("cyclohedron", 20),
    ("orbit", 24),
    ("root", 12),
    ("stellahedron", 224),
]


def assert_well_formed(polytope):
    vertices = np.asarray(polytope.vertices)
    n = vertices.shape[0]

    assert len(set(polytope.edges)) == len(polytope.edges)
    for u, v in polytope.edges:
        assert 0 <= u < v < n
    for face in polytope.faces:
        assert len(face) >= 3
        assert all(0 <= i < n for i in face)

    center = np.mean(vertices, axis=0)
    for face in polytope.faces:
        normal = face_normal(vertices, face)
        assert np.dot(normal, np.mean(vertices[face], axis=0) - center) > 0


@pytest.mark.parametrize("family_id, parameters, n_vertices, n_faces, n_edges", POLYTOPE_EXPECTATIONS)
def test_polytope_families(family_id, parameters, n_vertices, n_faces, n_edges):
    polytope = get_family(family_id).create_polytope(parameters)

    assert np.asarray(polytope.vertices).shape == (n_vertices, 3)
    assert len(polytope.faces) == n_faces
    assert len(polytope.edges) == n_edges
    assert_well_formed(polytope)


@pytest.mark.parametrize("solid_type, n_vertices, n_edges", ARCHIMEDEAN_EXPECTATIONS)
def test_archimedean_solids(solid_type, n_vertices, n_edges):
    polytope = ArchimedeanSolids().create_polytope({"solid_type": solid_type})
    vertices = np.asarray(polytope.vertices)

    assert vertices.shape == (n_vertices, 3)
    assert np.allclose(np.linalg.norm(vertices, axis=1), 1.0)
    assert len(polytope.edges) == n_edges
    assert len(polytope.faces) == n_edges - n_vertices + 2
    assert_well_formed(polytope)


@pytest.mark.parametrize("family_id, n_vertices", DEFAULT_VERTEX_COUNTS)
def test_default_parameters(family_id, n_vertices):
    polytope = get_family(family_id).create_polytope()

    assert np.asarray(polytope.vertices).shape == (n_vertices, 3)
    assert polytope.faces
    assert euler_characteristic(polytope.faces, polytope.edges) == 2
    assert_well_formed(polytope)


@pytest.mark.parametrize("family_id", sorted(FAMILIES))
@pytest.mark.parametrize("size", [0.5, 2.0, 3.7])
def test_size_scales_every_coordinate(family_id, size):
    family = get_family(family_id)
    unit = np.asarray(family.calculate_vertices(size=1.0))

    assert np.allclose(family.calculate_vertices(size=size), size * unit)
    assert np.allclose(family.calculate_vertices({"size": size}), size * unit)


def test_size_argument_overrides_size_parameter():
    family = PlatonicSolids()
    unit = np.asarray(family.calculate_vertices())
    assert np.allclose(family.calculate_vertices({"size": 3.0}, size=2.0), 2.0 * unit)


def test_size_does_not_change_combinatorics():
    small = Permutahedron().create_polytope(size=0.5)
    large = Permutahedron().create_polytope(size=4.0)
    assert small.faces == large.faces
    assert small.edges == large.edges


def test_permutahedron_vertices_are_equidistant_from_centroid():
    vertices = np.asarray(Permutahedron().calculate_vertices({"permutahedron_type": "A3"}))
    radii = np.linalg.norm(vertices - vertices.mean(axis=0), axis=1)

    assert np.allclose(radii, radii[0])
    assert np.allclose(radii[0], np.sqrt(5.0))


def test_signed_permutahedron_is_centered():
    vertices = np.asarray(Permutahedron().calculate_vertices({"permutahedron_type": "B3/C3"}))
    assert np.allclose(vertices.mean(axis=0), 0.0)


def test_associahedron_faces():
    polytope = Associahedron().create_polytope()
    sizes = sorted(len(face) for face in polytope.faces)

    assert len({tuple(np.round(v, 6)) for v in np.asarray(polytope.vertices)}) == 14
    assert sizes == [4, 4, 4, 5, 5, 5, 5, 5, 5]


def test_cyclohedron_hull():
    polytope = Cyclohedron().create_polytope()
    sizes = sorted(len(face) for face in polytope.faces)

    assert np.asarray(polytope.vertices).shape == (20, 3)
    assert {i for face in polytope.faces for i in face} == set(range(20))
    assert sizes == [3] * 4 + [4] * 16
    assert len(polytope.edges) == 38


def test_orbit_polytope_keeps_zero_coordinates():
    family = OrbitPolytope()
    resolved = family.resolve_parameters({"point1": 0, "point2": 0.0})

    assert resolved == {"point1": 0.0, "point2": 0.0, "point3": 2.0, "point4": 3.0}


def test_orbit_polytope_cuboctahedron_faces():
    polytope = OrbitPolytope().create_polytope()
    sizes = sorted(len(face) for face in polytope.faces)
    assert sizes == [3] * 8 + [4] * 6


def test_root_polytope_vertex_counts():
    family = RootPolytope()
    counts = {
        value: family.calculate_vertices({"root_system_type": value}).shape[0]
        for value, _label in family.types
    }
    assert counts == {"A3": 12, "B3": 18, "C3": 24, "D3": 12, "H3": 30}


def test_h3_root_polytope_is_icosidodecahedron():
    polytope = RootPolytope().create_polytope({"root_system_type": "H3"})
    sizes = sorted(len(face) for face in polytope.faces)
    assert sizes == [3] * 20 + [5] * 12


def test_stellahedron_hull():
    polytope = Stellahedron().create_polytope()
    used = {i for face in polytope.faces for i in face}
    distinct = {tuple(np.round(np.asarray(polytope.vertices)[i], 6)) for i in used}

    assert len(used) == 16
    assert len(distinct) == 16
    assert len(polytope.faces) == 10
    assert len(polytope.edges) == 24


def test_stellahedron_bounds():
    vertices = np.asarray(Stellahedron().calculate_vertices())

    assert vertices.shape == (224, 3)
    assert np.allclose(vertices.min(axis=0), 0.0)
    assert np.allclose(vertices.max(axis=0), 0.3)


def test_platonic_metadata():
    solids = create_all_platonic_solids()

    assert set(solids) == {"tetrahedron", "cube", "octahedron", "dodecahedron", "icosahedron"}
    assert solids["tetrahedron"].dual_name == "tetrahedron"
    assert solids["cube"].dual_name == "octahedron"
    assert solids["icosahedron"].dual_name == "dodecahedron"
    assert len(solids["dodecahedron"].faces) == 12


def test_parameter_schema():
    family = PlatonicSolids()
    schema = family.parameters()

    assert [spec.name for spec in schema] == ["solid_type", "size"]
    assert schema[-1] == SIZE_PARAMETER
    assert schema[0].kind == "choice"
    assert ("cube", "Cube") in schema[0].options


def test_orbit_parameter_schema():
    schema = OrbitPolytope().family_parameters()

    assert [spec.name for spec in schema] == ["point1", "point2", "point3", "point4"]
    assert [spec.default for spec in schema] == [1.0, 2.0, 2.0, 3.0]
    assert all(spec.minimum == -5.0 and spec.maximum == 5.0 and spec.step == 0.5 for spec in schema)


def test_unknown_choice_falls_back_to_default(caplog):
    with caplog.at_level(logging.WARNING, logger="polytope_engine"):
        resolved = PlatonicSolids().resolve_parameters({"solid_type": "hypercube"})

    assert resolved == {"solid_type": "tetrahedron"}
    assert "hypercube" in caplog.text


def test_non_numeric_value_falls_back_to_default(caplog):
    with caplog.at_level(logging.WARNING, logger="polytope_engine"):
        resolved = OrbitPolytope().resolve_parameters({"point1": "abc", "point2": "1.5", "point3": None})

    assert resolved == {"point1": 1.0, "point2": 1.5, "point3": 2.0, "point4": 3.0}
    assert "abc" in caplog.text


@pytest.mark.parametrize("value", ["nan", float("inf"), "-inf"])
def test_non_finite_value_falls_back_to_default(caplog, value):
    with caplog.at_level(logging.WARNING, logger="polytope_engine"):
        resolved = OrbitPolytope().resolve_parameters({"point1": value})

    assert resolved["point1"] == 1.0
    assert "non-finite" in caplog.text


def test_non_finite_seed_still_builds_a_polytope():
    polytope = OrbitPolytope().create_polytope({"point1": "nan", "point4": float("inf")})

    assert np.all(np.isfinite(np.asarray(polytope.vertices)))
    assert len(polytope.faces) == 14


@pytest.mark.parametrize("size", ["big", "nan", float("inf"), [2.0]])
def test_unusable_size_falls_back_to_default(caplog, size):
    family = PlatonicSolids()
    unit = np.asarray(family.calculate_vertices())

    with caplog.at_level(logging.WARNING, logger="polytope_engine"):
        from_parameters = family.create_polytope({"size": size})
        from_argument = family.calculate_vertices(size=size)

    assert np.allclose(from_parameters.vertices, unit)
    assert np.allclose(from_argument, unit)
    assert len(from_parameters.faces) == 4
    assert "size" in caplog.text


def test_numeric_size_string_is_accepted():
    family = PlatonicSolids()
    unit = np.asarray(family.calculate_vertices())
    assert np.allclose(family.calculate_vertices({"size": "2.5"}), 2.5 * unit)


def test_polytope_center_and_dict():
    polytope = PlatonicSolids().create_polytope({"solid_type": "cube"}, size=2.0)
    data = polytope.to_dict()

    assert np.allclose(polytope.center, 0.0)
    assert set(data) == {"vertices", "faces", "edges"}
    assert len(data["vertices"]) == 8
    assert all(len(edge) == 2 for edge in data["edges"])
    json.dumps(data)


def test_archimedean_table_from_file(archimedean_table_file):
    table = load_archimedean_table(archimedean_table_file)
    polytope = ArchimedeanSolids(table).create_polytope({"solid_type": "cuboctahedron"})

    assert len(polytope.faces) == 14
    assert len(polytope.edges) == 24


def test_archimedean_environment_override(archimedean_table_file, monkeypatch):
    monkeypatch.setenv("POLYTOPE_ENGINE_ARCHIMEDEAN_DATA", str(archimedean_table_file))
    assert list(load_archimedean_table()) == ["cuboctahedron"]


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_unreadable_archimedean_table(tmp_path, caplog, content):
    path = tmp_path / "broken.json"
    path.write_text(content, encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="polytope_engine"):
        assert load_archimedean_table(path) == {}
    assert "broken.json" in caplog.text


def test_missing_archimedean_data_gives_empty_polytope(tmp_path, caplog):
    family = ArchimedeanSolids(load_archimedean_table(tmp_path / "missing.json"))

    with caplog.at_level(logging.WARNING, logger="polytope_engine"):
        polytope = family.create_polytope({"solid_type": "snubCube"})

    assert np.asarray(polytope.vertices).shape == (0, 3)
    assert polytope.faces == []
    assert polytope.edges == []
    assert np.allclose(polytope.center, 0.0)
    assert "snubCube" in caplog.text


def test_archimedean_entry_without_vertices():
    family = ArchimedeanSolids({"cuboctahedron": {"vertices": []}, "snubCube": "oops"})

    assert family.calculate_vertices({"solid_type": "cuboctahedron"}).shape == (0, 3)
    assert family.calculate_vertices({"solid_type": "snubCube"}).shape == (0, 3)
