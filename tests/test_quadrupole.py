import numpy as np
import pytest

from lasercool.quadrupole import (
    QuadrupoleField2D,
    QuadrupoleField3D,
    quadrupole_2d_field,
    quadrupole_3d_field,
)


def test_quadrupole_3d_field():
    field = quadrupole_3d_field([1.0, 1.0, 1.0], [0.0, 1.0, 0.0], 1.0, [0.0, 0.0, 1.0])
    assert np.array_equal(field, np.array([1.0, 0.0, -2.0]))


def test_quadrupole_2d_field():
    field = quadrupole_2d_field(
        [1.0, 1.0, 1.0], [0.0, 0.5, 0.0], 1.0, [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]
    )
    assert np.array_equal(field, np.array([-1.0, 0.5, 0.0]))


def test_quadrupole_jacobian_calculation():
    pos = [0.02, 0.01, -0.05]
    centre = [0.0, 0.0, 0.0]
    first = QuadrupoleField3D(gradient=1.0, direction=[0.0, 0.0, 1.0])
    second = QuadrupoleField3D(
        gradient=2.0, direction=np.array([1.0, 0.0, 1.0]) / np.sqrt(2.0)
    )
    jacobian = first.jacobian(pos, centre) + second.jacobian(pos, centre)
    expected = np.array(
        [
            [0.0, 0.0, -3.0],
            [0.0, 3.0, 0.0],
            [-3.0, 0.0, -3.0],
        ]
    )
    assert np.allclose(jacobian, expected, atol=1e-6, rtol=0.0)


def test_gauss_per_cm_3d_converts_and_normalises():
    quad = QuadrupoleField3D.gauss_per_cm(100.0, [0.0, 0.0, 5.0])
    assert quad.gradient == pytest.approx(1.0)
    assert np.allclose(quad.direction, [0.0, 0.0, 1.0])


def test_gauss_per_cm_3d_field_at_point():
    quad = QuadrupoleField3D.gauss_per_cm(100.0, [0.0, 0.0, 1.0])
    field = quad.field([1.0, 1.0, 1.0], [0.0, 0.0, 0.0])
    assert np.allclose(field, [1.0, 1.0, -2.0])


def test_field_at_node_is_zero():
    quad = QuadrupoleField3D(gradient=3.0, direction=[0.0, 1.0, 0.0])
    assert np.allclose(quad.field([0.5, -0.2, 0.1], [0.5, -0.2, 0.1]), 0.0)


def test_gauss_per_cm_2d_directions():
    quad = QuadrupoleField2D.gauss_per_cm(100.0, [0.0, 0.0, 1.0], [1.0, 0.0, 0.0])
    assert quad.gradient == pytest.approx(1.0)
    assert np.allclose(quad.direction_out, [1.0, 0.0, 0.0])
    assert np.allclose(quad.direction_in, [0.0, 1.0, 0.0])


def test_gauss_per_cm_2d_removes_axial_part_of_out_direction():
    quad = QuadrupoleField2D.gauss_per_cm(50.0, [0.0, 0.0, 2.0], [1.0, 0.0, 1.0])
    assert np.allclose(quad.direction_out, [1.0, 0.0, 0.0])
    assert float(np.dot(quad.direction_out, [0.0, 0.0, 1.0])) == pytest.approx(0.0)


def test_2d_field_method():
    quad = QuadrupoleField2D(gradient=2.0, direction_out=[1.0, 0.0, 0.0], direction_in=[0.0, 1.0, 0.0])
    field = quad.field([1.0, 1.0, 3.0], [0.0, 0.0, 0.0])
    assert np.allclose(field, [2.0, -2.0, 0.0])