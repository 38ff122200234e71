import math

import numpy as np
import pytest

from lasercool.frame import Frame
from lasercool.maths import (
    gaussian_dis,
    get_minimum_distance_line_point,
    get_relative_coordinates_line_point,
)


def test_minimum_distance_line_point():
    distance, _ = get_minimum_distance_line_point([1.0, 1.0, 1.0], [0.0, 1.0, 1.0], [1.0, 2.0, 2.0])
    assert 0.942 < distance < 0.943


def test_minimum_distance_on_line_is_zero():
    distance, z = get_minimum_distance_line_point([0.0, 0.0, 3.0], [0.0, 0.0, 0.0], [0.0, 0.0, 1.0])
    assert distance == pytest.approx(0.0)
    assert z == pytest.approx(3.0)


def test_relative_coordinates_match_distance():
    frame = Frame.from_direction([1.0, 0.0, 0.0], [0.0, 1.0, 0.0])
    pos = [2.0, 0.3, -0.4]
    x, y, z = get_relative_coordinates_line_point(pos, [0.0, 0.0, 0.0], [1.0, 0.0, 0.0], frame)
    distance, z2 = get_minimum_distance_line_point(pos, [0.0, 0.0, 0.0], [1.0, 0.0, 0.0])
    assert z == pytest.approx(z2)
    assert math.hypot(x, y) == pytest.approx(distance)
    assert x == pytest.approx(0.3)


def test_gaussian_peak_normalisation():
    assert gaussian_dis(1.0, 0.0) == pytest.approx(1.0 / (2.0 * math.pi))


def test_gaussian_integrates_to_one():
    std = 0.5
    grid = np.linspace(-5.0, 5.0, 401)
    step = grid[1] - grid[0]
    total = sum(gaussian_dis(std, gx * gx + gy * gy) for gx in grid for gy in grid) * step * step
    assert total == pytest.approx(1.0, rel=1e-3)


def test_gaussian_decreases_with_distance():
    assert gaussian_dis(1.0, 1.0) < gaussian_dis(1.0, 0.5) < gaussian_dis(1.0, 0.0)