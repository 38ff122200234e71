"""Geometric and statistical helpers."""

from __future__ import annotations

import math

import numpy as np

from lasercool.frame import Frame


def get_relative_coordinates_line_point(pos, line_point, direction, frame: Frame):
    """Return (x, y, z) of a point relative to a line, x and y along the frame axes."""
    pos = np.asarray(pos, dtype=float)
    line_point = np.asarray(line_point, dtype=float)
    direction = np.asarray(direction, dtype=float)
    relative = pos - line_point
    z = float(np.dot(relative, direction)) / float(np.linalg.norm(direction))
    r_vec = relative - z * direction
    x = float(np.dot(r_vec, frame.x_vector))
    y = float(np.dot(r_vec, frame.y_vector))
    return x, y, z


def get_minimum_distance_line_point(pos, line_point, direction):
    """Return (distance, z): distance of a point from a line and its position along it."""
    pos = np.asarray(pos, dtype=float)
    line_point = np.asarray(line_point, dtype=float)
    direction = np.asarray(direction, dtype=float)
    relative = pos - line_point
    norm = float(np.linalg.norm(direction))
    distance = float(np.linalg.norm(np.cross(direction, relative) / norm))
    z = float(np.dot(relative, direction)) / norm
    return distance, z


def gaussian_dis(std: float, distance_squared: float) -> float:
    """A 2D gaussian normalised to unit area for sigma_x = sigma_y = std."""
    return 1.0 / (2.0 * math.pi * std * std) * math.exp(-distance_squared / 2.0 / (std * std))