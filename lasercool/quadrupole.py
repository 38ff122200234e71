"""Magnetic quadrupole fields in two and three dimensions."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

_GAUSS_PER_CM = 0.01
_JACOBIAN_STEP = 1e-9


def _unit(vector) -> np.ndarray:
    vector = np.asarray(vector, dtype=float)
    return vector / np.linalg.norm(vector)


def quadrupole_3d_field(pos, centre, gradient: float, direction) -> np.ndarray:
    """Field of a 3D quadrupole, in T.

    In coordinates aligned with the normalised symmetry axis `direction` the
    field is grad * (x, y, -2 z), with the node at `centre`.
    """
    direction = np.asarray(direction, dtype=float)
    delta = np.asarray(pos, dtype=float) - np.asarray(centre, dtype=float)
    z_comp = float(np.dot(delta, direction)) * direction
    r_comp = delta - z_comp
    return gradient * (r_comp - 2.0 * z_comp)


def quadrupole_2d_field(pos, quad_pos, gradient: float, direction_in, direction_out) -> np.ndarray:
    """Field of a 2D quadrupole, in T.

    Field lines point into the node along direction_in and away from it
    along direction_out.
    """
    direction_in = np.asarray(direction_in, dtype=float)
    direction_out = np.asarray(direction_out, dtype=float)
    delta = np.asarray(pos, dtype=float) - np.asarray(quad_pos, dtype=float)
    in_comp = float(np.dot(direction_in, delta)) * direction_in
    out_comp = float(np.dot(direction_out, delta)) * direction_out
    return gradient * (out_comp - in_comp)


@dataclass(eq=False)
class QuadrupoleField3D:
    """A 3D quadrupole field; gradient in T/m, direction a unit vector along the axis."""

    gradient: float
    direction: np.ndarray

    def __post_init__(self) -> None:
        self.direction = np.asarray(self.direction, dtype=float)

    @classmethod
    def gauss_per_cm(cls, gradient: float, direction) -> "QuadrupoleField3D":
        """Create a field with the gradient given in Gauss/cm."""
        return cls(gradient=gradient * _GAUSS_PER_CM, direction=_unit(direction))

    def field(self, pos, centre) -> np.ndarray:
        """Field at pos for a quadrupole whose node is at centre, in T."""
        return quadrupole_3d_field(pos, centre, self.gradient, self.direction)

    def jacobian(self, pos, centre) -> np.ndarray:
        """Jacobian of the field at pos by central differences; column i is dB/dx_i."""
        pos = np.asarray(pos, dtype=float)
        here = self.field(pos, centre)
        jacobian = np.zeros((3, 3))
        for axis, step in enumerate(np.eye(3) * _JACOBIAN_STEP):
            grad_plus = (self.field(pos + step, centre) - here) / _JACOBIAN_STEP
            grad_minus = (here - self.field(pos - step, centre)) / _JACOBIAN_STEP
            jacobian[:, axis] = (grad_plus + grad_minus) / 2.0
        return jacobian


@dataclass(eq=False)
class QuadrupoleField2D:
    """A 2D quadrupole field B'(x, -y, 0), x along direction_out and y along direction_in."""

    gradient: float
    direction_out: np.ndarray
    direction_in: np.ndarray

    def __post_init__(self) -> None:
        self.direction_out = np.asarray(self.direction_out, dtype=float)
        self.direction_in = np.asarray(self.direction_in, dtype=float)

    @classmethod
    def gauss_per_cm(cls, gradient: float, axis, out_direction) -> "QuadrupoleField2D":
        """Create a field with the gradient in Gauss/cm from its axis and outward direction."""
        axis = _unit(axis)
        out_direction = _unit(out_direction)
        direction_out = _unit(out_direction - axis * float(np.dot(axis, out_direction)))
        return cls(
            gradient=gradient * _GAUSS_PER_CM,
            direction_out=direction_out,
            direction_in=np.cross(axis, out_direction),
        )

    def field(self, pos, centre) -> np.ndarray:
        """Field at pos for a quadrupole whose node is at centre, in T."""
        return quadrupole_2d_field(pos, centre, self.gradient, self.direction_in, self.direction_out)