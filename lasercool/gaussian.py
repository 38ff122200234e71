"""Gaussian beam intensity distributions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from lasercool import maths
from lasercool.frame import Frame


@dataclass(eq=False)
class GaussianBeam:
    """A laser beam with a gaussian intensity profile propagating in vacuum.

    e_radius is the 1/e intensity radius in m, power in W, rayleigh_range in m.
    """

    intersection: np.ndarray
    direction: np.ndarray
    e_radius: float
    power: float
    rayleigh_range: float = math.inf
    ellipticity: float = 0.0

    def __post_init__(self) -> None:
        self.intersection = np.asarray(self.intersection, dtype=float)
        self.direction = np.asarray(self.direction, dtype=float)

    @classmethod
    def from_peak_intensity(cls, intersection, direction, peak_intensity, e_radius) -> "GaussianBeam":
        """Create a beam from its peak intensity in W/m^2, with infinite Rayleigh range."""
        std = e_radius / math.sqrt(2.0)
        power = 2.0 * math.pi * std**2 * peak_intensity
        return cls(intersection, direction, e_radius, power, math.inf, 0.0)

    @classmethod
    def from_peak_intensity_with_rayleigh_range(
        cls, intersection, direction, peak_intensity, e_radius, wavelength
    ) -> "GaussianBeam":
        """Create a beam from its peak intensity, deriving the Rayleigh range from the wavelength."""
        std = e_radius / math.sqrt(2.0)
        power = 2.0 * math.pi * std**2 * peak_intensity
        return cls(
            intersection,
            direction,
            e_radius,
            power,
            calculate_rayleigh_range(wavelength, e_radius),
            0.0,
        )

    @classmethod
    def from_power_with_ellipticity_and_rayleigh_range(
        cls, intersection, direction, power, e_radius, wavelength, ellipticity
    ) -> "GaussianBeam":
        """Create a beam from its power and ellipticity; the direction is normalised."""
        direction = np.asarray(direction, dtype=float)
        return cls(
            intersection,
            direction / np.linalg.norm(direction),
            e_radius,
            power,
            calculate_rayleigh_range(wavelength, e_radius),
            ellipticity,
        )


@dataclass(frozen=True)
class CircularMask:
    """Blocks the central part of a coaxial beam; radius in m."""

    radius: float


def get_gaussian_beam_intensity(
    beam: GaussianBeam,
    pos,
    mask: Optional[CircularMask] = None,
    frame: Optional[Frame] = None,
) -> float:
    """Intensity of the beam at a position, in W/m^2.

    Ellipticity is only taken into account when a frame is given.
    """
    if frame is not None:
        x, y, z = maths.get_relative_coordinates_line_point(
            pos, beam.intersection, beam.direction, frame
        )
        semi_major_axis = 1.0 / math.sqrt(1.0 - beam.ellipticity**2)
        # Scaling by 1/semi_major_axis keeps the total beam power unchanged.
        distance_squared = (1.0 / semi_major_axis) * (x**2 + (y * semi_major_axis) ** 2)
    else:
        distance, z = maths.get_minimum_distance_line_point(pos, beam.intersection, beam.direction)
        distance_squared = distance * distance

    power = beam.power
    if mask is not None and math.sqrt(distance_squared) < mask.radius:
        power = 0.0

    broadening = 1.0 + (z / beam.rayleigh_range) ** 2
    return (
        power
        / math.pi
        / beam.e_radius**2
        / broadening
        * math.exp(-distance_squared / (beam.e_radius**2 * broadening))
    )


def calculate_rayleigh_range(wavelength: float, e_radius: float) -> float:
    """Rayleigh range of a beam with the given wavelength and 1/e radius."""
    return 2.0 * math.pi * e_radius**2 / wavelength


def get_gaussian_beam_intensity_gradient(beam: GaussianBeam, pos, reference_frame: Frame) -> np.ndarray:
    """Gradient of the beam intensity at a position, as a 3-vector."""
    rela = np.asarray(pos, dtype=float) - beam.intersection
    semi_major_axis = 1.0 / math.sqrt(1.0 - beam.ellipticity**2)

    x = float(np.dot(rela, reference_frame.x_vector)) / math.sqrt(semi_major_axis)
    y = float(np.dot(rela, reference_frame.y_vector)) * math.sqrt(semi_major_axis)
    z = float(np.dot(rela, beam.direction))

    spot_size_squared = 2.0 * beam.e_radius**2 * (1.0 + (z / beam.rayleigh_range) ** 2)
    vector = -4.0 * (reference_frame.x_vector * x + reference_frame.y_vector * y) + (
        beam.direction
        * z
        / (beam.rayleigh_range**2 + z**2)
        * (-2.0 * spot_size_squared + 4.0 * (x**2 + y**2))
    )
    intensity = (
        2.0
        * beam.power
        / math.pi
        / spot_size_squared
        * math.exp(-2.0 * (x**2 + y**2) / spot_size_squared)
    )
    return intensity / spot_size_squared * vector