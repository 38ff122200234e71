"""Uniform and time-orbiting magnetic fields."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

_GAUSS = 1.0e-4


@dataclass(eq=False)
class UniformMagneticField:
    """A uniform bias field; components along x, y, z in Tesla."""

    field: np.ndarray

    def __post_init__(self) -> None:
        self.field = np.asarray(self.field, dtype=float)

    @classmethod
    def gauss(cls, components) -> "UniformMagneticField":
        """Create a field with components given in Gauss."""
        return cls(np.asarray(components, dtype=float) * _GAUSS)

    @classmethod
    def tesla(cls, components) -> "UniformMagneticField":
        """Create a field with components given in Tesla."""
        return cls(components)


@dataclass
class TimeOrbitingPotential:
    """A bias field rotating in the x-y plane; amplitude in T, frequency in Hz."""

    amplitude: float
    frequency: float

    @classmethod
    def gauss(cls, amplitude: float, frequency: float) -> "TimeOrbitingPotential":
        """Create a potential with amplitude in Gauss and frequency in Hz."""
        return cls(amplitude=amplitude * _GAUSS, frequency=frequency)

    def field_at(self, time: float) -> np.ndarray:
        """The rotating field at the given time, in T."""
        phase = 2.0 * math.pi * self.frequency * time
        return self.amplitude * np.array([math.cos(phase), math.sin(phase), 0.0])