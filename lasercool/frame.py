"""Reference frames orthogonal to a laser beam."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(eq=False)
class Frame:
    """Orthonormal basis vectors of a plane orthogonal to a beam."""

    x_vector: np.ndarray
    y_vector: np.ndarray

    def __post_init__(self) -> None:
        self.x_vector = np.asarray(self.x_vector, dtype=float)
        self.y_vector = np.asarray(self.y_vector, dtype=float)

    @classmethod
    def from_direction(cls, beam_direction, x_vector) -> "Frame":
        """Build a frame from the beam direction and a vector orthogonal to it.

        Raises ValueError if the vectors are not orthogonal or either is zero.
        """
        beam_direction = np.asarray(beam_direction, dtype=float)
        x_vector = np.asarray(x_vector, dtype=float)
        if float(np.dot(beam_direction, x_vector)) != 0.0:
            raise ValueError("You entered non-orthogonal vectors!")
        if np.linalg.norm(beam_direction) * np.linalg.norm(x_vector) == 0.0:
            raise ValueError("At least one of the entered vectors is zero!")
        orth = np.cross(beam_direction, x_vector)
        orth = orth / np.linalg.norm(orth)
        return cls(x_vector=x_vector / np.linalg.norm(x_vector), y_vector=orth)