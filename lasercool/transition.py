"""Atomic transitions and the cooling light that drives them."""

from __future__ import annotations

import math
from dataclasses import dataclass

#: Speed of light in vacuum, m/s.
C = 299792458.0


@dataclass(frozen=True)
class AtomicTransition:
    """Physical constants of a laser cooling transition.

    frequency and linewidth are in Hz and saturation_intensity is in W/m^2.
    mup, mum and muz are the magnetic moments, in J/T, that shift the sigma+,
    sigma- and pi transitions in a magnetic field.
    """

    frequency: float
    linewidth: float
    saturation_intensity: float
    mup: float
    mum: float
    muz: float

    def wavelength(self) -> float:
        """Wavelength of the transition, m."""
        return C / self.frequency

    def gamma(self) -> float:
        """Gamma, equal to 2 pi times the linewidth."""
        return self.linewidth * 2.0 * math.pi

    def rate_prefactor(self) -> float:
        """Prefactor used when calculating rate coefficients."""
        return (self.linewidth * 2.0 * math.pi) ** 3 / (self.saturation_intensity * 8.0)


@dataclass
class CoolingLight:
    """Polarisation and wavelength of light used for laser cooling.

    polarization is 1 for sigma+ and -1 for sigma-, relative to the
    quantisation axis; wavelength is in m.
    """

    polarization: int
    wavelength: float

    def frequency(self) -> float:
        """Frequency of the light, Hz."""
        return C / self.wavelength

    def wavenumber(self) -> float:
        """Wavenumber of the light, in units of 2 pi inverse metres."""
        return 2.0 * math.pi / self.wavelength

    @classmethod
    def for_transition(
        cls, transition: AtomicTransition, detuning: float, polarization: int
    ) -> "CoolingLight":
        """Light detuned from a transition by the given detuning in MHz."""
        freq = transition.frequency + detuning * 1.0e6
        return cls(polarization=polarization, wavelength=C / freq)

    def lerp(self, other: "CoolingLight", amount: float) -> "CoolingLight":
        """Interpolate the wavelength towards other; polarisation is kept."""
        return CoolingLight(
            polarization=self.polarization,
            wavelength=self.wavelength - (self.wavelength - other.wavelength) * amount,
        )