"""Laser-cooling physics: Gaussian beams, transitions, photon scattering counts and magnetic fields."""

__version__ = "0.1.0"