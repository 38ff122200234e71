# lasercool

Building blocks for modelling laser-cooled atoms in Python. The package works
out, for one point or one atom at a time, quantities a rate-equation model of
laser cooling is built from:

- `lasercool.frame`: `Frame`, an orthonormal pair of vectors across a beam.
  `Frame.from_direction(beam_direction, x_vector)` raises `ValueError` if the
  vectors are not orthogonal or either is zero.
- `lasercool.maths`: `get_relative_coordinates_line_point`,
  `get_minimum_distance_line_point` and `gaussian_dis`, a 2D Gaussian
  normalised to unit area.
- `lasercool.gaussian`: `GaussianBeam` (built directly or with
  `from_peak_intensity`, `from_peak_intensity_with_rayleigh_range` and
  `from_power_with_ellipticity_and_rayleigh_range`), `CircularMask`,
  `get_gaussian_beam_intensity`, `get_gaussian_beam_intensity_gradient` and
  `calculate_rayleigh_range`. Ellipticity is taken into account by the
  intensity only when a `Frame` is given.
- `lasercool.lasers`: `Laser` (a beam with its `LaserIndex` and optional
  cooling light, mask and frame), `index_lasers`, which numbers all indices
  from zero if any of them is not yet initiated, and `fill_sampler_masks`,
  which reports which of `beam_limit` slots hold cooling light.
- `lasercool.transition`: `AtomicTransition` (frequency, linewidth,
  saturation intensity and magnetic moments, with `wavelength()`, `gamma()`
  and `rate_prefactor()`) and `CoolingLight` (with `frequency()`,
  `wavenumber()`, `for_transition(...)` and `lerp(...)`), plus the speed of
  light `C`.
- `lasercool.photons`: `total_photons_scattered`, `expected_photons_scattered`
  (shares the total between the slots in use in proportion to their rates,
  leaving unused slots as NaN), `actual_photons_scattered` (Poisson draws, or
  the expected numbers unchanged when `fluctuations=False`) and
  `total_scattered`.
- `lasercool.fields`: `UniformMagneticField` (`gauss` or `tesla`) and
  `TimeOrbitingPotential` (`gauss`, and `field_at(time)` for the rotating
  field).
- `lasercool.quadrupole`: `quadrupole_3d_field`, `quadrupole_2d_field`,
  `QuadrupoleField3D` (`gauss_per_cm`, `field`, and `jacobian` by central
  differences) and `QuadrupoleField2D` (`gauss_per_cm`, `field`).

Vectors are NumPy arrays of three floats, and all quantities are in SI units
unless a constructor says otherwise, for example `gauss` or `gauss_per_cm`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Intensity of a Gaussian beam at a point:

```python
import numpy as np
from lasercool.gaussian import GaussianBeam, calculate_rayleigh_range, get_gaussian_beam_intensity

beam = GaussianBeam(
    intersection=np.zeros(3),
    direction=np.array([1.0, 0.0, 0.0]),
    e_radius=2.0,
    power=1.0,
    rayleigh_range=calculate_rayleigh_range(1064e-9, 2.0),
    ellipticity=0.0,
)
intensity = get_gaussian_beam_intensity(beam, np.array([0.0, 1.0, 0.0]), None, None)
```

Field and Jacobian of a 3D quadrupole given in gauss per centimetre:

```python
import numpy as np
from lasercool.quadrupole import QuadrupoleField3D

quad = QuadrupoleField3D.gauss_per_cm(100.0, np.array([0.0, 0.0, 1.0]))
b = quad.field(np.array([1.0, 1.0, 1.0]), np.zeros(3))
jac = quad.jacobian(np.array([1.0, 1.0, 1.0]), np.zeros(3))
```

A cooling beam detuned from a transition, and the photons it scatters:

```python
from lasercool.photons import actual_photons_scattered, expected_photons_scattered, total_photons_scattered
from lasercool.transition import AtomicTransition, CoolingLight

transition = AtomicTransition(
    frequency=384.2304844685e12,
    linewidth=6.065e6,
    saturation_intensity=16.69,
    mup=9.274e-24,
    mum=-9.274e-24,
    muz=0.0,
)
light = CoolingLight.for_transition(transition, detuning=-12.0, polarization=1)

total = total_photons_scattered(transition, excited=0.3, timestep=1.0e-6)
expected = expected_photons_scattered([1.0e6, 1.0e6, 0.0], [True, True, False], total)
actual = actual_photons_scattered(expected, fluctuations=False)
```

The detuning passed to `for_transition` is in MHz. The transition constants
above are illustrative.

## What the package does not do

The package computes single quantities; it does not run a simulation. It has
no time integrator, no store of atoms, and nothing that steps a set of atoms
through time or writes trajectories to files. It also does not compute
Doppler or Zeeman shifts, laser detunings, scattering rate coefficients,
two-level populations, or the absorption and emission forces on an atom:
those have to be supplied by the caller, for example as the rates passed to
`expected_photons_scattered`. There is no command-line program.