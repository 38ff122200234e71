"""Indexing of laser beams and the masks of which sampler slots are in use."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from lasercool.frame import Frame
from lasercool.gaussian import CircularMask, GaussianBeam


@dataclass
class LaserIndex:
    """Slot of a laser in per-atom sampler arrays; initiated once assigned."""

    index: int = 0
    initiated: bool = False


@dataclass
class Laser:
    """A laser beam with its index and the optional parts attached to it."""

    beam: Optional[GaussianBeam] = None
    index: LaserIndex = field(default_factory=LaserIndex)
    cooling: Optional[Any] = None
    mask: Optional[CircularMask] = None
    frame: Optional[Frame] = None


def index_lasers(indices: Iterable[LaserIndex]) -> None:
    """Assign sequential indices to all lasers if any of them is not yet indexed."""
    indices = list(indices)
    if all(index.initiated for index in indices):
        return
    for number, index in enumerate(indices):
        index.index = number
        index.initiated = True


def fill_sampler_masks(lasers: Iterable[Laser], beam_limit: int) -> List[bool]:
    """Return which sampler slots, out of beam_limit, are used by cooling light.

    Raises IndexError if a cooling laser's index does not fit in beam_limit.
    """
    masks = [False] * beam_limit
    for laser in lasers:
        if laser.cooling is not None:
            masks[laser.index.index] = True
    return masks