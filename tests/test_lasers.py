import pytest

from lasercool.lasers import Laser, LaserIndex, fill_sampler_masks, index_lasers


def test_index_lasers():
    first = LaserIndex()
    second = LaserIndex()
    index_lasers([first, second])
    assert first.index != second.index
    assert first.initiated and second.initiated


def test_indexed_lasers_are_left_alone():
    first = LaserIndex(index=5, initiated=True)
    second = LaserIndex(index=3, initiated=True)
    index_lasers([first, second])
    assert (first.index, second.index) == (5, 3)


def test_new_laser_triggers_reindex():
    first = LaserIndex(index=5, initiated=True)
    second = LaserIndex()
    index_lasers([first, second])
    assert sorted([first.index, second.index]) == [0, 1]


def test_fill_sampler_masks_marks_cooling_lights():
    lasers = [
        Laser(index=LaserIndex(0, True), cooling=object()),
        Laser(index=LaserIndex(2, True), cooling=object()),
        Laser(index=LaserIndex(1, True)),
    ]
    masks = fill_sampler_masks(lasers, 4)
    assert masks == [True, False, True, False]


def test_fill_sampler_masks_out_of_range():
    with pytest.raises(IndexError):
        fill_sampler_masks([Laser(index=LaserIndex(4, True), cooling=object())], 4)