import math

import pytest

from roomplanner.clamping import clamp, clamp_bed, clamp_furniture, clamp_opening
from roomplanner.footprint import bed_footprint, furniture_footprint
from roomplanner.models import Bed, Door, Furniture, Window

from conftest import box_inside

QUARTER = math.pi / 2


def test_bed_that_fits_is_unchanged(room):
    bed = room.add_bed(Bed.create_default(3, 2))
    assert bed.x_m == pytest.approx(2.2)
    assert bed.y_m == pytest.approx(1.0)


def test_bed_pushed_back_inside(room):
    bed = Bed(5.5, -1.0, 1.6, 2.0)
    clamp_bed(room, bed)
    assert bed.x_m == pytest.approx(6.0 - 1.6)
    assert bed.y_m == 0.0


def test_bed_clamp_accounts_for_nightstands(room):
    bed = Bed(0.0, 0.0, 1.6, 2.0, nightstand_left=True, nightstand_right=True,
              nightstand_size_m=0.45)
    clamp_bed(room, bed)
    assert bed.x_m == pytest.approx(0.45)

    bed.x_m = 10
    clamp_bed(room, bed)
    assert bed.x_m == pytest.approx(6.0 - 1.6 - 0.45)


def test_rotated_bed_clamp_uses_swapped_size(room):
    bed = Bed(0.0, 10.0, 1.6, 2.0, rotation_rad=QUARTER, nightstand_right=True,
              nightstand_size_m=0.45)
    clamp_bed(room, bed)
    # quarter turn: 2.0 wide, 1.6 tall, right nightstand below
    assert bed.y_m == pytest.approx(4.0 - 1.6 - 0.45)


def test_oversized_entity_pinned_to_lower_bound(room):
    bed = Bed(3.0, 3.0, 8.0, 5.0, nightstand_left=True, nightstand_size_m=0.45)
    clamp_bed(room, bed)
    assert bed.x_m == pytest.approx(0.45)
    assert bed.y_m == 0.0

    item = Furniture(2.0, 2.0, 7.0, 0.6)
    clamp_furniture(room, item)
    assert item.x_m == 0.0


def test_furniture_clamp(room):
    item = Furniture(-1.0, 3.9, 1.2, 0.6, rotation_rad=QUARTER)
    clamp_furniture(room, item)
    assert item.x_m == 0.0
    assert item.y_m == pytest.approx(4.0 - 1.2)


@pytest.mark.parametrize("side, offset, expected", [
    ('N', 10.0, 4.8),
    ('S', -3.0, 0.0),
    ('E', 10.0, 2.8),
    ('W', 1.0, 1.0),
])
def test_opening_clamp(room, side, offset, expected):
    opening = Window(side, 0.0, 1.2)
    opening.offset_m = offset
    clamp_opening(room, opening)
    assert opening.offset_m == pytest.approx(expected)


def test_opening_longer_than_wall(room):
    opening = Door('E', 2.0, 5.0)
    clamp_opening(room, opening)
    assert opening.offset_m == 0.0


BEDS = [
    dict(x_m=x, y_m=y, rotation_rad=step * QUARTER, nightstand_left=left,
         nightstand_right=right)
    for x, y in [(-3.0, -3.0), (2.0, 1.0), (9.0, 9.0), (5.9, 0.2)]
    for step in range(4)
    for left, right in [(False, False), (True, False), (False, True), (True, True)]
]


@pytest.mark.parametrize("attrs", BEDS)
def test_bed_clamp_idempotent_and_contained(room, attrs):
    bed = Bed(width_m=1.6, height_m=2.0, nightstand_size_m=0.45, **attrs)
    clamp_bed(room, bed)
    once = (bed.x_m, bed.y_m)
    clamp_bed(room, bed)
    assert (bed.x_m, bed.y_m) == once
    assert box_inside(bed_footprint(bed).box, room)


@pytest.mark.parametrize("x, y, step", [
    (x, y, step) for x, y in [(-1, -1), (3, 2), (7, 7)] for step in range(4)
])
def test_furniture_clamp_idempotent_and_contained(room, x, y, step):
    item = Furniture(x, y, 1.2, 0.6, rotation_rad=step * QUARTER)
    clamp_furniture(room, item)
    once = (item.x_m, item.y_m)
    clamp_furniture(room, item)
    assert (item.x_m, item.y_m) == once
    assert box_inside(furniture_footprint(item).box, room)


@pytest.mark.parametrize("side", ['N', 'E', 'S', 'W'])
def test_opening_clamp_idempotent_and_contained(room, side):
    opening = Window(side, 0.0, 1.2)
    opening.offset_m = 50.0
    clamp_opening(room, opening)
    once = opening.offset_m
    clamp_opening(room, opening)
    assert opening.offset_m == once
    assert opening.offset_m + opening.length_m <= room.wall_length(side) + 1e-9


def test_clamp_dispatch(room):
    item = Furniture(-5, -5, 1, 1)
    assert clamp(room, item) is item
    assert (item.x_m, item.y_m) == (0.0, 0.0)
    with pytest.raises(TypeError):
        clamp(room, object())
