import pytest

from roomplanner.footprint import bed_footprint, furniture_footprint
from roomplanner.models import Bed, Furniture, Room
from roomplanner.overlap import (
    ACCEPTED, RELOCATED, REVERTED,
    bed_intersects_any_furniture, collides, colliding_pairs,
    furniture_intersects_any_bed, resolve_placement, ring_offsets,
)

from conftest import box_inside


def test_ring_offsets_order():
    offsets = ring_offsets()
    assert len(offsets) == 40
    assert offsets[:4] == [(0.2, 0.0), (-0.2, 0.0), (0.0, 0.2), (0.0, -0.2)]
    assert offsets[-4][0] == pytest.approx(2.0)
    assert offsets[-1][1] == pytest.approx(-2.0)


def test_ring_offsets_custom():
    assert ring_offsets(step=0.5, max_radius=1) == [(0.5, 0.0), (-0.5, 0.0), (0.0, 0.5), (0.0, -0.5)]


def test_bed_and_furniture_touching_do_not_collide(room):
    bed = room.add_bed(Bed(0.0, 0.0, 1.6, 2.0))
    item = room.add_furniture(Furniture(1.6, 0.0, 1.2, 0.6))
    assert not bed_intersects_any_furniture(room, bed)
    assert not furniture_intersects_any_bed(room, item)


def test_nightstand_counts_toward_collision(room):
    bed = room.add_bed(Bed(1.0, 0.0, 1.6, 2.0))
    item = room.add_furniture(Furniture(2.7, 0.0, 0.5, 0.5))
    assert not collides(room, bed)

    bed.nightstand_right = True
    assert collides(room, bed)
    assert collides(room, item)
    assert colliding_pairs(room) == [(bed, item)]


def test_same_category_overlap_allowed(room):
    room.add_bed(Bed.create_default(3, 2))
    assert room.place_bed(Bed.create_default(3, 2)) == ACCEPTED

    room.add_furniture(Furniture.create_default(1, 1))
    second = Furniture.create_default(1, 1)
    assert room.place_furniture(second) == ACCEPTED
    assert (second.x_m, second.y_m) == pytest.approx((0.4, 0.7))


def test_no_conflict_is_accepted(room):
    item = room.add_furniture(Furniture(0.2, 0.2, 1.2, 0.6))
    x, y = item.x_m, item.y_m
    assert resolve_placement(room, item) == ACCEPTED
    assert (item.x_m, item.y_m) == (x, y)


def test_furniture_placed_on_bed_is_relocated(room):
    bed = Bed.create_default(3, 2)
    assert room.place_bed(bed) == ACCEPTED
    assert bed.x_m == pytest.approx(2.2)
    assert bed.y_m == pytest.approx(1.0)

    item = Furniture.create_default(3, 2)
    assert room.place_furniture(item) == RELOCATED

    assert not furniture_intersects_any_bed(room, item)
    assert not bed_intersects_any_furniture(room, bed)
    # the first free candidates are 1.4 m to either side, same row
    assert item.y_m == pytest.approx(1.7)
    assert abs(item.x_m - 2.4) == pytest.approx(1.4)
    assert box_inside(furniture_footprint(item).box, room)


def test_bed_placed_on_furniture_is_relocated(room):
    item = room.add_furniture(Furniture(2.6, 1.8, 0.8, 0.4))
    bed = Bed.create_default(3, 2)
    assert room.place_bed(bed) == RELOCATED
    assert not bed_intersects_any_furniture(room, bed)
    assert not furniture_intersects_any_bed(room, item)


def test_relocation_never_leaves_room():
    room = Room(2.4, 2.2)
    bed = room.add_bed(Bed(0.0, 0.0, 1.6, 2.0))
    item = Furniture(0.5, 0.5, 0.6, 0.6)
    outcome = room.place_furniture(item)

    assert outcome == RELOCATED
    assert not collides(room, item)
    assert box_inside(furniture_footprint(item).box, room)
    assert box_inside(bed_footprint(bed).box, room)


def test_no_free_spot_restores_original_position():
    room = Room(1.7, 2.1)
    bed = Bed.create_default(0.85, 1.05)
    assert room.place_bed(bed) == ACCEPTED

    item = Furniture.create_default(0.85, 1.05)
    outcome = room.place_furniture(item)

    assert outcome == REVERTED
    assert item.x_m == pytest.approx(0.25)
    assert item.y_m == pytest.approx(0.75)
    # overlap is tolerated, containment is not
    assert collides(room, item)
    assert box_inside(furniture_footprint(item).box, room)
    assert box_inside(bed_footprint(bed).box, room)
