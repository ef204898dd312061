import pytest

from roomplanner.models import Door, Window
from roomplanner.transfer import ADJACENT, OpeningDrag, transfer_opening


def test_adjacency_is_symmetric_with_screen_axes():
    assert ADJACENT['N'] == ('W', 'E')
    assert ADJACENT['S'] == ('W', 'E')
    assert ADJACENT['E'] == ('N', 'S')
    assert ADJACENT['W'] == ('N', 'S')


def test_in_range_sets_offset(room):
    window = room.add_opening(Window.create('N', 1.0))
    assert transfer_opening(room, window, 2.5) is False
    assert window.wall_side == 'N'
    assert window.offset_m == pytest.approx(2.5)


def test_north_past_end_moves_to_east(room):
    window = room.add_opening(Window.create('N', 1.0))
    assert transfer_opening(room, window, 5.3) is True
    assert window.wall_side == 'E'
    assert window.offset_m == pytest.approx(0.5)


def test_overflow_capped_by_new_wall(room):
    window = room.add_opening(Window.create('N', 1.0))
    transfer_opening(room, window, 10.0)
    assert window.wall_side == 'E'
    assert window.offset_m == pytest.approx(2.8)


@pytest.mark.parametrize("side, along, new_side, new_offset", [
    ('N', -0.3, 'W', 0.3),
    ('S', -0.4, 'W', 0.4),
    ('S', 5.0, 'E', 0.2),
    ('W', 3.0, 'S', 0.2),
    ('W', -1.0, 'N', 1.0),
    ('E', -0.5, 'N', 0.5),
    ('E', 3.5, 'S', 0.7),
])
def test_transfer_to_adjacent_wall(room, side, along, new_side, new_offset):
    window = room.add_opening(Window.create(side, 0.0))
    assert transfer_opening(room, window, along) is True
    assert window.wall_side == new_side
    assert window.offset_m == pytest.approx(new_offset)


def test_door_settings_survive_transfer(room):
    door = room.add_opening(Door('N', 0.5, 0.9, open_fraction=0.5, hinge_at_start=False))
    transfer_opening(room, door, -0.2)
    assert door.wall_side == 'W'
    assert door.open_fraction == 0.5
    assert door.hinge_at_start is False
    assert door.length_m == 0.9


def test_drag_keeps_grip_after_transfer(room):
    window = room.add_opening(Window.create('N', 4.0))
    drag = OpeningDrag(room, window, 4.5, -0.05)
    assert drag.grab_m == pytest.approx(0.5)

    assert drag.move(5.5, -0.05) is True
    assert window.wall_side == 'E'
    assert window.offset_m == pytest.approx(0.2)

    # the same pointer position must not move it again
    assert drag.move(5.5, -0.05) is False
    assert window.wall_side == 'E'
    assert window.offset_m == pytest.approx(0.2)

    drag.move(6.05, 1.0)
    assert window.offset_m == pytest.approx(1.25)


def test_drag_around_perimeter(room):
    window = room.add_opening(Window.create('N', 2.0))
    drag = OpeningDrag(room, window, 2.0, -0.05)

    drag.move(7.0, -0.05)
    assert window.wall_side == 'E'

    drag.move(6.05, 6.0)
    assert window.wall_side == 'S'

    drag.move(-2.0, 4.05)
    assert window.wall_side == 'W'

    drag.move(-0.05, -3.0)
    assert window.wall_side == 'N'

    opening = drag.end()
    assert opening is window
    assert 0.0 <= window.offset_m <= room.wall_length('N') - window.length_m
