import pytest

from roomplanner.editor import RoomEditor
from roomplanner.models import Room


@pytest.fixture
def room():
    """6 x 4 m room with the default 0.1 m walls"""
    return Room(6.0, 4.0)


@pytest.fixture
def editor(room):
    return RoomEditor(room)


def box_inside(box, room, eps=1e-9):
    return (box.left >= -eps and box.top >= -eps and
            box.right <= room.width + eps and box.bottom <= room.height + eps)
