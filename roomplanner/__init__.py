"""Room Planner - room layout editing core: rooms, openings, beds and furniture."""

__version__ = "0.1.0"

from .errors import InvalidDimension, InvalidWallSide, LayoutError
from .models import Bed, Door, Furniture, Opening, Room, Window
from .overlap import ACCEPTED, RELOCATED, REVERTED
from .editor import RoomEditor
from .serialize import deserialize_room, serialize_room

__all__ = [
    "ACCEPTED",
    "Bed",
    "Door",
    "Furniture",
    "InvalidDimension",
    "InvalidWallSide",
    "LayoutError",
    "Opening",
    "RELOCATED",
    "REVERTED",
    "Room",
    "RoomEditor",
    "Window",
    "deserialize_room",
    "serialize_room",
]
