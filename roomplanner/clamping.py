"""
Containment Clamping - keep entities inside the room

Clamping always succeeds. When an entity is larger than the room it is
pinned to the lower bound.
"""

from .footprint import base_size, nightstand_offsets
from .models import Bed, Furniture, Opening


def _clamp(value, low, high):
    return max(low, min(value, max(low, high)))


def clamp_bed(room, bed):
    """Clamp so the body plus nightstands stays within [0, W] x [0, H]"""
    base_w, base_h = base_size(bed)
    off = nightstand_offsets(bed)

    min_x = -off.left
    max_x = room.width - base_w - off.right
    min_y = -off.top
    max_y = room.height - base_h - off.bottom

    bed.x_m = _clamp(bed.x_m, min_x, max_x)
    bed.y_m = _clamp(bed.y_m, min_y, max_y)
    return bed


def clamp_furniture(room, item):
    base_w, base_h = base_size(item)
    item.x_m = _clamp(item.x_m, 0.0, room.width - base_w)
    item.y_m = _clamp(item.y_m, 0.0, room.height - base_h)
    return item


def clamp_opening(room, opening):
    """Keep the opening's span on its wall run"""
    run = room.wall_length(opening.wall_side)
    opening.offset_m = _clamp(opening.offset_m, 0.0, max(0.0, run - opening.length_m))
    return opening


def clamp(room, entity):
    """Clamp any room entity"""
    if isinstance(entity, Bed):
        return clamp_bed(room, entity)
    if isinstance(entity, Furniture):
        return clamp_furniture(room, entity)
    if isinstance(entity, Opening):
        return clamp_opening(room, entity)
    raise TypeError(f"cannot clamp {type(entity).__name__}")
