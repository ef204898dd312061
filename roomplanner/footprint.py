"""
Footprint Computation - the world-space box every other part works with

Clamping, overlap checks, hit-testing and rendering all read geometry from
here so they agree on where an entity actually sits.
"""

import math

from .geometry import Box, is_portrait
from .models import Bed, Furniture


class Offsets:
    """How far the footprint sticks out past the base box on each side"""

    __slots__ = ('left', 'right', 'top', 'bottom')

    def __init__(self, left=0.0, right=0.0, top=0.0, bottom=0.0):
        self.left = left
        self.right = right
        self.top = top
        self.bottom = bottom

    def __repr__(self):
        return (f"Offsets(left={self.left!r}, right={self.right!r}, "
                f"top={self.top!r}, bottom={self.bottom!r})")


class Footprint:
    """
    Derived geometry of a bed or furniture item.

    Attributes:
        step: rotation step 0..3
        base_w, base_h: rotated size of the body alone
        offsets: nightstand extension (left/top negative, right/bottom positive)
        box: world AABB including extensions
    """

    __slots__ = ('step', 'base_w', 'base_h', 'offsets', 'box')

    def __init__(self, step, base_w, base_h, offsets, box):
        self.step = step
        self.base_w = base_w
        self.base_h = base_h
        self.offsets = offsets
        self.box = box

    @property
    def portrait(self):
        return is_portrait(self.step)


def base_size(entity):
    """Rotated width/height of the body"""
    if is_portrait(entity.rotation_step):
        return entity.height_m, entity.width_m
    return entity.width_m, entity.height_m


def nightstand_offsets(bed):
    """Map local left/right nightstands to world sides for the bed's rotation"""
    off = Offsets()
    ns = bed.nightstand_size_m
    step = bed.rotation_step

    if step == 0:
        if bed.nightstand_left:
            off.left = -ns
        if bed.nightstand_right:
            off.right = ns
    elif step == 1:
        if bed.nightstand_left:
            off.top = -ns
        if bed.nightstand_right:
            off.bottom = ns
    elif step == 2:
        if bed.nightstand_left:
            off.right = ns
        if bed.nightstand_right:
            off.left = -ns
    else:  # 3
        if bed.nightstand_left:
            off.bottom = ns
        if bed.nightstand_right:
            off.top = -ns

    return off


def _build(entity, off):
    base_w, base_h = base_size(entity)
    left = entity.x_m + off.left
    top = entity.y_m + off.top
    right = entity.x_m + base_w + off.right
    bottom = entity.y_m + base_h + off.bottom
    return Footprint(entity.rotation_step, base_w, base_h, off,
                     Box(left, top, right - left, bottom - top))


def bed_footprint(bed):
    return _build(bed, nightstand_offsets(bed))


def furniture_footprint(item):
    return _build(item, Offsets())


def footprint(entity):
    """Footprint of a bed or furniture item"""
    if isinstance(entity, Bed):
        return bed_footprint(entity)
    if isinstance(entity, Furniture):
        return furniture_footprint(entity)
    raise TypeError(f"no footprint for {type(entity).__name__}")


def center(entity):
    """Center of the rotated body, nightstands excluded"""
    base_w, base_h = base_size(entity)
    return entity.x_m + base_w / 2, entity.y_m + base_h / 2


def contains_point(entity, x_m, y_m):
    """
    Hit-test a point against the body in its local frame.
    Nightstands are not part of the hit area.
    """
    cx, cy = center(entity)
    dx = x_m - cx
    dy = y_m - cy
    angle = -entity.rotation_rad
    cos = math.cos(angle)
    sin = math.sin(angle)
    lx = dx * cos - dy * sin + entity.width_m / 2
    ly = dx * sin + dy * cos + entity.height_m / 2
    eps = 1e-9
    return -eps <= lx <= entity.width_m + eps and -eps <= ly <= entity.height_m + eps


def opening_rect(room, opening):
    """Wall band an opening occupies, in interior meters (walls lie outside 0..W, 0..H)"""
    t = room.wall_thickness_m
    side = opening.wall_side

    if side == 'N':
        return Box(opening.offset_m, -t, opening.length_m, t)
    elif side == 'S':
        return Box(opening.offset_m, room.height, opening.length_m, t)
    elif side == 'W':
        return Box(-t, opening.offset_m, t, opening.length_m)
    else:  # E
        return Box(room.width, opening.offset_m, t, opening.length_m)
