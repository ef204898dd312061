"""
Drawing support - what a renderer needs to place a room on screen

Nothing here feeds back into geometry.
"""

import math

from . import config
from .footprint import opening_rect


class RoomMetrics:
    """Pixel layout of a room centered in a view"""

    def __init__(self, inner_w_px, inner_h_px, wall_px, outer_w_px, outer_h_px,
                 origin_x, origin_y, scale):
        self.inner_w_px = inner_w_px
        self.inner_h_px = inner_h_px
        self.wall_px = wall_px
        self.outer_w_px = outer_w_px
        self.outer_h_px = outer_h_px
        self.origin_x = origin_x
        self.origin_y = origin_y
        self.scale = scale

    def to_pixels(self, x_m, y_m):
        """Interior meters to view pixels"""
        return (self.origin_x + self.wall_px + x_m * self.scale,
                self.origin_y + self.wall_px + y_m * self.scale)

    def to_meters(self, px, py):
        """View pixels to interior meters (outside 0..W/0..H means inside a wall)"""
        return ((px - self.origin_x - self.wall_px) / self.scale,
                (py - self.origin_y - self.wall_px) / self.scale)


def compute_room_metrics(room, scale, view_width, view_height):
    inner_w = room.width * scale
    inner_h = room.height * scale
    wall_px = max(1.0, room.wall_thickness_m * scale)
    outer_w = inner_w + wall_px * 2
    outer_h = inner_h + wall_px * 2
    return RoomMetrics(inner_w, inner_h, wall_px, outer_w, outer_h,
                       (view_width - outer_w) / 2, (view_height - outer_h) / 2, scale)


class DoorSwing:
    """
    Door leaf placement in interior meters.
    The leaf starts along base_angle and turns by sweep (signed radians).
    """

    def __init__(self, hinge_x, hinge_y, base_angle, sweep, radius):
        self.hinge_x = hinge_x
        self.hinge_y = hinge_y
        self.base_angle = base_angle
        self.sweep = sweep
        self.radius = radius

    @property
    def leaf_end(self):
        angle = self.base_angle + self.sweep
        return (self.hinge_x + math.cos(angle) * self.radius,
                self.hinge_y + math.sin(angle) * self.radius)


def door_swing(room, door):
    """Hinge point and swing of a door, opening into the room"""
    rect = opening_rect(room, door)
    angle = min(1.0, max(0.0, door.open_fraction)) * config.DOOR_MAX_ANGLE_RAD
    side = door.wall_side
    at_start = door.hinge_at_start

    if side == 'N':
        hx = rect.left if at_start else rect.right
        hy = rect.bottom
        base = 0.0 if at_start else math.pi
        sign = 1 if at_start else -1
        if door.mirror_horizontal:
            sign *= -1
    elif side == 'S':
        hx = rect.left if at_start else rect.right
        hy = rect.top
        base = 0.0 if at_start else math.pi
        sign = -1 if at_start else 1
        if door.mirror_horizontal:
            sign *= -1
    elif side == 'W':
        hx = rect.right
        hy = rect.top if at_start else rect.bottom
        base = math.pi / 2 if at_start else -math.pi / 2
        sign = -1 if at_start else 1
        if door.mirror_vertical:
            sign *= -1
    else:  # E
        hx = rect.left
        hy = rect.top if at_start else rect.bottom
        base = math.pi / 2 if at_start else -math.pi / 2
        sign = 1 if at_start else -1
        if door.mirror_vertical:
            sign *= -1

    return DoorSwing(hx, hy, base, sign * angle, door.length_m)
