"""
Geometry primitives - axis-aligned boxes and 90° rotation steps
"""

import math

from shapely.geometry import box

HALF_PI = math.pi / 2
TWO_PI = math.pi * 2


class Box:
    """Axis-aligned box in room-interior meters (top-left origin, y down)"""

    __slots__ = ('x', 'y', 'w', 'h')

    def __init__(self, x, y, w, h):
        self.x = x
        self.y = y
        self.w = w
        self.h = h

    @property
    def left(self):
        return self.x

    @property
    def top(self):
        return self.y

    @property
    def right(self):
        return self.x + self.w

    @property
    def bottom(self):
        return self.y + self.h

    def polygon(self):
        """Shapely polygon of this box"""
        return box(self.left, self.top, self.right, self.bottom)

    def contains_point(self, x, y):
        """Closed containment test, edges count as inside"""
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def within(self, left, top, right, bottom):
        """Check if the box lies inside the given bounds"""
        return (self.left >= left and self.top >= top and
                self.right <= right and self.bottom <= bottom)

    def as_tuple(self):
        return (self.x, self.y, self.w, self.h)

    def __eq__(self, other):
        if not isinstance(other, Box):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self):
        return f"Box(x={self.x!r}, y={self.y!r}, w={self.w!r}, h={self.h!r})"


def normalize_rotation_step(angle):
    """Map any angle in radians to the nearest 90° step (0..3)"""
    rot = angle % TWO_PI
    # halves round up, so 45° lands on step 1
    return int(math.floor(rot / HALF_PI + 0.5)) % 4


def is_portrait(step):
    """Odd steps swap local width and height in world space"""
    return step % 2 == 1


def intersects(a, b):
    """
    Open-interval overlap test.
    Boxes that only share an edge or a corner do not intersect.
    """
    poly_a = a.polygon()
    poly_b = b.polygon()
    return poly_a.intersects(poly_b) and not poly_a.touches(poly_b)


def overlap_area(a, b):
    """Area shared by two boxes (0 when they only touch)"""
    return a.polygon().intersection(b.polygon()).area
