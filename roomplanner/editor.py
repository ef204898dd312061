"""
Room Editor - the operations a UI calls to change a room

Live drags revert to the last safe position on collision. Discrete edits
(rotate, set position, resize, nightstand toggle) search for a free spot
and fall back to the pre-edit state when there is none.
"""

import math

from . import config
from .clamping import clamp, clamp_opening
from .footprint import center, footprint
from .geometry import normalize_rotation_step
from .errors import InvalidWallSide
from .models import Bed, Door, WALL_SIDES
from .overlap import ACCEPTED, REVERTED, collides, resolve_placement
from .transfer import OpeningDrag


def _usable(value, minimum, inclusive=False):
    """Form values that are not finite or too small are ignored"""
    if value is None:
        return False
    try:
        value = float(value)
    except (TypeError, ValueError):
        return False
    if not math.isfinite(value):
        return False
    return value >= minimum if inclusive else value > minimum


class RoomEditor:
    """Editing session over one room, one active drag at a time"""

    def __init__(self, room, snap_distance_m=None):
        self.room = room
        self.snap_distance_m = config.WALL_SNAP_M if snap_distance_m is None else snap_distance_m
        self.last_safe = {}
        self.dragging = None
        self._grab = (0.0, 0.0)

    # ------------------------------------------------------------------
    # Bed / furniture drag
    # ------------------------------------------------------------------

    def begin_drag(self, entity, pointer_x_m, pointer_y_m):
        """Start dragging; the pointer keeps its offset from the body center"""
        self.last_safe[entity.id] = entity.snapshot()
        cx, cy = center(entity)
        self._grab = (pointer_x_m - cx, pointer_y_m - cy)
        self.dragging = entity

    def drag_to(self, pointer_x_m, pointer_y_m):
        """Move the dragged entity under the pointer"""
        entity = self.dragging
        if entity is None:
            return REVERTED

        fp = footprint(entity)
        cx = pointer_x_m - self._grab[0]
        cy = pointer_y_m - self._grab[1]
        entity.x_m = cx - fp.base_w / 2
        entity.y_m = cy - fp.base_h / 2

        self._snap_to_walls(entity)
        clamp(self.room, entity)

        if collides(self.room, entity):
            safe = self.last_safe.get(entity.id)
            if safe is not None:
                entity.restore(safe)
            return REVERTED

        self.last_safe[entity.id] = entity.snapshot()
        return ACCEPTED

    def end_drag(self):
        entity = self.dragging
        self.dragging = None
        return entity

    def forget(self, entity):
        """Drop the drag snapshot kept for an entity"""
        self.last_safe.pop(entity.id, None)
        if self.dragging is entity:
            self.dragging = None

    def remove(self, entity):
        """Take an entity out of the room along with its snapshot"""
        self.forget(entity)
        return self.room.remove(entity)

    def _snap_to_walls(self, entity):
        """Pull footprint edges flush with walls that are close enough"""
        fp = footprint(entity)
        off = fp.offsets
        box = fp.box
        snap = self.snap_distance_m
        room = self.room

        if abs(box.left) < snap:
            entity.x_m = -off.left
        if abs(box.top) < snap:
            entity.y_m = -off.top
        if abs(room.width - box.right) < snap:
            entity.x_m = room.width - fp.base_w - off.right
        if abs(room.height - box.bottom) < snap:
            entity.y_m = room.height - fp.base_h - off.bottom

    # ------------------------------------------------------------------
    # Discrete edits
    # ------------------------------------------------------------------

    def _commit(self, entity, mutate):
        saved = dict(vars(entity))
        mutate(entity)
        clamp(self.room, entity)

        if not collides(self.room, entity):
            outcome = ACCEPTED
        else:
            outcome = resolve_placement(self.room, entity)
            if outcome == REVERTED:
                vars(entity).update(saved)
                clamp(self.room, entity)

        self.last_safe[entity.id] = entity.snapshot()
        return outcome

    def rotate(self, entity):
        """Quarter turn clockwise"""
        def turn(e):
            e.rotation_step = (e.rotation_step + 1) % 4
        return self._commit(entity, turn)

    def set_rotation(self, entity, rotation_rad):
        if not _usable(rotation_rad, -math.inf):
            return REVERTED
        step = normalize_rotation_step(float(rotation_rad))

        def apply(e):
            e.rotation_step = step
        return self._commit(entity, apply)

    def set_position(self, entity, x_m, y_m):
        def move(e):
            e.x_m = x_m
            e.y_m = y_m
        return self._commit(entity, move)

    def resize_bed(self, bed, width_m=None, height_m=None, nightstand_size_m=None):
        def apply(b):
            if _usable(width_m, config.MIN_BED_SIDE_M):
                b.width_m = float(width_m)
            if _usable(height_m, config.MIN_BED_SIDE_M):
                b.height_m = float(height_m)
            if _usable(nightstand_size_m, config.MIN_NIGHTSTAND_SIZE_M, inclusive=True):
                b.nightstand_size_m = float(nightstand_size_m)
        return self._commit(bed, apply)

    def resize_furniture(self, item, width_m=None, height_m=None):
        def apply(f):
            if _usable(width_m, config.MIN_FURNITURE_SIDE_M):
                f.width_m = float(width_m)
            if _usable(height_m, config.MIN_FURNITURE_SIDE_M):
                f.height_m = float(height_m)
        return self._commit(item, apply)

    def resize(self, entity, width_m=None, height_m=None):
        if isinstance(entity, Bed):
            return self.resize_bed(entity, width_m, height_m)
        return self.resize_furniture(entity, width_m, height_m)

    def set_nightstands(self, bed, left=None, right=None):
        def apply(b):
            if left is not None:
                b.nightstand_left = bool(left)
            if right is not None:
                b.nightstand_right = bool(right)
        return self._commit(bed, apply)

    def toggle_nightstand(self, bed, side):
        if side == 'left':
            return self.set_nightstands(bed, left=not bed.nightstand_left)
        if side == 'right':
            return self.set_nightstands(bed, right=not bed.nightstand_right)
        raise ValueError(f"nightstand side must be 'left' or 'right', got {side!r}")

    def set_label(self, item, label):
        item.label = label or ''
        return ACCEPTED

    # ------------------------------------------------------------------
    # Openings
    # ------------------------------------------------------------------

    def begin_opening_drag(self, opening, pointer_x_m, pointer_y_m):
        return OpeningDrag(self.room, opening, pointer_x_m, pointer_y_m)

    def set_opening_offset(self, opening, offset_m):
        opening.offset_m = offset_m
        clamp_opening(self.room, opening)
        return ACCEPTED

    def set_opening_end_distance(self, opening, end_m):
        """Place the opening by its distance from the far end of the wall"""
        if not _usable(end_m, 0.0, inclusive=True):
            return REVERTED
        run = self.room.wall_length(opening.wall_side)
        opening.offset_m = max(0.0, run - opening.length_m - end_m)
        clamp_opening(self.room, opening)
        return ACCEPTED

    def set_opening_length(self, opening, length_m):
        if not _usable(length_m, 0.0):
            return REVERTED
        opening.length_m = float(length_m)
        clamp_opening(self.room, opening)
        return ACCEPTED

    def set_opening_wall(self, opening, side):
        if side not in WALL_SIDES:
            raise InvalidWallSide(f"wall side must be one of {', '.join(WALL_SIDES)}, got {side!r}")
        opening.wall_side = side
        clamp_opening(self.room, opening)
        return ACCEPTED

    def set_door_open_fraction(self, door, fraction):
        if not isinstance(door, Door) or not _usable(fraction, -math.inf):
            return REVERTED
        door.open_fraction = min(1.0, max(0.0, float(fraction)))
        return ACCEPTED

    def set_door_hinge(self, door, at_start):
        if not isinstance(door, Door):
            return REVERTED
        door.hinge_at_start = bool(at_start)
        return ACCEPTED

    def toggle_door_mirror(self, door, axis):
        """Flip the swing: axis 'H' for N/S walls, 'V' for E/W walls"""
        if not isinstance(door, Door):
            return REVERTED
        if axis == 'H':
            door.mirror_horizontal = not door.mirror_horizontal
        elif axis == 'V':
            door.mirror_vertical = not door.mirror_vertical
        else:
            raise ValueError(f"mirror axis must be 'H' or 'V', got {axis!r}")
        return ACCEPTED

