"""
Room Model - room, openings, beds and furniture

Positions are meters relative to the room interior's top-left corner.
Bed and furniture (x_m, y_m) is the top-left of the rotated base box;
nightstands never move it.
"""

import itertools
import math

from . import config
from .errors import InvalidDimension, InvalidWallSide
from .geometry import HALF_PI, normalize_rotation_step

WALL_SIDES = ('N', 'E', 'S', 'W')  # clockwise from top


def _require_positive(name, value):
    if value is None or not math.isfinite(value) or value <= 0:
        raise InvalidDimension(f"{name} must be a positive number, got {value!r}")
    return value


def _require_wall_side(side):
    if side not in WALL_SIDES:
        raise InvalidWallSide(f"wall side must be one of {', '.join(WALL_SIDES)}, got {side!r}")
    return side


class Opening:
    """Window or door set into one wall"""

    kind = None
    id_prefix = 'opening'

    def __init__(self, wall_side, offset_m, length_m, id=None):
        self.id = id
        self.wall_side = _require_wall_side(wall_side)
        self.offset_m = max(0.0, offset_m)
        self.length_m = _require_positive('length_m', length_m)

    @property
    def is_door(self):
        return self.kind == 'door'

    def __repr__(self):
        return (f"{type(self).__name__}(id={self.id!r}, wall_side={self.wall_side!r}, "
                f"offset_m={self.offset_m!r}, length_m={self.length_m!r})")


class Window(Opening):
    kind = 'window'
    id_prefix = 'window'

    @classmethod
    def create(cls, wall_side, offset_m):
        return cls(wall_side, offset_m, config.DEFAULT_WINDOW_LENGTH_M)


class Door(Opening):
    """
    Door opening with swing settings.
    open_fraction 0 is closed, 1 is the widest swing.
    """

    kind = 'door'
    id_prefix = 'door'

    def __init__(self, wall_side, offset_m, length_m, id=None, open_fraction=0.0,
                 hinge_at_start=True, mirror_horizontal=False, mirror_vertical=False):
        super().__init__(wall_side, offset_m, length_m, id=id)
        self.open_fraction = min(1.0, max(0.0, open_fraction))
        self.hinge_at_start = hinge_at_start
        self.mirror_horizontal = mirror_horizontal
        self.mirror_vertical = mirror_vertical

    @classmethod
    def create(cls, wall_side, offset_m):
        return cls(wall_side, offset_m, config.DEFAULT_DOOR_LENGTH_M)


class _Placed:
    """Shared position and rotation handling for beds and furniture"""

    id_prefix = None

    def __init__(self, x_m, y_m, width_m, height_m, rotation_rad=0.0, id=None):
        self.id = id
        self.x_m = x_m
        self.y_m = y_m
        self.width_m = _require_positive('width_m', width_m)
        self.height_m = _require_positive('height_m', height_m)
        self.rotation_step = normalize_rotation_step(rotation_rad)

    @property
    def rotation_rad(self):
        return self.rotation_step * HALF_PI

    def snapshot(self):
        """Position and rotation, enough to undo a move or a rotate"""
        return (self.x_m, self.y_m, self.rotation_step)

    def restore(self, snapshot):
        self.x_m, self.y_m, self.rotation_step = snapshot


class Bed(_Placed):
    """Bed with optional nightstands on its local left/right sides"""

    id_prefix = 'bed'

    def __init__(self, x_m, y_m, width_m, height_m, rotation_rad=0.0, id=None,
                 nightstand_left=False, nightstand_right=False,
                 nightstand_size_m=config.DEFAULT_NIGHTSTAND_SIZE_M):
        super().__init__(x_m, y_m, width_m, height_m, rotation_rad, id=id)
        if nightstand_size_m is None or not math.isfinite(nightstand_size_m) or nightstand_size_m < 0:
            raise InvalidDimension(f"nightstand_size_m must be >= 0, got {nightstand_size_m!r}")
        self.nightstand_left = nightstand_left
        self.nightstand_right = nightstand_right
        self.nightstand_size_m = nightstand_size_m

    @classmethod
    def create_default(cls, center_x_m, center_y_m):
        """Default bed centered on a point"""
        width = config.DEFAULT_BED_WIDTH_M
        height = config.DEFAULT_BED_HEIGHT_M
        return cls(center_x_m - width / 2, center_y_m - height / 2, width, height)

    def __repr__(self):
        return (f"Bed(id={self.id!r}, x_m={self.x_m!r}, y_m={self.y_m!r}, "
                f"width_m={self.width_m!r}, height_m={self.height_m!r}, "
                f"rotation_step={self.rotation_step!r})")


class Furniture(_Placed):
    id_prefix = 'f'

    def __init__(self, x_m, y_m, width_m, height_m, rotation_rad=0.0, id=None,
                 label='Item'):
        super().__init__(x_m, y_m, width_m, height_m, rotation_rad, id=id)
        self.label = label

    @classmethod
    def create_default(cls, center_x_m, center_y_m):
        """Default table centered on a point"""
        width = config.DEFAULT_FURNITURE_WIDTH_M
        height = config.DEFAULT_FURNITURE_HEIGHT_M
        return cls(center_x_m - width / 2, center_y_m - height / 2, width, height,
                   label=config.DEFAULT_FURNITURE_LABEL)

    def __repr__(self):
        return (f"Furniture(id={self.id!r}, label={self.label!r}, x_m={self.x_m!r}, "
                f"y_m={self.y_m!r}, width_m={self.width_m!r}, height_m={self.height_m!r}, "
                f"rotation_step={self.rotation_step!r})")


class Room:
    """
    Rectangular room and the sole owner of its openings, beds and furniture.
    List order is z-order: later items sit on top.
    """

    def __init__(self, width, height, wall_thickness_m=config.DEFAULT_WALL_THICKNESS_M,
                 id_factory=None):
        self.width = _require_positive('width', width)
        self.height = _require_positive('height', height)
        self.wall_thickness_m = _require_positive('wall_thickness_m', wall_thickness_m)
        self.openings = []
        self.beds = []
        self.furniture = []
        self._id_factory = id_factory
        self._counter = itertools.count(1)
        self._reserved = set()

    def wall_length(self, side):
        """Run length of a wall: width for N/S, height for E/W"""
        if _require_wall_side(side) in ('N', 'S'):
            return self.width
        return self.height

    # --- ids ---

    def _ids_in_use(self):
        used = {e.id for e in itertools.chain(self.openings, self.beds, self.furniture)}
        return used | self._reserved

    def reserve_ids(self, ids):
        """Keep generated ids clear of ids that are about to be loaded"""
        self._reserved.update(i for i in ids if i)

    def new_id(self, prefix):
        """Next unused id for this room"""
        if self._id_factory is not None:
            return self._id_factory(prefix)
        used = self._ids_in_use()
        while True:
            candidate = f"{prefix}-{next(self._counter)}"
            if candidate not in used:
                return candidate

    def _adopt(self, entity):
        if entity.id is None:
            entity.id = self.new_id(entity.id_prefix)

    # --- adding ---

    def add_opening(self, opening):
        from .clamping import clamp_opening
        self._adopt(opening)
        self.openings.append(opening)
        clamp_opening(self, opening)
        return opening

    def add_bed(self, bed):
        from .clamping import clamp_bed
        self._adopt(bed)
        self.beds.append(bed)
        clamp_bed(self, bed)
        return bed

    def add_furniture(self, item):
        from .clamping import clamp_furniture
        self._adopt(item)
        self.furniture.append(item)
        clamp_furniture(self, item)
        return item

    def place_bed(self, bed):
        """Add a bed and move it off any furniture it lands on"""
        from .overlap import resolve_placement
        self.add_bed(bed)
        return resolve_placement(self, bed)

    def place_furniture(self, item):
        """Add a furniture item and move it off any bed it lands on"""
        from .overlap import resolve_placement
        self.add_furniture(item)
        return resolve_placement(self, item)

    # --- lookup ---

    def find(self, entity_id):
        for entity in itertools.chain(self.openings, self.beds, self.furniture):
            if entity.id == entity_id:
                return entity
        return None

    def remove(self, entity):
        """Drop an entity from whichever collection holds it"""
        for collection in (self.openings, self.beds, self.furniture):
            if entity in collection:
                collection.remove(entity)
                return True
        return False

    def entity_at(self, x_m, y_m):
        """Topmost bed or furniture item under a point, furniture drawn above beds"""
        from .footprint import contains_point
        for item in reversed(self.furniture):
            if contains_point(item, x_m, y_m):
                return item
        for bed in reversed(self.beds):
            if contains_point(bed, x_m, y_m):
                return bed
        return None

    def opening_at(self, x_m, y_m):
        """Topmost opening whose wall band contains a point"""
        from .footprint import opening_rect
        for opening in reversed(self.openings):
            if opening_rect(self, opening).contains_point(x_m, y_m):
                return opening
        return None

    def __repr__(self):
        return (f"Room(width={self.width!r}, height={self.height!r}, "
                f"openings={len(self.openings)}, beds={len(self.beds)}, "
                f"furniture={len(self.furniture)})")
