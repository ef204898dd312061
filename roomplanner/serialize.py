"""
Room records - the persisted shape of a room

Keys follow the stored project format (camelCase, meters, radians).
Loading always goes through Room.add_* so a stored room that was edited
by hand still comes back inside its walls.
"""

import json
import math

from . import config
from .errors import InvalidDimension
from .models import Bed, Door, Furniture, Room, Window


def _number(value, default):
    """Optional numeric field, default when missing or malformed"""
    if isinstance(value, bool):
        return default
    try:
        value = float(value)
    except (TypeError, ValueError):
        return default
    return value if math.isfinite(value) else default


def _positive(value, default):
    value = _number(value, default)
    return value if value > 0 else default


def _non_negative(value, default):
    value = _number(value, default)
    return value if value >= 0 else default


def _entity_id(record):
    entity_id = record.get('id')
    return entity_id if isinstance(entity_id, str) and entity_id else None


def _required(record, key):
    value = _number(record.get(key), None)
    if value is None:
        raise InvalidDimension(f"missing or malformed {key!r}")
    return value


# ----------------------------------------------------------------------------
# Entity -> record
# ----------------------------------------------------------------------------

def opening_to_record(opening):
    is_door = opening.is_door
    return {
        'id': opening.id,
        'type': opening.kind,
        'wallSide': opening.wall_side,
        'offsetM': opening.offset_m,
        'lengthM': opening.length_m,
        'doorOpen01': opening.open_fraction if is_door else 0,
        'doorHingeStart': bool(opening.hinge_at_start) if is_door else False,
        'doorMirrorH': bool(opening.mirror_horizontal) if is_door else False,
        'doorMirrorV': bool(opening.mirror_vertical) if is_door else False,
    }


def bed_to_record(bed):
    return {
        'id': bed.id,
        'xM': bed.x_m,
        'yM': bed.y_m,
        'widthM': bed.width_m,
        'heightM': bed.height_m,
        'rotationRad': bed.rotation_rad,
        'nightstandLeft': bool(bed.nightstand_left),
        'nightstandRight': bool(bed.nightstand_right),
        'nightstandSizeM': bed.nightstand_size_m,
    }


def furniture_to_record(item):
    return {
        'id': item.id,
        'xM': item.x_m,
        'yM': item.y_m,
        'widthM': item.width_m,
        'heightM': item.height_m,
        'rotationRad': item.rotation_rad,
        'label': item.label,
    }


def serialize_room(room):
    return {
        'width': room.width,
        'height': room.height,
        'wallThicknessM': room.wall_thickness_m,
        'openings': [opening_to_record(o) for o in room.openings],
        'beds': [bed_to_record(b) for b in room.beds],
        'furniture': [furniture_to_record(f) for f in room.furniture],
    }


# ----------------------------------------------------------------------------
# Record -> entity (not clamped, not attached to a room)
# ----------------------------------------------------------------------------

def opening_from_record(record):
    side = record.get('wallSide')
    offset = _number(record.get('offsetM'), 0.0)
    entity_id = _entity_id(record)

    if record.get('type') == 'door':
        return Door(side, offset, _positive(record.get('lengthM'), config.DEFAULT_DOOR_LENGTH_M),
                    id=entity_id,
                    open_fraction=_number(record.get('doorOpen01'), 0.0),
                    hinge_at_start=bool(record.get('doorHingeStart', False)),
                    mirror_horizontal=bool(record.get('doorMirrorH', False)),
                    mirror_vertical=bool(record.get('doorMirrorV', False)))

    return Window(side, offset, _positive(record.get('lengthM'), config.DEFAULT_WINDOW_LENGTH_M),
                  id=entity_id)


def bed_from_record(record):
    return Bed(_number(record.get('xM'), 0.0),
               _number(record.get('yM'), 0.0),
               _required(record, 'widthM'),
               _required(record, 'heightM'),
               rotation_rad=_number(record.get('rotationRad'), 0.0),
               id=_entity_id(record),
               nightstand_left=bool(record.get('nightstandLeft', False)),
               nightstand_right=bool(record.get('nightstandRight', False)),
               nightstand_size_m=_non_negative(record.get('nightstandSizeM'),
                                                config.DEFAULT_NIGHTSTAND_SIZE_M))


def furniture_from_record(record):
    label = record.get('label')
    return Furniture(_number(record.get('xM'), 0.0),
                     _number(record.get('yM'), 0.0),
                     _required(record, 'widthM'),
                     _required(record, 'heightM'),
                     rotation_rad=_number(record.get('rotationRad'), 0.0),
                     id=_entity_id(record),
                     label=label if isinstance(label, str) else 'Item')


def _records(data, key):
    """Entity records under key, skipping anything that is not an object"""
    items = data.get(key)
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


def deserialize_room(data, id_factory=None):
    """Rebuild a room, clamping every entity on the way in"""
    room = Room(_required(data, 'width'),
                _required(data, 'height'),
                _positive(data.get('wallThicknessM'), config.DEFAULT_WALL_THICKNESS_M),
                id_factory=id_factory)

    room.reserve_ids(_entity_id(record) for key in ('openings', 'beds', 'furniture')
                     for record in _records(data, key))

    for record in _records(data, 'openings'):
        room.add_opening(opening_from_record(record))
    for record in _records(data, 'beds'):
        room.add_bed(bed_from_record(record))
    for record in _records(data, 'furniture'):
        room.add_furniture(furniture_from_record(record))

    return room


# ----------------------------------------------------------------------------
# Files
# ----------------------------------------------------------------------------

def load_room(path):
    with open(path, 'r') as f:
        return deserialize_room(json.load(f))


def save_room(room, path):
    with open(path, 'w') as f:
        json.dump(serialize_room(room), f, indent=2)
