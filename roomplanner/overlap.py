"""
Overlap Resolution - beds vs furniture

Only bed/furniture pairs are constrained. Beds may overlap beds and
furniture may overlap furniture.
"""

from . import config
from .clamping import clamp
from .footprint import bed_footprint, furniture_footprint
from .geometry import intersects
from .models import Bed, Furniture

# Edit outcomes
ACCEPTED = 'accepted'
REVERTED = 'reverted'
RELOCATED = 'relocated'


def bed_intersects_any_furniture(room, bed):
    a = bed_footprint(bed).box
    for item in room.furniture:
        if intersects(a, furniture_footprint(item).box):
            return True
    return False


def furniture_intersects_any_bed(room, item):
    b = furniture_footprint(item).box
    for bed in room.beds:
        if intersects(bed_footprint(bed).box, b):
            return True
    return False


def colliding_pairs(room):
    """Every (bed, furniture) pair whose footprints overlap"""
    pairs = []
    for bed in room.beds:
        a = bed_footprint(bed).box
        for item in room.furniture:
            if intersects(a, furniture_footprint(item).box):
                pairs.append((bed, item))
    return pairs


def collides(room, entity):
    """Check an entity against the opposite category"""
    if isinstance(entity, Bed):
        return bed_intersects_any_furniture(room, entity)
    if isinstance(entity, Furniture):
        return furniture_intersects_any_bed(room, entity)
    return False


def ring_offsets(step=None, max_radius=None):
    """
    Candidate offsets at growing radius:
    (+d, 0), (-d, 0), (0, +d), (0, -d) for d = r * step, r = 1..max_radius
    """
    step = config.SEARCH_STEP_M if step is None else step
    max_radius = config.SEARCH_MAX_RADIUS if max_radius is None else max_radius

    offsets = []
    for r in range(1, max_radius + 1):
        d = r * step
        offsets.extend([(d, 0.0), (-d, 0.0), (0.0, d), (0.0, -d)])
    return offsets


def resolve_placement(room, entity):
    """
    Move a bed or furniture item off the opposite category.

    Tries the ring offsets in order and keeps the first clamped position
    that is free. When none is, the entity goes back to where it started
    (clamped) and the overlap is left in place.

    Returns ACCEPTED (no conflict), RELOCATED or REVERTED.
    """
    clamp(room, entity)
    if not collides(room, entity):
        return ACCEPTED

    x0, y0 = entity.x_m, entity.y_m
    for dx, dy in ring_offsets():
        entity.x_m = x0 + dx
        entity.y_m = y0 + dy
        clamp(room, entity)
        if not collides(room, entity):
            return RELOCATED

    entity.x_m = x0
    entity.y_m = y0
    clamp(room, entity)
    return REVERTED
