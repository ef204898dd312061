"""
Opening Wall-Transfer - sliding windows and doors around the perimeter

Offsets run along the screen axis: left to right on N and S, top to
bottom on E and W. Running off the start of N/S lands on W, off the end
on E; running off the start of E/W lands on N, off the end on S.
"""

from .clamping import clamp_opening

HORIZONTAL = ('N', 'S')

# side -> (wall reached before the start, wall reached past the end)
ADJACENT = {
    'N': ('W', 'E'),
    'S': ('W', 'E'),
    'W': ('N', 'S'),
    'E': ('N', 'S'),
}


def _limit(room, side, length_m):
    return max(0.0, room.wall_length(side) - length_m)


def transfer_opening(room, opening, along_m):
    """
    Apply a raw along-wall position to an opening.

    Inside [0, run - length] the offset is simply set. Past either end the
    opening moves to the adjacent wall with the overflow as its new offset,
    capped at that wall's own limit.

    Returns True when the opening changed walls.
    """
    side = opening.wall_side
    limit = _limit(room, side, opening.length_m)
    before, after = ADJACENT[side]

    if along_m < 0:
        opening.wall_side = before
        opening.offset_m = min(-along_m, _limit(room, before, opening.length_m))
        return True
    if along_m > limit:
        opening.wall_side = after
        opening.offset_m = min(along_m - limit, _limit(room, after, opening.length_m))
        return True

    opening.offset_m = along_m
    return False


def _axis(side, x_m, y_m):
    return x_m if side in HORIZONTAL else y_m


class OpeningDrag:
    """
    One drag gesture on an opening.
    Pointer coordinates are interior meters and may lie inside the walls.
    """

    def __init__(self, room, opening, pointer_x_m, pointer_y_m):
        self.room = room
        self.opening = opening
        self.grab_m = _axis(opening.wall_side, pointer_x_m, pointer_y_m) - opening.offset_m

    def move(self, pointer_x_m, pointer_y_m):
        """Follow the pointer; returns True when the opening changed walls"""
        opening = self.opening
        along = _axis(opening.wall_side, pointer_x_m, pointer_y_m) - self.grab_m
        moved = transfer_opening(self.room, opening, along)
        if moved:
            # re-anchor so the pointer keeps the same grip on the new wall
            self.grab_m = _axis(opening.wall_side, pointer_x_m, pointer_y_m) - opening.offset_m
        return moved

    def end(self):
        clamp_opening(self.room, self.opening)
        return self.opening
