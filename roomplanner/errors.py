"""Errors raised for malformed room or entity construction input"""


class LayoutError(Exception):
    """Base class for room planner errors"""


class InvalidDimension(LayoutError, ValueError):
    """A room or entity size is not positive"""


class InvalidWallSide(LayoutError, ValueError):
    """Wall side is not one of N, E, S, W"""
