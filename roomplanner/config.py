"""
Room Planner - Shared Settings
All lengths are in meters unless the name says otherwise.
"""

import math

# ============================================================================
# CONFIGURATION - CHANGE THESE SETTINGS
# ============================================================================

# Room
DEFAULT_WALL_THICKNESS_M = 0.1

# Default entity sizes
DEFAULT_BED_WIDTH_M = 1.6
DEFAULT_BED_HEIGHT_M = 2.0
DEFAULT_NIGHTSTAND_SIZE_M = 0.45
DEFAULT_FURNITURE_WIDTH_M = 1.2
DEFAULT_FURNITURE_HEIGHT_M = 0.6
DEFAULT_FURNITURE_LABEL = 'Table'
DEFAULT_WINDOW_LENGTH_M = 1.2
DEFAULT_DOOR_LENGTH_M = 0.9

# Placement search (ring offsets around the original position)
SEARCH_STEP_M = 0.2
SEARCH_MAX_RADIUS = 10

# Drag magnet: pull an edge flush to a wall when closer than this
WALL_SNAP_M = 0.1

# Smallest values accepted by dimension edits
MIN_BED_SIDE_M = 0.5
MIN_NIGHTSTAND_SIZE_M = 0.2
MIN_FURNITURE_SIDE_M = 0.2

# Door swing
DOOR_MAX_ANGLE_RAD = math.radians(170)

# ============================================================================
