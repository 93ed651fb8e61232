"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (timings, pixel offsets, limits)
   scattered throughout the code.
2. Defaults: The runtime-tunable values on `GameConfig` start from here and
   return here on reset.

Exports:
    DEFAULT_SPEED_MS (int): Interval between generated points.
    DEFAULT_HUE (float): Initial hue of the point colour in degrees.
    DEFAULT_TOTAL_POINTS (int): Number of points generated per session.
    LOG_LEVEL (int): Logging level read from CHAOSGAME_LOG_LEVEL.
"""
import logging
import os

# Playback
DEFAULT_SPEED_MS: int = 1000
DEFAULT_HUE: float = 180.0
DEFAULT_TOTAL_POINTS: int = 3000
SPEED_SLIDER_MAX: int = 1000
HUE_MAX: int = 360

# Vertex count limits (one capital letter per anchor)
DEFAULT_VERTICES: int = 3
MIN_VERTICES: int = 3
MAX_VERTICES: int = 26

# Label geometry in canvas pixels
LABEL_PUSH_PX: float = 30.0
PROVISIONAL_LABEL_PUSH_PX: float = 20.0
MARKER_LABEL_OFFSET_PX: float = 16.0

# Parking spot for the hidden cursor, outside the [-1, 1] view
OFFSCREEN: tuple[float, float] = (2.0, 2.0)

# Rendering
POINT_SIZE: int = 8
BORDER_EXTRA: int = 3


def get_log_level(default: int = logging.INFO) -> int:
    """Resolve the logging level from the environment (name or number)."""
    raw = os.environ.get("CHAOSGAME_LOG_LEVEL", "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    print(f"WARNING: Unknown log level '{raw}', falling back to default")
    return default


LOG_LEVEL: int = get_log_level()
