"""
swissjax converts positions between WGS84 and the Swiss LV03 and LV95 grids, implemented in JAX.
"""

from .constants import (
    LV95_NORTH_OFFSET,
    LV95_EAST_OFFSET,
    LV03_NORTH_MIN,
    LV03_NORTH_MAX,
    LV03_EAST_MIN,
    LV03_EAST_MAX,
)

from .config import set_dtype, get_dtype

from .coordinates import (
    Wgs84,
    Lv03,
    Lv95,
    position_wgs84_to_lv03,
    position_lv03_to_wgs84,
    position_lv03_to_lv95,
    position_lv95_to_lv03,
    lv03_is_valid,
    distance_squared_lv03,
)

__all__ = [
    # Constants
    "LV95_NORTH_OFFSET",
    "LV95_EAST_OFFSET",
    "LV03_NORTH_MIN",
    "LV03_NORTH_MAX",
    "LV03_EAST_MIN",
    "LV03_EAST_MAX",
    # Config
    "set_dtype",
    "get_dtype",
    # Point types
    "Wgs84",
    "Lv03",
    "Lv95",
    # Kernels
    "position_wgs84_to_lv03",
    "position_lv03_to_wgs84",
    "position_lv03_to_lv95",
    "position_lv95_to_lv03",
    "lv03_is_valid",
    "distance_squared_lv03",
]
