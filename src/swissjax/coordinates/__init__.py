"""Coordinate representations for Swiss geodesy.

Provides three interconvertible point types:

- :class:`Wgs84` -- geographic ``[lon, lat, alt]`` in degrees and metres
- :class:`Lv03` -- legacy Swiss grid ``[north, east, alt]`` in metres
- :class:`Lv95` -- current Swiss grid, LV03 shifted by (+1e6, +2e6) m

Also re-exports the array kernels from :mod:`.conversions`, which are
JIT-compatible and can be vectorized with ``jax.vmap``.
"""

from .conversions import (
    position_wgs84_to_lv03,
    position_lv03_to_wgs84,
    position_lv03_to_lv95,
    position_lv95_to_lv03,
    lv03_is_valid,
    distance_squared_lv03,
)

from .wgs84 import Wgs84
from .lv03 import Lv03
from .lv95 import Lv95

__all__ = [
    # Kernels
    "position_wgs84_to_lv03",
    "position_lv03_to_wgs84",
    "position_lv03_to_lv95",
    "position_lv95_to_lv03",
    "lv03_is_valid",
    "distance_squared_lv03",
    # Point types
    "Wgs84",
    "Lv03",
    "Lv95",
]
