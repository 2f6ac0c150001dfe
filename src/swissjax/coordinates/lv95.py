"""LV95 projected coordinates.

Provides the ``Lv95`` class.  LV95 uses the LV03 projection shifted by
1,000,000 m north and 2,000,000 m east, so validity and the WGS84
conversion both go through :class:`~swissjax.coordinates.lv03.Lv03`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import jax
import jax.numpy as jnp

from swissjax.config import get_coordinate_tolerance, get_dtype
from swissjax.constants import LV95_EAST_OFFSET, LV95_NORTH_OFFSET
from swissjax.coordinates.conversions import lv03_is_valid, position_lv03_to_lv95
from swissjax.coordinates.lv03 import Lv03

if TYPE_CHECKING:
    from swissjax.coordinates.wgs84 import Wgs84

logger = logging.getLogger(__name__)


class Lv95:
    """Point in the LV95 frame.

    Internal storage is a shape ``(3,)`` array ``[north, east, altitude]``.

    Note that ``Lv95(north, east, altitude)`` takes **LV03** values and
    shifts them, like :meth:`new`.  Use :meth:`from_vector` to build a
    point from LV95 values.

    Args:
        north (float): LV03 northing in *m*.
        east (float): LV03 easting in *m*.
        altitude (float): Altitude in *m*.

    Raises:
        ValueError: If the unshifted point lies outside the LV03 validity region.
    """

    __slots__ = ('_data',)

    def __init__(self, north: float, east: float, altitude: float) -> None:
        self._data = Lv03(north, east, altitude).to_lv95()._data

    @classmethod
    def new(cls, north: float, east: float, altitude: float) -> Lv95 | None:
        """Validate LV03 coordinates and shift them into LV95.

        The LV03 check runs on the unshifted values, so the implied LV95
        region is ``[1070000, 1300000] x [2480000, 2850000]``.

        Args:
            north (float): LV03 northing in *m*.
            east (float): LV03 easting in *m*.
            altitude (float): Altitude in *m*.

        Returns:
            Lv95 | None: Shifted point, or ``None`` when invalid.
        """
        p = Lv03.new(north, east, altitude)
        if p is None:
            return None
        return cls.from_lv03(p)

    @classmethod
    def _from_internal(cls, data: jax.Array) -> Lv95:
        """Create from a raw JAX array without validation."""
        obj = object.__new__(cls)
        obj._data = data
        return obj

    # Properties

    @property
    def north(self) -> jax.Array:
        """Northing in metres."""
        return self._data[0]

    @property
    def east(self) -> jax.Array:
        """Easting in metres."""
        return self._data[1]

    @property
    def altitude(self) -> jax.Array:
        """Altitude in metres."""
        return self._data[2]

    # Factory methods

    @classmethod
    def from_vector(cls, v: jax.Array) -> Lv95 | None:
        """Create from an LV95 vector ``[north, east, altitude]``.

        Returns:
            Lv95 | None: New point, or ``None`` if the LV03 equivalent is invalid.
        """
        data = jnp.asarray(v, dtype=jnp.float64)
        offset = jnp.array([LV95_NORTH_OFFSET, LV95_EAST_OFFSET, 0.0], dtype=jnp.float64)
        if not bool(lv03_is_valid(data - offset)):
            logger.debug(
                "Rejected LV95 coordinate north=%s east=%s",
                float(data[0]),
                float(data[1]),
            )
            return None
        return cls._from_internal(data.astype(get_dtype()))

    def to_vector(self) -> jax.Array:
        """Return the point as ``[north, east, altitude]``."""
        return self._data

    @classmethod
    def from_lv03(cls, p: Lv03) -> Lv95:
        """Create from an ``Lv03`` point by adding the frame offset."""
        return cls._from_internal(position_lv03_to_lv95(p.to_vector()))

    # Methods

    def copy(self) -> Lv95:
        return Lv95._from_internal(self._data)

    # Conversion methods

    def to_lv03(self) -> Lv03:
        """Convert to ``Lv03`` by removing the frame offset.

        Returns:
            Lv03: Equivalent point.
        """
        return Lv03.from_lv95(self)

    def to_wgs84(self) -> Wgs84:
        """Convert to ``Wgs84`` through LV03.

        Returns:
            Wgs84: Approximate geographic position.
        """
        return self.to_lv03().to_wgs84()

    # Operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lv95):
            return NotImplemented
        eps = get_coordinate_tolerance()
        return bool(jnp.all(jnp.abs(self._data - other._data) < eps))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Lv95):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None

    # String representations

    def __str__(self) -> str:
        return (
            f"Lv95(north={float(self._data[0]):.3f}, "
            f"east={float(self._data[1]):.3f}, "
            f"altitude={float(self._data[2]):.3f})"
        )

    def __repr__(self) -> str:
        # The constructor takes LV03 values, so spell out the LV95 factory
        return (
            f"Lv95.from_vector([{float(self._data[0])}, "
            f"{float(self._data[1])}, "
            f"{float(self._data[2])}])"
        )


# Register as JAX pytree
jax.tree_util.register_pytree_node(
    Lv95,
    lambda p: ((p._data,), None),
    lambda _, children: Lv95._from_internal(children[0]),
)
