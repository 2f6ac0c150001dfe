"""LV03 projected coordinates.

Provides the ``Lv03`` class, a point in the legacy Swiss national grid
stored as ``[north, east, altitude]`` in metres.  Points are checked
against the Swiss validity region on construction.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import jax
import jax.numpy as jnp

from swissjax.config import get_coordinate_tolerance, get_dtype
from swissjax.coordinates.conversions import (
    distance_squared_lv03,
    lv03_is_valid,
    position_lv03_to_lv95,
    position_lv03_to_wgs84,
    position_lv95_to_lv03,
)

if TYPE_CHECKING:
    from swissjax.coordinates.lv95 import Lv95
    from swissjax.coordinates.wgs84 import Wgs84

logger = logging.getLogger(__name__)


class Lv03:
    """Point in the LV03 frame.

    Internal storage is a shape ``(3,)`` array ``[north, east, altitude]``
    in the configured float dtype.  Instances are immutable.

    This class is registered as a JAX pytree with the data array as
    the sole leaf and no auxiliary data.  Unflattening skips the
    validity check, so instances can be traced through ``jax.jit``.

    Args:
        north (float): Northing (X coordinate) in *m*.
        east (float): Easting (Y coordinate) in *m*.
        altitude (float): Altitude above the Swiss geoid in *m*.

    Raises:
        ValueError: If the point lies outside the LV03 validity region.
            Use :meth:`new` to get ``None`` instead.
    """

    __slots__ = ('_data',)

    def __init__(self, north: float, east: float, altitude: float) -> None:
        data = jnp.array([north, east, altitude], dtype=jnp.float64)
        if not bool(lv03_is_valid(data)):
            raise ValueError(
                f"north={float(north)}, east={float(east)} is not a valid "
                f"LV03 coordinate"
            )
        self._data = data.astype(get_dtype())

    @classmethod
    def new(cls, north: float, east: float, altitude: float) -> Lv03 | None:
        """Create a point, or ``None`` if it lies outside Switzerland.

        Rejects northings outside ``[70000, 300000]``, eastings outside
        ``[480000, 850000]`` and points whose northing exceeds their
        easting.  The reason is not reported.

        Args:
            north (float): Northing in *m*.
            east (float): Easting in *m*.
            altitude (float): Altitude in *m*.

        Returns:
            Lv03 | None: New point, or ``None`` when invalid.
        """
        return cls._checked(jnp.array([north, east, altitude], dtype=jnp.float64))

    @classmethod
    def _checked(cls, data: jax.Array) -> Lv03 | None:
        """Wrap *data* if it passes the validity check, else ``None``.

        The check runs at the precision of *data*, before the cast to the
        configured dtype.
        """
        if not bool(lv03_is_valid(data)):
            logger.debug(
                "Rejected LV03 coordinate north=%s east=%s",
                float(data[0]),
                float(data[1]),
            )
            return None
        return cls._from_internal(data.astype(get_dtype()))

    @classmethod
    def _from_internal(cls, data: jax.Array) -> Lv03:
        """Create from a raw JAX array without validation.

        Used by pytree unflatten and conversion outputs.

        Args:
            data (jax.Array): Array of shape ``(3,)`` ``[north, east, altitude]``.

        Returns:
            Lv03: New instance.
        """
        obj = object.__new__(cls)
        obj._data = data
        return obj

    # Properties

    @property
    def north(self) -> jax.Array:
        """Northing (X coordinate) in metres."""
        return self._data[0]

    @property
    def east(self) -> jax.Array:
        """Easting (Y coordinate) in metres."""
        return self._data[1]

    @property
    def altitude(self) -> jax.Array:
        """Altitude above the Swiss geoid in metres."""
        return self._data[2]

    # Factory methods

    @classmethod
    def from_vector(cls, v: jax.Array) -> Lv03 | None:
        """Create from a 3-element vector ``[north, east, altitude]``.

        Returns:
            Lv03 | None: New point, or ``None`` when invalid.
        """
        return cls.new(v[0], v[1], v[2])

    def to_vector(self) -> jax.Array:
        """Return the point as ``[north, east, altitude]``."""
        return self._data

    @classmethod
    def from_lv95(cls, p: Lv95) -> Lv03:
        """Create from an ``Lv95`` point by removing the frame offset.

        Args:
            p (Lv95): Source point.

        Returns:
            Lv03: Equivalent point.
        """
        return cls._from_internal(position_lv95_to_lv03(p.to_vector()))

    # Methods

    def copy(self) -> Lv03:
        return Lv03._from_internal(self._data)

    def distance_squared(self, other: Lv03) -> jax.Array:
        """Squared Euclidean distance to another LV03 point.

        Args:
            other (Lv03): Point in the same frame.

        Returns:
            jax.Array: Scalar distance in *m^2*.

        Raises:
            TypeError: If *other* is not an ``Lv03``.
        """
        if not isinstance(other, Lv03):
            raise TypeError(
                f"distance_squared expects Lv03, got {type(other).__name__}"
            )
        return distance_squared_lv03(self._data, other._data)

    # Conversion methods

    def to_wgs84(self) -> Wgs84:
        """Convert to ``Wgs84`` using the inverse projection.

        Returns:
            Wgs84: Approximate geographic position.
        """
        from swissjax.coordinates.wgs84 import Wgs84

        return Wgs84._from_internal(position_lv03_to_wgs84(self._data))

    def to_lv95(self) -> Lv95:
        """Convert to ``Lv95`` by adding the frame offset.

        Returns:
            Lv95: Equivalent point.
        """
        from swissjax.coordinates.lv95 import Lv95

        return Lv95._from_internal(position_lv03_to_lv95(self._data))

    # Operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lv03):
            return NotImplemented
        eps = get_coordinate_tolerance()
        return bool(jnp.all(jnp.abs(self._data - other._data) < eps))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Lv03):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None

    # String representations

    def __str__(self) -> str:
        return (
            f"Lv03(north={float(self._data[0]):.3f}, "
            f"east={float(self._data[1]):.3f}, "
            f"altitude={float(self._data[2]):.3f})"
        )

    def __repr__(self) -> str:
        return (
            f"Lv03(north={float(self._data[0])}, "
            f"east={float(self._data[1])}, "
            f"altitude={float(self._data[2])})"
        )


# Register as JAX pytree
jax.tree_util.register_pytree_node(
    Lv03,
    lambda p: ((p._data,), None),
    lambda _, children: Lv03._from_internal(children[0]),
)
