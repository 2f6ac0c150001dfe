"""WGS84 geographic coordinates.

Provides the ``Wgs84`` class, a longitude/latitude/altitude triple in
decimal degrees and metres.  Any numeric triple is accepted; whether the
point lies in Switzerland is only known after projecting it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import jax
import jax.numpy as jnp

from swissjax.config import get_angle_tolerance, get_coordinate_tolerance, get_dtype
from swissjax.coordinates.conversions import position_wgs84_to_lv03
from swissjax.utils import to_degrees

if TYPE_CHECKING:
    from swissjax.coordinates.lv03 import Lv03
    from swissjax.coordinates.lv95 import Lv95


class Wgs84:
    """Geographic point on the WGS84 ellipsoid.

    Internal storage is a shape ``(3,)`` array ``[longitude, latitude,
    altitude]`` with angles always in degrees.

    This class is registered as a JAX pytree with the data array as
    the sole leaf and no auxiliary data.

    Args:
        longitude (float): Longitude.
        latitude (float): Latitude.
        altitude (float): Altitude above the ellipsoid in *m*.
        use_degrees (bool): If ``False``, interpret angles as radians. Default: ``True``.
    """

    __slots__ = ('_data',)

    def __init__(
        self,
        longitude: float,
        latitude: float,
        altitude: float,
        use_degrees: bool = True,
    ) -> None:
        data = jnp.array([longitude, latitude, altitude], dtype=get_dtype())
        angles = to_degrees(data[:2], use_degrees)
        self._data = jnp.concatenate([angles, data[2:]])

    @classmethod
    def _from_internal(cls, data: jax.Array) -> Wgs84:
        """Create from a raw JAX array ``[lon_deg, lat_deg, alt]``."""
        obj = object.__new__(cls)
        obj._data = data
        return obj

    # Properties

    @property
    def longitude(self) -> jax.Array:
        """Longitude in decimal degrees."""
        return self._data[0]

    @property
    def latitude(self) -> jax.Array:
        """Latitude in decimal degrees."""
        return self._data[1]

    @property
    def altitude(self) -> jax.Array:
        """Altitude above the ellipsoid in metres."""
        return self._data[2]

    # Factory methods

    @classmethod
    def from_vector(cls, v: jax.Array, use_degrees: bool = True) -> Wgs84:
        """Create from a 3-element vector ``[lon, lat, alt]``."""
        return cls(v[0], v[1], v[2], use_degrees=use_degrees)

    def to_vector(self, use_degrees: bool = True) -> jax.Array:
        """Return the point as ``[lon, lat, alt]``.

        Args:
            use_degrees (bool): If ``False``, return angles in radians.

        Returns:
            jnp.ndarray: Array of shape ``(3,)``.
        """
        if use_degrees:
            return self._data
        return jnp.array([
            jnp.deg2rad(self._data[0]),
            jnp.deg2rad(self._data[1]),
            self._data[2],
        ])

    @classmethod
    def from_lv03(cls, p: Lv03) -> Wgs84:
        """Create from an ``Lv03`` point.  Equivalent to ``p.to_wgs84()``."""
        return p.to_wgs84()

    @classmethod
    def from_lv95(cls, p: Lv95) -> Wgs84:
        """Create from an ``Lv95`` point.  Equivalent to ``p.to_wgs84()``."""
        return p.to_wgs84()

    # Methods

    def copy(self) -> Wgs84:
        return Wgs84._from_internal(self._data)

    # Conversion methods

    def to_lv03(self) -> Lv03 | None:
        """Project onto the LV03 plane.

        Returns:
            Lv03 | None: Projected point, or ``None`` when the result falls
                outside the LV03 validity region (the input is not a
                Swiss coordinate).
        """
        from swissjax.coordinates.lv03 import Lv03

        return Lv03._checked(position_wgs84_to_lv03(self._data))

    def to_lv95(self) -> Lv95 | None:
        """Project onto the LV95 plane.

        Returns:
            Lv95 | None: Projected point, or ``None`` outside Switzerland.
        """
        p = self.to_lv03()
        if p is None:
            return None
        return p.to_lv95()

    # Operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wgs84):
            return NotImplemented
        d = jnp.abs(self._data - other._data)
        return bool(
            (d[0] < get_angle_tolerance())
            & (d[1] < get_angle_tolerance())
            & (d[2] < get_coordinate_tolerance())
        )

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Wgs84):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None

    # String representations

    def __str__(self) -> str:
        return (
            f"Wgs84(longitude={float(self._data[0]):.6f}, "
            f"latitude={float(self._data[1]):.6f}, "
            f"altitude={float(self._data[2]):.3f})"
        )

    def __repr__(self) -> str:
        return (
            f"Wgs84(longitude={float(self._data[0])}, "
            f"latitude={float(self._data[1])}, "
            f"altitude={float(self._data[2])})"
        )


# Register as JAX pytree
jax.tree_util.register_pytree_node(
    Wgs84,
    lambda p: ((p._data,), None),
    lambda _, children: Wgs84._from_internal(children[0]),
)
