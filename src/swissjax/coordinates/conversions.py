"""Pure conversion kernels between WGS84, LV03 and LV95.

All functions operate on raw JAX arrays (no class instances) so they can
be JIT-compiled and vectorized with ``vmap``.  The classes in
``wgs84.py``, ``lv03.py`` and ``lv95.py`` call these kernels and wrap
the results.

Convention:
    WGS84 layout is ``[longitude, latitude, altitude]`` in degrees and
    metres above the ellipsoid.
    LV03 and LV95 layout is ``[north, east, altitude]`` in metres.

The WGS84 <-> LV03 formulas are the swisstopo approximations, accurate to
about one metre inside Switzerland.  They are not exact inverses of each
other.

References:
    1. swisstopo, *Approximate formulas for the transformation between
       Swiss projection coordinates and WGS84*, 2016.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from swissjax.config import get_dtype
from swissjax.constants import (
    LAT_ORIGIN_AS,
    LON_ORIGIN_AS,
    LV03_EAST_MAX,
    LV03_EAST_MIN,
    LV03_EAST_ORIGIN,
    LV03_NORTH_MAX,
    LV03_NORTH_MIN,
    LV03_NORTH_ORIGIN,
    LV95_EAST_OFFSET,
    LV95_NORTH_OFFSET,
)
from swissjax.utils import (
    aux_to_degrees,
    degrees_to_aux,
    from_degrees,
    projected_to_aux,
    to_degrees,
)


# ---------------------------------------------------------------------------
# WGS84 <-> LV03
# ---------------------------------------------------------------------------

def position_wgs84_to_lv03(
    x_wgs84: ArrayLike,
    use_degrees: bool = True,
) -> Array:
    """Project a WGS84 position onto the LV03 plane.

    The result is not checked against the LV03 validity region; use
    :func:`lv03_is_valid` on the output when that matters.

    Args:
        x_wgs84: WGS84 coordinates ``[lon, lat, alt]``.
            Longitude and latitude in *deg* (or *rad* if ``use_degrees=False``),
            altitude in *m* above the WGS84 ellipsoid.
        use_degrees: If ``False``, interpret longitude and latitude as radians.

    Returns:
        jax.Array: LV03 position ``[north, east, alt]`` in *m*, altitude
            above the Swiss geoid.

    Example:
        >>> import jax.numpy as jnp
        >>> from swissjax.coordinates import position_wgs84_to_lv03
        >>> x = position_wgs84_to_lv03(jnp.array([7.44417, 46.94658, 542.8]))
        >>> abs(float(x[1]) - 600421.43) < 2.0
        True
    """
    x_wgs84 = jnp.asarray(x_wgs84, dtype=get_dtype())

    lon = to_degrees(x_wgs84[0], use_degrees)
    lat = to_degrees(x_wgs84[1], use_degrees)
    alt = x_wgs84[2]

    phi = degrees_to_aux(lat, LAT_ORIGIN_AS)
    phi_2 = phi * phi
    phi_3 = phi * phi_2
    lam = degrees_to_aux(lon, LON_ORIGIN_AS)
    lam_2 = lam * lam
    lam_3 = lam * lam_2

    e = (
        2_600_072.37
        + 211_455.93 * lam
        - 10_938.51 * lam * phi
        - 0.36 * lam * phi_2
        - 44.54 * lam_3
    )
    n = (
        1_200_147.07
        + 308_807.95 * phi
        + 3_745.25 * lam_2
        + 76.63 * phi_2
        - 194.56 * lam_2 * phi
        + 119.79 * phi_3
    )

    east = e - LV95_EAST_OFFSET
    north = n - LV95_NORTH_OFFSET
    # Geoid undulation over Switzerland
    h = alt - 49.55 + 2.73 * lam + 6.94 * phi

    return jnp.array([north, east, h])


def position_lv03_to_wgs84(
    x_lv03: ArrayLike,
    use_degrees: bool = True,
) -> Array:
    """Convert an LV03 position to WGS84.

    Total over all inputs: no validity check is applied.

    Args:
        x_lv03: LV03 position ``[north, east, alt]`` in *m*.
        use_degrees: If ``False``, return longitude and latitude in radians.

    Returns:
        jax.Array: WGS84 coordinates ``[lon, lat, alt]``.
    """
    x_lv03 = jnp.asarray(x_lv03, dtype=get_dtype())

    y = projected_to_aux(x_lv03[1], LV03_EAST_ORIGIN)
    y_2 = y * y
    y_3 = y * y_2
    x = projected_to_aux(x_lv03[0], LV03_NORTH_ORIGIN)
    x_2 = x * x
    x_3 = x * x_2

    lam = (
        2.6779094
        + 4.728982 * y
        + 0.791484 * y * x
        + 0.1306 * y * x_2
        - 0.0436 * y_3
    )
    phi = (
        16.9023892
        + 3.238272 * x
        - 0.270978 * y_2
        - 0.002528 * x_2
        - 0.0447 * y_2 * x
        - 0.0140 * x_3
    )
    h = x_lv03[2] + 49.55 - 12.6 * y - 22.64 * x

    lon = from_degrees(aux_to_degrees(lam), use_degrees)
    lat = from_degrees(aux_to_degrees(phi), use_degrees)

    return jnp.array([lon, lat, h])


# ---------------------------------------------------------------------------
# LV03 <-> LV95
# ---------------------------------------------------------------------------

def position_lv03_to_lv95(x_lv03: ArrayLike) -> Array:
    """Shift an LV03 position into the LV95 frame.

    Args:
        x_lv03: LV03 position ``[north, east, alt]`` in *m*.

    Returns:
        jax.Array: LV95 position ``[north, east, alt]`` in *m*.
    """
    x_lv03 = jnp.asarray(x_lv03, dtype=get_dtype())
    offset = jnp.array([LV95_NORTH_OFFSET, LV95_EAST_OFFSET, 0.0], dtype=x_lv03.dtype)
    return x_lv03 + offset


def position_lv95_to_lv03(x_lv95: ArrayLike) -> Array:
    """Shift an LV95 position back into the LV03 frame.

    Args:
        x_lv95: LV95 position ``[north, east, alt]`` in *m*.

    Returns:
        jax.Array: LV03 position ``[north, east, alt]`` in *m*.
    """
    x_lv95 = jnp.asarray(x_lv95, dtype=get_dtype())
    offset = jnp.array([LV95_NORTH_OFFSET, LV95_EAST_OFFSET, 0.0], dtype=x_lv95.dtype)
    return x_lv95 - offset


# ---------------------------------------------------------------------------
# Validity and metric
# ---------------------------------------------------------------------------

def lv03_is_valid(x_lv03: ArrayLike) -> Array:
    """Check whether an LV03 position lies in the Swiss validity region.

    A position is valid when north is in ``[70000, 300000]``, east is in
    ``[480000, 850000]`` and north does not exceed east.  The last
    condition catches swapped axes, since every Swiss easting is larger
    than its northing.

    The comparison runs at the precision of the input, not the
    configured dtype, so a float64 point just outside a bound is not
    rounded onto it.

    Args:
        x_lv03: LV03 position ``[north, east, alt]`` in *m*.

    Returns:
        jax.Array: Boolean scalar.
    """
    x_lv03 = jnp.asarray(x_lv03)
    north = x_lv03[0]
    east = x_lv03[1]

    below = (north < LV03_NORTH_MIN) | (east < LV03_EAST_MIN)
    above = (north > LV03_NORTH_MAX) | (east > LV03_EAST_MAX)
    swapped = north > east

    return ~(below | above | swapped)


def distance_squared_lv03(a: ArrayLike, b: ArrayLike) -> Array:
    """Squared Euclidean distance between two LV03 positions.

    North, east and altitude are treated as orthonormal axes, which only
    holds at metropolitan scale.

    Args:
        a: LV03 position ``[north, east, alt]`` in *m*.
        b: LV03 position ``[north, east, alt]`` in *m*.

    Returns:
        jax.Array: Squared distance in *m^2*.
    """
    d = jnp.asarray(a, dtype=get_dtype()) - jnp.asarray(b, dtype=get_dtype())
    return jnp.sum(d * d)
