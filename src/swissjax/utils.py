"""Shared numeric helpers for the Swiss projection formulas.

The approximate swisstopo formulas work in auxiliary units: angles as
arc seconds relative to the Bern origin scaled by 1e-4, and planar
coordinates relative to the same origin scaled by 1e-6.  These helpers
move values into and out of those units and wrap the ``use_degrees``
convention used by the coordinate kernels.
"""

from jax import Array
import jax.numpy as jnp
from jax.typing import ArrayLike

from swissjax.constants import AUX_SCALE


def to_degrees(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to degrees unless ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, ``angle`` is already in degrees.

    Returns:
        Angle in degrees.
    """
    return jnp.where(use_degrees, angle, jnp.rad2deg(angle))


def from_degrees(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from degrees to radians unless ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in degrees.
        use_degrees (bool): If ``True``, keep degrees.

    Returns:
        Angle in degrees or radians.
    """
    return jnp.where(use_degrees, angle, jnp.deg2rad(angle))


def degrees_to_aux(angle: ArrayLike, origin_as: float) -> Array:
    """Express an angle in auxiliary units relative to an origin.

    Args:
        angle (ArrayLike): Angle in decimal degrees.
        origin_as (float): Origin of the auxiliary frame in arc seconds.

    Returns:
        ``(3600 * angle - origin_as) / 10000``.
    """
    return (3600.0 * angle - origin_as) / 10_000.0


def aux_to_degrees(value: ArrayLike) -> Array:
    """Convert an absolute angle from units of 10000 arc seconds to degrees."""
    return value * 100.0 / 36.0


def projected_to_aux(value: ArrayLike, origin: float) -> Array:
    """Express a planar LV03 coordinate in auxiliary units relative to an origin.

    Args:
        value (ArrayLike): Coordinate in metres.
        origin (float): Origin of the auxiliary frame in metres.

    Returns:
        ``(value - origin) / 1e6``.
    """
    return (value - origin) / AUX_SCALE
