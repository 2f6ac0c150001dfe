"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
throughout swissjax.  The default is ``jnp.float64``: LV95 eastings are
around 2.6e6 m, where float32 only resolves a quarter metre.  Importing
this module enables JAX's 64-bit mode (``jax_enable_x64``).

Call ``set_dtype`` **before** any JIT compilation.  Under JIT,
``get_dtype()`` runs during tracing and its result is baked into the
compiled program.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

jax.config.update("jax_enable_x64", True)

_VALID_DTYPES = (jnp.float32, jnp.float64)

_dtype = jnp.float64


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for swissjax.

    Half-precision types are rejected since they cannot represent
    projected Swiss coordinates (float16 overflows above 65504).

    Args:
        dtype: ``jnp.float32`` or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float64``).
    """
    return _dtype


def get_coordinate_tolerance() -> float:
    """Return the dtype-adaptive tolerance for projected coordinate comparisons.

    - ``float64``: 1e-6 m
    - ``float32``: 0.5 m

    Returns:
        float: Tolerance in metres.
    """
    if _dtype == jnp.float64:
        return 1e-6
    return 0.5


def get_angle_tolerance() -> float:
    """Return the dtype-adaptive tolerance for WGS84 angle comparisons.

    - ``float64``: 1e-12 deg
    - ``float32``: 1e-5 deg

    Returns:
        float: Tolerance in degrees.
    """
    if _dtype == jnp.float64:
        return 1e-12
    return 1e-5
