"""Tests for the swissjax.coordinates.conversions kernels.

Covers the forward and inverse projection against swisstopo reference
points, the LV03/LV95 frame shift, the validity mask, the squared
distance, and JAX compatibility (jit, vmap).
"""

import jax
import jax.numpy as jnp

from swissjax.coordinates import (
    distance_squared_lv03,
    lv03_is_valid,
    position_lv03_to_lv95,
    position_lv03_to_wgs84,
    position_lv95_to_lv03,
    position_wgs84_to_lv03,
)

# ──────────────────────────────────────────────
# Tolerance constants
# ──────────────────────────────────────────────

_POS_TOL = 2.0  # metres, projection approximation
_ANG_DEG_TOL = 1e-3  # degrees, projection approximation
_SHIFT_TOL = 1e-6  # metres, frame shift is exact

# Federal Palace, Bern
_BUNDESHAUS_LV03 = jnp.array([199_498.43, 600_421.43, 542.8])
_BUNDESHAUS_WGS84 = jnp.array([7.44417, 46.94658, 542.8])

_SOUTH_EAST_LV03 = jnp.array([100_000.0, 700_000.0, 542.8])
_SOUTH_EAST_WGS84 = jnp.array([8.730497076, 46.044130339, 542.8])


# ──────────────────────────────────────────────
# WGS84 -> LV03
# ──────────────────────────────────────────────


class TestWgs84ToLv03:
    def test_bundeshaus(self):
        x = position_wgs84_to_lv03(_BUNDESHAUS_WGS84)

        assert jnp.abs(x[0] - _BUNDESHAUS_LV03[0]) < _POS_TOL
        assert jnp.abs(x[1] - _BUNDESHAUS_LV03[1]) < _POS_TOL

    def test_south_east(self):
        x = position_wgs84_to_lv03(_SOUTH_EAST_WGS84)

        assert jnp.abs(x[0] - _SOUTH_EAST_LV03[0]) < _POS_TOL
        assert jnp.abs(x[1] - _SOUTH_EAST_LV03[1]) < _POS_TOL

    def test_radians_input(self):
        """use_degrees=False gives the same result for radian input."""
        x_deg = position_wgs84_to_lv03(_BUNDESHAUS_WGS84)
        x_rad = position_wgs84_to_lv03(
            jnp.array([
                jnp.deg2rad(_BUNDESHAUS_WGS84[0]),
                jnp.deg2rad(_BUNDESHAUS_WGS84[1]),
                _BUNDESHAUS_WGS84[2],
            ]),
            use_degrees=False,
        )
        assert jnp.allclose(x_deg, x_rad, atol=1e-6)

    def test_outside_switzerland_not_clamped(self):
        """The kernel returns the raw projection even far from Switzerland."""
        x = position_wgs84_to_lv03(jnp.array([0.0, 0.0, 0.0]))
        assert jnp.all(jnp.isfinite(x))
        assert not lv03_is_valid(x)


# ──────────────────────────────────────────────
# LV03 -> WGS84
# ──────────────────────────────────────────────


class TestLv03ToWgs84:
    def test_bundeshaus(self):
        x = position_lv03_to_wgs84(_BUNDESHAUS_LV03)

        assert jnp.abs(x[0] - _BUNDESHAUS_WGS84[0]) < _ANG_DEG_TOL
        assert jnp.abs(x[1] - _BUNDESHAUS_WGS84[1]) < _ANG_DEG_TOL

    def test_south_east(self):
        x = position_lv03_to_wgs84(_SOUTH_EAST_LV03)

        assert jnp.abs(x[0] - _SOUTH_EAST_WGS84[0]) < _ANG_DEG_TOL
        assert jnp.abs(x[1] - _SOUTH_EAST_WGS84[1]) < _ANG_DEG_TOL

    def test_origin(self):
        """The projection origin maps to the old Bern observatory."""
        x = position_lv03_to_wgs84(jnp.array([200_000.0, 600_000.0, 0.0]))

        assert jnp.abs(x[0] - 2.6779094 * 100.0 / 36.0) < 1e-12
        assert jnp.abs(x[1] - 16.9023892 * 100.0 / 36.0) < 1e-12
        assert jnp.abs(x[2] - 49.55) < 1e-9

    def test_radians_output(self):
        x_deg = position_lv03_to_wgs84(_BUNDESHAUS_LV03)
        x_rad = position_lv03_to_wgs84(_BUNDESHAUS_LV03, use_degrees=False)

        assert jnp.abs(jnp.deg2rad(x_deg[0]) - x_rad[0]) < 1e-12
        assert jnp.abs(jnp.deg2rad(x_deg[1]) - x_rad[1]) < 1e-12
        assert x_deg[2] == x_rad[2]

    def test_total_outside_region(self):
        """Inverse projection never fails, even for invalid LV03 triples."""
        x = position_lv03_to_wgs84(jnp.array([600_000.0, 200_000.0, 0.0]))
        assert jnp.all(jnp.isfinite(x))


class TestProjectionRoundtrip:
    def test_bundeshaus(self):
        x = position_wgs84_to_lv03(position_lv03_to_wgs84(_BUNDESHAUS_LV03))
        assert distance_squared_lv03(x, _BUNDESHAUS_LV03) < 1.0

    def test_south_east(self):
        x = position_wgs84_to_lv03(position_lv03_to_wgs84(_SOUTH_EAST_LV03))
        assert distance_squared_lv03(x, _SOUTH_EAST_LV03) < 1.0

    def test_origin(self):
        origin = jnp.array([200_000.0, 600_000.0, 500.0])
        x = position_wgs84_to_lv03(position_lv03_to_wgs84(origin))
        assert distance_squared_lv03(x, origin) < 1.0


# ──────────────────────────────────────────────
# LV03 <-> LV95
# ──────────────────────────────────────────────


class TestFrameShift:
    def test_offsets(self):
        x = position_lv03_to_lv95(jnp.array([200_000.0, 600_000.0, 500.0]))

        assert x[0] == 1_200_000.0
        assert x[1] == 2_600_000.0
        assert x[2] == 500.0

    def test_inverse_offsets(self):
        x = position_lv95_to_lv03(jnp.array([1_199_498.43, 2_600_421.43, 542.8]))
        assert jnp.allclose(x, _BUNDESHAUS_LV03, atol=_SHIFT_TOL)

    def test_roundtrip(self):
        x = position_lv95_to_lv03(position_lv03_to_lv95(_BUNDESHAUS_LV03))
        assert distance_squared_lv03(x, _BUNDESHAUS_LV03) < 0.001


# ──────────────────────────────────────────────
# Validity and distance
# ──────────────────────────────────────────────


class TestLv03IsValid:
    def test_inside(self):
        assert lv03_is_valid(jnp.array([250_000.0, 500_000.0, -5.0]))

    def test_corners(self):
        assert lv03_is_valid(jnp.array([70_000.0, 480_000.0, 0.0]))
        assert lv03_is_valid(jnp.array([300_000.0, 850_000.0, 0.0]))

    def test_below_minimum(self):
        assert not lv03_is_valid(jnp.array([69_999.0, 600_000.0, 0.0]))
        assert not lv03_is_valid(jnp.array([200_000.0, 479_999.0, 0.0]))

    def test_above_maximum(self):
        assert not lv03_is_valid(jnp.array([300_001.0, 600_000.0, 0.0]))
        assert not lv03_is_valid(jnp.array([200_000.0, 850_001.0, 0.0]))

    def test_negative(self):
        assert not lv03_is_valid(jnp.array([-1.0, 2.0, 5.0]))
        assert not lv03_is_valid(jnp.array([1.0, -2.0, 5.0]))

    def test_swapped_axes(self):
        assert not lv03_is_valid(jnp.array([600_000.0, 200_000.0, 500.0]))

    def test_altitude_ignored(self):
        assert lv03_is_valid(jnp.array([200_000.0, 600_000.0, -1e6]))


class TestDistanceSquared:
    def test_north_offset(self):
        a = jnp.array([200_000.0, 600_000.0, 500.0])
        b = jnp.array([200_002.0, 600_000.0, 500.0])
        assert float(distance_squared_lv03(a, b)) == 4.0

    def test_all_axes(self):
        a = jnp.array([200_000.0, 600_000.0, 500.0])
        b = jnp.array([200_001.0, 600_002.0, 502.0])
        assert float(distance_squared_lv03(a, b)) == 9.0

    def test_symmetric(self):
        assert distance_squared_lv03(_BUNDESHAUS_LV03, _SOUTH_EAST_LV03) == (
            distance_squared_lv03(_SOUTH_EAST_LV03, _BUNDESHAUS_LV03)
        )

    def test_self_is_zero(self):
        assert float(distance_squared_lv03(_BUNDESHAUS_LV03, _BUNDESHAUS_LV03)) == 0.0


# ──────────────────────────────────────────────
# JAX compatibility
# ──────────────────────────────────────────────


class TestJaxCompatibility:
    def test_jit_wgs84_to_lv03(self):
        eager = position_wgs84_to_lv03(_BUNDESHAUS_WGS84)
        jitted = jax.jit(position_wgs84_to_lv03)(_BUNDESHAUS_WGS84)
        assert jnp.allclose(eager, jitted, atol=1e-6)

    def test_jit_lv03_to_wgs84(self):
        eager = position_lv03_to_wgs84(_BUNDESHAUS_LV03)
        jitted = jax.jit(position_lv03_to_wgs84)(_BUNDESHAUS_LV03)
        assert jnp.allclose(eager, jitted, atol=1e-9)

    def test_jit_is_valid(self):
        assert jax.jit(lv03_is_valid)(_BUNDESHAUS_LV03)
        assert not jax.jit(lv03_is_valid)(jnp.array([600_000.0, 200_000.0, 0.0]))

    def test_vmap_wgs84_to_lv03(self):
        batch = jnp.stack([_BUNDESHAUS_WGS84, _SOUTH_EAST_WGS84])
        out = jax.vmap(position_wgs84_to_lv03)(batch)

        assert out.shape == (2, 3)
        assert jnp.allclose(out[0], position_wgs84_to_lv03(_BUNDESHAUS_WGS84))
        assert jnp.allclose(out[1], position_wgs84_to_lv03(_SOUTH_EAST_WGS84))

    def test_vmap_is_valid(self):
        batch = jnp.array([
            [200_000.0, 600_000.0, 0.0],
            [600_000.0, 200_000.0, 0.0],
            [69_999.0, 600_000.0, 0.0],
        ])
        mask = jax.vmap(lv03_is_valid)(batch)
        assert mask.tolist() == [True, False, False]

    def test_vmap_lv03_to_lv95(self):
        batch = jnp.stack([_BUNDESHAUS_LV03, _SOUTH_EAST_LV03])
        out = jax.vmap(position_lv03_to_lv95)(batch)
        assert jnp.allclose(out - batch, jnp.array([1_000_000.0, 2_000_000.0, 0.0]))
