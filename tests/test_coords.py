"""
Unit tests for the coordinate mapper.
"""

import numpy as np
import pytest

from tensor_resize.coords import map_axis, map_axis_array, scale_factor


class TestScaleFactor:
    def test_is_float32(self):
        s = scale_factor(2, 4)
        assert s.dtype == np.float32
        assert s == np.float32(0.5)

    def test_downscale(self):
        assert scale_factor(6, 3) == np.float32(2.0)


class TestMapAxis:
    """Test the top-left-corner projection."""

    def test_origin_maps_to_origin(self):
        s = map_axis(0, scale_factor(7, 3), 7)
        assert (s.i0, s.i1) == (0, 1)
        assert s.weight == 0.0

    def test_fractional_weight(self):
        s = map_axis(1, scale_factor(2, 4), 2)
        assert s.coord == np.float32(0.5)
        assert (s.i0, s.i1) == (0, 1)
        assert s.weight == np.float32(0.5)

    def test_next_clamped_at_border(self):
        s = map_axis(3, scale_factor(2, 4), 2)
        assert s.i0 == 1
        assert s.i1 == 1

    def test_weight_in_unit_interval(self):
        scale = scale_factor(13, 7)
        for x in range(7):
            s = map_axis(x, scale, 13)
            assert 0.0 <= s.weight < 1.0
            assert s.i0 <= s.i1 <= 12

    def test_identity_scale(self):
        scale = scale_factor(5, 5)
        for x in range(5):
            s = map_axis(x, scale, 5)
            assert s.i0 == x
            assert s.weight == 0.0


class TestMapAxisArray:
    """The array mapping must agree with the scalar mapping."""

    @pytest.mark.parametrize("in_len,out_len", [(2, 4), (5, 3), (7, 7), (3, 8), (1, 4), (10, 1)])
    def test_matches_scalar(self, in_len, out_len):
        coord, i0, i1, weight = map_axis_array(in_len, out_len)
        scale = scale_factor(in_len, out_len)
        for x in range(out_len):
            s = map_axis(x, scale, in_len)
            assert coord[x] == s.coord
            assert i0[x] == s.i0
            assert i1[x] == s.i1
            assert weight[x] == s.weight

    def test_dtypes(self):
        coord, i0, i1, weight = map_axis_array(3, 5)
        assert coord.dtype == np.float32
        assert weight.dtype == np.float32
        assert np.issubdtype(i0.dtype, np.integer)
        assert np.issubdtype(i1.dtype, np.integer)
