"""
Tests for image I/O and image <-> tensor conversion.
"""

import numpy as np
import pytest

from tensor_resize.io_utils import ensure_uint8, from_tensor, read_image, save_image, to_gray, to_tensor
from tensor_resize.layout import DataLayout


class TestToGray:
    def test_gray_passthrough(self):
        img = np.array([[0, 255]], dtype=np.uint8)
        np.testing.assert_array_equal(to_gray(img), img)

    def test_rgb(self):
        img = np.zeros((2, 2, 3), dtype=np.uint8)
        img[..., 0] = 100
        out = to_gray(img)
        assert out.shape == (2, 2)
        assert out[0, 0] == 29  # 0.299 * 100

    def test_unsupported(self):
        with pytest.raises(ValueError):
            to_gray(np.zeros((1, 1, 1, 1)))


class TestTensorConversion:
    def test_gray_to_nchw(self):
        img = np.arange(6, dtype=np.uint8).reshape(2, 3)
        t = to_tensor(img, DataLayout.NCHW)
        assert t.shape == (1, 1, 2, 3)
        assert t.dtype == np.float32

    def test_rgb_to_nchw(self):
        img = np.zeros((2, 3, 3), dtype=np.uint8)
        img[..., 2] = 9
        t = to_tensor(img, DataLayout.NCHW)
        assert t.shape == (1, 3, 2, 3)
        assert np.all(t[0, 2] == 9)
        assert t.flags.c_contiguous

    def test_rgb_to_nhwc(self):
        img = np.zeros((2, 3, 4), dtype=np.uint8)
        assert to_tensor(img, DataLayout.NHWC).shape == (1, 2, 3, 4)

    @pytest.mark.parametrize("layout", list(DataLayout))
    def test_round_trip(self, layout):
        img = np.arange(24, dtype=np.uint8).reshape(2, 4, 3)
        np.testing.assert_array_equal(from_tensor(to_tensor(img, layout), layout), img)

    def test_single_channel_comes_back_2d(self):
        t = np.zeros((1, 1, 5, 4), dtype=np.float32)
        assert from_tensor(t, DataLayout.NCHW).shape == (5, 4)

    def test_batch_index(self):
        t = np.stack([np.zeros((1, 2, 2)), np.ones((1, 2, 2))]).astype(np.float32)
        assert np.all(from_tensor(t, DataLayout.NCHW, index=1) == 1.0)

    def test_rejects_bad_ndim(self):
        with pytest.raises(ValueError):
            to_tensor(np.zeros((1, 1, 1, 1)))
        with pytest.raises(ValueError):
            from_tensor(np.zeros((2, 2)))


class TestFiles:
    def test_ensure_uint8(self):
        out = ensure_uint8(np.array([-3.0, 12.4, 300.0]))
        np.testing.assert_array_equal(out, [0, 12, 255])
        assert out.dtype == np.uint8

    def test_save_and_read(self, tmp_path):
        img = np.arange(16, dtype=np.uint8).reshape(4, 4) * 10
        path = tmp_path / "nested" / "img.png"
        save_image(path, img)
        assert path.exists()
        np.testing.assert_array_equal(read_image(path), img)
