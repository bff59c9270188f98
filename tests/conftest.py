"""Shared fixtures for resize tests."""

import numpy as np
import pytest

from tensor_resize.cursors import ArrayDecoder, ArrayEncoder
from tensor_resize.interpolation import resize
from tensor_resize.layout import DataLayout, dims, make_shape


@pytest.fixture
def cursor_resize():
    """Run the cursor-driven resize on a numpy tensor and return the output tensor."""

    def _run(array, size, layout=DataLayout.NCHW, method="bilinear", output_layout=None):
        layout = DataLayout.parse(layout)
        out_layout = layout if output_layout is None else DataLayout.parse(output_layout)
        n, c, _, _ = dims(array.shape, layout)
        out = np.full(make_shape(n, c, size[0], size[1], out_layout), np.nan, dtype=np.float32)
        resize(ArrayDecoder(array), array.shape, ArrayEncoder(out), out.shape, layout, method, output_layout)
        return out

    return _run


@pytest.fixture
def image_2x2():
    """The 2x2 single-channel image [[1, 2], [3, 4]] as an NCHW tensor."""
    return np.array([[1, 2], [3, 4]], dtype=np.float32).reshape(1, 1, 2, 2)


@pytest.fixture
def rng():
    return np.random.default_rng(0)
