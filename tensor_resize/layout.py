from __future__ import annotations

from enum import Enum
from typing import Sequence, Tuple

import numpy as np

Array = np.ndarray
Shape = Tuple[int, int, int, int]


class DataLayout(str, Enum):
    NCHW = "NCHW"  # channels-first
    NHWC = "NHWC"  # channels-last

    @property
    def channels_index(self) -> int:
        return 1 if self is DataLayout.NCHW else 3

    @property
    def height_index(self) -> int:
        return 2 if self is DataLayout.NCHW else 1

    @property
    def width_index(self) -> int:
        return 3 if self is DataLayout.NCHW else 2

    @classmethod
    def parse(cls, value: "DataLayout | str") -> "DataLayout":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Unknown layout: {value}") from None


def dims(shape: Sequence[int], layout: DataLayout) -> Shape:
    """(batch, channels, height, width) of a shape laid out as `layout`."""
    return (
        int(shape[0]),
        int(shape[layout.channels_index]),
        int(shape[layout.height_index]),
        int(shape[layout.width_index]),
    )


def make_shape(batch: int, channels: int, height: int, width: int, layout: DataLayout) -> Shape:
    if layout is DataLayout.NCHW:
        return (batch, channels, height, width)
    return (batch, height, width, channels)


def get_index(layout: DataLayout, shape: Sequence[int], n: int, c: int, y: int, x: int) -> int:
    """Flat element offset of (n, c, y, x) in a row-major buffer of `shape`."""
    if layout is DataLayout.NCHW:
        _, channels, height, width = shape
        return ((n * channels + c) * height + y) * width + x

    _, height, width, channels = shape
    return ((n * height + y) * width + x) * channels + c


def convert(array: Array, src: DataLayout, dst: DataLayout) -> Array:
    if array.ndim != 4:
        raise ValueError(f"convert() expects a 4-D tensor, got shape {array.shape}")
    if src is dst:
        return array
    if src is DataLayout.NCHW:
        return np.transpose(array, (0, 2, 3, 1))
    return np.transpose(array, (0, 3, 1, 2))
