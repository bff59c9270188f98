from __future__ import annotations

from typing import NamedTuple, Tuple

import numpy as np

Array = np.ndarray


class AxisSample(NamedTuple):
    coord: np.float32  # real-valued source coordinate
    i0: int  # discrete coordinate of the top/left texel
    i1: int  # next texel, clamped to the last valid index
    weight: np.float32  # interpolation weight in [0, 1)


def scale_factor(in_extent: int, out_extent: int) -> np.float32:
    return np.float32(in_extent) / np.float32(out_extent)


def map_axis(out_coord: int, scale: np.float32, in_extent: int) -> AxisSample:
    """Project the top-left corner of output texel `out_coord` into the input.

    Corners are aligned, not texel centres, so output 0 always lands exactly
    on input 0 and the weight is zero there.
    """
    coord = np.float32(out_coord) * scale
    floored = np.floor(coord)
    i0 = int(floored)
    weight = coord - floored
    i1 = min(i0 + 1, in_extent - 1)
    return AxisSample(coord, i0, i1, weight)


def map_axis_array(in_extent: int, out_extent: int) -> Tuple[Array, Array, Array, Array]:
    """`map_axis` for every output index along one axis, as arrays."""
    scale = scale_factor(in_extent, out_extent)
    coord = np.arange(out_extent, dtype=np.float32) * scale
    floored = np.floor(coord)
    i0 = floored.astype(np.intp)
    weight = coord - floored
    i1 = np.minimum(i0 + 1, in_extent - 1)
    return coord, i0, i1, weight
