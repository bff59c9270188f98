from __future__ import annotations

from numbers import Integral
from typing import Sequence

from .layout import DataLayout, Shape, dims


class ResizeContractError(ValueError):
    """Raised when a resize call violates its caller contract."""


def check_shape(shape: Sequence[int], layout: DataLayout, name: str) -> Shape:
    if len(shape) != 4:
        raise ResizeContractError(f"{name} shape must have 4 dims, got {tuple(shape)}")
    for d in shape:
        if not isinstance(d, Integral) or d < 0:
            raise ResizeContractError(f"{name} shape has an invalid dimension: {tuple(shape)}")

    n, c, h, w = dims(shape, layout)
    if h < 1 or w < 1:
        raise ResizeContractError(f"{name} height and width must be >= 1, got {h}x{w}")
    return n, c, h, w


def check_resize(
    input_shape: Sequence[int],
    input_layout: DataLayout,
    output_shape: Sequence[int],
    output_layout: DataLayout,
) -> None:
    n_in, c_in, _, _ = check_shape(input_shape, input_layout, "input")
    n_out, c_out, _, _ = check_shape(output_shape, output_layout, "output")

    if n_in != n_out:
        raise ResizeContractError(f"Batch mismatch: {n_in} vs {n_out}")
    if c_in != c_out:
        raise ResizeContractError(f"Channel mismatch: {c_in} vs {c_out}")


def check_buffer(length: int, shape: Sequence[int], name: str) -> None:
    expected = 1
    for d in shape:
        expected *= int(d)
    if length != expected:
        raise ResizeContractError(
            f"{name} buffer holds {length} elements, shape {tuple(shape)} needs {expected}"
        )
