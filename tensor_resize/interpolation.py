from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence, Tuple

import numpy as np

from .coords import AxisSample, map_axis, map_axis_array, scale_factor
from .cursors import Decoder, Encoder
from .layout import DataLayout, convert, dims, get_index, make_shape
from .validation import check_buffer, check_resize

logger = logging.getLogger(__name__)

Array = np.ndarray

_ONE = np.float32(1.0)


class ResizeMethod(str, Enum):
    BILINEAR = "bilinear"
    NEAREST_NEIGHBOR = "nearest"

    @classmethod
    def parse(cls, value: "ResizeMethod | str") -> "ResizeMethod":
        if isinstance(value, cls):
            return value
        name = str(value).lower()
        if name in ("nearest_neighbor", "nearestneighbor"):
            return cls.NEAREST_NEIGHBOR
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown method: {value}") from None


def lerp(a, b, w):
    return w * b + (_ONE - w) * a


def _distance(dx, dy):
    return np.sqrt(dx * dx + dy * dy)


def _clip_uint8(x: Array) -> Array:
    return np.clip(np.round(x), 0, 255).astype(np.uint8)


def _sample(decoder: Decoder, shape: Sequence[int], layout: DataLayout, n: int, c: int, y: int, x: int):
    return decoder.at(get_index(layout, shape, n, c, y, x)).get()


def _bilinear(decoder, shape, layout, n, c, ys: AxisSample, xs: AxisSample):
    top = lerp(
        _sample(decoder, shape, layout, n, c, ys.i0, xs.i0),
        _sample(decoder, shape, layout, n, c, ys.i0, xs.i1),
        xs.weight,
    )
    bottom = lerp(
        _sample(decoder, shape, layout, n, c, ys.i1, xs.i0),
        _sample(decoder, shape, layout, n, c, ys.i1, xs.i1),
        xs.weight,
    )
    return lerp(top, bottom, ys.weight)


def _nearest(decoder, shape, layout, n, c, ys: AxisSample, xs: AxisSample):
    # Only the two diagonal candidates (y0, x0) and (y1, x1) are compared.
    d0 = _distance(xs.weight, ys.weight)
    d1 = _distance(xs.coord - np.float32(xs.i1), ys.coord - np.float32(ys.i1))
    if d0 <= d1:
        return _sample(decoder, shape, layout, n, c, ys.i0, xs.i0)
    return _sample(decoder, shape, layout, n, c, ys.i1, xs.i1)


def resize(
    decoder: Decoder,
    input_shape: Sequence[int],
    encoder: Encoder,
    output_shape: Sequence[int],
    layout: DataLayout | str,
    method: ResizeMethod | str = ResizeMethod.BILINEAR,
    output_layout: Optional[DataLayout | str] = None,
) -> None:
    """Resample the tensor behind `decoder` into the tensor behind `encoder`.

    The top-left corner of each output texel is projected into the input
    (TensorFlow / Android NN convention), which gives different results from
    projecting texel centres. Every output element is written exactly once,
    in (n, c, y, x) order. `output_layout` defaults to `layout`.
    """
    layout = DataLayout.parse(layout)
    output_layout = layout if output_layout is None else DataLayout.parse(output_layout)
    method = ResizeMethod.parse(method)

    check_resize(input_shape, layout, output_shape, output_layout)
    check_buffer(len(decoder), input_shape, "input")
    check_buffer(len(encoder), output_shape, "output")

    batch, channels, in_h, in_w = dims(input_shape, layout)
    _, _, out_h, out_w = dims(output_shape, output_layout)

    scale_y = scale_factor(in_h, out_h)
    scale_x = scale_factor(in_w, out_w)
    logger.debug(
        "resize %s %s -> %s %s (%s), scale y=%.4f x=%.4f",
        tuple(input_shape), layout.value, tuple(output_shape), output_layout.value,
        method.value, scale_y, scale_x,
    )

    interpolate = _bilinear if method is ResizeMethod.BILINEAR else _nearest
    x_samples = [map_axis(x, scale_x, in_w) for x in range(out_w)]

    for n in range(batch):
        for c in range(channels):
            for y in range(out_h):
                ys = map_axis(y, scale_y, in_h)
                for x, xs in enumerate(x_samples):
                    value = interpolate(decoder, input_shape, layout, n, c, ys, xs)
                    encoder.at(get_index(output_layout, output_shape, n, c, y, x)).set(value)


def resize_array(
    array: Array,
    size: Tuple[int, int],
    layout: DataLayout | str = DataLayout.NCHW,
    method: ResizeMethod | str = ResizeMethod.BILINEAR,
) -> Array:
    """Vectorised `resize` for a 4-D numpy tensor. Returns float32 in `layout`."""
    if array.ndim != 4:
        raise ValueError(f"resize_array() expects a 4-D tensor, got shape {array.shape}")
    layout = DataLayout.parse(layout)
    method = ResizeMethod.parse(method)

    n, c, in_h, in_w = dims(array.shape, layout)
    out_h, out_w = size
    check_resize(array.shape, layout, make_shape(n, c, out_h, out_w, layout), layout)

    src = convert(np.asarray(array, dtype=np.float32), layout, DataLayout.NCHW)
    cy, y0, y1, wy = map_axis_array(in_h, out_h)
    cx, x0, x1, wx = map_axis_array(in_w, out_w)

    if method is ResizeMethod.BILINEAR:
        Ia = src[:, :, y0[:, None], x0[None, :]]
        Ib = src[:, :, y0[:, None], x1[None, :]]
        Ic = src[:, :, y1[:, None], x0[None, :]]
        Id = src[:, :, y1[:, None], x1[None, :]]

        top = lerp(Ia, Ib, wx[None, :])
        bottom = lerp(Ic, Id, wx[None, :])
        out = lerp(top, bottom, wy[:, None])
    else:
        d0 = _distance(wx[None, :], wy[:, None])
        d1 = _distance((cx - x1.astype(np.float32))[None, :], (cy - y1.astype(np.float32))[:, None])
        base = d0 <= d1
        yn = np.where(base, y0[:, None], y1[:, None])
        xn = np.where(base, x0[None, :], x1[None, :])
        out = src[:, :, yn, xn]

    return np.ascontiguousarray(convert(out, DataLayout.NCHW, layout), dtype=np.float32)


def resize_image(
    img: Array,
    size: Optional[Tuple[int, int]] = None,
    scale: Optional[float] = None,
    method: ResizeMethod | str = ResizeMethod.BILINEAR,
) -> Array:
    """Resize an (H,W) or (H,W,C) image. uint8 in gives uint8 out, else float32."""
    if img.ndim not in (2, 3):
        raise ValueError(f"resize_image() expects an (H,W) or (H,W,C) image, got {img.shape}")
    if (size is None) == (scale is None):
        raise ValueError("pass exactly one of size or scale")

    h, w = img.shape[:2]
    if scale is not None:
        if scale <= 0:
            raise ValueError("scale must be > 0")
        size = (max(1, int(round(h * scale))), max(1, int(round(w * scale))))

    x = img.astype(np.float32).reshape(1, h, w, -1)
    out = resize_array(x, size, DataLayout.NHWC, method)[0]
    if img.ndim == 2:
        out = out[..., 0]

    if img.dtype == np.uint8:
        return _clip_uint8(out)
    return out
