from __future__ import annotations

import math
from typing import Optional

import numpy as np

Array = np.ndarray


def _check_shapes(a: Array, b: Array) -> None:
    if a.shape != b.shape:
        raise ValueError(f"Shape mismatch: {a.shape} vs {b.shape}")


def mse(a: Array, b: Array) -> float:
    _check_shapes(a, b)
    a = a.astype(np.float64)
    b = b.astype(np.float64)
    return float(np.mean((a - b) ** 2))


def psnr(a: Array, b: Array, max_value: Optional[float] = None) -> float:
    m = mse(a, b)
    if m == 0:
        return float("inf")
    if max_value is None:
        max_value = 255.0 if (a.dtype == np.uint8 or b.dtype == np.uint8) else 1.0
    return float(10.0 * math.log10((max_value ** 2) / m))


def max_abs_error(a: Array, b: Array) -> float:
    _check_shapes(a, b)
    if a.size == 0:
        return 0.0
    return float(np.max(np.abs(a.astype(np.float64) - b.astype(np.float64))))
