from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from tensor_resize.config import ResizeConfig, add_resize_args
from tensor_resize.cursors import ArrayDecoder, ArrayEncoder
from tensor_resize.interpolation import resize
from tensor_resize.io_utils import read_image, to_gray, to_tensor, from_tensor, save_image
from tensor_resize.layout import dims, make_shape
from tensor_resize.logger import setup_logging

logger = logging.getLogger(__name__)


def main():
    ap = argparse.ArgumentParser(description="Resize an image with the cursor-driven resampler.")
    ap.add_argument("--image", required=True)
    ap.add_argument("--out", default="results/resized.png")
    ap.add_argument("--gray", action="store_true", help="drop colour channels before resizing")
    add_resize_args(ap)
    args = ap.parse_args()

    setup_logging(args.log_level)
    cfg = ResizeConfig.from_args(args)

    img = read_image(args.image)
    if args.gray and img.ndim == 3:
        img = to_gray(img)
    tensor = to_tensor(img, cfg.layout)

    n, c, h, w = dims(tensor.shape, cfg.layout)
    out_layout = cfg.resolved_output_layout
    out = np.zeros(make_shape(n, c, cfg.height, cfg.width, out_layout), dtype=np.float32)

    logger.info("Resizing %s from %dx%d to %dx%d (%s)", args.image, h, w, cfg.height, cfg.width, cfg.method.value)
    resize(ArrayDecoder(tensor), tensor.shape, ArrayEncoder(out), out.shape, cfg.layout, cfg.method, out_layout)

    save_image(args.out, from_tensor(out, out_layout))
    print(f"[OK] Saved to: {Path(args.out).resolve()}")


if __name__ == "__main__":
    main()
