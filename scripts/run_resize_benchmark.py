from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from tensor_resize.cursors import ArrayDecoder, ArrayEncoder
from tensor_resize.interpolation import ResizeMethod, resize, resize_array
from tensor_resize.io_utils import read_image, to_gray, to_tensor, from_tensor, save_image
from tensor_resize.layout import DataLayout, convert, make_shape
from tensor_resize.logger import setup_logging
from tensor_resize.metrics import max_abs_error

logger = logging.getLogger(__name__)


def make_grid(original: np.ndarray, variants: list[tuple[str, np.ndarray]], out_path: Path) -> None:
    cols = 1 + len(variants)
    plt.figure(figsize=(3.6 * cols, 3.6))
    plt.subplot(1, cols, 1)
    plt.title("original")
    plt.imshow(original, cmap="gray")
    plt.axis("off")

    for i, (name, img) in enumerate(variants, start=2):
        plt.subplot(1, cols, i)
        plt.title(name)
        plt.imshow(img, cmap="gray", interpolation="nearest")
        plt.axis("off")

    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=180)
    plt.close()


def run_cursor_path(tensor: np.ndarray, size: tuple[int, int], method: ResizeMethod) -> tuple[np.ndarray, float]:
    n, c = tensor.shape[:2]
    out = np.zeros(make_shape(n, c, size[0], size[1], DataLayout.NCHW), dtype=np.float32)
    t0 = time.perf_counter()
    resize(ArrayDecoder(tensor), tensor.shape, ArrayEncoder(out), out.shape, DataLayout.NCHW, method)
    return out, time.perf_counter() - t0


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--image", required=True)
    ap.add_argument("--sizes", nargs="+", default=["32x32", "96x128"], help="HxW targets")
    ap.add_argument("--outdir", default="results")
    ap.add_argument("--log-level", default="INFO")
    args = ap.parse_args()

    setup_logging(args.log_level)

    img = to_gray(read_image(args.image))
    tensor = to_tensor(img, DataLayout.NCHW)
    nhwc = np.ascontiguousarray(convert(tensor, DataLayout.NCHW, DataLayout.NHWC))

    outdir = Path(args.outdir)
    figdir = outdir / "figures"
    tbldir = outdir / "tables"
    figdir.mkdir(parents=True, exist_ok=True)
    tbldir.mkdir(parents=True, exist_ok=True)

    rows = []
    for s in args.sizes:
        h, w = (int(v) for v in s.lower().split("x"))
        variants = []
        for m in ResizeMethod:
            looped, t_loop = run_cursor_path(tensor, (h, w), m)

            t0 = time.perf_counter()
            fast = resize_array(tensor, (h, w), DataLayout.NCHW, m)
            t_fast = time.perf_counter() - t0

            fast_nhwc = resize_array(nhwc, (h, w), DataLayout.NHWC, m)
            layout_err = max_abs_error(fast, convert(fast_nhwc, DataLayout.NHWC, DataLayout.NCHW))
            path_err = max_abs_error(looped, fast)
            logger.info(
                "%s %dx%d: cursor %.3fs, vectorised %.4fs, path err %.2e, layout err %.2e",
                m.value, h, w, t_loop, t_fast, path_err, layout_err,
            )
            rows.append((m.value, h, w, t_loop, t_fast, path_err, layout_err))

            r = from_tensor(fast, DataLayout.NCHW)
            variants.append((f"{m.value} {h}x{w}", r))
            save_image(outdir / f"resize_{m.value}_{h}x{w}.png", r)

        make_grid(img, variants, figdir / f"grid_resize_{h}x{w}.png")

    csv_path = tbldir / "resize_benchmark.csv"
    with open(csv_path, "w", encoding="utf-8") as f:
        f.write("method,height,width,cursor_s,vectorised_s,path_max_abs_err,layout_max_abs_err\n")
        for m, h, w, t_loop, t_fast, path_err, layout_err in rows:
            f.write(f"{m},{h},{w},{t_loop:.6f},{t_fast:.6f},{path_err:.3e},{layout_err:.3e}\n")

    print(f"[OK] CSV:     {csv_path.resolve()}")
    print(f"[OK] Figures: {figdir.resolve()}")


if __name__ == "__main__":
    main()
