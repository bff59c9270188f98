from __future__ import annotations

import io

import numpy as np
import streamlit as st
import imageio.v2 as imageio

from tensor_resize.cursors import ArrayDecoder, ArrayEncoder
from tensor_resize.interpolation import ResizeMethod, resize, resize_image
from tensor_resize.io_utils import to_gray, to_tensor, from_tensor, ensure_uint8
from tensor_resize.layout import DataLayout, dims, make_shape
from tensor_resize.metrics import mse, psnr, max_abs_error

st.set_page_config(page_title="Tensor Resize", layout="wide")

st.title("🖼️ Tensor Resize")
st.caption("Bilinear / nearest-neighbour resampling with top-left-corner projection, NCHW or NHWC")


def load_upload(u) -> np.ndarray:
    data = u.read()
    return imageio.imread(io.BytesIO(data))


tabs = st.tabs(["Resizing", "Layout parity"])


# ==========================
# Tab 1: Resizing
# ==========================
with tabs[0]:
    st.subheader("Resizing")

    left, right = st.columns([1, 1], gap="large")

    with left:
        up = st.file_uploader("Upload image", type=["png", "jpg", "jpeg"], key="resize")
        method = st.selectbox("Method", [m.value for m in ResizeMethod], index=0, key="resize_method")
        gray = st.checkbox("Grayscale", value=True, key="resize_gray")
        mode = st.radio("Target", ["Scale", "Size"], horizontal=True, key="resize_mode")
        if mode == "Scale":
            scale = st.slider("Scale", 0.1, 3.0, 2.0, 0.1, key="resize_scale")
        else:
            out_h = st.number_input("Height", min_value=1, value=128, step=1, key="resize_h")
            out_w = st.number_input("Width", min_value=1, value=128, step=1, key="resize_w")

    if up is not None:
        img = load_upload(up)
        img = to_gray(img) if gray else ensure_uint8(img[..., :3] if img.ndim == 3 else img)

        if mode == "Scale":
            out = resize_image(img, scale=scale, method=method)
        else:
            out = resize_image(img, size=(int(out_h), int(out_w)), method=method)

        with right:
            c1, c2 = st.columns(2)
            c1.markdown(f"**Original** {img.shape[1]}×{img.shape[0]}")
            c1.image(img, clamp=True)
            c2.markdown(f"**Resized ({method})** {out.shape[1]}×{out.shape[0]}")
            c2.image(out, clamp=True)


# ==========================
# Tab 2: Layout parity
# ==========================
with tabs[1]:
    st.subheader("Layout parity (cursor resampler)")
    st.caption("Resizes the same image encoded as NCHW and NHWC and compares the results in a common layout.")

    left, right = st.columns([1, 2], gap="large")

    with left:
        up2 = st.file_uploader("Upload image", type=["png", "jpg", "jpeg"], key="parity")
        method2 = st.selectbox("Method", [m.value for m in ResizeMethod], index=0, key="parity_method")
        out_h2 = st.number_input("Height", min_value=1, max_value=256, value=48, step=1, key="parity_h")
        out_w2 = st.number_input("Width", min_value=1, max_value=256, value=48, step=1, key="parity_w")
        st.caption("The cursor path visits every output element in Python, so keep sizes small.")

    if up2 is not None:
        img = to_gray(load_upload(up2))
        results = {}
        for layout in DataLayout:
            tensor = to_tensor(img, layout)
            n, c, _, _ = dims(tensor.shape, layout)
            out = np.zeros(make_shape(n, c, int(out_h2), int(out_w2), layout), dtype=np.float32)
            resize(ArrayDecoder(tensor), tensor.shape, ArrayEncoder(out), out.shape, layout, method2)
            results[layout] = from_tensor(out, layout)

        a = results[DataLayout.NCHW]
        b = results[DataLayout.NHWC]

        with right:
            c1, c2 = st.columns(2)
            c1.markdown("**NCHW**")
            c1.image(ensure_uint8(a), clamp=True)
            c2.markdown("**NHWC**")
            c2.image(ensure_uint8(b), clamp=True)

            st.dataframe(
                [{
                    "method": method2,
                    "mse": mse(a, b),
                    "psnr(dB)": psnr(a, b, max_value=255.0),
                    "max_abs_error": max_abs_error(a, b),
                }],
                use_container_width=True,
            )
