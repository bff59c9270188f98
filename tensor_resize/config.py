from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional

from .interpolation import ResizeMethod
from .layout import DataLayout


@dataclass(frozen=True)
class ResizeConfig:
    height: int
    width: int
    method: ResizeMethod = ResizeMethod.BILINEAR
    layout: DataLayout = DataLayout.NCHW
    output_layout: Optional[DataLayout] = None

    def __post_init__(self):
        if self.height < 1 or self.width < 1:
            raise ValueError(f"Output size must be >= 1, got {self.height}x{self.width}")
        object.__setattr__(self, "method", ResizeMethod.parse(self.method))
        object.__setattr__(self, "layout", DataLayout.parse(self.layout))
        if self.output_layout is not None:
            object.__setattr__(self, "output_layout", DataLayout.parse(self.output_layout))

    @property
    def size(self):
        return self.height, self.width

    @property
    def resolved_output_layout(self) -> DataLayout:
        return self.layout if self.output_layout is None else self.output_layout

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ResizeConfig":
        return cls(
            height=args.height,
            width=args.width,
            method=args.method,
            layout=args.layout,
            output_layout=args.output_layout,
        )


def add_resize_args(ap: argparse.ArgumentParser, require_size: bool = True) -> argparse.ArgumentParser:
    ap.add_argument("--height", type=int, required=require_size)
    ap.add_argument("--width", type=int, required=require_size)
    ap.add_argument("--method", choices=[m.value for m in ResizeMethod], default=ResizeMethod.BILINEAR.value)
    ap.add_argument("--layout", choices=[l.value for l in DataLayout], default=DataLayout.NCHW.value)
    ap.add_argument("--output-layout", choices=[l.value for l in DataLayout], default=None)
    ap.add_argument("--log-level", default="INFO")
    return ap
