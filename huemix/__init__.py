# Copyright (c) 2026 Huemix
# SPDX-License-Identifier: MIT

"""
Huemix -- color interpolation in a chosen color space.

Blends two colors at a ratio, in device RGB, HSV/HSL (along the hue circle)
or the perceptual LUV/LAB spaces. Colors are opaque to the engine: any type
that can convert itself to and from each space works.

Quick start::

    from huemix import interpolate, ColorSpace

    c = interpolate(red, blue)                      # 0.5 in LUV
    c = interpolate(red, blue, 0.25, ColorSpace.HSV)
"""

from __future__ import annotations

__version__ = "1.0.0"

from huemix.errors import UnsupportedColorSpaceError
from huemix.mix import (
    ColorLike,
    interpolate,
    interpolate_options,
    mix,
    mix_arrays,
)
from huemix.schema import (
    HSL,
    HSV,
    LAB,
    LUV,
    RGB,
    ColorSpace,
    InterpolationOptions,
)

__all__ = [
    # Core API
    "interpolate",
    "interpolate_options",
    "mix",
    "mix_arrays",
    "ColorLike",
    "ColorSpace",
    "InterpolationOptions",
    # Space tuples
    "RGB",
    "HSV",
    "HSL",
    "LUV",
    "LAB",
    # Errors
    "UnsupportedColorSpaceError",
    # Version
    "__version__",
]
