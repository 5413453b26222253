# Copyright (c) 2026 Huemix
# SPDX-License-Identifier: MIT

"""
Schema definitions for interpolation.

All types in this module are immutable (frozen dataclasses and enums).
"""

from huemix.schema.options import (
    DEFAULT_RATIO,
    DEFAULT_SPACE,
    InterpolationOptions,
)
from huemix.schema.spaces import (
    HSL,
    HSV,
    LAB,
    LUV,
    RGB,
    ColorSpace,
    SpaceTuple,
)

__all__ = [
    # Space tags
    "ColorSpace",
    # Component tuples
    "RGB",
    "HSV",
    "HSL",
    "LUV",
    "LAB",
    "SpaceTuple",
    # Options
    "InterpolationOptions",
    "DEFAULT_RATIO",
    "DEFAULT_SPACE",
]
