# Copyright (c) 2026 Huemix
# SPDX-License-Identifier: MIT

"""
Interpolation core for Huemix.

Mixing primitives operate on plain numbers; the dispatcher converts colors
into the selected space, blends, and converts back.
"""

from huemix.mix.batch import mix_arrays
from huemix.mix.interpolate import (
    ColorLike,
    blend_space,
    interpolate,
    interpolate_options,
    mix,
)
from huemix.mix.primitives import (
    blend_hue,
    lerp,
    mix_hsl,
    mix_hsv,
    mix_lab,
    mix_luv,
    mix_rgb,
)

__all__ = [
    "interpolate",
    "interpolate_options",
    "mix",
    "mix_arrays",
    "blend_space",
    "ColorLike",
    "lerp",
    "blend_hue",
    "mix_rgb",
    "mix_hsv",
    "mix_hsl",
    "mix_luv",
    "mix_lab",
]
