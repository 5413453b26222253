# Copyright (c) 2026 Huemix
# SPDX-License-Identifier: MIT

"""
Mixing primitives.

Pure blend functions over plain numbers. They know nothing about color
objects; the interpolator feeds them component tuples.

Every function accepts Python floats or NumPy arrays (broadcasting as NumPy
does). Scalar inputs return Python floats.
"""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import NDArray

from huemix.schema import HSL, HSV, LAB, LUV, RGB


Number = Union[float, NDArray[np.float64]]


def _out(x: NDArray[np.float64]) -> Number:
    """Unwrap 0-d results so scalar callers get a float back."""
    x = np.asarray(x)
    return float(x) if x.ndim == 0 else x


# =============================================================================
# Linear and circular blends
# =============================================================================


def lerp(x1: Number, x2: Number, v: Number) -> Number:
    """
    Linear blend ``(1 - v) * x1 + v * x2``.

    NaN inputs are replaced by 0.0 before blending, so an undefined
    component never propagates into the result.
    """
    a = np.asarray(x1, dtype=np.float64)
    b = np.asarray(x2, dtype=np.float64)
    a = np.where(np.isnan(a), 0.0, a)
    b = np.where(np.isnan(b), 0.0, b)
    return _out((1 - v) * a + v * b)


def blend_hue(
    h1: Number, s1: Number, o1: Number,
    h2: Number, s2: Number, o2: Number,
    v: Number,
) -> tuple[Number, Number, Number]:
    """
    Blend two hue-based triples (HSV or HSL).

    Hue:
    - If h2 - h1 > 180, h1 is lifted by a full turn before blending and the
      result is reduced modulo 360 (truncated, so the sign follows the
      dividend).
    - Otherwise plain ``h1 + v * (h2 - h1)`` with no reduction. This branch
      also covers very negative differences, so the result can leave
      [0, 360).
    - A NaN hue (achromatic) satisfies neither test and yields 0.0.

    The other two components (saturation and value/lightness) are blended
    linearly and clamped to [0, 1].

    Args:
        h1, s1, o1: First triple (o is value for HSV, lightness for HSL)
        h2, s2, o2: Second triple
        v: Mixing ratio, not clamped

    Returns:
        (hue, saturation, value_or_lightness)
    """
    h1 = np.asarray(h1, dtype=np.float64)
    h2 = np.asarray(h2, dtype=np.float64)
    d = h2 - h1

    wrapped = np.fmod((1 - v) * (h1 + 360.0) + v * h2, 360.0)
    direct = h1 + v * d
    hh = np.where(d > 180.0, wrapped, np.where(d <= 180.0, direct, 0.0))

    ss = np.clip((1 - v) * np.asarray(s1, dtype=np.float64) + v * np.asarray(s2), 0.0, 1.0)
    oo = np.clip((1 - v) * np.asarray(o1, dtype=np.float64) + v * np.asarray(o2), 0.0, 1.0)
    return _out(hh), _out(ss), _out(oo)


# =============================================================================
# Per-space mixers
# =============================================================================


def mix_rgb(c1: RGB, c2: RGB, v: float) -> RGB:
    return RGB(lerp(c1.r, c2.r, v), lerp(c1.g, c2.g, v), lerp(c1.b, c2.b, v))


def mix_luv(c1: LUV, c2: LUV, v: float) -> LUV:
    return LUV(lerp(c1.l, c2.l, v), lerp(c1.u, c2.u, v), lerp(c1.v, c2.v, v))


def mix_lab(c1: LAB, c2: LAB, v: float) -> LAB:
    return LAB(lerp(c1.l, c2.l, v), lerp(c1.a, c2.a, v), lerp(c1.b, c2.b, v))


def mix_hsv(c1: HSV, c2: HSV, v: float) -> HSV:
    """Blend two HSV tuples along the hue circle."""
    return HSV(*blend_hue(c1.h, c1.s, c1.v, c2.h, c2.s, c2.v, v))


def mix_hsl(c1: HSL, c2: HSL, v: float) -> HSL:
    """Blend two HSL tuples along the hue circle."""
    return HSL(*blend_hue(c1.h, c1.s, c1.l, c2.h, c2.s, c2.l, v))
