# Copyright (c) 2026 Huemix
# SPDX-License-Identifier: MIT

"""
Vectorized blending of component arrays.

For callers that already hold colors as (..., 3) arrays in the target
space. No conversion happens here; the arrays are blended as they are.
"""

from __future__ import annotations

from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from huemix.mix.interpolate import blend_space
from huemix.mix.primitives import blend_hue, lerp
from huemix.schema import ColorSpace, InterpolationOptions


def mix_arrays(
    a: NDArray[np.float64],
    b: NDArray[np.float64],
    ratio: Union[float, NDArray[np.float64]] = 0.5,
    space: Optional[Union[ColorSpace, str]] = None,
) -> NDArray[np.float64]:
    """
    Blend arrays of space tuples.

    Args:
        a: Array of shape (..., 3), components in the given space
            (hue first for HSV/HSL)
        b: Array broadcastable with a
        ratio: Scalar, or array matching the leading dimensions, so one
            pair can be sampled at many ratios
        space: Space the components are in (default: LUV)

    Returns:
        Array of shape (..., 3) with the blended components

    Raises:
        UnsupportedColorSpaceError: If space is CYMK.
        ValueError: If either input is not a (..., 3) array.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.ndim == 0 or b.ndim == 0 or a.shape[-1] != 3 or b.shape[-1] != 3:
        raise ValueError(
            f"Expected (..., 3) arrays, got shapes {a.shape} and {b.shape}"
        )

    target = blend_space(InterpolationOptions(ratio=0.5, space=space).resolved_space)
    v = np.asarray(ratio, dtype=np.float64)

    if target in (ColorSpace.HSV, ColorSpace.HSL):
        h, s, o = blend_hue(
            a[..., 0], a[..., 1], a[..., 2],
            b[..., 0], b[..., 1], b[..., 2],
            v,
        )
        return np.stack(np.broadcast_arrays(h, s, o), axis=-1)

    # RGB, LAB and LUV are all per-component linear
    if v.ndim > 0:
        v = v[..., np.newaxis]
    return np.asarray(lerp(a, b, v), dtype=np.float64)
