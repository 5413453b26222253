# Copyright (c) 2026 Huemix
# SPDX-License-Identifier: MIT

"""
Interpolation dispatcher.

This is the primary entry point for blending two colors. Colors are opaque:
the dispatcher only asks them to convert themselves into a space tuple and
asks their type to rebuild a color from one.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, TypeVar, Union, runtime_checkable

from huemix.errors import UnsupportedColorSpaceError
from huemix.mix.primitives import mix_hsl, mix_hsv, mix_lab, mix_luv, mix_rgb
from huemix.schema import (
    HSL,
    HSV,
    LAB,
    LUV,
    RGB,
    ColorSpace,
    InterpolationOptions,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class ColorLike(Protocol):
    """
    What the interpolator needs from a color type.

    Conversions are expected to be total and, within each space's natural
    domain, inverses of each other.
    """

    def to_rgb(self) -> RGB: ...
    def to_hsv(self) -> HSV: ...
    def to_hsl(self) -> HSL: ...
    def to_luv(self) -> LUV: ...
    def to_lab(self) -> LAB: ...

    @classmethod
    def from_rgb(cls, rgb: RGB) -> ColorLike: ...
    @classmethod
    def from_hsv(cls, hsv: HSV) -> ColorLike: ...
    @classmethod
    def from_hsl(cls, hsl: HSL) -> ColorLike: ...
    @classmethod
    def from_luv(cls, luv: LUV) -> ColorLike: ...
    @classmethod
    def from_lab(cls, lab: LAB) -> ColorLike: ...


C = TypeVar("C", bound=ColorLike)


def blend_space(tag: Optional[ColorSpace]) -> ColorSpace:
    """
    Map a requested tag to the space the blend actually runs in.

    Args:
        tag: A ColorSpace, or None for a tag that could not be recognised.

    Returns:
        One of RGB, HSV, HSL, LAB or LUV.

    Raises:
        UnsupportedColorSpaceError: For CYMK.
    """
    if tag is ColorSpace.RGB:
        return ColorSpace.RGB
    if tag is ColorSpace.CYMK:
        raise UnsupportedColorSpaceError(tag)
    if tag is ColorSpace.HSV:
        return ColorSpace.HSV
    if tag is ColorSpace.HSL:
        return ColorSpace.HSL
    if tag is ColorSpace.LAB:
        return ColorSpace.LAB
    if tag in (ColorSpace.LUV, ColorSpace.HCL, ColorSpace.NONE):
        return ColorSpace.LUV
    # Unrecognised tag
    logger.debug("Unrecognised color space tag, falling back to LUV")
    return ColorSpace.LUV


def interpolate_options(c1: C, c2: ColorLike, options: InterpolationOptions) -> C:
    """
    Blend two colors according to an InterpolationOptions.

    The result is rebuilt with ``type(c1)``. Neither input is modified.
    """
    if c1 is None or c2 is None:
        raise TypeError("interpolate() needs two colors, got None")

    v = options.resolved_ratio
    space = blend_space(options.resolved_space)
    logger.debug("Interpolating at ratio %s in %s", v, space.name)

    kind = type(c1)
    if space is ColorSpace.RGB:
        return kind.from_rgb(mix_rgb(c1.to_rgb(), c2.to_rgb(), v))
    if space is ColorSpace.HSV:
        return kind.from_hsv(mix_hsv(c1.to_hsv(), c2.to_hsv(), v))
    if space is ColorSpace.HSL:
        return kind.from_hsl(mix_hsl(c1.to_hsl(), c2.to_hsl(), v))
    if space is ColorSpace.LAB:
        return kind.from_lab(mix_lab(c1.to_lab(), c2.to_lab(), v))
    return kind.from_luv(mix_luv(c1.to_luv(), c2.to_luv(), v))


def interpolate(
    c1: C,
    c2: ColorLike,
    ratio: Optional[float] = None,
    space: Optional[Union[ColorSpace, str]] = None,
) -> C:
    """
    Blend two colors at a ratio, in a chosen color space.

    Args:
        c1: First color (returned at ratio 0)
        c2: Second color (returned at ratio 1)
        ratio: Mixing ratio (default: 0.5). Not clamped.
        space: Space to blend in (default: LUV). HCL is an alias of LUV,
            and unrecognised names also take the LUV path.

    Returns:
        A new color of the same type as c1.

    Raises:
        UnsupportedColorSpaceError: If space is CYMK.
        TypeError: If either color is None.

    Example:
        >>> interpolate(red, blue, 0.25, ColorSpace.HSV)
    """
    return interpolate_options(c1, c2, InterpolationOptions(ratio=ratio, space=space))


def mix(c1: C, c2: ColorLike, *options: object) -> C:
    """
    Loose form of interpolate().

    Options are assigned by type: a number is the ratio, a ColorSpace or
    string is the space. Order is irrelevant and the last value of each
    kind wins, e.g. ``mix(a, b, ColorSpace.HSL, 0.75)``.
    """
    return interpolate_options(c1, c2, InterpolationOptions.from_args(*options))
