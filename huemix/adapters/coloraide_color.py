# Copyright (c) 2026 Huemix
# SPDX-License-Identifier: MIT

"""
ColorAide-backed color type.

Implements the ColorLike protocol by delegating every conversion to the
``coloraide`` library, so interpolate() can be used without writing a
collaborator by hand.

Space mapping:
- RGB -> "srgb" (gamma-encoded, [0, 1])
- HSV -> "hsv", HSL -> "hsl" (hue in degrees, 0 when achromatic)
- LUV -> "luv" (CIE L*u*v*, D65)
- LAB -> "lab-d65" (CIE L*a*b*, D65)
"""

from __future__ import annotations

from typing import Any

from huemix.schema import HSL, HSV, LAB, LUV, RGB


def _color_classes() -> tuple[Any, Any]:
    """Return (coloraide.Color, ColorAll); ColorAll registers every space."""
    try:
        from coloraide import Color
        from coloraide.everything import ColorAll
    except ImportError as e:
        raise ImportError(
            "coloraide is required for ColorAideColor. "
            "Install with: pip install huemix[coloraide]"
        ) from e
    return Color, ColorAll


class ColorAideColor:
    """
    Immutable wrapper around a ``coloraide.Color``.

    The wrapped color is copied on the way in and out, so callers can never
    mutate an instance through a shared reference.
    """

    __slots__ = ("_color",)

    def __init__(self, color: Any) -> None:
        Color, ColorAll = _color_classes()
        if not isinstance(color, Color):
            raise TypeError(
                f"Expected coloraide.Color, got {type(color).__name__}"
            )
        object.__setattr__(self, "_color", ColorAll(color))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._color.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorAideColor):
            return NotImplemented
        return self._color == other._color

    def __hash__(self) -> int:
        return hash((self._color.space(), tuple(self._color[:])))

    @property
    def color(self) -> Any:
        """A copy of the wrapped coloraide.Color."""
        return self._color.clone()

    @classmethod
    def _build(cls, space: str, coords: tuple[float, ...]) -> ColorAideColor:
        return cls(_color_classes()[1](space, list(coords)))

    def _coords(self, space: str) -> tuple[float, ...]:
        return tuple(float(x) for x in self._color.convert(space).coords(nans=False))

    # -- ColorLike ----------------------------------------------------------

    def to_rgb(self) -> RGB:
        return RGB(*self._coords("srgb"))

    def to_hsv(self) -> HSV:
        return HSV(*self._coords("hsv"))

    def to_hsl(self) -> HSL:
        return HSL(*self._coords("hsl"))

    def to_luv(self) -> LUV:
        return LUV(*self._coords("luv"))

    def to_lab(self) -> LAB:
        return LAB(*self._coords("lab-d65"))

    @classmethod
    def from_rgb(cls, rgb: RGB) -> ColorAideColor:
        return cls._build("srgb", rgb.as_tuple())

    @classmethod
    def from_hsv(cls, hsv: HSV) -> ColorAideColor:
        return cls._build("hsv", hsv.as_tuple())

    @classmethod
    def from_hsl(cls, hsl: HSL) -> ColorAideColor:
        return cls._build("hsl", hsl.as_tuple())

    @classmethod
    def from_luv(cls, luv: LUV) -> ColorAideColor:
        return cls._build("luv", luv.as_tuple())

    @classmethod
    def from_lab(cls, lab: LAB) -> ColorAideColor:
        return cls._build("lab-d65", lab.as_tuple())
