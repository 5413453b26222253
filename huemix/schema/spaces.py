# Copyright (c) 2026 Huemix
# SPDX-License-Identifier: MIT

"""
Interpolation spaces and their component tuples.

Tuples are transient carriers: a collaborator converts a color into one,
a mixer blends two of them, and the collaborator rebuilds a color from the
result. None of them validate ranges; the engine does not constrain
components (hue is in degrees, everything else is unconstrained until the
HSV/HSL mixers clamp saturation, value and lightness).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Iterable, Optional, Union


class ColorSpace(Enum):
    """
    Color space an interpolation is performed in.

    HCL is an alias of LUV. NONE selects the default (LUV) path.
    CYMK is reserved and rejected by the interpolator.
    """

    NONE = "none"
    RGB = "rgb"
    CYMK = "cymk"
    HSV = "hsv"
    HSL = "hsl"
    LUV = "luv"
    HCL = "hcl"
    LAB = "lab"

    @classmethod
    def parse(cls, value: object) -> Optional[ColorSpace]:
        """
        Look up a space by member, value or name (case-insensitive).

        Returns None for None and for anything unrecognised; callers decide
        how to treat an unknown tag.
        """
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key == member.value or key == member.name.lower():
                    return member
        return None


class _SpaceTuple:
    """Shared helpers for the fixed-arity component records."""

    __slots__ = ()

    def as_tuple(self) -> tuple[float, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def __iter__(self):
        return iter(self.as_tuple())

    def to_dict(self) -> dict:
        """Serialize to dictionary keyed by component name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict):
        """Deserialize from dictionary."""
        return cls(**{f.name: float(data[f.name]) for f in fields(cls)})

    @classmethod
    def from_sequence(cls, values: Iterable[float]):
        """Build from any iterable of exactly three numbers."""
        values = tuple(float(x) for x in values)
        names = [f.name for f in fields(cls)]
        if len(values) != len(names):
            raise ValueError(
                f"{cls.__name__} needs {len(names)} components, got {len(values)}"
            )
        return cls(*values)


@dataclass(frozen=True, slots=True)
class RGB(_SpaceTuple):
    """Device RGB, components nominally in [0, 1]."""
    r: float
    g: float
    b: float


@dataclass(frozen=True, slots=True)
class HSV(_SpaceTuple):
    """
    Hue, saturation, value.

    Attributes:
        h: Hue in degrees, [0, 360)
        s: Saturation [0, 1]
        v: Value [0, 1]
    """
    h: float
    s: float
    v: float


@dataclass(frozen=True, slots=True)
class HSL(_SpaceTuple):
    """
    Hue, saturation, lightness.

    Attributes:
        h: Hue in degrees, [0, 360)
        s: Saturation [0, 1]
        l: Lightness [0, 1]
    """
    h: float
    s: float
    l: float  # noqa: E741


@dataclass(frozen=True, slots=True)
class LUV(_SpaceTuple):
    """CIE L*u*v*. Unconstrained colorimetric axes."""
    l: float  # noqa: E741
    u: float
    v: float


@dataclass(frozen=True, slots=True)
class LAB(_SpaceTuple):
    """CIE L*a*b*. Unconstrained colorimetric axes."""
    l: float  # noqa: E741
    a: float
    b: float


SpaceTuple = Union[RGB, HSV, HSL, LUV, LAB]
