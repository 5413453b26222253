# Copyright (c) 2026 Huemix
# SPDX-License-Identifier: MIT

"""Shared fixtures: a stub collaborator with identity conversions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pytest

from huemix.schema import HSL, HSV, LAB, LUV, RGB


@dataclass(frozen=True)
class StubColor:
    """
    Color whose every space tuple is the same three numbers.

    ``origin`` records which from_* constructor built it, so tests can see
    which dispatch arm ran.
    """

    coords: tuple[float, float, float]
    origin: Optional[str] = None

    def to_rgb(self) -> RGB:
        return RGB(*self.coords)

    def to_hsv(self) -> HSV:
        return HSV(*self.coords)

    def to_hsl(self) -> HSL:
        return HSL(*self.coords)

    def to_luv(self) -> LUV:
        return LUV(*self.coords)

    def to_lab(self) -> LAB:
        return LAB(*self.coords)

    @classmethod
    def from_rgb(cls, rgb: RGB) -> StubColor:
        return cls(rgb.as_tuple(), "rgb")

    @classmethod
    def from_hsv(cls, hsv: HSV) -> StubColor:
        return cls(hsv.as_tuple(), "hsv")

    @classmethod
    def from_hsl(cls, hsl: HSL) -> StubColor:
        return cls(hsl.as_tuple(), "hsl")

    @classmethod
    def from_luv(cls, luv: LUV) -> StubColor:
        return cls(luv.as_tuple(), "luv")

    @classmethod
    def from_lab(cls, lab: LAB) -> StubColor:
        return cls(lab.as_tuple(), "lab")


@pytest.fixture
def stub():
    return StubColor


@pytest.fixture
def pair():
    """Two hue-space friendly colors: (h, s, v/l) within natural ranges."""
    return StubColor((30.0, 0.2, 0.4)), StubColor((90.0, 0.8, 0.6))
