# Copyright (c) 2026 Huemix
# SPDX-License-Identifier: MIT

"""
Interpolation options.

Two settings, each independently optional: the mixing ratio and the space
the blend runs in. Omitted settings fall back to a ratio of 0.5 and the
LUV path.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Optional, Union

from huemix.schema.spaces import ColorSpace


DEFAULT_RATIO = 0.5
DEFAULT_SPACE = ColorSpace.LUV


@dataclass(frozen=True)
class InterpolationOptions:
    """
    Configuration for a single interpolation.

    Attributes:
        ratio: Mixing ratio. 0 yields the first color, 1 the second. Not
            validated or clamped; values outside [0, 1] extrapolate linear
            components and wrap hue. None means 0.5.
        space: Space to blend in, as a ColorSpace or its name. None means
            the default LUV path. Unrecognised names also take the LUV path.
    """

    ratio: Optional[float] = None
    space: Optional[Union[ColorSpace, str]] = None

    @property
    def resolved_ratio(self) -> float:
        return DEFAULT_RATIO if self.ratio is None else float(self.ratio)

    @property
    def resolved_space(self) -> Optional[ColorSpace]:
        """
        The selected space, or None when the tag is unrecognised.

        An omitted tag resolves to DEFAULT_SPACE.
        """
        if self.space is None:
            return DEFAULT_SPACE
        return ColorSpace.parse(self.space)

    @classmethod
    def from_args(cls, *args: object) -> InterpolationOptions:
        """
        Resolve a loose, dynamically-typed option list.

        Each argument is assigned by its runtime type: a real number sets
        the ratio, a ColorSpace or string sets the space. Order does not
        matter; when a setting is given more than once the last one wins.

        Raises:
            TypeError: For any argument that is neither a number nor a tag.
        """
        ratio: Optional[float] = None
        space: Optional[Union[ColorSpace, str]] = None
        for arg in args:
            if isinstance(arg, (ColorSpace, str)):
                space = arg
            elif isinstance(arg, numbers.Real) and not isinstance(arg, bool):
                ratio = float(arg)
            else:
                raise TypeError(
                    f"Expected a ratio or a ColorSpace, got {type(arg).__name__}"
                )
        return cls(ratio=ratio, space=space)

    def to_dict(self) -> dict:
        """Serialize the resolved settings."""
        space = self.resolved_space
        return {
            "ratio": self.resolved_ratio,
            "space": space.value if space is not None else str(self.space),
        }
