# Copyright (c) 2026 Huemix
# SPDX-License-Identifier: MIT

"""Exceptions raised by the interpolation engine."""

from __future__ import annotations

from typing import Any


class UnsupportedColorSpaceError(ValueError):
    """
    Raised when a blend is requested in a space that has no implementation.

    Attributes:
        space: The offending ColorSpace member.
    """

    def __init__(self, space: Any) -> None:
        self.space = space
        name = getattr(space, "name", space)
        super().__init__(f"Interpolation in {name} is not supported")
