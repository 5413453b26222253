# Copyright (c) 2026 Huemix
# SPDX-License-Identifier: MIT

"""
Ready-made color types implementing the ColorLike protocol.

Adapters import their backing library lazily; installing the matching
extra is only needed when an adapter is actually used.
"""

from huemix.adapters.coloraide_color import ColorAideColor

__all__ = ["ColorAideColor"]
