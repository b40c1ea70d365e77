#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options classes for fastcat."""

from fastcat.options.base import CloneFrozenMixin
from fastcat.options.render import RenderOptions

__all__ = ["CloneFrozenMixin", "RenderOptions"]
