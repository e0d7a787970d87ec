"""Read-only renderers for finished grids."""

__all__ = ["render_ascii", "render_png", "save_png"]

from .ascii import render_ascii
from .image import render_png, save_png
