"""
Color values used by gradients.

>>> from gradientgrid.colors import ColorRGB
>>> red = ColorRGB((255, 0, 0))
>>> red.value
(255, 0, 0)
>>> ColorRGB.from_hex("#0000ff").b
255

Colors are immutable and hashable. Channels are stored as given; use
``clamped()`` to force them into 0..255.
"""

from .color_base import ColorBase
from .rgb import Color, ColorRGB, as_color

__all__ = ["ColorBase", "ColorRGB", "Color", "as_color"]
