"""
gradientgrid - multi-stop RGB gradients mapped onto grids
=========================================================

Build a gradient from color stops, sample it at any position between 0 and
1, or map it onto a grid of cells along a direction.

Quick Start
-----------
>>> from gradientgrid import Gradient, GradientDirection
>>>
>>> gradient = Gradient([(255, 0, 0), (0, 0, 255)], steps=[4])
>>> gradient.color_at_fraction(0.0)
ColorRGB(r=255, g=0, b=0)
>>>
>>> cells = gradient.build_coordinate_map(2, 2, GradientDirection.VERTICAL)
>>> len(cells)
9

Modules
-------
- colors: immutable RGB color values
- gradients: spectrum building, sampling, direction strategies and fills
- types: direction enum, grid coordinates and channel limits
- errors: InvalidArgument and OutOfRange
"""

from .colors import Color, ColorBase, ColorRGB, as_color
from .errors import GradientError, InvalidArgument, OutOfRange
from .gradients import (
    Fill,
    Gradient,
    GradientFill,
    SolidFill,
    build_spectrum,
    fraction_grid,
    interpolate_colors,
    normalized_distance_from_center,
)
from .types.grid_types import GradientDirection, GridCoordinate, Rect

__version__ = "1.0.0"

__all__ = [
    # Colors
    "ColorBase",
    "ColorRGB",
    "Color",
    "as_color",

    # Gradients
    "Gradient",
    "GradientDirection",
    "build_spectrum",
    "interpolate_colors",
    "fraction_grid",
    "normalized_distance_from_center",

    # Fills
    "Fill",
    "GradientFill",
    "SolidFill",

    # Grid types
    "GridCoordinate",
    "Rect",

    # Errors
    "GradientError",
    "InvalidArgument",
    "OutOfRange",

    # Version
    "__version__",
]
