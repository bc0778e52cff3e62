from .directions import (
    diagonal_fractions,
    direction_to_fraction_function,
    fraction_grid,
    horizontal_fractions,
    normalized_distance_from_center,
    radial_fractions,
    vertical_fractions,
)
from .fill import Fill, GradientFill, SolidFill
from .gradient import Gradient
from .spectrum import build_spectrum, interpolate_colors

__all__ = [
    "Gradient",
    "build_spectrum",
    "interpolate_colors",
    "fraction_grid",
    "direction_to_fraction_function",
    "vertical_fractions",
    "horizontal_fractions",
    "radial_fractions",
    "diagonal_fractions",
    "normalized_distance_from_center",
    "Fill",
    "GradientFill",
    "SolidFill",
]
