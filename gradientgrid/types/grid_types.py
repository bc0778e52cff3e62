# No dependencies
from enum import Enum
from typing import NamedTuple, Tuple


class GradientDirection(str, Enum):
    """How a grid coordinate is turned into a position along the spectrum."""
    VERTICAL = "vertical"      # varies by row, constant across a row
    HORIZONTAL = "horizontal"  # varies by column, constant down a column
    RADIAL = "radial"          # varies with distance from the grid center
    DIAGONAL = "diagonal"      # slanted, rows weigh twice as much as columns


class GridCoordinate(NamedTuple):
    col: int
    row: int


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int


CHANNEL_MIN = 0
CHANNEL_MAX = 255

DEFAULT_FILL_COLOR: Tuple[int, int, int] = (0, 0, 0)
