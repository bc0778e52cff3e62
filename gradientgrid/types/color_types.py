from __future__ import annotations
from typing import Sequence, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from ..colors.rgb import ColorRGB

IntVector = Tuple[int, ...]
RGBTuple = Tuple[int, int, int]
ColorLike = Union["ColorRGB", RGBTuple, Sequence[int], str]
