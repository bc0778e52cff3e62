from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Union

from ..colors.rgb import ColorRGB, as_color
from ..types.color_types import ColorLike
from ..types.grid_types import DEFAULT_FILL_COLOR, GradientDirection, GridCoordinate, Rect
from .gradient import Gradient


class Fill(ABC):
    """Base class for anything that picks the color of a single cell."""

    @abstractmethod
    def get_color(self, point: Tuple[int, int]) -> ColorRGB:
        """Return the color for ``point`` given as ``(col, row)``."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class SolidFill(Fill):
    """Fills every cell with the same color."""

    def __init__(self, color: ColorLike) -> None:
        self.color = as_color(color)

    def get_color(self, point: Tuple[int, int]) -> ColorRGB:
        return self.color

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.color!r})"


class GradientFill(Fill):
    """
    Fills a rectangular area with a gradient.

    The coordinate map is built once for the area. Points are given in the
    same coordinate space as ``area``; anything outside it gets ``fallback``.
    """

    def __init__(
        self,
        area: Union[Rect, Tuple[int, int, int, int]],
        gradient: Gradient,
        direction: Union[GradientDirection, str],
        fallback: ColorLike = DEFAULT_FILL_COLOR,
    ) -> None:
        self.area = Rect(*area)
        self.gradient = gradient
        self.direction = direction
        self.fallback = as_color(fallback)

        self._map: Dict[GridCoordinate, ColorRGB]
        if self.area.width < 1 or self.area.height < 1:
            self._map = {}
        else:
            self._map = gradient.build_coordinate_map(
                self.area.height - 1, self.area.width - 1, direction
            )

    def get_color(self, point: Tuple[int, int]) -> ColorRGB:
        col, row = point
        key = GridCoordinate(col - self.area.x, row - self.area.y)
        return self._map.get(key, self.fallback)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(area={tuple(self.area)}, direction={self.direction!r})"
