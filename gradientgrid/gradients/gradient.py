from __future__ import annotations

import math
from typing import Dict, Sequence, Tuple, Union

import numpy as np
from boundednumbers import UnitFloat
from numpy import ndarray as NDArray

from ..colors.rgb import ColorRGB, as_color
from ..errors import OutOfRange
from ..types.color_types import ColorLike
from ..types.grid_types import GradientDirection, GridCoordinate
from .directions import fraction_grid
from .spectrum import build_spectrum


class Gradient:
    """
    A multi-stop RGB gradient expanded into a fixed spectrum of colors.

    The spectrum is computed once at construction and never changes, so a
    Gradient can be shared freely between readers.

    Example:
        >>> g = Gradient([(255, 0, 0), (0, 0, 255)], steps=[4])
        >>> len(g)
        5
        >>> g.color_at_fraction(0.5)
        ColorRGB(r=127, g=0, b=127)
    """

    __slots__ = ("_stops", "_steps", "_loop", "_spectrum")

    def __init__(
        self,
        stops: Sequence[ColorLike],
        steps: Sequence[int],
        loop: bool = False,
        *,
        strict: bool = False,
        warn: bool = True,
    ) -> None:
        """
        Args:
            stops: Ordered colors the gradient passes through, at least one
            steps: Interval count for each pair of consecutive stops
                (one extra entry when ``loop`` is set)
            loop: Return to the first stop at the end
            strict: Reject a ``steps`` length that does not match the
                number of stop pairs instead of truncating
            warn: Warn when truncating; False truncates silently

        Raises:
            InvalidArgument: if ``stops`` is empty or any step is not an
                integer >= 1
        """
        self._stops: Tuple[ColorRGB, ...] = tuple(as_color(s) for s in stops)
        self._steps: Tuple[int, ...] = tuple(steps)
        self._loop = bool(loop)
        self._spectrum = build_spectrum(
            self._stops, self._steps, self._loop, strict=strict, warn=warn, stacklevel=3
        )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def stops(self) -> Tuple[ColorRGB, ...]:
        return self._stops

    @property
    def steps(self) -> Tuple[int, ...]:
        return self._steps

    @property
    def loop(self) -> bool:
        return self._loop

    @property
    def spectrum(self) -> Tuple[ColorRGB, ...]:
        return self._spectrum

    def __len__(self) -> int:
        return len(self._spectrum)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(stops={list(self._stops)!r}, "
            f"steps={list(self._steps)!r}, loop={self._loop})"
        )

    def spectrum_array(self) -> NDArray:
        """Return the spectrum as a read-only ``(len, 3)`` integer array."""
        arr = np.array([c.value for c in self._spectrum], dtype=np.int64)
        arr.setflags(write=False)
        return arr

    def color_at_fraction(self, fraction: Union[UnitFloat, float]) -> ColorRGB:
        """
        Return the spectrum color at ``fraction`` of the way through.

        NaN maps to the last color; it is what a zero-sized grid dimension
        produces when building a coordinate map.

        Raises:
            OutOfRange: if ``fraction`` is outside [0, 1]
        """
        fraction = float(fraction)
        if math.isnan(fraction):
            return self._spectrum[-1]
        if fraction < 0 or fraction > 1:
            raise OutOfRange(fraction)

        index = math.floor(fraction * (len(self._spectrum) - 1))
        return self._spectrum[index]

    def fraction_grid(
        self,
        max_row: int,
        max_col: int,
        direction: Union[GradientDirection, str],
    ) -> NDArray:
        """Per-cell fractions as a ``(max_row + 1, max_col + 1)`` array."""
        return fraction_grid(max_row, max_col, direction)

    def build_coordinate_map(
        self,
        max_row: int,
        max_col: int,
        direction: Union[GradientDirection, str],
    ) -> Dict[GridCoordinate, ColorRGB]:
        """
        Map every cell from ``(0, 0)`` to ``(max_col, max_row)`` inclusive
        to a color, so a 1/1 extent yields four entries.

        Args:
            max_row: Last row index, >= 0
            max_col: Last column index, >= 0
            direction: Strategy turning a cell into a spectrum fraction

        Returns:
            New dict keyed by ``GridCoordinate(col, row)``
        """
        fractions = fraction_grid(max_row, max_col, direction)

        mapping: Dict[GridCoordinate, ColorRGB] = {}
        for (row, col), fraction in np.ndenumerate(fractions):
            mapping[GridCoordinate(col, row)] = self.color_at_fraction(fraction)
        return mapping
