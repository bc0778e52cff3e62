"""
Fraction strategies for projecting a spectrum onto a grid.

Each strategy takes the inclusive grid extent ``(max_row, max_col)`` and
returns a float array of shape ``(max_row + 1, max_col + 1)`` indexed as
``fractions[row, col]``. Values lie in [0, 1], except that 0/0 on a
degenerate grid yields NaN, which samplers treat as the end of the
gradient.
"""
from __future__ import annotations

import operator
from typing import Callable, Dict, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from ..errors import InvalidArgument
from ..types.grid_types import GradientDirection

FractionFunction = Callable[[int, int], NDArray]


def validate_extent(max_row: int, max_col: int) -> Tuple[int, int]:
    try:
        max_row, max_col = operator.index(max_row), operator.index(max_col)
    except TypeError:
        raise InvalidArgument(
            f"grid extent must be integers, got ({max_row!r}, {max_col!r})"
        ) from None
    if max_row < 0 or max_col < 0:
        raise InvalidArgument(
            f"grid extent must be non-negative, got ({max_row}, {max_col})"
        )
    return max_row, max_col


def _grid_indices(max_row: int, max_col: int) -> Tuple[NDArray, NDArray]:
    rows, cols = np.indices((max_row + 1, max_col + 1), dtype=np.float64)
    return rows, cols


def vertical_fractions(max_row: int, max_col: int) -> NDArray:
    rows, _ = _grid_indices(max_row, max_col)
    if max_row == 0:
        return np.ones_like(rows)
    return rows / max_row


def horizontal_fractions(max_row: int, max_col: int) -> NDArray:
    _, cols = _grid_indices(max_row, max_col)
    if max_col == 0:
        return np.ones_like(cols)
    return cols / max_col


def normalized_distance_from_center(
    max_row: int,
    max_col: int,
    col: Union[float, NDArray],
    row: Union[float, NDArray],
) -> Union[float, NDArray]:
    """
    Distance from ``(col, row)`` to the grid center, divided by the
    center-to-corner distance.

    A 1x1 grid has no extent, so the division is 0/0 and the result is NaN.
    """
    center_x = max_col / 2.0
    center_y = max_row / 2.0
    dx = np.asarray(col, dtype=np.float64) - center_x
    dy = np.asarray(row, dtype=np.float64) - center_y
    distance = np.sqrt(dx * dx + dy * dy)
    max_distance = np.sqrt(center_x * center_x + center_y * center_y)
    with np.errstate(divide="ignore", invalid="ignore"):
        return distance / max_distance


def radial_fractions(max_row: int, max_col: int) -> NDArray:
    rows, cols = _grid_indices(max_row, max_col)
    return normalized_distance_from_center(max_row, max_col, cols, rows)


def diagonal_fractions(max_row: int, max_col: int) -> NDArray:
    rows, cols = _grid_indices(max_row, max_col)
    # rows count double, so the slope is steeper than 45 degrees
    with np.errstate(divide="ignore", invalid="ignore"):
        return (rows * 2 + cols) / np.float64(max_row * 2 + max_col)


direction_to_fraction_function: Dict[GradientDirection, FractionFunction] = {
    GradientDirection.VERTICAL: vertical_fractions,
    GradientDirection.HORIZONTAL: horizontal_fractions,
    GradientDirection.RADIAL: radial_fractions,
    GradientDirection.DIAGONAL: diagonal_fractions,
}


def resolve_direction(direction: Union[GradientDirection, str]) -> GradientDirection:
    if isinstance(direction, GradientDirection):
        return direction
    try:
        return GradientDirection(str(direction).lower())
    except ValueError:
        valid = ", ".join(d.value for d in GradientDirection)
        raise InvalidArgument(
            f"unknown gradient direction {direction!r}; expected one of: {valid}"
        ) from None


def fraction_grid(
    max_row: int,
    max_col: int,
    direction: Union[GradientDirection, str],
) -> NDArray:
    """Compute the per-cell spectrum fractions for ``direction``."""
    max_row, max_col = validate_extent(max_row, max_col)
    fn = direction_to_fraction_function[resolve_direction(direction)]
    return fn(max_row, max_col)
