from __future__ import annotations

import operator
import warnings
from typing import List, Sequence, Tuple

import numpy as np

from ..colors.rgb import ColorRGB, as_color
from ..errors import InvalidArgument
from ..types.color_types import ColorLike


def _validate_step(step: int) -> int:
    try:
        step = operator.index(step)
    except TypeError:
        raise InvalidArgument(f"steps must be integers, got {step!r}") from None
    if step < 1:
        raise InvalidArgument(f"steps must be greater than 0, got {step}")
    return step


def interpolate_colors(start: ColorLike, end: ColorLike, steps: int) -> List[ColorRGB]:
    """
    Linearly interpolate ``steps + 1`` colors from ``start`` to ``end``.

    Both endpoints are included. Each channel is computed as
    ``start + (s / steps) * (end - start)`` and truncated toward zero, so
    the result is not clamped when the endpoints are out of range.

    Args:
        start: First color of the segment
        end: Last color of the segment
        steps: Number of intervals between the endpoints, an integer >= 1

    Returns:
        List of ``steps + 1`` ColorRGB instances
    """
    steps = _validate_step(steps)

    c0 = np.array(as_color(start).value, dtype=np.float64)
    c1 = np.array(as_color(end).value, dtype=np.float64)

    u = np.arange(steps + 1, dtype=np.float64) / steps
    channels = np.trunc(c0 + u[:, None] * (c1 - c0)).astype(np.int64)

    return [ColorRGB(row) for row in channels]


def build_spectrum(
    stops: Sequence[ColorLike],
    steps: Sequence[int],
    loop: bool = False,
    strict: bool = False,
    *,
    warn: bool = True,
    stacklevel: int = 2,
) -> Tuple[ColorRGB, ...]:
    """
    Expand color stops into the full sequence of gradient colors.

    Args:
        stops: Ordered colors the gradient passes through, at least one
        steps: Integer interval count for each pair of consecutive stops
        loop: Close the gradient by returning to the first stop
        strict: Raise instead of truncating when ``steps`` does not have one
            entry per pair of stops
        warn: Emit a ``UserWarning`` when truncating; pass False to
            truncate silently
        stacklevel: Passed to ``warnings.warn``; the default blames the
            direct caller of this function

    Returns:
        Tuple of colors. Segments share their boundary color, so each inner
        stop appears twice.

    Notes:
        With a single stop the spectrum is that stop repeated ``sum(steps)``
        times. Otherwise stop pairs and steps are zipped, so surplus entries
        on either side are dropped.
    """
    stops = [as_color(stop) for stop in stops]
    if not stops:
        raise InvalidArgument("At least one color stop must be provided.")
    steps = tuple(_validate_step(step) for step in steps)

    if len(stops) == 1:
        spectrum = stops * sum(steps)
    else:
        if loop:
            stops.append(stops[0])
        pairs = list(zip(stops, stops[1:]))

        if len(pairs) != len(steps):
            message = (
                f"{len(steps)} step counts given for {len(pairs)} color transitions; "
                f"only the first {min(len(pairs), len(steps))} transitions are used"
            )
            if strict:
                raise InvalidArgument(message)
            if warn:
                warnings.warn(message, stacklevel=stacklevel)

        spectrum = []
        for (start, end), n in zip(pairs, steps):
            spectrum.extend(interpolate_colors(start, end, n))

    if not spectrum:
        raise InvalidArgument("At least one step must be provided.")
    return tuple(spectrum)
