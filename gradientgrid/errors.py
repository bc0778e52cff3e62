"""Exceptions raised by gradientgrid.

Every error derives from ``ValueError`` so code that already guards gradient
construction with ``except ValueError`` keeps working.
"""


class GradientError(ValueError):
    """Base class for all gradientgrid errors."""


class InvalidArgument(GradientError):
    """Raised when a gradient, color or grid is built from unusable input."""


class OutOfRange(GradientError):
    """Raised when a spectrum position falls outside [0, 1]."""

    def __init__(self, fraction: float) -> None:
        self.fraction = fraction
        super().__init__(f"fraction must be between 0 and 1, got {fraction!r}")
