from __future__ import annotations
from typing import ClassVar, Tuple
from boundednumbers.functions import clamp
from ..errors import InvalidArgument
from ..types.color_types import ColorLike
from ..types.grid_types import CHANNEL_MAX, CHANNEL_MIN
from .color_base import ColorBase


class ColorRGB(ColorBase):
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "rgb"
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b")

    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    def clamped(self) -> "ColorRGB":
        """Return a copy with every channel clamped to 0..255."""
        return self.__class__(
            tuple(int(clamp(c, CHANNEL_MIN, CHANNEL_MAX)) for c in self._value)
        )

    @classmethod
    def from_hex(cls, text: str) -> "ColorRGB":
        """
        Parse ``#RRGGBB`` or ``#RGB`` (the leading ``#`` is optional).
        """
        digits = text.strip().lstrip("#")
        if len(digits) == 3:
            digits = "".join(d * 2 for d in digits)
        if len(digits) != 6:
            raise InvalidArgument(f"invalid hex color: {text!r}")
        try:
            return cls((int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)))
        except ValueError:
            raise InvalidArgument(f"invalid hex color: {text!r}") from None

    def to_hex(self) -> str:
        """Format as ``#RRGGBB``; channels are clamped first."""
        r, g, b = self.clamped().value
        return f"#{r:02X}{g:02X}{b:02X}"


Color = ColorRGB


def as_color(value: ColorLike) -> ColorRGB:
    """Convert a tuple, array or ColorRGB into a ColorRGB."""
    if isinstance(value, ColorRGB):
        return value
    if isinstance(value, str):
        return ColorRGB.from_hex(value)
    return ColorRGB(value)
