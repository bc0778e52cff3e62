from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple
import numpy as np
from ..errors import InvalidArgument
from ..types.color_types import IntVector
from ..types.grid_types import CHANNEL_MAX, CHANNEL_MIN


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # no new attributes → immutability

    num_channels: ClassVar[int] = 1
    mode:         ClassVar[str]
    channel_names: ClassVar[Tuple[str, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Any) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode != self.mode:
                raise InvalidArgument(f"cannot build {self.mode} color from {value.mode} color")
            value = value.value

        if isinstance(value, str):
            raise InvalidArgument(
                f"{self.mode} expects a channel sequence, got string {value!r}; use from_hex for hex text"
            )

        # ---- Handle array input ----
        if isinstance(value, np.ndarray):
            if value.shape != (self.num_channels,):
                raise InvalidArgument(
                    f"{self.mode} expects shape ({self.num_channels},), got {value.shape}"
                )
            value = value.tolist()

        try:
            channels = tuple(value)
        except TypeError:
            raise InvalidArgument(
                f"{self.mode} expects {self.num_channels} channels, got {value!r}"
            ) from None
        if len(channels) != self.num_channels:
            raise InvalidArgument(
                f"{self.mode} expects {self.num_channels} channels, got {len(channels)}"
            )

        # channels are stored as-is, no clamping
        self._value: IntVector = tuple(int(c) for c in channels)

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> IntVector:
        return self._value

    @property
    def is_in_range(self) -> bool:
        """Whether every channel lies within 0..255."""
        return all(CHANNEL_MIN <= c <= CHANNEL_MAX for c in self._value)

    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorBase):
            return self.mode == other.mode and self._value == other._value
        if isinstance(other, tuple):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        channels = ", ".join(f"{n}={v}" for n, v in zip(self.channel_names, self._value))
        return f"{self.__class__.__name__}({channels})"
