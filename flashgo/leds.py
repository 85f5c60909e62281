"""Colours and LED output devices."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

LED_COUNT = 8 * 8


def _to_u8(value: float) -> int:
    """Truncate a float into 0..255, saturating at the bounds (NaN gives 0)."""
    if math.isnan(value):
        return 0
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float) -> "Color":
        """Convert hue (degrees), saturation and value (0..1) to RGB."""
        c = value * saturation
        x = c * (1.0 - abs(math.fmod(hue / 60.0, 2.0) - 1.0))
        m = value - c
        if hue < 60.0:
            r, g, b = c, x, 0.0
        elif hue < 120.0:
            r, g, b = x, c, 0.0
        elif hue < 180.0:
            r, g, b = 0.0, c, x
        elif hue < 240.0:
            r, g, b = 0.0, x, c
        else:
            r, g, b = x, 0.0, c
        return cls(
            _to_u8((r + m) * 255.0),
            _to_u8((g + m) * 255.0),
            _to_u8((b + m) * 255.0),
        )

    @classmethod
    def black(cls) -> "Color":
        return cls(0, 0, 0)

    @classmethod
    def white(cls) -> "Color":
        return cls(255, 255, 255)

    @classmethod
    def red(cls) -> "Color":
        return cls(255, 0, 0)

    @classmethod
    def green(cls) -> "Color":
        return cls(0, 255, 0)

    @classmethod
    def blue(cls) -> "Color":
        return cls(0, 0, 255)


class Leds(ABC):
    """An output device that shows a full frame of LED colours."""

    @abstractmethod
    def update(self, colors: Sequence[Color]) -> None:
        """Show ``colors``, one per LED."""


@dataclass
class SimLeds(Leds):
    """Simulated LED panel that records every frame as red, green and blue channels."""

    on_update: Optional[Callable[[bytes, bytes, bytes], None]] = None
    frames: list[tuple[bytes, bytes, bytes]] = field(default_factory=list)

    def update(self, colors: Sequence[Color]) -> None:
        if len(colors) != LED_COUNT:
            raise ValueError(f"expected {LED_COUNT} colours, got {len(colors)}")
        reds = bytes(color.red for color in colors)
        greens = bytes(color.green for color in colors)
        blues = bytes(color.blue for color in colors)
        self.frames.append((reds, greens, blues))
        if self.on_update is not None:
            self.on_update(reds, greens, blues)