"""LED animations and the state they are drawn from."""

from __future__ import annotations

import math
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from flashgo import protos
from flashgo.leds import Color
from flashgo.leds_controller import LedsController

_U32_MASK = 0xFFFFFFFF


@dataclass
class AnimationState:
    """Time and power information handed to an animation on every tick."""

    time_ms: int = 0
    power: int = 0

    def update(self, start: float) -> None:
        """Set ``time_ms`` to the milliseconds elapsed since the monotonic time ``start``."""
        elapsed_ms = int((time.monotonic() - start) * 1000)
        self.time_ms = max(0, elapsed_ms) & _U32_MASK


class Animation(ABC):
    """Something that draws a frame onto an LED controller."""

    @abstractmethod
    def tick(self, state: AnimationState, leds: LedsController) -> None:
        """Draw the frame for ``state`` onto ``leds``."""


@dataclass
class RainbowAnimation(Animation):
    """Cycles through the hues.

    ``speed`` multiplies how fast the hue moves; with ``progressive`` the hue
    shifts across the panel, otherwise the whole panel shows one colour.
    """

    speed: float = 0.0
    progressive: bool = False

    @classmethod
    def from_config(cls, config: protos.RainbowAnimation) -> "RainbowAnimation":
        return cls(speed=config.speed, progressive=config.progressive)

    def tick(self, state: AnimationState, leds: LedsController) -> None:
        base = state.time_ms / 1000.0 * self.speed
        if self.progressive:
            for i in range(leds.width):
                for j in range(leds.height):
                    hue = math.fmod(base + (i + j), 360.0)
                    leds.set_color(i, j, Color.from_hsv(hue, 1.0, 1.0))
        else:
            leds.set_all_colors(Color.from_hsv(math.fmod(base, 360.0), 1.0, 1.0))


def get_animation(set_animation: protos.SetAnimation) -> Optional[Animation]:
    """Build the animation a SetAnimation message selects, or None if it selects none."""
    config = set_animation.animation
    if config is None:
        return None
    if isinstance(config, protos.RainbowAnimation):
        return RainbowAnimation.from_config(config)
    raise TypeError(f"unknown animation configuration: {config!r}")