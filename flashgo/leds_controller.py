"""Frame buffer for an 8x8 serpentine LED matrix."""

from __future__ import annotations

from flashgo.leds import LED_COUNT, Color, Leds


class LedsController:
    """Holds the colour of every LED and pushes frames to a device when changed."""

    def __init__(self) -> None:
        self._colors: list[Color] = [Color.black()] * LED_COUNT
        self.changed = False
        self.width = 8
        self.height = 8

    @property
    def colors(self) -> tuple[Color, ...]:
        """Current colours in wiring order."""
        return tuple(self._colors)

    def update(self, leds: Leds) -> None:
        """Send the frame to ``leds`` if any colour has been set."""
        if self.changed:
            leds.update(list(self._colors))

    def get_color(self, x: int, y: int) -> Color:
        if x < 0 or y < 0:
            raise IndexError("coordinates must not be negative")
        index = (y << 3) | (x >> 3)
        if index >= LED_COUNT:
            raise IndexError(f"LED index {index} out of range")
        return self._colors[index]

    def set_color(self, x: int, y: int, color: Color) -> None:
        """Set the LED at matrix position (x, y), following the serpentine wiring."""
        if not (0 <= x < 8 and 0 <= y < 8):
            raise IndexError(f"position ({x}, {y}) out of range")
        final_y = 7 - y
        final_x = 7 - (x if y % 2 == 0 else 7 - x)
        self._colors[final_x + final_y * 8] = color
        self.changed = True

    def set_color_by_index(self, index: int, color: Color) -> None:
        if not 0 <= index < LED_COUNT:
            raise IndexError(f"LED index {index} out of range")
        self._colors[index] = color
        self.changed = True

    def set_all_colors(self, color: Color) -> None:
        self._colors = [color] * LED_COUNT
        self.changed = True