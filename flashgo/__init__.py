"""Animation engine for an 8x8 RGB LED matrix with simulated BLE, LED and microphone drivers."""

__version__ = "0.1.0"