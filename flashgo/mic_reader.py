"""Microphone input and bass-level analysis."""

from __future__ import annotations

import asyncio
import logging
import math
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np

log = logging.getLogger(__name__)

_U32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class MicConfig:
    """Sampling parameters for audio analysis."""

    sample_rate: int = 44100 // 4
    buffer_size: int = 512


MIC_ANALYSIS_CONFIG = MicConfig()


def log_data(key: str, value: float) -> None:
    """Report a named measurement."""
    log.info("%s: %s", key, value)


class Mic(ABC):
    """A source of audio samples."""

    @abstractmethod
    async def read_buffer(self, size: int, rate: int) -> Sequence[float]:
        """Return ``size`` samples taken at ``rate`` Hz."""


class SimMic(Mic):
    """Simulated microphone that takes its samples from a callable (silence by default)."""

    def __init__(self, source: Optional[Callable[[int, int], Sequence[float]]] = None) -> None:
        self.source = source

    async def read_buffer(self, size: int, rate: int) -> np.ndarray:
        if self.source is None:
            return np.zeros(size, dtype=np.float32)
        samples = np.asarray(self.source(size, rate), dtype=np.float32)
        if samples.shape != (size,):
            raise ValueError(f"expected {size} samples, got {samples.size}")
        return samples


class MicReader:
    """Reads buffers from a microphone and measures the bass volume."""

    def __init__(
        self,
        mic: Mic,
        config: MicConfig = MIC_ANALYSIS_CONFIG,
        log_data: Callable[[str, float], None] = log_data,
    ) -> None:
        self.mic = mic
        self.config = config
        self.log_data = log_data
        self.buffer = np.zeros(config.buffer_size, dtype=np.float32)

    def analyze(self) -> float:
        """Measure the mean spectral power between about 30 and 80 Hz of the buffer."""
        size = self.config.buffer_size
        buffer = np.asarray(self.buffer, dtype=np.float32)
        if buffer.shape != (size,):
            raise ValueError(f"buffer must hold {size} samples")
        buffer = buffer - np.float32(buffer.mean())
        self.buffer = buffer

        spectrum = np.fft.rfft(buffer)[: size // 2].copy()
        spectrum[0] = complex(spectrum[0].real, 0.0)
        power = np.nan_to_num(spectrum.real**2 + spectrum.imag**2, nan=0.0)
        amplitudes = np.floor(np.clip(power, 0, _U32_MAX)).astype(np.uint64)

        index_high = 80 * size // self.config.sample_rate
        index_low = 30 * size // self.config.sample_rate
        width = index_high - index_low
        total = int(amplitudes[index_low:index_high].sum())
        bass_volume = total / width if width > 0 else math.nan

        self.log_data("bass_volume", bass_volume)
        return bass_volume

    async def read_buffer_process(self) -> float:
        """Read one buffer, analyse it and report the polling frequency."""
        start = time.perf_counter()
        samples = await self.mic.read_buffer(self.config.buffer_size, self.config.sample_rate)
        buffer = np.asarray(samples, dtype=np.float32)
        if buffer.shape != (self.config.buffer_size,):
            raise ValueError(f"microphone returned {buffer.size} samples")
        self.buffer = buffer.copy()

        await asyncio.sleep(0.001)

        bass_volume = self.analyze()

        elapsed_ms = int((time.perf_counter() - start) * 1000)
        frequency = 1000.0 / elapsed_ms if elapsed_ms else math.inf
        self.log_data("polling_frequency_hz", frequency)
        return bass_volume