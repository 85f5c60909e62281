"""Wires BLE, the animation thread and the microphone together."""

from __future__ import annotations

import argparse
import asyncio
import logging
import time
from typing import Any, Optional, Sequence

from flashgo import protos
from flashgo.animation_controller import AnimationThread, Init, SetAnimationMessage
from flashgo.ble import SimServer, SimService
from flashgo.leds import SimLeds
from flashgo.mic_reader import MicReader, SimMic

MIC_THREAD_ID = 0
OTHER_THREAD_ID = 1
NAME = "FlashGO"

log = logging.getLogger(__name__)


class AnimationsOrchestrator:
    """Exposes the animation over a BLE characteristic and forwards changes to the thread."""

    def __init__(self, ble_service: SimService, animation_thread: Any) -> None:
        self.characteristic = ble_service.register_characteristic("animation", True, True)
        self.animation_thread = animation_thread
        self.characteristic.set_callback(self._on_write)

    def _on_write(self, value: bytes) -> None:
        log.info("AnimationOrchestrator received animation: %r", value)
        set_animation = protos.SetAnimation.decode(value)
        self.animation_thread.send(SetAnimationMessage(set_animation))

    def init(self) -> None:
        """Initialise the panel and start the default rainbow."""
        self.animation_thread.send(Init(1))
        self.set_animation(protos.RainbowAnimation(speed=1.0, progressive=True))

    def set_animation(self, animation: protos.RainbowAnimation) -> None:
        """Publish ``animation`` to BLE clients and switch the panel to it."""
        set_animation = protos.SetAnimation(animation=animation)
        self.characteristic.send_value(set_animation.encode())
        self.animation_thread.send(SetAnimationMessage(set_animation))


def _create_drivers() -> tuple[SimLeds, SimMic]:
    return SimLeds(), SimMic()


async def _delay_ms(ms: int) -> None:
    await asyncio.sleep(ms / 1000)


async def _run(duration: Optional[float], with_mic: bool) -> None:
    leds, mic = _create_drivers()
    log.info("Starting %s", NAME)
    server = SimServer()
    thread = AnimationThread.start(leds)
    try:
        orchestrator = AnimationsOrchestrator(server.register_service("animation"), thread)
        mic_reader = MicReader(mic)
        orchestrator.init()
        server.start_advertisement()

        started = time.monotonic()
        while duration is None or time.monotonic() - started < duration:
            if with_mic:
                await mic_reader.read_buffer_process()
            await _delay_ms(100)
    finally:
        thread.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="flashgo", description=f"Run the {NAME} LED panel.")
    parser.add_argument(
        "--duration", type=float, default=None, help="seconds to run (default: forever)"
    )
    parser.add_argument("--mic", action="store_true", help="analyse microphone input")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
    try:
        asyncio.run(_run(args.duration, args.mic))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())