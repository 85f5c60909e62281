"""Runs the current animation and feeds frames to an LED device."""

from __future__ import annotations

import logging
import queue
import threading
import time
from dataclasses import dataclass
from typing import Optional, Union

from flashgo import protos
from flashgo.animations import Animation, AnimationState, get_animation
from flashgo.leds import Color, Leds
from flashgo.leds_controller import LedsController

log = logging.getLogger(__name__)

_TICK_INTERVAL = 0.001


@dataclass(frozen=True)
class Init:
    """Initialise the panel."""

    animation_id: int


@dataclass(frozen=True)
class SetAnimationMessage:
    """Switch to the animation the message selects."""

    set_animation: protos.SetAnimation


@dataclass(frozen=True)
class Stop:
    """Stop the current animation."""


Message = Union[Init, SetAnimationMessage, Stop]


class AnimationController:
    """Holds the running animation and the frame buffer it draws into."""

    def __init__(self, leds: Leds, start: Optional[float] = None) -> None:
        self.current: Optional[Animation] = None
        self.leds_controller = LedsController()
        self.leds = leds
        self.start = time.monotonic() if start is None else start

    def tick(self) -> None:
        """Draw one frame of the current animation and push it out."""
        state = AnimationState()
        state.update(self.start)
        if self.current is not None:
            self.current.tick(state, self.leds_controller)
        self.leds_controller.update(self.leds)

    def handle_message(self, message: Message) -> None:
        match message:
            case Init(animation_id=animation_id):
                log.info("AnimationController inited: %s", animation_id)
                self.leds_controller.set_color(0, 0, Color.green())
                self.leds_controller.update(self.leds)
            case SetAnimationMessage(set_animation=set_animation):
                log.info("AnimationController set animation")
                self.set_animation(set_animation)
            case Stop():
                log.info("AnimationController stop")
                self.stop()
            case _:
                raise TypeError(f"unknown message: {message!r}")

    def set_animation(self, set_animation: protos.SetAnimation) -> None:
        self.current = get_animation(set_animation)

    def stop(self) -> None:
        self.current = None


def _run_loop(
    messages: "queue.SimpleQueue[Message]",
    leds: Leds,
    stop: threading.Event,
    interval: float,
) -> None:
    controller = AnimationController(leds)
    while not stop.is_set():
        while True:
            try:
                message = messages.get_nowait()
            except queue.Empty:
                break
            controller.handle_message(message)
        try:
            controller.tick()
        except Exception:
            log.exception("animation tick failed")
        stop.wait(interval)


class AnimationThread:
    """Background thread that runs an AnimationController and takes messages."""

    def __init__(
        self,
        messages: "queue.SimpleQueue[Message]",
        thread: threading.Thread,
        stop_event: threading.Event,
    ) -> None:
        self._messages = messages
        self._thread = thread
        self._stop = stop_event

    @classmethod
    def start(cls, leds: Leds) -> "AnimationThread":
        """Start the animation loop on ``leds`` in a new thread."""
        messages: "queue.SimpleQueue[Message]" = queue.SimpleQueue()
        stop_event = threading.Event()
        thread = threading.Thread(
            target=_run_loop,
            args=(messages, leds, stop_event, _TICK_INTERVAL),
            name="animation_thread",
            daemon=True,
        )
        thread.start()
        return cls(messages, thread, stop_event)

    @property
    def running(self) -> bool:
        return self._thread.is_alive() and not self._stop.is_set()

    def send(self, message: Message) -> None:
        """Queue a message for the loop; RuntimeError if the loop has ended."""
        if not self.running:
            raise RuntimeError("animation thread is not running")
        self._messages.put(message)

    def close(self) -> None:
        """Stop the loop and wait for the thread to end."""
        self._stop.set()
        if self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> "AnimationThread":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()