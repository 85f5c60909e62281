# flashgo

flashgo drives animations on an 8x8 RGB LED matrix. An animation is chosen
by writing a small protobuf message to a BLE characteristic; an animation
loop running on its own thread draws frames into a frame buffer and pushes
them to the LEDs.

Every driver in the package is simulated, so the whole pipeline — BLE server,
LED matrix, microphone — runs on an ordinary computer.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running the simulated device

```
flashgo
flashgo --duration 5
flashgo --duration 5 --mic
```

The `flashgo` command (`flashgo.orchestrator.main`) creates a simulated LED
panel and BLE server, registers the `animation` service and its `animation`
characteristic, starts the animation thread, sends an `Init` message and the
default progressive rainbow (speed 1.0), and starts advertising. It then
waits in steps of 100 ms.

Options:

- `--duration SECONDS` — stop after this many seconds (default: run until
  interrupted).
- `--mic` — on each step, read a buffer from the simulated microphone and
  analyse it; the results are logged.

Log output goes to standard error at DEBUG level.

## Building blocks

### Colours and LED devices (`flashgo.leds`)

`Color` is a frozen dataclass with 8-bit `red`, `green` and `blue` channels.
`Color.from_hsv(hue, saturation, value)` converts from HSV (hue in degrees,
saturation and value in 0..1); the named constructors `black`, `white`,
`red`, `green` and `blue` give the usual colours.

`Leds` is the abstract output device, with `update(colors)` taking one
colour per LED (`LED_COUNT`, 64). `SimLeds` records every frame in `frames`
as a tuple of red, green and blue byte strings, and calls an optional
`on_update` callable with them. It raises `ValueError` if the frame does not
hold exactly 64 colours.

### The frame buffer (`flashgo.leds_controller`)

`LedsController` keeps the 64 colours of the panel. `set_color(x, y, color)`
maps matrix coordinates onto the panel's serpentine wiring,
`set_color_by_index` addresses an LED in wiring order, and `set_all_colors`
fills the panel. `colors` returns the current colours in wiring order.
`update(leds)` sends the frame to a `Leds` device once any colour has been
set. Out-of-range positions raise `IndexError`.

```python
from flashgo.leds import Color, SimLeds
from flashgo.leds_controller import LedsController

leds = SimLeds()
matrix = LedsController()
matrix.set_color(0, 0, Color.green())
matrix.update(leds)
```

### Animation messages (`flashgo.protos`)

`RainbowAnimation` (`speed`, `progressive`) and `SetAnimation` (`animation`)
are dataclasses encoded with the protobuf wire format through `encode()`,
`decode(data)` and `compute_size()`. Fields at their default value are not
written; unknown fields are skipped on decoding.

```python
from flashgo.protos import RainbowAnimation, SetAnimation

message = SetAnimation(animation=RainbowAnimation(speed=1.0, progressive=True))
payload = message.encode()
assert SetAnimation.decode(payload) == message
```

Malformed input raises `flashgo.protos.DecodeError`, a `ValueError`.

### Animations (`flashgo.animations`)

`get_animation(set_animation)` turns a `SetAnimation` message into a runnable
`Animation`, or returns `None` when the message carries no animation. The
only animation is `RainbowAnimation`: it moves through the hues at `speed`,
and with `progressive` shifts the hue diagonally across the panel instead of
showing one colour on every LED. `AnimationState` carries `time_ms` and
`power`; `update(start)` sets `time_ms` from a `time.monotonic()` start time.

### The animation loop (`flashgo.animation_controller`)

`AnimationController` holds the current animation and a `LedsController`.
`tick()` draws one frame and pushes it out; `handle_message` accepts the
messages `Init`, `SetAnimationMessage` and `Stop`.

`AnimationThread.start(leds)` runs an `AnimationController` on a background
thread, ticking about every millisecond. Messages are queued with `send`
(which raises `RuntimeError` once the loop has ended), and `close()` stops
the thread; the object is also a context manager.

### BLE simulation (`flashgo.ble`)

`SimServer.register_service(name)` returns a `SimService`, whose
`register_characteristic(name, is_read, is_write)` returns a
`SimCharacteristic`. UUIDs come from names via `get_uuid_from_name`
(UUID version 5 in the X.500 namespace) or `get_uuid(element)`.
`SimCharacteristic.send_value` records values in `sent`; `write(data)`
delivers a client write to the callback set with `set_callback` and returns
whether it was handled without error. `start_advertisement()` records the
UUIDs of the registered services in `advertised`.

### Orchestration (`flashgo.orchestrator`)

`AnimationsOrchestrator(service, animation_thread)` registers the
`animation` characteristic, decodes every write to it as a `SetAnimation`
and forwards it to the thread. `init()` sends `Init(1)` and the default
rainbow; `set_animation(animation)` publishes the encoded message on the
characteristic and forwards it to the thread.

### Microphone analysis (`flashgo.mic_reader`)

`MicReader` reads a buffer from a `Mic` (`SimMic` takes its samples from a
callable and yields silence by default) using `MicConfig` (11025 Hz, 512
samples). `analyze()` removes the mean, runs an FFT and returns the mean
power of the bins between about 30 and 80 Hz; `read_buffer_process()` reads
a buffer, analyses it and also reports the polling frequency. Values are
reported through a `log_data(key, value)` callable, which logs by default.

## What the package does not do

There are no drivers for real hardware: LED frames are only recorded by
`SimLeds`, the microphone is `SimMic`, and the BLE server is `SimServer`,
which neither opens a Bluetooth radio nor accepts connections. Client writes
are made by calling `SimCharacteristic.write` from Python. The bass level
measured from the microphone is reported but does not affect the
animations.