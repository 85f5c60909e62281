import pytest

from flashgo.protos import DecodeError, RainbowAnimation, SetAnimation


def test_default_rainbow_encodes_to_nothing():
    assert RainbowAnimation().encode() == b""
    assert RainbowAnimation().compute_size() == 0


def test_rainbow_wire_bytes():
    data = RainbowAnimation(speed=1.0, progressive=True).encode()
    assert data == b"\x0d\x00\x00\x80\x3f\x10\x01"


def test_set_animation_wraps_rainbow():
    inner = RainbowAnimation(speed=1.0, progressive=True)
    data = SetAnimation(animation=inner).encode()
    assert data[0] == 0x0A
    assert data[1] == len(inner.encode())
    assert data[2:] == inner.encode()


@pytest.mark.parametrize(
    "message",
    [
        RainbowAnimation(),
        RainbowAnimation(speed=2.5),
        RainbowAnimation(progressive=True),
        RainbowAnimation(speed=-0.5, progressive=True),
    ],
)
def test_rainbow_round_trip_and_size(message):
    data = message.encode()
    assert len(data) == message.compute_size()
    assert RainbowAnimation.decode(data) == message


@pytest.mark.parametrize(
    "message",
    [
        SetAnimation(),
        SetAnimation(animation=RainbowAnimation()),
        SetAnimation(animation=RainbowAnimation(speed=3.0, progressive=True)),
    ],
)
def test_set_animation_round_trip_and_size(message):
    data = message.encode()
    assert len(data) == message.compute_size()
    assert SetAnimation.decode(data) == message


def test_empty_set_animation_decodes_to_no_animation():
    assert SetAnimation.decode(b"").animation is None


def test_unknown_fields_are_skipped():
    known = RainbowAnimation(speed=1.0, progressive=True).encode()
    unknown = b"\x18\x05" + b"\x22\x02ab" + b"\x2d\x01\x02\x03\x04" + b"\x31" + bytes(8)
    assert RainbowAnimation.decode(unknown + known) == RainbowAnimation(1.0, True)


def test_zero_field_is_rejected():
    with pytest.raises(DecodeError):
        RainbowAnimation.decode(b"\x00")
    with pytest.raises(DecodeError):
        SetAnimation.decode(b"\x00")


def test_truncated_float_is_rejected():
    with pytest.raises(DecodeError):
        RainbowAnimation.decode(b"\x0d\x00\x00")


def test_truncated_nested_message_is_rejected():
    data = SetAnimation(animation=RainbowAnimation(speed=1.0)).encode()
    with pytest.raises(DecodeError):
        SetAnimation.decode(data[:-1])


def test_group_wire_type_is_rejected():
    with pytest.raises(DecodeError):
        RainbowAnimation.decode(b"\x1b")


def test_repeated_nested_message_merges():
    first = SetAnimation(animation=RainbowAnimation(speed=2.0)).encode()
    second = SetAnimation(animation=RainbowAnimation(progressive=True)).encode()
    merged = SetAnimation.decode(first + second)
    assert merged.animation == RainbowAnimation(speed=2.0, progressive=True)