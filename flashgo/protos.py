"""Protocol Buffers messages used to configure LED animations."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Optional

_WIRE_VARINT = 0
_WIRE_FIXED64 = 1
_WIRE_LEN = 2
_WIRE_FIXED32 = 5

_TAG_SPEED = (1 << 3) | _WIRE_FIXED32
_TAG_PROGRESSIVE = (2 << 3) | _WIRE_VARINT
_TAG_RAINBOW = (1 << 3) | _WIRE_LEN


class DecodeError(ValueError):
    """Raised when a message cannot be decoded from its wire bytes."""


def _encode_varint(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


class _Reader:
    """Cursor over a buffer of protobuf wire data."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self.pos = 0

    def __len__(self) -> int:
        return len(self._data)

    def at_end(self) -> bool:
        return self.pos >= len(self._data)

    def read_varint(self) -> int:
        result = 0
        shift = 0
        while True:
            if self.pos >= len(self._data):
                raise DecodeError("unexpected end of data in varint")
            byte = self._data[self.pos]
            self.pos += 1
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return result
            shift += 7
            if shift >= 64:
                raise DecodeError("varint is too long")

    def read_bytes(self, count: int) -> bytes:
        end = self.pos + count
        if end > len(self._data):
            raise DecodeError("unexpected end of data")
        chunk = self._data[self.pos:end]
        self.pos = end
        return chunk

    def read_len_delimited(self) -> "_Reader":
        return _Reader(self.read_bytes(self.read_varint()))

    def read_float(self) -> float:
        return struct.unpack("<f", self.read_bytes(4))[0]

    def read_bool(self) -> bool:
        return self.read_varint() != 0

    def read_tag(self) -> tuple[int, int]:
        tag = self.read_varint()
        if tag > 0xFFFFFFFF:
            raise DecodeError("tag does not fit in 32 bits")
        return tag >> 3, tag & 0x7

    def skip(self, wire_type: int) -> None:
        if wire_type == _WIRE_VARINT:
            self.read_varint()
        elif wire_type == _WIRE_FIXED64:
            self.read_bytes(8)
        elif wire_type == _WIRE_LEN:
            self.read_bytes(self.read_varint())
        elif wire_type == _WIRE_FIXED32:
            self.read_bytes(4)
        else:
            raise DecodeError(f"unsupported wire type {wire_type}")


@dataclass
class RainbowAnimation:
    """Configuration of the rainbow animation."""

    speed: float = 0.0
    progressive: bool = False

    def encode(self) -> bytes:
        """Serialise to protobuf wire bytes."""
        out = bytearray()
        if self.speed != 0.0:
            out.append(_TAG_SPEED)
            out += struct.pack("<f", self.speed)
        if self.progressive:
            out.append(_TAG_PROGRESSIVE)
            out.append(1)
        return bytes(out)

    def compute_size(self) -> int:
        """Number of bytes that encode() produces."""
        size = 0
        if self.speed != 0.0:
            size += 1 + 4
        if self.progressive:
            size += 1 + 1
        return size

    @classmethod
    def decode(cls, data: bytes) -> "RainbowAnimation":
        """Build a message from protobuf wire bytes."""
        message = cls()
        message._merge(_Reader(data))
        return message

    def _merge(self, reader: _Reader) -> None:
        while not reader.at_end():
            field_num, wire_type = reader.read_tag()
            if field_num == 0:
                raise DecodeError("field number zero")
            if field_num == 1:
                speed = reader.read_float()
                if speed != 0.0:
                    self.speed = speed
            elif field_num == 2:
                if reader.read_bool():
                    self.progressive = True
            else:
                reader.skip(wire_type)


@dataclass
class SetAnimation:
    """Request to switch to an animation; ``animation`` is the selected variant."""

    animation: Optional[RainbowAnimation] = field(default=None)

    def encode(self) -> bytes:
        """Serialise to protobuf wire bytes."""
        if self.animation is None:
            return b""
        inner = self.animation.encode()
        return bytes([_TAG_RAINBOW]) + _encode_varint(len(inner)) + inner

    def compute_size(self) -> int:
        """Number of bytes that encode() produces."""
        if self.animation is None:
            return 0
        inner = self.animation.compute_size()
        return 1 + len(_encode_varint(inner)) + inner

    @classmethod
    def decode(cls, data: bytes) -> "SetAnimation":
        """Build a message from protobuf wire bytes."""
        message = cls()
        message._merge(_Reader(data))
        return message

    def _merge(self, reader: _Reader) -> None:
        while not reader.at_end():
            field_num, wire_type = reader.read_tag()
            if field_num == 0:
                raise DecodeError("field number zero")
            if field_num == 1:
                sub = reader.read_len_delimited()
                if self.animation is None:
                    self.animation = RainbowAnimation()
                self.animation._merge(sub)
            else:
                reader.skip(wire_type)