"""Fixed-size wire format for flight information sent to the display."""

from __future__ import annotations

import struct
from dataclasses import dataclass

ICAO24_SIZE = 7
CALLSIGN_SIZE = 9
MODEL_SIZE = 128

_LAYOUT = struct.Struct(f"{ICAO24_SIZE}s{CALLSIGN_SIZE}s{MODEL_SIZE}s")
PACKET_SIZE = _LAYOUT.size

_ENCODING = "latin-1"


class PacketSizeError(ValueError):
    """A packet did not have the expected length."""

    def __init__(self, received: int, expected: int = PACKET_SIZE) -> None:
        super().__init__(f"Received {received} bytes (expected {expected})")
        self.received = received
        self.expected = expected


def _encode(text: str, size: int) -> bytes:
    # Leave room for the terminating NUL, as the fixed C-style fields do.
    return text.encode(_ENCODING, "replace")[: size - 1]


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode(_ENCODING)


@dataclass(frozen=True)
class FlightInfo:
    """An aircraft seen overhead: transponder address, callsign and model."""

    icao24: str
    callsign: str = ""
    model: str = ""

    def to_bytes(self) -> bytes:
        """Pack into NUL-padded fields, truncating each to fit its terminator."""
        return _LAYOUT.pack(
            _encode(self.icao24, ICAO24_SIZE),
            _encode(self.callsign, CALLSIGN_SIZE),
            _encode(self.model, MODEL_SIZE),
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> FlightInfo:
        """Unpack a packet; raise PacketSizeError if its length is wrong."""
        if len(data) != PACKET_SIZE:
            raise PacketSizeError(len(data))
        icao24, callsign, model = _LAYOUT.unpack(bytes(data))
        return cls(_decode(icao24), _decode(callsign), _decode(model))