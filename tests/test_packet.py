import pytest

from flighttrack.packet import (
    CALLSIGN_SIZE,
    ICAO24_SIZE,
    MODEL_SIZE,
    PACKET_SIZE,
    FlightInfo,
    PacketSizeError,
)


def test_packet_size_is_sum_of_fields():
    data = FlightInfo("", "", "").to_bytes()
    assert len(data) == ICAO24_SIZE + CALLSIGN_SIZE + MODEL_SIZE
    assert len(data) == PACKET_SIZE == 144


def test_round_trip():
    info = FlightInfo("abc123", "ACA123  ", "Boeing 737-800")
    data = info.to_bytes()
    assert len(data) == PACKET_SIZE
    assert FlightInfo.from_bytes(data) == info


def test_field_layout():
    data = FlightInfo("abc123", "ACA123", "A320").to_bytes()
    assert data[:ICAO24_SIZE] == b"abc123\0"
    assert data[ICAO24_SIZE : ICAO24_SIZE + CALLSIGN_SIZE].rstrip(b"\0") == b"ACA123"
    assert data[ICAO24_SIZE + CALLSIGN_SIZE :].rstrip(b"\0") == b"A320"


def test_fields_truncated_to_keep_terminator():
    info = FlightInfo("abcdefgh", "CALLSIGN12", "m" * 300)
    back = FlightInfo.from_bytes(info.to_bytes())
    assert back.icao24 == "abcdefgh"[: ICAO24_SIZE - 1]
    assert back.callsign == "CALLSIGN12"[: CALLSIGN_SIZE - 1]
    assert back.model == "m" * (MODEL_SIZE - 1)


def test_unterminated_field_reads_whole_field():
    data = b"ABCDEFG" + bytes(CALLSIGN_SIZE + MODEL_SIZE)
    assert FlightInfo.from_bytes(data).icao24 == "ABCDEFG"


def test_empty_fields():
    info = FlightInfo.from_bytes(bytes(PACKET_SIZE))
    assert info == FlightInfo("", "", "")


@pytest.mark.parametrize("length", [0, PACKET_SIZE - 1, PACKET_SIZE + 1])
def test_wrong_size_raises(length):
    with pytest.raises(PacketSizeError) as excinfo:
        FlightInfo.from_bytes(bytes(length))
    assert excinfo.value.received == length
    assert excinfo.value.expected == PACKET_SIZE
    assert isinstance(excinfo.value, ValueError)