import pytest

from metaverse_messages.header import Header, HeaderConstant, PacketFrequency

BODY = b"\x01\x02\x03\x04\x05\x06"


@pytest.mark.parametrize(
    "frequency,packet_id",
    [
        (PacketFrequency.HIGH, 4),
        (PacketFrequency.MEDIUM, 6),
        (PacketFrequency.LOW, 3),
        (PacketFrequency.LOW, 249),
        (PacketFrequency.FIXED, 251),
    ],
)
def test_header_round_trip(frequency, packet_id):
    header = Header(packet_id=packet_id, frequency=frequency, reliable=True, sequence_number=42)
    encoded = header.to_bytes()
    decoded = Header.from_bytes(encoded + BODY)
    assert decoded.packet_id == packet_id
    assert decoded.frequency is frequency
    assert decoded.sequence_number == 42
    assert decoded.reliable is True
    assert decoded.resent is False
    assert decoded.zerocoded is False
    assert decoded.appended_acks is False
    assert decoded.ack_list is None
    assert decoded.size == len(encoded)


def test_frequency_encodings():
    assert PacketFrequency.HIGH.to_bytes(4) == b"\x04"
    assert PacketFrequency.LOW.to_bytes(3) == b"\xff\xff\x00\x03"
    assert PacketFrequency.FIXED.to_bytes(251) == b"\xff\xff\xff\xfb"


def test_medium_encoding_prefix():
    encoded = PacketFrequency.MEDIUM.to_bytes(6)
    assert encoded[0] == 0xFF
    assert encoded[1] == 6
    assert len(encoded) == 2


def test_header_layout():
    header = Header(
        packet_id=4,
        frequency=PacketFrequency.HIGH,
        reliable=True,
        zerocoded=True,
        sequence_number=42,
    )
    encoded = header.to_bytes()
    assert encoded[0] == HeaderConstant.RELIABLE | HeaderConstant.ZEROCODED
    assert encoded[1:5] == (42).to_bytes(4, "big")
    assert encoded[5] == 0
    assert encoded[6:] == PacketFrequency.HIGH.to_bytes(4)


def test_flags_decoded():
    header = Header(
        packet_id=4,
        frequency=PacketFrequency.HIGH,
        resent=True,
        zerocoded=True,
    )
    decoded = Header.from_bytes(header.to_bytes() + BODY)
    assert decoded.resent is True
    assert decoded.zerocoded is True
    assert decoded.reliable is False


def test_frequency_str():
    low, _, _ = PacketFrequency.from_bytes(b"\x00\xff\xff\x00\x01\x03", False)
    fixed, packet_id, _ = PacketFrequency.from_bytes(b"\x00\xff\xff\xff\xfb", False)
    assert str(low) == "Low"
    assert str(fixed) == "Fixed"
    assert packet_id == 251


def test_empty_frequency_rejected():
    with pytest.raises(ValueError, match="Empty PacketFrequency"):
        PacketFrequency.from_bytes(b"", False)


@pytest.mark.parametrize("data", [b"\x00", b"\x00\x01\x02\x03", b"\x00" * 7])
def test_unsupported_length_rejected(data):
    with pytest.raises(ValueError, match="Unsupported packet length"):
        PacketFrequency.from_bytes(data, False)


def test_two_byte_region_is_high():
    frequency, packet_id, size = PacketFrequency.from_bytes(b"\x09\x00", False)
    assert frequency is PacketFrequency.HIGH
    assert packet_id == 9
    assert size == 1


def test_zerocoded_low_reads_sixth_byte():
    data = bytes([HeaderConstant.ZEROCODED]) + (7).to_bytes(4, "big") + b"\x00\xff\xff\x00\x01\x03"
    decoded = Header.from_bytes(data)
    assert decoded.frequency is PacketFrequency.LOW
    assert decoded.packet_id == 3
    assert decoded.zerocoded is True
    assert decoded.sequence_number == 7


def test_plain_low_reads_big_endian_id():
    frequency, packet_id, size = PacketFrequency.from_bytes(b"\x00\xff\xff\x00\x01\x03", False)
    assert frequency is PacketFrequency.LOW
    assert packet_id == 1
    assert size == 5


def test_zerocoded_low_truncated():
    with pytest.raises(ValueError):
        PacketFrequency.from_bytes(b"\x00\xff\xff\x00\x01", True)


def test_header_too_short():
    with pytest.raises(ValueError):
        Header.from_bytes(b"\x40\x00")


def test_appended_acks_encoded_at_end():
    header = Header(
        packet_id=1,
        frequency=PacketFrequency.HIGH,
        appended_acks=True,
        ack_list=[7],
        sequence_number=42,
    )
    encoded = header.to_bytes()
    assert encoded[-5:] == bytes([1]) + (7).to_bytes(4, "big")
    decoded = Header.from_bytes(encoded)
    assert decoded.appended_acks is True
    assert decoded.packet_id == 1
    assert len(decoded.ack_list) == 1
    assert decoded.size < len(encoded)


def test_appended_acks_overrun_rejected():
    header = Header(
        packet_id=1,
        frequency=PacketFrequency.HIGH,
        appended_acks=True,
        ack_list=[7, 8],
        sequence_number=42,
    )
    with pytest.raises(ValueError):
        Header.from_bytes(header.to_bytes())