from uuid import UUID

import pytest

from metaverse_messages.agent_update import AgentUpdate, ControlFlags, Quaternion, Vector3
from metaverse_messages.circuit_code import CircuitCode
from metaverse_messages.coarse_location_update import CoarseLocationUpdate, MinimapEntity
from metaverse_messages.disable_simulator import DisableSimulator
from metaverse_messages.header import Header, PacketFrequency
from metaverse_messages.login import Login
from metaverse_messages.packet import Packet, zero_decode, zero_encode
from metaverse_messages.packet_ack import PacketAck
from metaverse_messages.packet_types import UnknownPacketError

AGENT = UUID(int=1)
SESSION = UUID(int=2)
SAME = Quaternion(0.5, 0.5, 0.5, 0.5)
password = "password"


def test_zero_decode_expands_runs():
    assert zero_decode(b"\x01\x00\x03\x02") == b"\x01\x00\x00\x00\x02"


def test_zero_encode_compresses_runs():
    assert zero_encode(b"\x01\x00\x00\x00\x02") == b"\x01\x00\x03\x02"


@pytest.mark.parametrize(
    "data", [b"", b"\x00", bytes(300), b"\x05\x00\x00\x07" * 10, bytes(255) + b"\x09"]
)
def test_zero_coding_round_trip(data):
    assert zero_decode(zero_encode(data)) == data


def test_zero_decode_truncated_run():
    with pytest.raises(ValueError):
        zero_decode(b"\x01\x00")


def test_new_uses_body_defaults():
    packet = Packet.new(AgentUpdate(AGENT, SESSION))
    assert packet.header.packet_id == 4
    assert packet.header.frequency is PacketFrequency.HIGH
    assert packet.header.sequence_number == 1
    assert packet.header.reliable is False


def test_new_circuit_code_is_reliable_low():
    packet = Packet.new(CircuitCode(7, SESSION, AGENT))
    assert packet.header.reliable is True
    assert packet.to_bytes()[:10] == b"\x40\x00\x00\x00\x00\x00\xff\xff\x00\x03"


def test_new_rejects_body_without_defaults():
    with pytest.raises(TypeError):
        Packet.new(DisableSimulator())


@pytest.mark.parametrize(
    "body",
    [
        CircuitCode(code=42, session_id=SESSION, agent_id=AGENT),
        AgentUpdate(
            AGENT,
            SESSION,
            body_rotation=SAME,
            head_rotation=SAME,
            camera_center=Vector3(1.0, 2.0, 3.0),
            far=64.0,
            control_flags=ControlFlags.FLY | ControlFlags.AT_POS,
        ),
        PacketAck([10, 20]),
        CoarseLocationUpdate([MinimapEntity(4, 5, 6)], 0, 0),
        Login("first", "last", password, "home", "chan", True, False, "http://localhost/"),
    ],
)
def test_packet_round_trip(body):
    original = Packet.new(body)
    parsed = Packet.from_bytes(original.to_bytes())
    assert parsed.body == body
    assert parsed.header.packet_id == original.header.packet_id
    assert parsed.header.frequency is original.header.frequency
    assert parsed.header.reliable == original.header.reliable
    assert parsed.header.sequence_number == original.header.sequence_number


def test_zerocoded_packet_body_is_decoded():
    header = Header(packet_id=251, frequency=PacketFrequency.FIXED, zerocoded=True)
    body = PacketAck([1])
    raw = header.to_bytes() + zero_encode(body.to_bytes())
    parsed = Packet.from_bytes(raw)
    assert parsed.header.zerocoded is True
    assert parsed.body == body


def test_unknown_packet_raises():
    raw = Header(packet_id=200, frequency=PacketFrequency.LOW).to_bytes() + bytes(8)
    with pytest.raises(UnknownPacketError):
        Packet.from_bytes(raw)


def test_too_short_packet_raises():
    with pytest.raises(ValueError):
        Packet.from_bytes(b"\x00\x00")