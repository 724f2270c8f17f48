from uuid import UUID

import pytest

from metaverse_messages.agent_update import AgentUpdate, Quaternion
from metaverse_messages.chat_from_simulator import ChatFromSimulator
from metaverse_messages.chat_from_viewer import ChatFromViewer, ClientChatType
from metaverse_messages.circuit_code import CircuitCode
from metaverse_messages.coarse_location_update import CoarseLocationUpdate, MinimapEntity
from metaverse_messages.complete_agent_movement import CompleteAgentMovement
from metaverse_messages.complete_ping_check import CompletePingCheck
from metaverse_messages.disable_simulator import DisableSimulator
from metaverse_messages.errors import AckError, SessionError
from metaverse_messages.header import PacketFrequency
from metaverse_messages.login import Login
from metaverse_messages.login_response import LoginResponse
from metaverse_messages.packet_ack import PacketAck
from metaverse_messages.packet_types import (
    MessageType,
    UnknownPacketError,
    body_from_id,
    message_type,
)

AGENT = UUID(int=1)
SESSION = UUID(int=2)
password = "password"
SAME = Quaternion(0.5, 0.5, 0.5, 0.5)


@pytest.mark.parametrize(
    "packet_id, frequency, body",
    [
        (2, PacketFrequency.HIGH, CompletePingCheck(ping_id=7)),
        (4, PacketFrequency.HIGH, AgentUpdate(AGENT, SESSION, body_rotation=SAME, head_rotation=SAME)),
        (6, PacketFrequency.MEDIUM, CoarseLocationUpdate([MinimapEntity(1, 2, 3)], 0, -1)),
        (3, PacketFrequency.LOW, CircuitCode(code=99, session_id=SESSION, agent_id=AGENT)),
        (80, PacketFrequency.LOW, ChatFromViewer(AGENT, SESSION, "hello", ClientChatType.SAY, 0)),
        (152, PacketFrequency.LOW, DisableSimulator()),
        (249, PacketFrequency.LOW, CompleteAgentMovement(AGENT, SESSION, 5)),
        (66, PacketFrequency.FIXED, Login("a", "b", password, "home", "c", True, True, "u")),
        (251, PacketFrequency.FIXED, PacketAck([1, 2, 3])),
    ],
)
def test_body_from_id_round_trips(packet_id, frequency, body):
    assert body_from_id(packet_id, frequency, body.to_bytes()) == body


def test_body_from_id_chat_from_simulator():
    chat = ChatFromSimulator(from_name="Ann", source_id=AGENT, owner_id=SESSION, message="hi")
    parsed = body_from_id(139, PacketFrequency.LOW, chat.to_bytes())
    assert isinstance(parsed, ChatFromSimulator)
    assert parsed.from_name == "Ann"
    assert parsed.source_id == AGENT


def test_unknown_id_message():
    with pytest.raises(UnknownPacketError) as info:
        body_from_id(99, PacketFrequency.HIGH, b"")
    assert str(info.value) == "Unknown packet ID: 99, frequency: High"
    assert info.value.packet_id == 99


def test_known_id_at_wrong_frequency_is_unknown():
    with pytest.raises(UnknownPacketError):
        body_from_id(3, PacketFrequency.HIGH, bytes(36))


@pytest.mark.parametrize(
    "body, expected",
    [
        (PacketAck([1]), MessageType.ACKNOWLEDGMENT),
        (DisableSimulator(), MessageType.EVENT),
        (CircuitCode(1, SESSION, AGENT), MessageType.OUTGOING),
        (CompletePingCheck(1), MessageType.REQUEST),
        (LoginResponse(), MessageType.LOGIN),
        (SessionError(AckError("lost")), MessageType.ERROR),
    ],
)
def test_message_type(body, expected):
    assert message_type(body) is expected


def test_message_type_rejects_other_objects():
    with pytest.raises(TypeError):
        message_type(object())