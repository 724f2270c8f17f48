"""Dispatch of packet bodies by message id and frequency."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .agent_update import AgentUpdate
from .chat_from_simulator import ChatFromSimulator
from .chat_from_viewer import ChatFromViewer
from .circuit_code import CircuitCode
from .coarse_location_update import CoarseLocationUpdate
from .complete_agent_movement import CompleteAgentMovement
from .complete_ping_check import CompletePingCheck
from .disable_simulator import DisableSimulator
from .errors import SessionError
from .header import PacketFrequency
from .login import Login
from .login_response import LoginResponse
from .packet_ack import PacketAck


class MessageType(Enum):
    """Broad role of a message within the client."""

    ACKNOWLEDGMENT = "Acknowledgment"
    REQUEST = "Request"
    EVENT = "Event"
    COMMAND = "Command"
    ERROR = "Error"
    DATA = "Data"
    OUTGOING = "Outgoing"
    LOGIN = "Login"


class UnknownPacketError(ValueError):
    """No body type is known for a message id at a frequency."""

    def __init__(self, packet_id: int, frequency: PacketFrequency) -> None:
        super().__init__(f"Unknown packet ID: {packet_id}, frequency: {frequency}")
        self.packet_id = packet_id
        self.frequency = frequency


_MESSAGE_TYPES: dict[type, MessageType] = {
    ChatFromSimulator: MessageType.EVENT,
    CoarseLocationUpdate: MessageType.EVENT,
    DisableSimulator: MessageType.EVENT,
    AgentUpdate: MessageType.OUTGOING,
    CompleteAgentMovement: MessageType.OUTGOING,
    ChatFromViewer: MessageType.OUTGOING,
    CircuitCode: MessageType.OUTGOING,
    CompletePingCheck: MessageType.REQUEST,
    PacketAck: MessageType.ACKNOWLEDGMENT,
    Login: MessageType.LOGIN,
    LoginResponse: MessageType.LOGIN,
    SessionError: MessageType.ERROR,
}

_BODY_TYPES: dict[tuple[PacketFrequency, int], Any] = {
    (PacketFrequency.HIGH, 2): CompletePingCheck,
    (PacketFrequency.HIGH, 4): AgentUpdate,
    (PacketFrequency.MEDIUM, 6): CoarseLocationUpdate,
    (PacketFrequency.LOW, 3): CircuitCode,
    (PacketFrequency.LOW, 80): ChatFromViewer,
    (PacketFrequency.LOW, 139): ChatFromSimulator,
    (PacketFrequency.LOW, 152): DisableSimulator,
    (PacketFrequency.LOW, 249): CompleteAgentMovement,
    (PacketFrequency.FIXED, 66): Login,
    (PacketFrequency.FIXED, 251): PacketAck,
}


def message_type(body: Any) -> MessageType:
    """The role of a packet body."""
    for kind, role in _MESSAGE_TYPES.items():
        if isinstance(body, kind):
            return role
    raise TypeError(f"not a packet body: {type(body).__name__}")


def body_from_id(packet_id: int, frequency: PacketFrequency, data: bytes) -> Any:
    """Parse a body of the type registered for this id and frequency."""
    body_type = _BODY_TYPES.get((frequency, packet_id))
    if body_type is None:
        raise UnknownPacketError(packet_id, frequency)
    return body_type.from_bytes(data)