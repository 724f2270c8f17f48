"""ChatFromViewer: chat sent by the viewer to the simulator."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from uuid import UUID


class ClientChatType(IntEnum):
    """Kinds of chat a viewer can send."""

    WHISPER = 0
    NORMAL = 1
    SHOUT = 2
    SAY = 3
    START_TYPING = 4
    STOP_TYPING = 5
    DEBUG = 6
    UNKNOWN = 7

    @classmethod
    def from_byte(cls, value: int) -> ClientChatType:
        """Map a wire byte to a chat type; unrecognised values give UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass
class ChatFromViewer:
    """A chat message from the viewer."""

    agent_id: UUID
    session_id: UUID
    message: str
    message_type: ClientChatType
    channel: int

    @classmethod
    def from_bytes(cls, data: bytes) -> ChatFromViewer:
        """Parse the message body; the channel is read big-endian."""
        data = bytes(data)
        try:
            agent_raw, session_raw, length = struct.unpack_from("<16s16sH", data, 0)
            offset = struct.calcsize("<16s16sH")
            message_raw = data[offset:offset + length]
            if len(message_raw) < length:
                raise ValueError("Truncated ChatFromViewer message")
            offset += length
            type_byte, channel = struct.unpack_from(">Bi", data, offset)
        except struct.error as exc:
            raise ValueError(f"Truncated ChatFromViewer: {exc}") from exc

        return cls(
            agent_id=UUID(bytes=agent_raw),
            session_id=UUID(bytes=session_raw),
            message=message_raw.decode("utf-8"),
            message_type=ClientChatType.from_byte(type_byte),
            channel=channel,
        )

    def to_bytes(self) -> bytes:
        """Encode the message body; the channel is written little-endian, then a zero byte."""
        message_raw = self.message.encode("utf-8")
        if len(message_raw) > 0xFFFF:
            raise ValueError("Chat message too long")
        return b"".join(
            (
                self.agent_id.bytes,
                self.session_id.bytes,
                struct.pack("<H", len(message_raw)),
                message_raw,
                bytes([self.message_type]),
                struct.pack("<i", self.channel),
                b"\x00",
            )
        )