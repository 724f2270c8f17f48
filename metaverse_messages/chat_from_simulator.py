"""ChatFromSimulator: chat relayed by the simulator to the viewer."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar
from uuid import UUID

from .agent_update import Vector3
from .header import PacketFrequency


class SourceType(IntEnum):
    """Who produced a chat message."""

    SYSTEM = 0
    AGENT = 1
    OBJECT = 2
    UNKNOWN = 3

    @classmethod
    def from_byte(cls, value: int) -> SourceType:
        """Map a wire byte to a source type; unrecognised values give UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class Audible(IntEnum):
    """How well the chat can be heard."""

    NOT = 255
    BARELY = 0
    FULLY = 1
    UNKNOWN = 2

    @classmethod
    def from_byte(cls, value: int) -> Audible:
        """Map a wire byte to an audibility level; unrecognised values give UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class ChatType(IntEnum):
    """Kinds of chat the simulator relays."""

    WHISPER = 0
    NORMAL = 1
    SHOUT = 2
    SAY = 3
    START_TYPING = 4
    STOP_TYPING = 5
    DEBUG = 6
    OWNER_SAY = 8
    UNKNOWN = 9

    @classmethod
    def from_byte(cls, value: int) -> ChatType:
        """Map a wire byte to a chat type; unrecognised values give UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


_FIXED = struct.Struct("<16s16sBBB12s")


@dataclass
class ChatFromSimulator:
    """A chat message heard by the agent."""

    PACKET_ID: ClassVar[int] = 139
    FREQUENCY: ClassVar[PacketFrequency] = PacketFrequency.LOW
    RELIABLE: ClassVar[bool] = False

    from_name: str
    source_id: UUID
    owner_id: UUID
    source_type: SourceType = SourceType.SYSTEM
    chat_type: ChatType = ChatType.NORMAL
    audible: Audible = Audible.FULLY
    position: Vector3 = field(default_factory=Vector3)
    message: str = ""

    @classmethod
    def from_bytes(cls, data: bytes) -> ChatFromSimulator:
        """Parse the message body.

        One prefix byte before the message is skipped and the message's
        trailing byte is dropped.
        """
        data = bytes(data)
        end = data.find(b"\x00")
        if end < 0:
            raise ValueError("Unterminated ChatFromSimulator name")
        from_name = data[:end].decode("utf-8")
        offset = end + 1
        try:
            source_raw, owner_raw, source_type, chat_type, audible, pos_raw = (
                _FIXED.unpack_from(data, offset)
            )
        except struct.error as exc:
            raise ValueError(f"Truncated ChatFromSimulator: {exc}") from exc
        offset += _FIXED.size + 1
        message_raw = data[offset:]
        if message_raw:
            message_raw = message_raw[:-1]
        return cls(
            from_name=from_name,
            source_id=UUID(bytes=source_raw),
            owner_id=UUID(bytes=owner_raw),
            source_type=SourceType.from_byte(source_type),
            chat_type=ChatType.from_byte(chat_type),
            audible=Audible.from_byte(audible),
            position=Vector3.from_bytes(pos_raw),
            message=message_raw.decode("utf-8"),
        )

    def to_bytes(self) -> bytes:
        """Encode the message body with null-terminated name and message."""
        return b"".join(
            (
                self.from_name.encode("utf-8"),
                b"\x00",
                self.source_id.bytes,
                self.owner_id.bytes,
                bytes([int(self.source_type), int(self.chat_type), int(self.audible)]),
                self.position.to_bytes(),
                self.message.encode("utf-8"),
                b"\x00",
            )
        )