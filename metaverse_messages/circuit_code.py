"""UseCircuitCode: binds the UDP circuit to a logged-in session."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar
from uuid import UUID

from .header import PacketFrequency

_LAYOUT = struct.Struct("<I16s16s")


@dataclass
class CircuitCode:
    """The circuit code, session id and agent id."""

    PACKET_ID: ClassVar[int] = 3
    FREQUENCY: ClassVar[PacketFrequency] = PacketFrequency.LOW
    RELIABLE: ClassVar[bool] = True

    code: int
    session_id: UUID
    agent_id: UUID

    @classmethod
    def from_bytes(cls, data: bytes) -> CircuitCode:
        """Parse the message body."""
        try:
            code, session_raw, agent_raw = _LAYOUT.unpack_from(bytes(data), 0)
        except struct.error as exc:
            raise ValueError(f"Truncated CircuitCode: {exc}") from exc
        return cls(code=code, session_id=UUID(bytes=session_raw), agent_id=UUID(bytes=agent_raw))

    def to_bytes(self) -> bytes:
        """Encode the message body."""
        try:
            return _LAYOUT.pack(self.code, self.session_id.bytes, self.agent_id.bytes)
        except struct.error as exc:
            raise ValueError(f"Invalid circuit code: {exc}") from exc