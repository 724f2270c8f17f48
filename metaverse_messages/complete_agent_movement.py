"""CompleteAgentMovement: finalises the arrival of the agent in a region."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar
from uuid import UUID

from .header import PacketFrequency

_READ_LAYOUT = struct.Struct("<I16s16s")


@dataclass
class CompleteAgentMovement:
    """Agent id, session id and circuit code.

    The body is read as code, session id, agent id but written as
    agent id, session id, code.
    """

    PACKET_ID: ClassVar[int] = 249
    FREQUENCY: ClassVar[PacketFrequency] = PacketFrequency.LOW
    RELIABLE: ClassVar[bool] = False

    agent_id: UUID
    session_id: UUID
    circuit_code: int

    @classmethod
    def from_bytes(cls, data: bytes) -> CompleteAgentMovement:
        """Parse the message body."""
        try:
            code, session_raw, agent_raw = _READ_LAYOUT.unpack_from(bytes(data), 0)
        except struct.error as exc:
            raise ValueError(f"Truncated CompleteAgentMovement: {exc}") from exc
        return cls(
            agent_id=UUID(bytes=agent_raw),
            session_id=UUID(bytes=session_raw),
            circuit_code=code,
        )

    def to_bytes(self) -> bytes:
        """Encode the message body."""
        try:
            code = struct.pack("<I", self.circuit_code)
        except struct.error as exc:
            raise ValueError(f"Invalid circuit code: {exc}") from exc
        return self.agent_id.bytes + self.session_id.bytes + code