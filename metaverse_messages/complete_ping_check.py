"""CompletePingCheck: answer to a StartPingCheck."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .header import PacketFrequency


@dataclass
class CompletePingCheck:
    """The id of the ping being answered."""

    PACKET_ID: ClassVar[int] = 2
    FREQUENCY: ClassVar[PacketFrequency] = PacketFrequency.HIGH
    RELIABLE: ClassVar[bool] = False

    ping_id: int

    @classmethod
    def from_bytes(cls, data: bytes) -> CompletePingCheck:
        """Parse the message body; only the first byte is used."""
        data = bytes(data)
        if not data:
            raise ValueError("Truncated CompletePingCheck")
        return cls(ping_id=data[0])

    def to_bytes(self) -> bytes:
        """Encode the message body."""
        return bytes([self.ping_id])