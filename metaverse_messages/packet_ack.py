"""PacketAck: acknowledges reliable packets by sequence number."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import ClassVar

from .header import PacketFrequency


@dataclass
class PacketAck:
    """The sequence numbers being acknowledged."""

    PACKET_ID: ClassVar[int] = 251
    FREQUENCY: ClassVar[PacketFrequency] = PacketFrequency.FIXED
    RELIABLE: ClassVar[bool] = False

    packet_ids: list[int] = field(default_factory=list)

    @classmethod
    def from_bytes(cls, data: bytes) -> PacketAck:
        """Parse the message body: a count byte, then little-endian u32 ids."""
        data = bytes(data)
        if not data:
            raise ValueError("Truncated PacketAck")
        count = data[0]
        try:
            packet_ids = list(struct.unpack_from(f"<{count}I", data, 1))
        except struct.error as exc:
            raise ValueError(f"Truncated PacketAck ids: {exc}") from exc
        return cls(packet_ids=packet_ids)

    def to_bytes(self) -> bytes:
        """Encode the message body."""
        if len(self.packet_ids) > 0xFF:
            raise ValueError("Too many ids for one PacketAck")
        try:
            ids = struct.pack(f"<{len(self.packet_ids)}I", *self.packet_ids)
        except struct.error as exc:
            raise ValueError(f"Invalid packet id: {exc}") from exc
        return bytes([len(self.packet_ids)]) + ids