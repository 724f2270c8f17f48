"""Packet header: flag bits, sequence number, message id and frequency."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class HeaderConstant(IntEnum):
    """Bits of the header's flags byte."""

    APPENDED_ACKS = 0x10
    RESENT = 0x20
    RELIABLE = 0x40
    ZEROCODED = 0x80


class PacketFrequency(Enum):
    """How a message id is encoded in the header."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    FIXED = "Fixed"

    def __str__(self) -> str:
        return self.value

    def to_bytes(self, packet_id: int) -> bytes:
        """Encode a message id for this frequency."""
        if self is PacketFrequency.HIGH:
            return bytes([packet_id & 0xFF])
        if self is PacketFrequency.MEDIUM:
            return bytes([0xFF, packet_id & 0xFF])
        if self is PacketFrequency.LOW:
            return b"\xff\xff" + (packet_id & 0xFFFF).to_bytes(2, "big")
        return bytes([0xFF, 0xFF, 0xFF, packet_id & 0xFF])

    @classmethod
    def from_bytes(cls, data: bytes, zerocoded: bool) -> tuple[PacketFrequency, int, int]:
        """Decode the id region of a header.

        Returns the frequency, the message id and how many bytes the id took.
        """
        data = bytes(data)
        if not data:
            raise ValueError("Empty PacketFrequency")
        length = len(data)
        if length == 2:
            return cls.HIGH, data[0], 1
        if length == 3:
            return cls.MEDIUM, data[2], 3
        if length not in (5, 6):
            raise ValueError("Unsupported packet length")

        if data[1:4] == b"\xff\xff\xff":
            return cls.FIXED, data[4], 5
        if data[1:3] == b"\xff\xff":
            if zerocoded and data[3] == 0:
                if length < 6:
                    raise ValueError("Truncated zerocoded packet id")
                packet_id = data[5]
            else:
                packet_id = int.from_bytes(data[3:5], "big")
            return cls.LOW, packet_id, 5
        if data[1] == 0xFF:
            return cls.MEDIUM, data[2], 3
        return cls.HIGH, data[1], 2


@dataclass
class Header:
    """The header that starts every packet."""

    packet_id: int
    frequency: PacketFrequency
    reliable: bool = False
    resent: bool = False
    zerocoded: bool = False
    appended_acks: bool = False
    sequence_number: int = 0
    ack_list: list[int] | None = None
    size: int | None = None

    @classmethod
    def from_bytes(cls, data: bytes) -> Header:
        """Parse a header from the start of a packet; ``size`` is set to where the body begins."""
        data = bytes(data)
        if len(data) < 5:
            raise ValueError("Packet too short for a header")

        flags = data[0]
        zerocoded = bool(flags & HeaderConstant.ZEROCODED)
        sequence_number = int.from_bytes(data[1:5], "big")
        pos = 5

        frequency, packet_id, consumed = PacketFrequency.from_bytes(data[pos:pos + 6], zerocoded)
        pos += consumed

        ack_list = None
        if flags & HeaderConstant.APPENDED_ACKS:
            if pos >= len(data):
                raise ValueError("Missing appended ack count")
            count = data[pos]
            pos -= 1
            ack_list = []
            for _ in range(count):
                if pos < 4:
                    raise ValueError("Appended acks run past the start of the packet")
                offset = pos - 3
                ack_list.append(int.from_bytes(data[offset:offset + 4], "big"))
                pos -= 4

        return cls(
            packet_id=packet_id,
            frequency=frequency,
            reliable=bool(flags & HeaderConstant.RELIABLE),
            resent=bool(flags & HeaderConstant.RESENT),
            zerocoded=zerocoded,
            appended_acks=bool(flags & HeaderConstant.APPENDED_ACKS),
            sequence_number=sequence_number,
            ack_list=ack_list,
            size=pos,
        )

    def to_bytes(self) -> bytes:
        """Encode the header."""
        flags = 0
        if self.appended_acks:
            flags |= HeaderConstant.APPENDED_ACKS
        if self.reliable:
            flags |= HeaderConstant.RELIABLE
        if self.resent:
            flags |= HeaderConstant.RESENT
        if self.zerocoded:
            flags |= HeaderConstant.ZEROCODED

        out = bytearray([flags])
        out += self.sequence_number.to_bytes(4, "big")
        out.append(0)
        out += self.frequency.to_bytes(self.packet_id)

        if self.appended_acks and self.ack_list is not None:
            out.append(len(self.ack_list) & 0xFF)
            for ack in self.ack_list:
                out += ack.to_bytes(4, "big")
        return bytes(out)