"""A whole packet: header plus body, and the zero-run coding of bodies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .header import Header
from .packet_types import body_from_id

_log = logging.getLogger(__name__)


def zero_decode(data: bytes) -> bytes:
    """Expand each zero byte followed by a count into that many zeros."""
    data = bytes(data)
    out = bytearray()
    it = iter(data)
    for byte in it:
        if byte == 0:
            count = next(it, None)
            if count is None:
                raise ValueError("Zerocoded data ends inside a zero run")
            out += bytes(count)
        else:
            out.append(byte)
    return bytes(out)


def zero_encode(data: bytes) -> bytes:
    """Replace runs of zeros with a zero byte and a count; runs longer than 255 are split."""
    data = bytes(data)
    out = bytearray()
    run = 0
    for byte in data:
        if byte == 0:
            run += 1
            if run == 0xFF:
                out += b"\x00\xff"
                run = 0
            continue
        if run:
            out += bytes([0, run])
            run = 0
        out.append(byte)
    if run:
        out += bytes([0, run])
    return bytes(out)


@dataclass
class Packet:
    """A header and the body it describes."""

    header: Header
    body: Any

    @classmethod
    def new(cls, body: Any) -> Packet:
        """Wrap a body in the default header for its message type."""
        try:
            packet_id = body.PACKET_ID
            frequency = body.FREQUENCY
        except AttributeError:
            raise TypeError(f"{type(body).__name__} has no packet header defaults") from None
        header = Header(
            packet_id=packet_id,
            frequency=frequency,
            reliable=getattr(body, "RELIABLE", False),
            sequence_number=getattr(body, "SEQUENCE_NUMBER", 0),
        )
        return cls(header=header, body=body)

    @classmethod
    def from_bytes(cls, data: bytes) -> Packet:
        """Parse a packet, zero-decoding the body when the header says so."""
        data = bytes(data)
        header = Header.from_bytes(data)
        start = header.size or 0
        body_raw = data[start:] if start < len(data) else b""
        if header.zerocoded:
            body_raw = zero_decode(body_raw)
        try:
            body = body_from_id(header.packet_id, header.frequency, body_raw)
        except ValueError:
            _log.warning(
                "Failed to parse packet id: %s, frequency: %s", header.packet_id, header.frequency
            )
            raise
        return cls(header=header, body=body)

    def to_bytes(self) -> bytes:
        """Encode header and body."""
        return self.header.to_bytes() + self.body.to_bytes()