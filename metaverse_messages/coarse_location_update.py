"""CoarseLocationUpdate: minimap positions of nearby avatars."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field


@dataclass(frozen=True)
class MinimapEntity:
    """A coarse avatar position, one byte per axis."""

    x: int
    y: int
    z: int


@dataclass
class CoarseLocationUpdate:
    """Coarse positions of avatars plus the indices of you and your prey."""

    locations: list[MinimapEntity] = field(default_factory=list)
    you: int = 0
    prey: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> CoarseLocationUpdate:
        """Parse the message body."""
        data = bytes(data)
        if not data:
            raise ValueError("Truncated CoarseLocationUpdate")
        count = data[0]
        end = 1 + 3 * count
        raw = data[1:end]
        if len(raw) < 3 * count:
            raise ValueError("Truncated CoarseLocationUpdate locations")
        locations = [MinimapEntity(*raw[start:start + 3]) for start in range(0, len(raw), 3)]
        try:
            you, prey = struct.unpack_from("<hh", data, end)
        except struct.error as exc:
            raise ValueError(f"Truncated CoarseLocationUpdate: {exc}") from exc
        return cls(locations=locations, you=you, prey=prey)

    def to_bytes(self) -> bytes:
        """Encode the message body."""
        if len(self.locations) > 0xFF:
            raise ValueError("Too many locations for one CoarseLocationUpdate")
        out = bytearray([len(self.locations)])
        for entity in self.locations:
            out += bytes((entity.x, entity.y, entity.z))
        out += struct.pack("<hh", self.you, self.prey)
        return bytes(out)