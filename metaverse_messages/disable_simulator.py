"""DisableSimulator: the simulator is closing the circuit."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DisableSimulator:
    """A message with an empty body."""

    @classmethod
    def from_bytes(cls, data: bytes) -> DisableSimulator:
        """Parse the message body; its content is ignored."""
        return cls()

    def to_bytes(self) -> bytes:
        """Encode the (empty) message body."""
        return b""