"""AgentUpdate: the viewer's per-frame avatar and camera state."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntFlag
from typing import ClassVar
from uuid import UUID

from .header import PacketFrequency


class AgentState(IntFlag):
    """Bits of the agent state byte."""

    TYPING = 0x04
    EDITING = 0x10


class ControlFlags(IntFlag):
    """Movement and input bits sent with every agent update."""

    AT_POS = 0x00000001
    AT_NEG = 0x00000002
    LEFT_POS = 0x00000004
    LEFT_NEG = 0x00000008
    UP_POS = 0x00000010
    UP_NEG = 0x00000020
    PITCH_POS = 0x00000040
    PITCH_NEG = 0x00000080
    YAW_POS = 0x00000100
    YAW_NEG = 0x00000200
    FAST_AT = 0x00000400
    FAST_LEFT = 0x00000800
    FAST_UP = 0x00001000
    FLY = 0x00002000
    STOP = 0x00004000
    FINISH_ANIM = 0x00008000
    STAND_UP = 0x00010000
    SIT_ON_GROUND = 0x00020000
    MOUSELOOK = 0x00040000
    NUDGE_AT_POS = 0x00080000
    NUDGE_AT_NEG = 0x00100000
    NUDGE_LEFT_POS = 0x00200000
    NUDGE_LEFT_NEG = 0x00400000
    NUDGE_UP_POS = 0x00800000
    NUDGE_UP_NEG = 0x01000000
    TURN_LEFT = 0x02000000
    TURN_RIGHT = 0x04000000
    AWAY = 0x08000000
    L_BUTTON_DOWN = 0x10000000
    L_BUTTON_UP = 0x20000000
    ML_BUTTON_DOWN = 0x40000000
    ML_BUTTON_UP = 0x80000000


class UpdateFlags(IntFlag):
    """Bits of the trailing flags byte."""

    NONE = 0x00
    HIDE_TITLE = 0x01


_STATE_MASK = AgentState.TYPING | AgentState.EDITING
_VECTOR = struct.Struct("<3f")
_QUATERNION = struct.Struct("<4f")


@dataclass
class Vector3:
    """Three little-endian 32-bit floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_bytes(cls, data: bytes) -> Vector3:
        """Read a vector from the first 12 bytes."""
        try:
            return cls(*_VECTOR.unpack_from(bytes(data), 0))
        except struct.error as exc:
            raise ValueError(f"Truncated Vector3: {exc}") from exc

    def to_bytes(self) -> bytes:
        """Encode as x, y, z."""
        return _VECTOR.pack(self.x, self.y, self.z)


@dataclass
class Quaternion:
    """A rotation as four little-endian 32-bit floats.

    It is read in x, y, z, w order but written in w, x, y, z order.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_bytes(cls, data: bytes) -> Quaternion:
        """Read x, y, z, w from the first 16 bytes."""
        try:
            x, y, z, w = _QUATERNION.unpack_from(bytes(data), 0)
        except struct.error as exc:
            raise ValueError(f"Truncated Quaternion: {exc}") from exc
        return cls(x, y, z, w)

    def to_bytes(self) -> bytes:
        """Encode as w, x, y, z."""
        return _QUATERNION.pack(self.w, self.x, self.y, self.z)


_LAYOUT = struct.Struct("<16s16s16s16sB12sssssss")  # placeholder replaced below
_LAYOUT = struct.Struct("<16s16s16s16sB12s12s12s12sfIB")


@dataclass
class AgentUpdate:
    """The avatar's rotation, camera, and control state."""

    PACKET_ID: ClassVar[int] = 4
    FREQUENCY: ClassVar[PacketFrequency] = PacketFrequency.HIGH
    RELIABLE: ClassVar[bool] = False
    SEQUENCE_NUMBER: ClassVar[int] = 1

    agent_id: UUID
    session_id: UUID
    body_rotation: Quaternion = field(default_factory=Quaternion)
    head_rotation: Quaternion = field(default_factory=Quaternion)
    state: AgentState = AgentState(0)
    camera_center: Vector3 = field(default_factory=Vector3)
    camera_at_axis: Vector3 = field(default_factory=Vector3)
    camera_left_axis: Vector3 = field(default_factory=Vector3)
    camera_up_axis: Vector3 = field(default_factory=Vector3)
    far: float = 0.0
    control_flags: ControlFlags = ControlFlags(0)
    flags: UpdateFlags = UpdateFlags.NONE

    @classmethod
    def from_bytes(cls, data: bytes) -> AgentUpdate:
        """Parse the message body."""
        try:
            (
                agent_raw,
                session_raw,
                body_raw,
                head_raw,
                state,
                center_raw,
                at_raw,
                left_raw,
                up_raw,
                far,
                control,
                flags,
            ) = _LAYOUT.unpack_from(bytes(data), 0)
        except struct.error as exc:
            raise ValueError(f"Truncated AgentUpdate: {exc}") from exc

        return cls(
            agent_id=UUID(bytes=agent_raw),
            session_id=UUID(bytes=session_raw),
            body_rotation=Quaternion.from_bytes(body_raw),
            head_rotation=Quaternion.from_bytes(head_raw),
            state=AgentState(state & _STATE_MASK),
            camera_center=Vector3.from_bytes(center_raw),
            camera_at_axis=Vector3.from_bytes(at_raw),
            camera_left_axis=Vector3.from_bytes(left_raw),
            camera_up_axis=Vector3.from_bytes(up_raw),
            far=far,
            control_flags=ControlFlags(control),
            flags=UpdateFlags(flags & UpdateFlags.HIDE_TITLE),
        )

    def to_bytes(self) -> bytes:
        """Encode the message body."""
        return b"".join(
            (
                self.agent_id.bytes,
                self.session_id.bytes,
                self.body_rotation.to_bytes(),
                self.head_rotation.to_bytes(),
                bytes([int(self.state) & _STATE_MASK]),
                self.camera_center.to_bytes(),
                self.camera_at_axis.to_bytes(),
                self.camera_left_axis.to_bytes(),
                self.camera_up_axis.to_bytes(),
                struct.pack(
                    "<fIB",
                    self.far,
                    int(self.control_flags),
                    int(self.flags) & UpdateFlags.HIDE_TITLE,
                ),
            )
        )