"""Login: the request the user interface hands to the session, and the XML-RPC login call."""

from __future__ import annotations

import hashlib
import platform
import sys
import uuid
import xmlrpc.client
from dataclasses import dataclass
from typing import ClassVar
from xml.parsers.expat import ExpatError

import httpx

from .errors import ConversionError, LoginError, LoginReason, create_login_error_from_message
from .header import PacketFrequency
from .login_response import LoginResponse
from .simulator_login_protocol import SimulatorLoginOptions, SimulatorLoginProtocol

_VIEWER_VERSION = "0.1.0"
_USER_AGENT = "metaverse_messages"


def _read_string(data: bytes, offset: int) -> tuple[str, int]:
    """Read a null-terminated string; without a terminator the last byte of the rest is dropped."""
    end = data.find(b"\x00", offset)
    if end < 0:
        return data[offset:-1].decode("utf-8") if len(data) > offset else "", len(data)
    return data[offset:end].decode("utf-8"), end + 1


@dataclass
class Login:
    """Credentials and options for logging in to a grid."""

    PACKET_ID: ClassVar[int] = 66
    FREQUENCY: ClassVar[PacketFrequency] = PacketFrequency.FIXED
    RELIABLE: ClassVar[bool] = True

    first: str
    last: str
    passwd: str
    start: str
    channel: str
    agree_to_tos: bool
    read_critical: bool
    url: str

    @classmethod
    def from_bytes(cls, data: bytes) -> Login:
        """Parse null-terminated strings, two flag bytes and the url."""
        data = bytes(data)
        offset = 0
        texts = []
        for _ in range(5):
            text, offset = _read_string(data, offset)
            texts.append(text)
        flags = data[offset:offset + 2]
        if len(flags) < 2:
            raise ValueError("Truncated Login flags")
        offset += 2
        url, _ = _read_string(data, offset)
        first, last, passwd, start, channel = texts
        return cls(
            first=first,
            last=last,
            passwd=passwd,
            start=start,
            channel=channel,
            agree_to_tos=flags[0] != 0,
            read_critical=flags[1] != 0,
            url=url,
        )

    def to_bytes(self) -> bytes:
        """Encode as null-terminated strings with the two flags before the url."""
        head = b"".join(
            text.encode("utf-8") + b"\x00"
            for text in (self.first, self.last, self.passwd, self.start, self.channel)
        )
        flags = bytes([int(bool(self.agree_to_tos)), int(bool(self.read_critical))])
        return head + flags + self.url.encode("utf-8") + b"\x00"


def hash_passwd(passwd: str) -> str:
    """MD5-hash a password in the form the login service expects."""
    return "$1$" + hashlib.md5(passwd.encode("utf-8")).hexdigest()


def hash_viewer_digest() -> str:
    """MD5 of the running program's file; raises OSError if it cannot be read."""
    if not sys.argv or not sys.argv[0]:
        raise OSError("No program path available")
    with open(sys.argv[0], "rb") as program:
        return hashlib.md5(program.read()).hexdigest()


def _platform_name() -> str:
    if sys.platform == "darwin":
        return "mac"
    if sys.platform.startswith("win"):
        return "win"
    return "lin"


def _mac_address() -> str:
    node = uuid.getnode()
    if (node >> 40) & 1:
        # getnode fell back to a random number rather than a hardware address
        return "0"
    return ":".join(f"{(node >> shift) & 0xFF:02X}" for shift in range(40, -1, -8))


def build_login_protocol(login: Login) -> SimulatorLoginProtocol:
    """Fill in a login request from user-supplied values and this machine's details."""
    try:
        viewer_digest = hash_viewer_digest()
    except OSError:
        viewer_digest = "unused"
    release = platform.release()
    return SimulatorLoginProtocol(
        first=login.first,
        last=login.last,
        passwd=hash_passwd(login.passwd),
        start=login.start,
        channel=login.channel,
        version=_VIEWER_VERSION,
        platform=_platform_name(),
        platform_string=release,
        platform_version=release,
        mac=_mac_address(),
        id0="unused",
        agree_to_tos=login.agree_to_tos,
        read_critical=login.read_critical,
        viewer_digest=viewer_digest,
        address_size=64,
        extended_errors=True,
        last_exec_event=None,
        last_exec_duration=0,
        skipoptional=None,
        host_id="",
        mfa_hash="",
        token="",
        options=SimulatorLoginOptions(),
    )


async def login_to_simulator(login_data: SimulatorLoginProtocol, url: str) -> LoginResponse:
    """Call login_to_simulator at ``url``; raises LoginError when the login fails."""
    body = xmlrpc.client.dumps((login_data.to_value(),), methodname="login_to_simulator")
    headers = {"User-Agent": _USER_AGENT, "Content-Type": "text/xml; charset=utf-8"}
    try:
        async with httpx.AsyncClient() as client:
            response = await client.post(url, content=body.encode("utf-8"), headers=headers)
            raw = response.content
    except httpx.HTTPError as exc:
        raise LoginError(LoginReason.CONNECTION, repr(exc)) from exc

    try:
        params, _ = xmlrpc.client.loads(raw)
        parsed = params[0]
    except (xmlrpc.client.Fault, xmlrpc.client.ResponseError, ExpatError, ValueError, IndexError) as exc:
        raise LoginError(LoginReason.CONNECTION, repr(exc)) from exc

    try:
        return LoginResponse.from_value(parsed)
    except ConversionError as exc:
        raise create_login_error_from_message(parsed) from exc