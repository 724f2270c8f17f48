"""Errors raised during login and while a session runs."""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum


class ConversionError(Exception):
    """A login response could not be converted to its typed form."""


class LoginReason(Enum):
    """Why a login failed."""

    KEY = "Key"
    PRESENCE = "Presence"
    UNKNOWN = "Unknown"
    CONNECTION = "Connection"

    def __str__(self) -> str:
        return self.value


_REASON_TEXT = {
    LoginReason.PRESENCE: (
        "Login failed because you are already logged in. Wait a few minutes and try again"
    ),
    LoginReason.KEY: "Username or password incorrect",
    LoginReason.UNKNOWN: "Unknown error occured",
    LoginReason.CONNECTION: "Connection error",
}


class LoginError(Exception):
    """A login attempt failed."""

    def __init__(self, reason: LoginReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message

    def __str__(self) -> str:
        return f"{_REASON_TEXT[self.reason]} : {self.message}"

    def __repr__(self) -> str:
        return f"LoginError {{ reason: {self.reason}, message: {self.message} }}"


class _MessageError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class CircuitCodeError(_MessageError):
    """The circuit code that establishes the login failed."""


class CompleteAgentMovementError(_MessageError):
    """Completing agent movement after login failed."""


class AckError(_MessageError):
    """Acknowledging packets failed."""


class MailboxError(_MessageError):
    """The mailbox that handles packet I/O failed to connect."""


_SESSION_KINDS: dict[str, type[Exception]] = {
    cls.__name__: cls
    for cls in (CircuitCodeError, CompleteAgentMovementError, LoginError, MailboxError, AckError)
}


class SessionError(Exception):
    """A failure within the session, wrapping the specific error."""

    def __init__(self, error: Exception) -> None:
        if type(error).__name__ not in _SESSION_KINDS or not isinstance(
            error, _SESSION_KINDS[type(error).__name__]
        ):
            raise TypeError(f"unsupported session error: {type(error).__name__}")
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"{type(self.error).__name__}: {self.error}"

    def to_bytes(self) -> bytes:
        """Serialize the error for passing between processes."""
        payload = {"kind": type(self.error).__name__, "message": self.error.message}
        if isinstance(self.error, LoginError):
            payload["reason"] = self.error.reason.name
        return json.dumps(payload).encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes) -> SessionError | None:
        """Deserialize an error; returns None if the data is not a valid error."""
        try:
            payload = json.loads(bytes(data).decode("utf-8"))
            kind = _SESSION_KINDS[payload["kind"]]
            message = payload["message"]
            if not isinstance(message, str):
                return None
            if kind is LoginError:
                inner = LoginError(LoginReason[payload["reason"]], message)
            else:
                inner = kind(message)
        except (ValueError, KeyError, TypeError):
            return None
        return cls(inner)


_REASON_CODES = {"presence": LoginReason.PRESENCE, "key": LoginReason.KEY}


def create_login_error_from_message(message) -> LoginError:
    """Build a LoginError from a failed login response struct."""
    if not isinstance(message, Mapping):
        raise ConversionError("Unknown Message")
    reason_text = message.get("reason")
    reason = (
        _REASON_CODES.get(reason_text, LoginReason.UNKNOWN)
        if isinstance(reason_text, str)
        else LoginReason.UNKNOWN
    )
    content = message.get("message")
    if not isinstance(content, str):
        raise ConversionError("Unknown Message")
    return LoginError(reason, content)