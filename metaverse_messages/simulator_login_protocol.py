"""The XML-RPC login request sent to a simulator's login service.

Values are represented with plain Python types: dict for a struct,
list for an array, str, int and bool for scalars.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

_OPTION_NAMES = {
    "adult_compliant": "adult_compliant",
    "advanced_mode": "advanced_mode",
    "avatar_picker_url": "avatar_picker_url",
    "buddy_list": "buddy-list",
    "classified_categories": "classified_categories",
    "currency": "currency",
    "destination_guide_url": "destination_guide_url",
    "display_names": "display_names",
    "event_categories": "event_categories",
    "gestures": "gestures",
    "global_textures": "global-textures",
    "inventory_root": "inventory-root",
    "inventory_skeleton": "inventory-skeleton",
    "inventory_lib_root": "inventory-lib-root",
    "inventory_lib_owner": "inventory-lib-owner",
    "inventory_skel_lib": "inventory-skel-lib",
    "login_flags": "login-flags",
    "max_agent_groups": "max-agent-groups",
    "max_groups": "max_groups",
    "map_server_url": "map-server-url",
    "newuser_config": "newuser-config",
    "search": "search",
    "tutorial_setting": "tutorial_setting",
    "ui_config": "ui-config",
    "voice_config": "voice-config",
}


@dataclass
class SimulatorLoginOptions:
    """Which optional sections the login response should include."""

    adult_compliant: bool | None = None
    advanced_mode: bool | None = None
    avatar_picker_url: bool | None = None
    buddy_list: bool | None = None
    classified_categories: bool | None = None
    currency: bool | None = None
    destination_guide_url: bool | None = None
    display_names: bool | None = None
    event_categories: bool | None = None
    gestures: bool | None = None
    global_textures: bool | None = None
    inventory_root: bool | None = None
    inventory_skeleton: bool | None = None
    inventory_lib_root: bool | None = None
    inventory_lib_owner: bool | None = None
    inventory_skel_lib: bool | None = None
    login_flags: bool | None = None
    max_agent_groups: bool | None = None
    max_groups: bool | None = None
    map_server_url: bool | None = None
    newuser_config: bool | None = None
    search: bool | None = None
    tutorial_setting: bool | None = None
    ui_config: bool | None = None
    voice_config: bool | None = None

    def to_value(self) -> list[str]:
        """The names of the enabled options, in declaration order."""
        return [
            _OPTION_NAMES[f.name] for f in fields(self) if getattr(self, f.name)
        ]


@dataclass
class SimulatorLoginProtocol:
    """Parameters of a login_to_simulator call."""

    first: str = ""
    last: str = ""
    passwd: str = ""
    start: str = ""
    channel: str = ""
    version: str = ""
    platform: str = ""
    platform_string: str = ""
    platform_version: str = ""
    mac: str = ""
    id0: str = ""
    agree_to_tos: bool = False
    read_critical: bool = False
    viewer_digest: str | None = None
    address_size: int = 0
    extended_errors: bool = False
    last_exec_event: int | None = None
    last_exec_duration: int = 0
    skipoptional: bool | None = None
    host_id: str = ""
    mfa_hash: str = ""
    token: str = ""
    options: SimulatorLoginOptions = field(default_factory=SimulatorLoginOptions)

    def to_value(self) -> dict[str, Any]:
        """The XML-RPC struct for this request, with unset fields left out.

        Flags sent as integers are encoded 1 or 0; keys are sorted.
        """
        entries = {
            "first": self.first,
            "last": self.last,
            "passwd": self.passwd,
            "start": self.start,
            "channel": self.channel,
            "version": self.version,
            "platform": self.platform,
            "platform_string": self.platform_string,
            "platform_version": self.platform_version,
            "mac": self.mac,
            "id0": self.id0,
            "agree_to_tos": int(bool(self.agree_to_tos)),
            "read_critical": int(bool(self.read_critical)),
            "viewer_digest": self.viewer_digest,
            "address_size": self.address_size,
            "extended_errors": int(bool(self.extended_errors)),
            "last_exec_event": self.last_exec_event,
            "last_exec_duration": self.last_exec_duration,
            "skipoptional": self.skipoptional,
            "host_id": self.host_id,
            "mfa_hash": self.mfa_hash,
            "token": self.token,
            "options": self.options.to_value(),
        }
        return {key: value for key, value in sorted(entries.items()) if value is not None}