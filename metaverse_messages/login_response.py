"""The typed form of a successful login response and its XML-RPC conversions.

Values use plain Python types: dict for a struct, list for an array,
and str, int and bool for scalars.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar
from uuid import UUID

from .errors import ConversionError
from .login_types import (
    AgentID,
    BuddyListValues,
    ClassifiedCategory,
    GestureValues,
    GlobalTextures,
    HomeValues,
    InitialOutfit,
    InventoryRootValues,
    InventorySkeletonValues,
    LoginFlags,
    UiConfig,
    generate_friends_rights,
    parse_inventory_type,
)

_T = TypeVar("_T")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _to_i32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return ((value + 2**31) % 2**32) - 2**31


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _optional_int(value: Any) -> int | None:
    return value if _is_int(value) else None


def _required_str(struct: Mapping[str, Any], key: str) -> str:
    value = struct.get(key)
    if not isinstance(value, str):
        raise ConversionError(f"Missing or invalid string for field: {key}")
    return value


def _required_u32(struct: Mapping[str, Any], key: str) -> int:
    value = struct.get(key)
    if not _is_int(value):
        raise ConversionError(f"Missing or invalid u32 for field: {key}")
    if not 0 <= value <= 0xFFFFFFFF:
        raise ConversionError(f"Out of range u32 for field: {key}")
    return value


def _optional_uuid(value: Any, key: str) -> UUID | None:
    if not isinstance(value, str):
        return None
    try:
        return UUID(value)
    except ValueError as exc:
        raise ConversionError(f"Invalid UUID for field: {key}") from exc


def _item_field(item: Any, key: str) -> Any:
    if not isinstance(item, Mapping) or key not in item:
        raise ConversionError(f"Missing field in list entry: {key}")
    return item[key]


def _item_str(item: Any, key: str) -> str:
    value = _item_field(item, key)
    if not isinstance(value, str):
        raise ConversionError(f"Invalid string in list entry: {key}")
    return value


def _item_int(item: Any, key: str) -> int:
    value = _item_field(item, key)
    if not _is_int(value):
        raise ConversionError(f"Invalid integer in list entry: {key}")
    return value


def _item_yes(item: Any, key: str) -> bool:
    return _item_str(item, key) == "Y"


def _parse_list(value: Any, key: str, build: Callable[[Any], _T]) -> list[_T] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise ConversionError(f"Expected an array for field: {key}")
    return [build(item) for item in value]


def _string_3tuple(value: Any) -> tuple[str, str, str] | None:
    if not isinstance(value, list):
        return None
    if len(value) < 3 or not all(isinstance(part, str) for part in value[:3]):
        raise ConversionError("Invalid three-string array")
    return (value[0], value[1], value[2])


def _parse_login_flag(item: Any) -> LoginFlags:
    seconds = item.get("seconds_since_epoch") if isinstance(item, Mapping) else None
    return LoginFlags(
        stipend_since_login=_item_str(item, "stipend_since_login"),
        ever_logged_in=_item_yes(item, "ever_logged_in"),
        seconds_since_epoch=_optional_int(seconds),
        daylight_savings=_item_yes(item, "daylight_savings"),
        gendered=_item_yes(item, "gendered"),
    )


def _parse_skeleton(item: Any) -> InventorySkeletonValues:
    return InventorySkeletonValues(
        folder_id=_item_str(item, "folder_id"),
        parent_id=_item_str(item, "parent_id"),
        name=_item_str(item, "name"),
        type_default=parse_inventory_type(_item_field(item, "type_default")),
        version=_item_int(item, "version"),
    )


def _parse_buddy(item: Any) -> BuddyListValues:
    return BuddyListValues(
        buddy_id=_item_str(item, "buddy_id"),
        buddy_rights_given=generate_friends_rights(_item_int(item, "buddy_rights_given")),
        buddy_rights_has=generate_friends_rights(_item_int(item, "buddy_rights_has")),
    )


def _values(items: list[Any]) -> list[Any]:
    return [item.to_value() for item in items]


@dataclass
class LoginResponse:
    """The contents of a successful simulator login."""

    home: HomeValues | None = None
    look_at: tuple[str, str, str] | None = None
    agent_access: str | None = None
    agent_access_max: str | None = None
    seed_capability: str | None = None
    first_name: str = ""
    last_name: str = ""
    agent_id: UUID | None = None
    sim_ip: str | None = None
    sim_port: int | None = None
    http_port: int | None = None
    start_location: str | None = None
    region_x: int | None = None
    region_y: int | None = None
    region_size_x: int | None = None
    region_size_y: int | None = None
    circuit_code: int = 0
    session_id: UUID | None = None
    secure_session_id: UUID | None = None
    inventory_root: list[InventoryRootValues] | None = None
    inventory_skeleton: list[InventorySkeletonValues] | None = None
    inventory_lib_root: list[InventoryRootValues] | None = None
    inventory_skeleton_lib: list[InventorySkeletonValues] | None = None
    inventory_lib_owner: list[AgentID] | None = None
    map_server_url: str | None = None
    buddy_list: list[BuddyListValues] | None = None
    gestures: list[GestureValues] | None = None
    initial_outfit: list[InitialOutfit] | None = None
    global_textures: list[GlobalTextures] | None = None
    login: bool | None = None
    login_flags: list[LoginFlags] | None = None
    message: str | None = None
    ui_config: list[UiConfig] | None = None
    event_categories: str | None = None
    classified_categories: list[ClassifiedCategory] | None = None
    real_id: str | None = None
    search: str | None = None
    destination_guide_url: str | None = None
    event_notifications: str | None = None
    max_agent_groups: int | None = None
    seconds_since_epoch: int | None = None

    def to_value(self) -> dict[str, Any]:
        """The XML-RPC struct for this response; unset fields are left out and keys sorted."""
        value: dict[str, Any] = {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "circuit_code": _to_i32(self.circuit_code),
        }
        scalars = {
            "seed_capability": self.seed_capability,
            "agent_access": self.agent_access,
            "agent_access_max": self.agent_access_max,
            "sim_ip": self.sim_ip,
            "start_location": self.start_location,
            "map-server-url": self.map_server_url,
            "login": self.login,
            "message": self.message,
            "event_categories": self.event_categories,
            "real_id": self.real_id,
            "search": self.search,
            "destination_guide_url": self.destination_guide_url,
            "event_notifications": self.event_notifications,
        }
        integers = {
            "sim_port": self.sim_port,
            "http_port": self.http_port,
            "region_x": self.region_x,
            "region_y": self.region_y,
            "region_size_x": self.region_size_x,
            "region_size_y": self.region_size_y,
            "max_agent_groups": self.max_agent_groups,
            "seconds_since_epoch": self.seconds_since_epoch,
        }
        uuids = {
            "agent_id": self.agent_id,
            "session_id": self.session_id,
            "secure_session_id": self.secure_session_id,
        }
        lists = {
            "inventory-root": self.inventory_root,
            "inventory-skeleton": self.inventory_skeleton,
            "inventory-lib-root": self.inventory_lib_root,
            "inventory-skel-lib": self.inventory_skeleton_lib,
            "inventory-lib-owner": self.inventory_lib_owner,
            "buddy-list": self.buddy_list,
            "gestures": self.gestures,
            "initial-outfit": self.initial_outfit,
            "global-textures": self.global_textures,
            "login-flags": self.login_flags,
            "ui-config": self.ui_config,
            "classified_categories": self.classified_categories,
        }
        value.update({k: v for k, v in scalars.items() if v is not None})
        value.update({k: _to_i32(v) for k, v in integers.items() if v is not None})
        value.update({k: str(v) for k, v in uuids.items() if v is not None})
        value.update({k: _values(v) for k, v in lists.items() if v is not None})
        if self.home is not None:
            value["home"] = self.home.to_value()
        if self.look_at is not None:
            value["look_at"] = list(self.look_at)
        return dict(sorted(value.items()))

    @classmethod
    def from_value(cls, value: Any) -> LoginResponse:
        """Convert a login response struct; raises ConversionError if it is not one."""
        if not isinstance(value, Mapping):
            raise ConversionError("Login response is not a struct")

        login_text = value.get("login")
        if not isinstance(login_text, str):
            raise ConversionError("Missing or invalid string for field: login")

        sim_port = _optional_int(value.get("sim_port"))
        http_port = _optional_int(value.get("http_port"))

        return cls(
            home=HomeValues.from_value(value.get("home")),
            look_at=_string_3tuple(value.get("look_at")),
            agent_access=_optional_str(value.get("agent_access")),
            agent_access_max=_optional_str(value.get("agent_access_max")),
            seed_capability=_optional_str(value.get("seed_capability")),
            first_name=_required_str(value, "first_name"),
            last_name=_required_str(value, "last_name"),
            agent_id=_optional_uuid(value.get("agent_id"), "agent_id"),
            sim_ip=_optional_str(value.get("sim_ip")),
            sim_port=None if sim_port is None else sim_port & 0xFFFF,
            http_port=None if http_port is None else http_port & 0xFFFF,
            start_location=_optional_str(value.get("start_location")),
            region_x=_optional_int(value.get("region_x")),
            region_y=_optional_int(value.get("region_y")),
            region_size_x=_optional_int(value.get("region_size_x")),
            region_size_y=_optional_int(value.get("region_size_y")),
            circuit_code=_required_u32(value, "circuit_code"),
            session_id=_optional_uuid(value.get("session_id"), "session_id"),
            secure_session_id=_optional_uuid(
                value.get("secure_session_id"), "secure_session_id"
            ),
            inventory_root=_parse_list(
                value.get("inventory-root"),
                "inventory-root",
                lambda item: InventoryRootValues(_item_str(item, "folder_id")),
            ),
            inventory_skeleton=_parse_list(
                value.get("inventory-skeleton"), "inventory-skeleton", _parse_skeleton
            ),
            inventory_lib_root=_parse_list(
                value.get("inventory-lib-root"),
                "inventory-lib-root",
                lambda item: InventoryRootValues(_item_str(item, "folder_id")),
            ),
            inventory_skeleton_lib=_parse_list(
                value.get("inventory-skel-lib"), "inventory-skel-lib", _parse_skeleton
            ),
            inventory_lib_owner=_parse_list(
                value.get("inventory-lib-owner"),
                "inventory-lib-owner",
                lambda item: AgentID(_item_str(item, "agent_id")),
            ),
            map_server_url=_optional_str(value.get("map-server-url")),
            buddy_list=_parse_list(value.get("buddy-list"), "buddy-list", _parse_buddy),
            gestures=_parse_list(
                value.get("gestures"),
                "gestures",
                lambda item: GestureValues(
                    item_id=_item_str(item, "item_id"),
                    asset_id=_item_str(item, "asset_id"),
                ),
            ),
            initial_outfit=_parse_list(
                value.get("initial-outfit"),
                "initial-outfit",
                lambda item: InitialOutfit(
                    folder_name=_item_str(item, "folder_name"),
                    gender=_item_str(item, "gender"),
                ),
            ),
            global_textures=_parse_list(
                value.get("global-textures"),
                "global-textures",
                lambda item: GlobalTextures(
                    cloud_texture_id=_item_str(item, "cloud_texture_id"),
                    sun_texture_id=_item_str(item, "sun_texture_id"),
                    moon_texture_id=_item_str(item, "moon_texture_id"),
                ),
            ),
            login=login_text == "true",
            login_flags=_parse_list(value.get("login-flags"), "login-flags", _parse_login_flag),
            message=_optional_str(value.get("message")),
            ui_config=_parse_list(
                value.get("ui-config"),
                "ui-config",
                lambda item: UiConfig(allow_first_life=_item_yes(item, "allow_first_life")),
            ),
            event_categories=_optional_str(value.get("event_categories")),
            classified_categories=_parse_list(
                value.get("classified_categories"),
                "classified_categories",
                lambda item: ClassifiedCategory(
                    category_id=_item_int(item, "category_id"),
                    category_name=_item_str(item, "category_name"),
                ),
            ),
        )

    def to_bytes(self) -> bytes:
        """A login response carries no packet body."""
        return b""