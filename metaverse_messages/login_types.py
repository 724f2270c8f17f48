"""Typed pieces of a successful login response, converted to and from XML-RPC values.

Values use plain Python types: dict for a struct, list for an array,
and str, int and bool for scalars.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import ConversionError


class InventoryType(Enum):
    """Inventory item types, valued by the code sent back to the server."""

    UNKNOWN = -1
    TEXTURE = 0
    SOUND = 2
    CALLING_CARD = 3
    LANDMARK = 4
    OBJECT = 6
    NOTECARD = 7
    CATEGORY = 8
    FOLDER = 9
    ROOT_CATEGORY = 10
    LSL = 11
    SNAPSHOT = 15
    ATTACHMENT = 17
    WEARABLE = 18
    ANIMATION = 19
    GESTURE = 20
    MESH = 22

    def to_value(self) -> int:
        """The integer code for this type."""
        return self.value


# Codes received from the server map onto types with a shift around 8..10.
_RECEIVED_INVENTORY_TYPES = {
    -1: InventoryType.UNKNOWN,
    0: InventoryType.TEXTURE,
    2: InventoryType.SOUND,
    3: InventoryType.CALLING_CARD,
    4: InventoryType.LANDMARK,
    6: InventoryType.OBJECT,
    7: InventoryType.NOTECARD,
    8: InventoryType.FOLDER,
    9: InventoryType.ROOT_CATEGORY,
    10: InventoryType.LSL,
    15: InventoryType.SNAPSHOT,
    17: InventoryType.ATTACHMENT,
    18: InventoryType.WEARABLE,
    19: InventoryType.ANIMATION,
    20: InventoryType.GESTURE,
    22: InventoryType.MESH,
}


def parse_inventory_type(value: Any) -> InventoryType:
    """Convert a received integer code to an InventoryType; unknown codes give UNKNOWN."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConversionError("Missing or invalid integer for inventory type")
    return _RECEIVED_INVENTORY_TYPES.get(value, InventoryType.UNKNOWN)


@dataclass
class AgentID:
    """The id of an agent, kept as text."""

    agent_id: str

    def to_value(self) -> str:
        return self.agent_id


@dataclass
class InventoryRootValues:
    """The id of an inventory root folder."""

    folder_id: str

    def to_value(self) -> str:
        return self.folder_id


@dataclass
class ClassifiedCategory:
    """A category for classified ads."""

    category_id: int
    category_name: str

    def to_value(self) -> dict[str, Any]:
        return {"category_id": self.category_id, "category_name": self.category_name}


@dataclass
class UiConfig:
    """User interface settings."""

    allow_first_life: bool

    def to_value(self) -> dict[str, Any]:
        return {"allow_first_life": self.allow_first_life}


@dataclass
class LoginFlags:
    """Flags describing the account's login history."""

    stipend_since_login: str
    ever_logged_in: bool
    seconds_since_epoch: int | None
    daylight_savings: bool
    gendered: bool

    def to_value(self) -> dict[str, Any]:
        value: dict[str, Any] = {
            "stipend_since_login": self.stipend_since_login,
            "ever_logged_in": self.ever_logged_in,
        }
        if self.seconds_since_epoch is not None:
            value["seconds_since_epoch"] = self.seconds_since_epoch
        value["daylight_savings"] = self.daylight_savings
        value["gendered"] = self.gendered
        return value


@dataclass
class GlobalTextures:
    """Texture ids for the sky."""

    cloud_texture_id: str
    sun_texture_id: str
    moon_texture_id: str

    def to_value(self) -> dict[str, Any]:
        return {
            "cloud_texture_id": self.cloud_texture_id,
            "sun_texture_id": self.sun_texture_id,
            "moon_texture_id": self.moon_texture_id,
        }


@dataclass
class InitialOutfit:
    """The outfit worn on first login."""

    folder_name: str
    gender: str

    def to_value(self) -> dict[str, Any]:
        return {"folder_name": self.folder_name, "gender": self.gender}


@dataclass
class GestureValues:
    """An active gesture: its inventory item id and asset id."""

    item_id: str
    asset_id: str

    def to_value(self) -> dict[str, Any]:
        return {"item_id": self.item_id, "asset_id": self.asset_id}


@dataclass
class FriendsRights:
    """Rights granted between friends."""

    can_see_online: bool = False
    can_see_on_map: bool = False
    can_modify_objects: bool = False

    def to_value(self) -> dict[str, Any]:
        return {
            "can_see_online": self.can_see_online,
            "can_see_on_map": self.can_see_on_map,
            "can_modify_objects": self.can_modify_objects,
        }


def generate_friends_rights(rights: int) -> FriendsRights:
    """Convert a rights code to FriendsRights; unknown codes grant nothing."""
    if rights == 1:
        return FriendsRights(can_see_online=True)
    if rights == 2:
        return FriendsRights(can_see_online=True, can_see_on_map=True)
    if rights == 4:
        return FriendsRights(can_see_online=True, can_modify_objects=True)
    return FriendsRights()


@dataclass
class BuddyListValues:
    """A friend and the rights given and held."""

    buddy_id: str
    buddy_rights_given: FriendsRights
    buddy_rights_has: FriendsRights

    def to_value(self) -> dict[str, Any]:
        return {
            "buddy_id": self.buddy_id,
            "buddy_rights_given": self.buddy_rights_given.to_value(),
            "buddy_rights_has": self.buddy_rights_has.to_value(),
        }


@dataclass
class InventorySkeletonValues:
    """A child folder of an inventory root."""

    folder_id: str
    parent_id: str
    name: str
    type_default: InventoryType
    version: int

    def to_value(self) -> dict[str, Any]:
        return {
            "folder_id": self.folder_id,
            "parent_id": self.parent_id,
            "name": self.name,
            "type_default": self.type_default.to_value(),
            "version": self.version,
        }


_INVALID = "Invalid value"
_BAD_COUNT = "Invalid number of values"


@dataclass
class HomeValues:
    """The user's home location: region handle, position and facing."""

    region_handle: tuple[str, str]
    position: tuple[str, str, str]
    look_at: tuple[str, str, str]

    def to_value(self) -> dict[str, Any]:
        return {
            "region_handle": list(self.region_handle),
            "position": list(self.position),
            "look_at": list(self.look_at),
        }

    @classmethod
    def from_value(cls, value: Any) -> HomeValues:
        """Parse the home string sent by the server.

        The string looks like
        "{'region_handle':[r256000,r256000], 'position':[r50,r100,r200], 'look_at':[r1,r0,r0]}".
        Problems are reported in the fields themselves rather than raised.
        """
        if not isinstance(value, str):
            return cls(
                region_handle=("Error", _INVALID),
                look_at=("Error", _INVALID, _INVALID),
                position=("Error", _INVALID, _INVALID),
            )

        home = cls(region_handle=("", ""), position=("", "", ""), look_at=("", "", ""))
        for element in value.split("],"):
            parts = element.split(":[")
            if len(parts) != 2:
                continue
            label = parts[0].replace("{'", "").replace("'", "").replace(" ", "")
            values = parts[1].replace("]}", "").split(",")

            if label == "region_handle":
                if len(values) != 2:
                    return cls(
                        region_handle=("Error", _BAD_COUNT),
                        position=home.position,
                        look_at=home.look_at,
                    )
                home.region_handle = (values[0], values[1])
            elif label == "look_at":
                if len(values) != 3:
                    return cls(
                        region_handle=home.region_handle,
                        position=home.position,
                        look_at=("Error", _BAD_COUNT, _INVALID),
                    )
                home.look_at = (values[0], values[1], values[2])
            elif label == "position":
                if len(values) != 3:
                    return cls(
                        region_handle=home.region_handle,
                        position=("Error", _BAD_COUNT, _INVALID),
                        look_at=home.look_at,
                    )
                home.position = (values[0], values[1], values[2])
        return home