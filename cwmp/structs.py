"""Plain data records carried inside CWMP parameter and transfer messages."""

from __future__ import annotations

from dataclasses import dataclass, field

from .xmlutil import U8_MAX


def _check_u8(name: str, value: int) -> None:
    if not 0 <= value <= U8_MAX:
        raise ValueError(f"{name} must be between 0 and {U8_MAX}, got {value}")


@dataclass
class ParameterAttribute:
    """Notification setting and access list of one parameter."""

    name: str = ""
    notification: str = ""
    accesslist: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.accesslist = list(self.accesslist)


@dataclass
class ParameterInfoStruct:
    """A parameter name and whether it is writable."""

    name: str = ""
    writable: int = 0

    def __post_init__(self) -> None:
        _check_u8("writable", self.writable)


@dataclass
class ParameterValue:
    """A parameter name with its XML schema type and value."""

    name: str = ""
    type: str = ""
    value: str = ""


@dataclass
class QueuedTransferStruct:
    """A queued transfer; either field may be absent."""

    command_key: str | None = None
    state: str | None = None


@dataclass
class SetParameterAttributesStruct:
    """Requested attribute changes for one parameter."""

    name: str = ""
    notification_change: int = 0
    notification: int = 0
    access_list_change: int = 0
    access_list: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_u8("notification_change", self.notification_change)
        _check_u8("notification", self.notification)
        _check_u8("access_list_change", self.access_list_change)
        self.access_list = list(self.access_list)