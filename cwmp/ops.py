"""Records used by deployment-unit, option and download-window messages."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .xmlutil import I32_MAX, I32_MIN, U8_MAX, U32_MAX


def _check_range(name: str, value: int, minimum: int, maximum: int) -> None:
    if not minimum <= value <= maximum:
        raise ValueError(f"{name} must be between {minimum} and {maximum}, got {value}")


@dataclass
class InstallOp:
    """A request to install a deployment unit."""

    url: str = ""
    uuid: str = ""
    username: str = ""
    password: str = ""
    execution_env_ref: str = ""


@dataclass
class OptionStruct:
    """A software option enabled by a voucher."""

    option_name: str = ""
    voucher_sn: str = ""
    state: int = 0
    mode: str = ""
    start_date: datetime | None = None
    expiration_date: datetime | None = None
    is_transferable: int = 0

    def __post_init__(self) -> None:
        _check_range("state", self.state, 0, U8_MAX)
        _check_range("is_transferable", self.is_transferable, 0, U8_MAX)


@dataclass
class TimeWindow:
    """A window in which a scheduled download may take place."""

    window_start: int = 0
    window_end: int = 0
    window_mode: str = ""
    user_message: str = ""
    max_retries: int = 0

    def __post_init__(self) -> None:
        _check_range("window_start", self.window_start, 0, U32_MAX)
        _check_range("window_end", self.window_end, 0, U32_MAX)
        _check_range("max_retries", self.max_retries, I32_MIN, I32_MAX)


@dataclass
class UninstallOp:
    """A request to uninstall a deployment unit."""

    url: str = ""
    uuid: str = ""
    execution_env_ref: str = ""


@dataclass
class UpdateOp:
    """A request to update a deployment unit."""

    url: str = ""
    uuid: str = ""
    username: str = ""
    password: str = ""
    version: str = ""