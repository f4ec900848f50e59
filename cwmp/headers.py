"""SOAP header elements of a CWMP envelope."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .xmlutil import U8_MAX, U32_MAX, XmlWriter, bool2str, cwmp_prefix


def _check_unsigned(name: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")


def _write_header(
    writer: XmlWriter, has_cwmp: bool, name: str, must_understand: bool, text: str
) -> None:
    writer.start_element(
        cwmp_prefix(has_cwmp, name), {"mustUnderstand": bool2str(must_understand)}
    )
    writer.characters(text)
    writer.end_element()


@dataclass
class ID:
    """Session identifier that ties requests to responses."""

    must_understand: bool = False
    id: str = ""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``ID`` header."""
        _write_header(writer, has_cwmp, "ID", self.must_understand, self.id)


@dataclass
class HoldRequests:
    """Asks the peer to hold back its requests."""

    must_understand: bool = False
    hold: bool = False

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``HoldRequests`` header."""
        _write_header(
            writer, has_cwmp, "HoldRequests", self.must_understand, bool2str(self.hold)
        )


@dataclass
class NoMoreRequests:
    """Tells the peer that no more requests will follow."""

    must_understand: bool = False
    value: int = 0

    def __post_init__(self) -> None:
        _check_unsigned("value", self.value, U8_MAX)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``NoMoreRequests`` header."""
        _write_header(
            writer, has_cwmp, "NoMoreRequests", self.must_understand, str(self.value)
        )


@dataclass
class SessionTimeout:
    """Session timeout in seconds."""

    must_understand: bool = False
    timeout: int = 0

    def __post_init__(self) -> None:
        _check_unsigned("timeout", self.timeout, U32_MAX)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``SessionTimeout`` header."""
        _write_header(
            writer, has_cwmp, "SessionTimeout", self.must_understand, str(self.timeout)
        )


@dataclass
class SupportedCWMPVersions:
    """The protocol versions a peer supports."""

    must_understand: bool = False
    value: str = ""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``SupportedCWMPVersions`` header."""
        _write_header(
            writer, has_cwmp, "SupportedCWMPVersions", self.must_understand, self.value
        )


@dataclass
class UseCWMPVersion:
    """The protocol version chosen for the session."""

    must_understand: bool = False
    value: str = ""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``UseCWMPVersion`` header."""
        _write_header(writer, has_cwmp, "UseCWMPVersion", self.must_understand, self.value)


HeaderElement = Union[
    ID, HoldRequests, SessionTimeout, NoMoreRequests, SupportedCWMPVersions, UseCWMPVersion
]