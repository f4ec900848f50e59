"""RPC method discovery, inform, reboot, scheduling and voucher messages."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from .xmlutil import (
    U16_MAX,
    U32_MAX,
    XmlWriter,
    cwmp_prefix,
    parse_to_int,
    write_empty_tag,
    write_simple,
)

Attributes = Mapping[str, str] | Iterable[tuple[str, str]]


def _check_unsigned(name: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")


@dataclass
class GetRPCMethods:
    """Asks the peer which RPC methods it supports."""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``GetRPCMethods`` element."""
        write_empty_tag(writer, cwmp_prefix(has_cwmp, "GetRPCMethods"))


@dataclass
class GetRPCMethodsResponse:
    """The RPC methods a peer supports."""

    method_list: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.method_list = list(self.method_list)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``GetRPCMethodsResponse`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "GetRPCMethodsResponse"))
        writer.start_element(
            "MethodList", {"SOAP-ENC:arrayType": f"xsd:string[{len(self.method_list)}]"}
        )
        for method in self.method_list:
            write_simple(writer, "string", method)
        writer.end_element()
        writer.end_element()

    def start_handler(self, path: Sequence[str], name: str, attributes: Attributes) -> None:
        """React to the start of an element while parsing."""
        if tuple(path) == ("GetRPCMethodsResponse", "MethodList", "string"):
            self.method_list.append("")

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        if tuple(path) == ("GetRPCMethodsResponse", "MethodList", "string") and self.method_list:
            self.method_list[-1] = text


@dataclass
class InformResponse:
    """Acknowledges an ``Inform`` and states the envelope limit."""

    max_envelopes: int = 0

    def __post_init__(self) -> None:
        _check_unsigned("max_envelopes", self.max_envelopes, U16_MAX)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``InformResponse`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "InformResponse"))
        write_simple(writer, "MaxEnvelopes", str(self.max_envelopes))
        writer.end_element()

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``; an invalid count becomes 1."""
        if tuple(path) == ("InformResponse", "MaxEnvelopes"):
            self.max_envelopes = parse_to_int(text, 1, 0, U16_MAX)


@dataclass
class Kicked:
    """Reports a web-initiated kick of the device."""

    command: str = ""
    referer: str = ""
    arg: str = ""
    next: str = ""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``Kicked`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "Kicked"))
        write_simple(writer, "Command", self.command)
        write_simple(writer, "Referer", self.referer)
        write_simple(writer, "Arg", self.arg)
        write_simple(writer, "Next", self.next)
        writer.end_element()

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        match tuple(path):
            case ("Kicked", "Command"):
                self.command = text
            case ("Kicked", "Referer"):
                self.referer = text
            case ("Kicked", "Arg"):
                self.arg = text
            case ("Kicked", "Next"):
                self.next = text


@dataclass
class KickedResponse:
    """Tells the device where to send the browser next."""

    next_url: str = ""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``KickedResponse`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "KickedResponse"))
        write_simple(writer, "NextURL", self.next_url)
        writer.end_element()

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        if tuple(path) == ("KickedResponse", "NextURL"):
            self.next_url = text


@dataclass
class Reboot:
    """Asks the device to reboot."""

    command_key: str = ""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``Reboot`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "Reboot"))
        write_simple(writer, "CommandKey", self.command_key)
        writer.end_element()

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        if tuple(path) == ("Reboot", "CommandKey"):
            self.command_key = text


@dataclass
class RebootResponse:
    """Empty acknowledgement of ``Reboot``."""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``RebootResponse`` element."""
        write_empty_tag(writer, cwmp_prefix(has_cwmp, "RebootResponse"))


@dataclass
class ScheduleInform:
    """Asks the device to send an ``Inform`` after a delay."""

    delay_seconds: int = 0
    command_key: str = ""

    def __post_init__(self) -> None:
        _check_unsigned("delay_seconds", self.delay_seconds, U32_MAX)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``ScheduleInform`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "ScheduleInform"))
        write_simple(writer, "DelaySeconds", str(self.delay_seconds))
        write_simple(writer, "CommandKey", self.command_key)
        writer.end_element()

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        match tuple(path):
            case ("ScheduleInform", "DelaySeconds"):
                self.delay_seconds = parse_to_int(text, 0, 0, U32_MAX)
            case ("ScheduleInform", "CommandKey"):
                self.command_key = text


@dataclass
class ScheduleInformResponse:
    """Empty acknowledgement of ``ScheduleInform``."""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``ScheduleInformResponse`` element."""
        write_empty_tag(writer, cwmp_prefix(has_cwmp, "ScheduleInformResponse"))


@dataclass
class SetVouchers:
    """Hands base64-encoded option vouchers to the device."""

    voucher_list: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.voucher_list = list(self.voucher_list)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``SetVouchers`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "SetVouchers"))
        writer.start_element(
            "VoucherList", {"SOAP-ENC:arrayType": f"base64[{len(self.voucher_list)}]"}
        )
        for voucher in self.voucher_list:
            write_simple(writer, "base64", voucher)
        writer.end_element()
        writer.end_element()

    def start_handler(self, path: Sequence[str], name: str, attributes: Attributes) -> None:
        """React to the start of an element while parsing."""
        if tuple(path) == ("SetVouchers", "VoucherList", "base64"):
            self.voucher_list.append("")

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        if tuple(path) == ("SetVouchers", "VoucherList", "base64") and self.voucher_list:
            self.voucher_list[-1] = text


@dataclass
class SetVouchersResponse:
    """Empty acknowledgement of ``SetVouchers``."""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``SetVouchersResponse`` element."""
        write_empty_tag(writer, cwmp_prefix(has_cwmp, "SetVouchersResponse"))