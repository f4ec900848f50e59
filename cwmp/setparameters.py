"""Messages that change parameter values and attributes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from .structs import ParameterValue, SetParameterAttributesStruct
from .xmlutil import (
    U8_MAX,
    U32_MAX,
    XmlWriter,
    cwmp_prefix,
    extract_attribute,
    parse_to_int,
    write_empty_tag,
    write_simple,
)

Attributes = Mapping[str, str] | Iterable[tuple[str, str]]

_SPA_STRUCT = ("SetParameterAttributes", "ParameterList", "SetParameterAttributesStruct")
_SPV_STRUCT = ("SetParameterValues", "ParameterList", "ParameterValueStruct")


@dataclass
class SetParameterAttributes:
    """Asks for notification and access-list changes on parameters."""

    parameter_list: list[SetParameterAttributesStruct] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.parameter_list = list(self.parameter_list)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``SetParameterAttributes`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "SetParameterAttributes"))
        writer.start_element(
            "ParameterList",
            {
                "SOAP-ENC:arrayType": (
                    f"cwmp:SetParameterAttributesStruct[{len(self.parameter_list)}]"
                )
            },
        )
        for param in self.parameter_list:
            writer.start_element("SetParameterAttributesStruct")
            write_simple(writer, "Name", param.name)
            write_simple(writer, "NotificationChange", str(param.notification_change))
            write_simple(writer, "Notification", str(param.notification))
            write_simple(writer, "AccessListChange", str(param.access_list_change))
            writer.start_element("AccessList")
            for entry in param.access_list:
                write_simple(writer, "string", entry)
            writer.end_element()
            writer.end_element()
        writer.end_element()
        writer.end_element()

    def start_handler(self, path: Sequence[str], name: str, attributes: Attributes) -> None:
        """React to the start of an element while parsing."""
        match tuple(path):
            case (*prefix,) if tuple(prefix) == _SPA_STRUCT:
                self.parameter_list.append(SetParameterAttributesStruct())
            case (*prefix, "AccessList", "string") if tuple(prefix) == _SPA_STRUCT:
                if self.parameter_list:
                    self.parameter_list[-1].access_list.append("")

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        if not self.parameter_list:
            return
        current = self.parameter_list[-1]
        match tuple(path):
            case (*prefix, "AccessList", "string") if tuple(prefix) == _SPA_STRUCT:
                if current.access_list:
                    current.access_list[-1] = text
            case (*prefix, key) if tuple(prefix) == _SPA_STRUCT:
                match key:
                    case "Name":
                        current.name = text
                    case "NotificationChange":
                        current.notification_change = parse_to_int(text, 0, 0, U8_MAX)
                    case "Notification":
                        current.notification = parse_to_int(text, 0, 0, U8_MAX)
                    case "AccessListChange":
                        current.access_list_change = parse_to_int(text, 0, 0, U8_MAX)


@dataclass
class SetParameterAttributesResponse:
    """Empty acknowledgement of ``SetParameterAttributes``."""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``SetParameterAttributesResponse`` element."""
        write_empty_tag(writer, cwmp_prefix(has_cwmp, "SetParameterAttributesResponse"))


@dataclass
class SetParameterValues:
    """Asks for parameters to be set to new values."""

    parameter_list: list[ParameterValue] = field(default_factory=list)
    parameter_key: str | None = None

    def __post_init__(self) -> None:
        self.parameter_list = list(self.parameter_list)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``SetParameterValues`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "SetParameterValues"))
        if self.parameter_key is not None:
            write_simple(writer, "ParameterKey", self.parameter_key)
        if not self.parameter_list:
            write_empty_tag(writer, "ParameterList")
        else:
            array_type = (
                f"{cwmp_prefix(has_cwmp, 'ParameterValueStruct')}[{len(self.parameter_list)}]"
            )
            writer.start_element("ParameterList", {"SOAP-ENC:arrayType": array_type})
            for param in self.parameter_list:
                writer.start_element("ParameterValueStruct")
                write_simple(writer, "Name", param.name)
                writer.start_element("Value", {"xsi:type": param.type})
                writer.characters(param.value)
                writer.end_element()
                writer.end_element()
            writer.end_element()
        writer.end_element()

    def start_handler(self, path: Sequence[str], name: str, attributes: Attributes) -> None:
        """React to the start of an element while parsing."""
        match tuple(path):
            case ("SetParameterValues", "ParameterKey"):
                self.parameter_key = ""
            case (*prefix,) if tuple(prefix) == _SPV_STRUCT:
                self.parameter_list.append(ParameterValue())
            case (*prefix, "Value") if tuple(prefix) == _SPV_STRUCT:
                if self.parameter_list:
                    self.parameter_list[-1].type = extract_attribute(attributes, "type")

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        match tuple(path):
            case ("SetParameterValues", "ParameterKey"):
                self.parameter_key = text
            case (*prefix, key) if tuple(prefix) == _SPV_STRUCT:
                if not self.parameter_list:
                    return
                current = self.parameter_list[-1]
                match key:
                    case "Name":
                        current.name = text
                    case "Value":
                        current.value = text


@dataclass
class SetParameterValuesResponse:
    """Result of ``SetParameterValues``: 0 applied, 1 applied later."""

    status: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.status <= U32_MAX:
            raise ValueError(f"status must be between 0 and {U32_MAX}, got {self.status}")

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``SetParameterValuesResponse`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "SetParameterValuesResponse"))
        write_simple(writer, "Status", str(self.status))
        writer.end_element()

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        if tuple(path) == ("SetParameterValuesResponse", "Status"):
            self.status = parse_to_int(text, 0, 0, U32_MAX)