"""Messages that query parameter names, values and attributes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from .structs import ParameterAttribute, ParameterInfoStruct, ParameterValue
from .xmlutil import (
    U8_MAX,
    U32_MAX,
    XmlWriter,
    cwmp_prefix,
    extract_attribute,
    parse_to_int,
    write_simple,
)

Attributes = Mapping[str, str] | Iterable[tuple[str, str]]


def _open_list(
    writer: XmlWriter,
    has_cwmp: bool,
    message: str,
    list_name: str,
    item: str,
    count: int,
    extra: Mapping[str, str] | None = None,
) -> None:
    """Open the message element and its SOAP array element."""
    writer.start_element(cwmp_prefix(has_cwmp, message))
    attributes = dict(extra or {})
    attributes["SOAP-ENC:arrayType"] = f"{cwmp_prefix(has_cwmp, item)}[{count}]"
    writer.start_element(list_name, attributes)


@dataclass
class GetParameterAttributesResponse:
    """Attributes of the parameters that were asked for."""

    parameters: list[ParameterAttribute] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.parameters = list(self.parameters)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``GetParameterAttributesResponse`` element."""
        _open_list(
            writer,
            has_cwmp,
            "GetParameterAttributesResponse",
            "ParameterList",
            "ParameterAttributeStruct",
            len(self.parameters),
        )
        for param in self.parameters:
            writer.start_element("ParameterAttributeStruct")
            write_simple(writer, "Name", param.name)
            write_simple(writer, "Notification", param.notification)
            writer.start_element(
                "AccessList",
                {"SOAP-ENC:arrayType": f"xsd:string[{len(param.accesslist)}]"},
            )
            for entry in param.accesslist:
                write_simple(writer, "string", entry)
            writer.end_element()
            writer.end_element()
        writer.end_element()
        writer.end_element()

    def start_handler(self, path: Sequence[str], name: str, attributes: Attributes) -> None:
        """React to the start of an element while parsing."""
        match tuple(path):
            case ("GetParameterAttributesResponse", "ParameterList", "ParameterAttributeStruct"):
                self.parameters.append(ParameterAttribute())
            case (
                "GetParameterAttributesResponse",
                "ParameterList",
                "ParameterAttributeStruct",
                "AccessList",
                "string",
            ):
                if self.parameters:
                    self.parameters[-1].accesslist.append("")

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        if not self.parameters:
            return
        current = self.parameters[-1]
        match tuple(path):
            case ("GetParameterAttributesResponse", "ParameterList", "ParameterAttributeStruct", "Name"):
                current.name = text
            case (
                "GetParameterAttributesResponse",
                "ParameterList",
                "ParameterAttributeStruct",
                "Notification",
            ):
                current.notification = text
            case (
                "GetParameterAttributesResponse",
                "ParameterList",
                "ParameterAttributeStruct",
                "AccessList",
                "string",
            ):
                if current.accesslist:
                    current.accesslist[-1] = text


@dataclass
class GetParameterNames:
    """Asks for the parameter names below a path."""

    parameter_path: str = ""
    next_level: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.next_level <= U32_MAX:
            raise ValueError(
                f"next_level must be between 0 and {U32_MAX}, got {self.next_level}"
            )

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``GetParameterNames`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "GetParameterNames"))
        write_simple(writer, "ParameterPath", self.parameter_path)
        write_simple(writer, "NextLevel", str(self.next_level))
        writer.end_element()

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        match tuple(path):
            case ("GetParameterNames", "ParameterPath"):
                self.parameter_path = text
            case ("GetParameterNames", "NextLevel"):
                self.next_level = parse_to_int(text, 0, 0, U32_MAX)


@dataclass
class GetParameterNamesResponse:
    """Parameter names with their writable flags."""

    parameter_list: list[ParameterInfoStruct] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.parameter_list = list(self.parameter_list)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``GetParameterNamesResponse`` element."""
        _open_list(
            writer,
            has_cwmp,
            "GetParameterNamesResponse",
            "ParameterList",
            "ParameterInfoStruct",
            len(self.parameter_list),
        )
        for info in self.parameter_list:
            writer.start_element("ParameterInfoStruct")
            write_simple(writer, "Name", info.name)
            write_simple(writer, "Writable", str(info.writable))
            writer.end_element()
        writer.end_element()
        writer.end_element()

    def start_handler(self, path: Sequence[str], name: str, attributes: Attributes) -> None:
        """React to the start of an element while parsing."""
        if tuple(path) == ("GetParameterNamesResponse", "ParameterList", "ParameterInfoStruct"):
            self.parameter_list.append(ParameterInfoStruct())

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        if not self.parameter_list:
            return
        current = self.parameter_list[-1]
        match tuple(path):
            case ("GetParameterNamesResponse", "ParameterList", "ParameterInfoStruct", "Name"):
                current.name = text
            case ("GetParameterNamesResponse", "ParameterList", "ParameterInfoStruct", "Writable"):
                current.writable = parse_to_int(text, 0, 0, U8_MAX)


@dataclass
class GetParameterValues:
    """Asks for the values of the named parameters."""

    parameter_names: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.parameter_names = list(self.parameter_names)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``GetParameterValues`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "GetParameterValues"))
        writer.start_element("ParameterNames")
        for name in self.parameter_names:
            write_simple(writer, "string", name)
        writer.end_element()
        writer.end_element()

    def start_handler(self, path: Sequence[str], name: str, attributes: Attributes) -> None:
        """React to the start of an element while parsing."""
        if tuple(path) == ("GetParameterValues", "ParameterNames", "string"):
            self.parameter_names.append("")

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        if tuple(path) == ("GetParameterValues", "ParameterNames", "string") and self.parameter_names:
            self.parameter_names[-1] = text


@dataclass
class GetParameterValuesResponse:
    """Values of the parameters that were asked for."""

    parameters: list[ParameterValue] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.parameters = list(self.parameters)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``GetParameterValuesResponse`` element."""
        _open_list(
            writer,
            has_cwmp,
            "GetParameterValuesResponse",
            "ParameterList",
            "ParameterValueStruct",
            len(self.parameters),
            {"xsi:type": "SOAP-ENC:Array"},
        )
        for param in self.parameters:
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
            case ("GetParameterValuesResponse", "ParameterList", "ParameterValueStruct"):
                self.parameters.append(ParameterValue())
            case ("GetParameterValuesResponse", "ParameterList", "ParameterValueStruct", "Value"):
                if self.parameters:
                    self.parameters[-1].type = extract_attribute(attributes, "type")

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        if not self.parameters:
            return
        current = self.parameters[-1]
        match tuple(path):
            case ("GetParameterValuesResponse", "ParameterList", "ParameterValueStruct", "Name"):
                current.name = text
            case ("GetParameterValuesResponse", "ParameterList", "ParameterValueStruct", "Value"):
                current.value = text