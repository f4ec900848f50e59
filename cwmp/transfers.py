"""Messages about queued transfers, uploads and transfer acknowledgements."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from .structs import QueuedTransferStruct
from .xmlutil import (
    U8_MAX,
    U32_MAX,
    XmlWriter,
    cwmp_prefix,
    format_datetime,
    parse_datetime,
    parse_to_int,
    write_empty_tag,
    write_simple,
)

Attributes = Mapping[str, str] | Iterable[tuple[str, str]]

_QT_STRUCT = ("GetQueuedTransfersResponse", "TransferList", "QueuedTransferStruct")


def _check_unsigned(name: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")


def _parse_time(text: str) -> datetime | None:
    try:
        return parse_datetime(text)
    except ValueError:
        return None


@dataclass
class GetQueuedTransfers:
    """Asks for the list of queued transfers."""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``GetQueuedTransfers`` element."""
        write_empty_tag(writer, cwmp_prefix(has_cwmp, "GetQueuedTransfers"))


@dataclass
class GetQueuedTransfersResponse:
    """The transfers that are queued or in progress."""

    transfer_list: list[QueuedTransferStruct] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.transfer_list = list(self.transfer_list)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``GetQueuedTransfersResponse`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "GetQueuedTransfersResponse"))
        array_type = (
            f"{cwmp_prefix(has_cwmp, 'QueuedTransferStruct')}[{len(self.transfer_list)}]"
        )
        writer.start_element("TransferList", {"SOAP-ENC:arrayType": array_type})
        for transfer in self.transfer_list:
            writer.start_element("QueuedTransferStruct")
            if transfer.command_key is not None:
                write_simple(writer, "CommandKey", transfer.command_key)
            if transfer.state is not None:
                write_simple(writer, "State", transfer.state)
            writer.end_element()
        writer.end_element()
        writer.end_element()

    def start_handler(self, path: Sequence[str], name: str, attributes: Attributes) -> None:
        """React to the start of an element while parsing."""
        match tuple(path):
            case (*prefix,) if tuple(prefix) == _QT_STRUCT:
                self.transfer_list.append(QueuedTransferStruct())
            case (*prefix, "CommandKey") if tuple(prefix) == _QT_STRUCT:
                if self.transfer_list:
                    self.transfer_list[-1].command_key = ""
            case (*prefix, "State") if tuple(prefix) == _QT_STRUCT:
                if self.transfer_list:
                    self.transfer_list[-1].state = ""

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        match tuple(path):
            case (*prefix, key) if tuple(prefix) == _QT_STRUCT:
                if not self.transfer_list:
                    return
                current = self.transfer_list[-1]
                match key:
                    case "CommandKey":
                        current.command_key = text
                    case "State":
                        current.state = text


@dataclass
class Upload:
    """Asks the device to upload a file to a URL."""

    command_key: str = ""
    file_type: str = ""
    url: str = ""
    username: str = ""
    password: str = ""
    delay_seconds: int = 0

    def __post_init__(self) -> None:
        _check_unsigned("delay_seconds", self.delay_seconds, U32_MAX)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``Upload`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "Upload"))
        write_simple(writer, "CommandKey", self.command_key)
        write_simple(writer, "FileType", self.file_type)
        write_simple(writer, "URL", self.url)
        write_simple(writer, "Username", self.username)
        write_simple(writer, "Password", self.password)
        write_simple(writer, "DelaySeconds", str(self.delay_seconds))
        writer.end_element()

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``."""
        match tuple(path):
            case ("Upload", "CommandKey"):
                self.command_key = text
            case ("Upload", "FileType"):
                self.file_type = text
            case ("Upload", "URL"):
                self.url = text
            case ("Upload", "Username"):
                self.username = text
            case ("Upload", "Password"):
                self.password = text
            case ("Upload", "DelaySeconds"):
                self.delay_seconds = parse_to_int(text, 0, 0, U32_MAX)


@dataclass
class UploadResponse:
    """Result of an ``Upload`` with its start and completion times."""

    status: int = 0
    start_time: datetime | None = None
    complete_time: datetime | None = None

    def __post_init__(self) -> None:
        _check_unsigned("status", self.status, U8_MAX)

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``UploadResponse`` element."""
        writer.start_element(cwmp_prefix(has_cwmp, "UploadResponse"))
        write_simple(writer, "Status", str(self.status))
        if self.start_time is not None:
            write_simple(writer, "StartTime", format_datetime(self.start_time))
        if self.complete_time is not None:
            write_simple(writer, "CompleteTime", format_datetime(self.complete_time))
        writer.end_element()

    def characters(self, path: Sequence[str], text: str) -> None:
        """Store character data found at ``path``; bad timestamps are ignored."""
        match tuple(path):
            case ("UploadResponse", "Status"):
                self.status = parse_to_int(text, 0, 0, U8_MAX)
            case ("UploadResponse", "StartTime"):
                parsed = _parse_time(text)
                if parsed is not None:
                    self.start_time = parsed
            case ("UploadResponse", "CompleteTime"):
                parsed = _parse_time(text)
                if parsed is not None:
                    self.complete_time = parsed


@dataclass
class RequestDownloadResponse:
    """Empty acknowledgement of ``RequestDownload``."""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``RequestDownloadResponse`` element."""
        write_empty_tag(writer, cwmp_prefix(has_cwmp, "RequestDownloadResponse"))


@dataclass
class ScheduleDownloadResponse:
    """Empty acknowledgement of ``ScheduleDownload``."""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``ScheduleDownloadResponse`` element."""
        write_empty_tag(writer, cwmp_prefix(has_cwmp, "ScheduleDownloadResponse"))


@dataclass
class TransferCompleteResponse:
    """Empty acknowledgement of ``TransferComplete``."""

    def generate(self, writer: XmlWriter, has_cwmp: bool) -> None:
        """Write the ``TransferCompleteResponse`` element."""
        write_empty_tag(writer, cwmp_prefix(has_cwmp, "TransferCompleteResponse"))