"""XML writing helpers and value conversions shared by the CWMP messages."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from datetime import datetime, timedelta, timezone

U8_MAX = 0xFF
U16_MAX = 0xFFFF
U32_MAX = 0xFFFF_FFFF
I32_MIN = -0x8000_0000
I32_MAX = 0x7FFF_FFFF


class GenerateError(Exception):
    """Raised when a message cannot be written as XML."""


def _escape_text(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attr(value: str) -> str:
    return _escape_text(value).replace('"', "&quot;")


class XmlWriter:
    """Event-style XML writer that collects its output in memory.

    An element that is ended straight after it was started is written as a
    self-closing tag; writing any text, even an empty one, keeps both tags.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._stack: list[str] = []
        self._start_tag_open = False

    def _close_start_tag(self) -> None:
        if self._start_tag_open:
            self._parts.append(">")
            self._start_tag_open = False

    def start_element(
        self, name: str, attributes: Mapping[str, str] | None = None
    ) -> XmlWriter:
        """Open an element, with its attributes in the given order."""
        if not name:
            raise GenerateError("element name must not be empty")
        self._close_start_tag()
        self._parts.append(f"<{name}")
        for key, value in (attributes or {}).items():
            self._parts.append(f' {key}="{_escape_attr(str(value))}"')
        self._stack.append(name)
        self._start_tag_open = True
        return self

    def characters(self, text: str) -> XmlWriter:
        """Write escaped character data inside the current element."""
        self._close_start_tag()
        self._parts.append(_escape_text(text))
        return self

    def end_element(self) -> XmlWriter:
        """Close the innermost open element."""
        if not self._stack:
            raise GenerateError("end_element called with no open element")
        name = self._stack.pop()
        if self._start_tag_open:
            self._parts.append(" />")
            self._start_tag_open = False
        else:
            self._parts.append(f"</{name}>")
        return self

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)


def bool2str(value: bool) -> str:
    """Encode a boolean the way CWMP does: "1" or "0"."""
    return "1" if value else "0"


def str2bool(text: str) -> bool:
    """Anything but "0" is true."""
    return text != "0"


def write_simple(writer: XmlWriter, name: str, value: str) -> None:
    """Write ``<name>value</name>``."""
    writer.start_element(name)
    writer.characters(value)
    writer.end_element()


def write_empty_tag(writer: XmlWriter, name: str) -> None:
    """Write an element with no content."""
    writer.start_element(name)
    writer.end_element()


def cwmp_prefix(has_cwmp: bool, postfix: str) -> str:
    """Qualify an element name with the ``cwmp`` prefix when required."""
    return f"cwmp:{postfix}" if has_cwmp else postfix


_INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_to_int(
    chars: str,
    default: int,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    """Parse a decimal integer, returning ``default`` when it is not valid.

    ``minimum`` and ``maximum`` bound the accepted range; a negative sign is
    refused outright when ``minimum`` is not negative.
    """
    if not _INT_RE.fullmatch(chars):
        return default
    if chars.startswith("-") and minimum is not None and minimum >= 0:
        return default
    value = int(chars)
    if minimum is not None and value < minimum:
        return default
    if maximum is not None and value > maximum:
        return default
    return value


def _local_name(qualified: str) -> str:
    if "}" in qualified:
        qualified = qualified.rsplit("}", 1)[1]
    return qualified.rsplit(":", 1)[-1]


def extract_attribute(
    attributes: Mapping[str, str] | Iterable[tuple[str, str]], name: str
) -> str:
    """Return the value of the first attribute whose local name is ``name``."""
    pairs = attributes.items() if isinstance(attributes, Mapping) else attributes
    for key, value in pairs:
        if _local_name(key) == name:
            return value
    return ""


def format_datetime(value: datetime) -> str:
    """Format a timestamp as RFC 3339 in UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    micro = value.microsecond
    if micro:
        text += f".{micro // 1000:03d}" if micro % 1000 == 0 else f".{micro:06d}"
    return text + "+00:00"


_DATETIME_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:([Zz])|([+-])(\d{2}):?(\d{2}))",
    re.ASCII,
)


def parse_datetime(text: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware UTC datetime.

    Raises ValueError when the text is not a valid timestamp.
    """
    match = _DATETIME_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"not an RFC 3339 timestamp: {text!r}")
    year, month, day, hour, minute, second = (int(g) for g in match.group(1, 2, 3, 4, 5, 6))
    fraction = match.group(7) or ""
    micro = int(fraction[:6].ljust(6, "0")) if fraction else 0
    if match.group(8):
        tz = timezone.utc
    else:
        offset = timedelta(hours=int(match.group(10)), minutes=int(match.group(11)))
        tz = timezone(-offset if match.group(9) == "-" else offset)
    parsed = datetime(year, month, day, hour, minute, second, micro, tzinfo=tz)
    return parsed.astimezone(timezone.utc)