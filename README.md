# cwmp

Message types for the CPE WAN Management Protocol (TR-069). Each message
can write itself as XML, and most can fill themselves in from a stream of
parse events. The package has no dependencies outside the standard library.

## Installation

```
pip install cwmp
```

To run the test suite, install the test extra:

```
pip install "cwmp[test]"
pytest
```

## Generating XML

Every message type has a `generate(writer, has_cwmp)` method that writes its
elements to a `cwmp.xmlutil.XmlWriter`. When `has_cwmp` is true, the message
element is given the `cwmp:` prefix. `XmlWriter.getvalue()` returns the text
written so far.

```python
from cwmp.xmlutil import XmlWriter
from cwmp.methods import Reboot

writer = XmlWriter()
Reboot("reboot-key").generate(writer, True)
print(writer.getvalue())
# <cwmp:Reboot><CommandKey>reboot-key</CommandKey></cwmp:Reboot>
```

Header elements work the same way and carry a `mustUnderstand` attribute
written as `"1"` or `"0"`:

```python
from cwmp.headers import ID

writer = XmlWriter()
ID(must_understand=True, id="1234").generate(writer, True)
print(writer.getvalue())
# <cwmp:ID mustUnderstand="1">1234</cwmp:ID>
```

An element that is closed straight after it is opened is written as a
self-closing tag, so `GetRPCMethods().generate(writer, False)` writes
`<GetRPCMethods />`. Text and attribute values are escaped. The writer raises
`cwmp.xmlutil.GenerateError` when asked to open an element with an empty name
or to close an element when none is open.

Integer fields are checked against the width the protocol gives them
(for example `NoMoreRequests.value` is 0 to 255, `SessionTimeout.timeout`
and `ScheduleInform.delay_seconds` are 0 to 4294967295); a constructor given
a value out of range raises `ValueError`.

## Parsing

Message types that carry data take part in parsing through two handlers:

- `start_handler(path, name, attributes)`: called when an element opens;
  `path` is the sequence of local element names from the message element
  down to the one just opened. `attributes` is a mapping or an iterable of
  `(name, value)` pairs; prefixes such as `xsi:` are ignored when looking up
  an attribute.
- `characters(path, text)`: called with the text of the current element.

Messages whose fields are all simple values (`GetParameterNames`,
`SetParameterValuesResponse`, `Upload`, `UploadResponse`, `InformResponse`,
`Kicked`, `KickedResponse`, `Reboot`, `ScheduleInform`) have only
`characters`.

```python
from cwmp.getparameters import GetParameterValues

message = GetParameterValues()
path = ["GetParameterValues", "ParameterNames", "string"]
message.start_handler(path, "string", {})
message.characters(path, "InternetGatewayDevice.DeviceInfo.SpecVersion")
print(message.parameter_names)
# ['InternetGatewayDevice.DeviceInfo.SpecVersion']
```

Parsing never raises: unknown paths are ignored, numbers that fail to parse
or fall outside their range are replaced by a default (0, or 1 for
`InformResponse.max_envelopes`), and timestamps that are not valid RFC 3339
leave the field as it was.

## Helpers in `cwmp.xmlutil`

- `bool2str` / `str2bool`: the protocol's `"1"`/`"0"` booleans; any text
  other than `"0"` is true.
- `write_simple`, `write_empty_tag`, `cwmp_prefix`: small writing helpers.
- `parse_to_int(chars, default, minimum, maximum)`: decimal parsing with a
  fallback value.
- `extract_attribute(attributes, name)`: attribute lookup by local name,
  returning `""` when absent.
- `format_datetime` / `parse_datetime`: RFC 3339 timestamps in UTC
  (`2015-01-19T23:08:24+00:00`); naive datetimes are taken as UTC, and
  `parse_datetime` raises `ValueError` on bad input.

## Modules

- `cwmp.xmlutil`: `XmlWriter`, `GenerateError` and the helpers above.
- `cwmp.structs`: `ParameterAttribute`, `ParameterInfoStruct`,
  `ParameterValue`, `QueuedTransferStruct`, `SetParameterAttributesStruct`.
- `cwmp.headers`: SOAP header elements `ID`, `HoldRequests`,
  `NoMoreRequests`, `SessionTimeout`, `SupportedCWMPVersions`,
  `UseCWMPVersion`.
- `cwmp.ops`: data records `InstallOp`, `UninstallOp`, `UpdateOp`,
  `OptionStruct`, `TimeWindow`.
- `cwmp.getparameters`: `GetParameterNames`, `GetParameterNamesResponse`,
  `GetParameterValues`, `GetParameterValuesResponse`,
  `GetParameterAttributesResponse`.
- `cwmp.setparameters`: `SetParameterAttributes`,
  `SetParameterAttributesResponse`, `SetParameterValues`,
  `SetParameterValuesResponse`.
- `cwmp.transfers`: `GetQueuedTransfers`, `GetQueuedTransfersResponse`,
  `Upload`, `UploadResponse`, `RequestDownloadResponse`,
  `ScheduleDownloadResponse`, `TransferCompleteResponse`.
- `cwmp.methods`: `GetRPCMethods`, `GetRPCMethodsResponse`,
  `InformResponse`, `Kicked`, `KickedResponse`, `Reboot`, `RebootResponse`,
  `ScheduleInform`, `ScheduleInformResponse`, `SetVouchers`,
  `SetVouchersResponse`.

## What this package does not do

- It has no SOAP envelope type and no function that turns a whole XML
  document into messages or messages into a complete document. You drive
  the handlers yourself from an XML parser of your choice and wrap the
  generated elements in an envelope yourself.
- Only the message types listed above are provided. Messages such as
  `Inform`, `AddObject`, `DeleteObject`, `Download`, `TransferComplete`,
  `GetParameterAttributes`, `FactoryReset` and SOAP faults are not part of
  the package.
- `InstallOp`, `UninstallOp`, `UpdateOp`, `OptionStruct` and `TimeWindow`
  are plain records; no message in the package writes or reads them.
- There is no network client or server; the package only builds and reads
  messages.