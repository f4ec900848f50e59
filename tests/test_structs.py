import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cwmp.structs import (
    ParameterAttribute,
    ParameterInfoStruct,
    ParameterValue,
    QueuedTransferStruct,
    SetParameterAttributesStruct,
)

TEXT = st.text()
U8 = st.integers(0, 255)


def test_parameter_attribute_defaults():
    attribute = ParameterAttribute()
    assert attribute.name == ""
    assert attribute.notification == ""
    assert attribute.accesslist == []


def test_parameter_attribute_accepts_tuple_access_list():
    attribute = ParameterAttribute("Device.Test", "1", ("Subscriber", "Other"))
    assert attribute.accesslist == ["Subscriber", "Other"]
    assert isinstance(attribute.accesslist, list)


def test_parameter_attribute_copies_access_list():
    source = ["Subscriber"]
    attribute = ParameterAttribute("Device.Test", "0", source)
    source.append("Other")
    assert attribute.accesslist == ["Subscriber"]


def test_default_lists_are_not_shared():
    first = ParameterAttribute()
    first.accesslist.append("Subscriber")
    assert ParameterAttribute().accesslist == []
    second = SetParameterAttributesStruct()
    second.access_list.append("Subscriber")
    assert SetParameterAttributesStruct().access_list == []


def test_parameter_info_struct_fields():
    info = ParameterInfoStruct("Device.Test.", 1)
    assert info == ParameterInfoStruct(name="Device.Test.", writable=1)
    assert ParameterInfoStruct() == ParameterInfoStruct("", 0)


@pytest.mark.parametrize("writable", [-1, 256])
def test_parameter_info_struct_range(writable):
    with pytest.raises(ValueError):
        ParameterInfoStruct("Device.Test.", writable)


def test_parameter_value_fields():
    value = ParameterValue("InternetGatewayDevice.DeviceInfo.SpecVersion", "xsd:string", "1.0")
    assert value.name == "InternetGatewayDevice.DeviceInfo.SpecVersion"
    assert value.type == "xsd:string"
    assert value.value == "1.0"
    assert ParameterValue() == ParameterValue("", "", "")


def test_queued_transfer_struct_optional_fields():
    empty = QueuedTransferStruct()
    assert empty.command_key is None
    assert empty.state is None
    filled = QueuedTransferStruct("key", "1")
    assert (filled.command_key, filled.state) == ("key", "1")
    assert filled != empty


@pytest.mark.parametrize(
    "field_name", ["notification_change", "notification", "access_list_change"]
)
@pytest.mark.parametrize("bad", [-1, 256])
def test_set_parameter_attributes_struct_range(field_name, bad):
    with pytest.raises(ValueError):
        SetParameterAttributesStruct(name="Device.Test", **{field_name: bad})


@given(TEXT, U8, U8, U8, st.lists(TEXT))
def test_set_parameter_attributes_struct_copy_equal(name, change, note, alc, access):
    record = SetParameterAttributesStruct(name, change, note, alc, access)
    clone = copy.deepcopy(record)
    assert clone == record
    clone.access_list.append("extra")
    assert clone != record
    assert record.access_list == access


@given(TEXT, TEXT, st.lists(TEXT))
def test_parameter_attribute_equality(name, notification, access):
    assert ParameterAttribute(name, notification, access) == ParameterAttribute(
        name, notification, tuple(access)
    )