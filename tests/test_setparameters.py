import xml.etree.ElementTree as ET

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cwmp.setparameters import (
    SetParameterAttributes,
    SetParameterAttributesResponse,
    SetParameterValues,
    SetParameterValuesResponse,
)
from cwmp.structs import ParameterValue, SetParameterAttributesStruct
from cwmp.xmlutil import XmlWriter

_SAFE = (
    " !#$%&()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ^_"
    "abcdefghijklmnopqrstuvwxyz{|}~"
)
safe_text = st.text(alphabet=_SAFE, max_size=12)
u8 = st.integers(min_value=0, max_value=255)


def _render(message, has_cwmp):
    writer = XmlWriter()
    message.generate(writer, has_cwmp)
    return writer.getvalue()


def _feed(message, document):
    root = ET.fromstring(
        '<root xmlns:cwmp="urn:cwmp" xmlns:SOAP-ENC="urn:enc" xmlns:xsi="urn:xsi">'
        f"{document}</root>"
    )

    def walk(element, path):
        name = element.tag.rsplit("}", 1)[-1]
        path = path + [name]
        if hasattr(message, "start_handler"):
            message.start_handler(path, name, element.attrib)
        if element.text:
            message.characters(path, element.text)
        for child in element:
            walk(child, path)

    for child in root:
        walk(child, [])
    return message


param_attr_structs = st.builds(
    SetParameterAttributesStruct,
    name=safe_text,
    notification_change=u8,
    notification=u8,
    access_list_change=u8,
    access_list=st.lists(safe_text, max_size=3),
)
param_values = st.builds(ParameterValue, name=safe_text, type=safe_text, value=safe_text)


@given(st.lists(param_attr_structs, max_size=3), st.booleans())
def test_set_parameter_attributes_round_trip(params, has_cwmp):
    original = SetParameterAttributes(params)
    parsed = _feed(SetParameterAttributes(), _render(original, has_cwmp))
    assert parsed == original


def test_set_parameter_attributes_array_type_always_cwmp():
    message = SetParameterAttributes(
        [SetParameterAttributesStruct("Device.Test.", 1, 2, 0, ["Subscriber"])]
    )
    text = _render(message, False)
    assert text.startswith("<SetParameterAttributes>")
    assert 'SOAP-ENC:arrayType="cwmp:SetParameterAttributesStruct[1]"' in text
    assert "<AccessList><string>Subscriber</string></AccessList>" in text


def test_set_parameter_attributes_bad_numbers_default_to_zero():
    message = SetParameterAttributes()
    struct_path = ["SetParameterAttributes", "ParameterList", "SetParameterAttributesStruct"]
    message.start_handler(struct_path, "SetParameterAttributesStruct", {})
    message.characters(struct_path + ["Notification"], "256")
    message.characters(struct_path + ["NotificationChange"], "x")
    message.characters(struct_path + ["AccessListChange"], "1")
    assert message.parameter_list[0].notification == 0
    assert message.parameter_list[0].notification_change == 0
    assert message.parameter_list[0].access_list_change == 1


def test_set_parameter_attributes_characters_without_struct_ignored():
    message = SetParameterAttributes()
    path = ["SetParameterAttributes", "ParameterList", "SetParameterAttributesStruct", "Name"]
    message.characters(path, "Device.")
    assert message.parameter_list == []


@pytest.mark.parametrize("has_cwmp", [True, False])
def test_set_parameter_attributes_response(has_cwmp):
    text = _render(SetParameterAttributesResponse(), has_cwmp)
    if has_cwmp:
        assert text == "<cwmp:SetParameterAttributesResponse />"
    else:
        assert text.startswith("<SetParameterAttributesResponse")


@given(
    st.lists(param_values, max_size=3),
    st.one_of(st.none(), safe_text),
    st.booleans(),
)
def test_set_parameter_values_round_trip(params, key, has_cwmp):
    original = SetParameterValues(params, key)
    parsed = _feed(SetParameterValues(), _render(original, has_cwmp))
    assert parsed == original


def test_set_parameter_values_empty_list_is_empty_tag():
    assert _render(SetParameterValues(), False) == (
        "<SetParameterValues><ParameterList /></SetParameterValues>"
    )


@pytest.mark.parametrize(
    "has_cwmp, expected",
    [(True, "cwmp:ParameterValueStruct[1]"), (False, "ParameterValueStruct[1]")],
)
def test_set_parameter_values_array_type(has_cwmp, expected):
    message = SetParameterValues(
        [ParameterValue("Device.Test", "xsd:string", "1")], "ParamKey"
    )
    text = _render(message, has_cwmp)
    assert f'SOAP-ENC:arrayType="{expected}"' in text
    assert "<ParameterKey>ParamKey</ParameterKey>" in text
    assert '<Value xsi:type="xsd:string">1</Value>' in text


def test_set_parameter_values_value_type_from_attribute():
    message = SetParameterValues()
    struct_path = ["SetParameterValues", "ParameterList", "ParameterValueStruct"]
    message.start_handler(struct_path, "ParameterValueStruct", {})
    message.start_handler(struct_path + ["Value"], "Value", {"{urn:xsi}type": "xsd:int"})
    message.characters(struct_path + ["Value"], "5")
    assert message.parameter_list == [ParameterValue("", "xsd:int", "5")]
    assert message.parameter_key is None


@given(st.integers(min_value=0, max_value=0xFFFF_FFFF), st.booleans())
def test_set_parameter_values_response_round_trip(status, has_cwmp):
    original = SetParameterValuesResponse(status)
    parsed = _feed(SetParameterValuesResponse(), _render(original, has_cwmp))
    assert parsed == original


def test_set_parameter_values_response_generate():
    assert _render(SetParameterValuesResponse(1), True) == (
        "<cwmp:SetParameterValuesResponse><Status>1</Status></cwmp:SetParameterValuesResponse>"
    )


@pytest.mark.parametrize("text", ["-1", "abc", "4294967296", ""])
def test_set_parameter_values_response_invalid_status(text):
    message = SetParameterValuesResponse(1)
    message.characters(["SetParameterValuesResponse", "Status"], text)
    assert message.status == 0


@pytest.mark.parametrize("status", [-1, 0x1_0000_0000])
def test_set_parameter_values_response_range(status):
    with pytest.raises(ValueError):
        SetParameterValuesResponse(status)