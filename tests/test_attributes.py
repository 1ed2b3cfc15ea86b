import pytest

from apkmanifest.attributes import (
    AttributeLine,
    decode_boolean_hex,
    decode_int_hex,
    line_depth,
    parse_attribute_line,
    parse_element_line,
    parse_sdk,
)


@pytest.mark.parametrize("value, expected", [
    ("0xffffffff", True),
    ("0xFFFFFFFF", True),
    ("-1", True),
    ("0x0", False),
    ("0", False),
    ("0x1", False),
    (None, False),
])
def test_decode_boolean_hex(value, expected):
    assert decode_boolean_hex(value) is expected


def test_decode_int_hex():
    assert decode_int_hex("0x1e") == "30"
    assert decode_int_hex("0x1") == "1"
    assert decode_int_hex("33") == "33"
    assert decode_int_hex(None, "7.0") == "7.0"
    assert decode_int_hex(None, None) == ""


def test_decode_int_hex_non_numeric_literal():
    assert decode_int_hex("abc") == "abc"
    assert decode_int_hex("abc", "raw") == "raw"
    assert decode_int_hex("0xzz") == "0xzz"


def test_line_depth():
    assert line_depth("E: manifest (line=2)") == 0
    assert line_depth("  E: application (line=5)") == 1
    assert line_depth("     A: android:name") == 2


def test_parse_element_line():
    assert parse_element_line("    E: intent-filter (line=17)") == "intent-filter"
    assert parse_element_line("    A: package=\"x\"") is None
    assert parse_element_line("N: android=http://schemas.android.com/apk/res/android") is None


def test_parse_attribute_line_quoted():
    line = '      A: android:name(0x01010003)=".Main" (Raw: ".Main")'
    assert parse_attribute_line(line) == AttributeLine("name", ".Main", None)


def test_parse_attribute_line_typed_hex():
    line = "    A: android:versionCode(0x0101021b)=(type 0x10)0x2a"
    assert parse_attribute_line(line) == AttributeLine("versionCode", None, "0x2a")


def test_parse_attribute_line_without_prefix():
    line = '  A: package="com.example.app" (Raw: "com.example.app")'
    assert parse_attribute_line(line) == AttributeLine("package", "com.example.app", None)


def test_parse_attribute_line_namespace_uri():
    line = '      A: http://schemas.android.com/apk/res/android:name(0x01010003)=".Main" (Raw: ".Main")'
    assert parse_attribute_line(line) == AttributeLine("name", ".Main", None)


def test_parse_attribute_line_signed_int():
    line = "      A: android:exported(0x01010010)=(type 0x12)-1"
    assert parse_attribute_line(line).hex_value == "-1"


def test_parse_attribute_line_unsupported_values():
    assert parse_attribute_line("      A: android:label(0x01010001)=@0x7f0f001c") is None
    assert parse_attribute_line("garbage") is None
    assert parse_attribute_line("") is None


def test_parse_sdk():
    assert parse_sdk("30") == 30
    assert parse_sdk("30-preview") == 30
    assert parse_sdk("S") == 0
    assert parse_sdk("") == 0
    assert parse_sdk(None) == 0
