#!/usr/bin/env python3
import re
from typing import NamedTuple, Optional

"""Line-level decoders for `aapt dump xmltree` output"""


# E: activity (line=15)
ELEMENT_RE = re.compile(r"^\s*E:\s+(\S+)")

# A: android:name(0x01010003)=".Main" (Raw: ".Main")
# A: android:versionCode(0x0101021b)=(type 0x10)0x1
# A: package="com.example.app" (Raw: "com.example.app")
# A: http://schemas.android.com/apk/res/android:name(0x01010003)="..."   (aapt2)
ATTRIBUTE_RE = re.compile(
    r'^\s*A:\s+(?:[\w.:/-]*:)?(\w+)(?:\([^)]*\))?='
    r'(?:"([^"]*)"|(?:\(type [^)]+\))?(0x[0-9a-fA-F]+|-?\d+))'
)

SDK_RE = re.compile(r"\s*([+-]?\d+)")

BOOLEAN_TRUE = ("0xffffffff", "-1")


class AttributeLine(NamedTuple):
    name: str
    string_value: Optional[str]
    hex_value: Optional[str]


def leading_spaces(line: str) -> int:
    return len(line) - len(line.lstrip())


def line_depth(line: str) -> int:
    """Nesting level, assuming the dumper indents two spaces per level."""
    return leading_spaces(line) // 2


def parse_element_line(line: str) -> Optional[str]:
    """Return the tag of an `E:` line, or None."""
    m = ELEMENT_RE.match(line)
    return m.group(1) if m else None


def parse_attribute_line(line: str) -> Optional[AttributeLine]:
    """Return (name, quoted string value, integer literal) of an `A:` line, or None."""
    m = ATTRIBUTE_RE.match(line)
    if not m:
        return None
    return AttributeLine(m.group(1), m.group(2), m.group(3))


def decode_boolean_hex(hex_value: Optional[str]) -> bool:
    """
    Binary XML stores booleans as 32-bit all-ones / all-zeros.
    Only 0xffffffff (or -1) is true; 0x1 is not.
    """
    if hex_value is None:
        return False
    return hex_value.lower() in BOOLEAN_TRUE


def decode_int_hex(hex_value: Optional[str], string_value: Optional[str] = None) -> str:
    """
    Integer literal as a base-10 string. Falls back to the raw string value,
    or to the literal itself when it is not a number.
    """
    if hex_value:
        base = 16 if hex_value.lower().lstrip("-").startswith("0x") else 10
        try:
            return str(int(hex_value, base))
        except ValueError:
            return string_value if string_value is not None else hex_value
    return string_value or ""


def parse_sdk(value: Optional[str]) -> int:
    """
    Leading integer of an SDK version string, 0 when there is none.
    Callers must guard with > 0: absent and unparseable look the same here.
    """
    if not value:
        return 0
    m = SDK_RE.match(value)
    return int(m.group(1)) if m else 0
