#!/usr/bin/env python3
import logging
from typing import Iterable, Optional

from apkmanifest.attributes import (
    decode_boolean_hex,
    decode_int_hex,
    leading_spaces,
    line_depth,
    parse_attribute_line,
    parse_element_line,
)
from apkmanifest.models import COMPONENT_TAGS, Component, IntentFilter, ManifestDocument, Permission, Provider
from apkmanifest.permissions import protection_level

"""Rebuilds a ManifestDocument from the indented text of `aapt dump xmltree`

The dump has no closing tags. Nesting is recovered from indentation only:
an element, component or intent-filter scope ends at the next `E:` line whose
depth is <= the depth it was opened at.
"""

logger = logging.getLogger(__name__)

PERMISSION_TAGS = ("uses-permission", "uses-permission-sdk-23")
DATA_KEYS = ("scheme", "host", "path")
PROVIDER_ATTRIBUTES = {
    "authorities": "authorities",
    "readPermission": "read_permission",
    "writePermission": "write_permission",
}


class TreeParser:
    """Single forward pass over the dump lines. One instance per parse."""

    def __init__(self):
        self.doc = ManifestDocument()
        self.current_element: Optional[str] = None
        self.component: Optional[Component] = None
        self.component_depth = 0
        self.intent_filter: Optional[IntentFilter] = None
        self.intent_filter_depth = 0
        self.intent_filter_owner: Optional[Component] = None
        self.finished = False

    def feed(self, line: str):
        depth = line_depth(line)

        tag = parse_element_line(line)
        if tag is not None:
            if leading_spaces(line) % 2:
                self._irregular_indent(line)
            self._close_scopes(depth)
            self._open_element(tag, depth)
            return

        attr = parse_attribute_line(line)
        if attr is not None:
            self._route_attribute(attr)

    def finish(self) -> ManifestDocument:
        """Flush whatever is still open at end of input."""
        if not self.finished:
            self._close_scopes(0)
            self.finished = True
        return self.doc

    def _irregular_indent(self, line: str):
        if not self.doc.irregular_indent_lines:
            logger.warning(f"Unsupported indentation (not 2 spaces per level), scopes may be misattributed: {line.strip()!r}")
        self.doc.irregular_indent_lines += 1

    # -- scopes

    def _close_scopes(self, depth: int):
        if self.component is not None and self.component_depth >= depth:
            # a nested filter ending on the same line still belongs to this component
            if self.intent_filter is not None and self.intent_filter_depth >= depth:
                self._close_intent_filter()
            self._close_component()

        if self.intent_filter is not None and self.intent_filter_depth >= depth:
            self._close_intent_filter()

    def _close_component(self):
        component = self.component
        self.component = None
        if component.name:
            self.doc.add_component(component)
        else:
            self.doc.dropped_components += 1
            logger.debug(f"Dropping unnamed {component.kind}")

    def _close_intent_filter(self):
        intent_filter, owner = self.intent_filter, self.intent_filter_owner
        self.intent_filter = None
        self.intent_filter_owner = None
        if owner is not None and owner is self.component and owner.has_intent_filters:
            owner.intent_filters.append(intent_filter)
        else:
            logger.debug(f"Discarding orphaned intent-filter {intent_filter}")

    def _open_element(self, tag: str, depth: int):
        self.current_element = tag

        component_cls = COMPONENT_TAGS.get(tag)
        if component_cls is not None:
            if self.component is not None:
                self._close_component()
            self.component = component_cls()
            self.component_depth = depth
        elif tag == "intent-filter":
            if self.intent_filter is not None:
                self._close_intent_filter()
            self.intent_filter = IntentFilter()
            self.intent_filter_depth = depth
            self.intent_filter_owner = self.component

    # -- attributes

    def _route_attribute(self, attr):
        name, string_value, hex_value = attr
        element = self.current_element
        doc = self.doc

        if element == "manifest":
            if name == "package":
                doc.package_name = string_value or ""
            elif name == "versionCode":
                doc.version_code = decode_int_hex(hex_value, string_value)
            elif name == "versionName":
                doc.version_name = string_value or ""

        elif element == "uses-sdk":
            if name == "minSdkVersion":
                doc.min_sdk = decode_int_hex(hex_value, string_value)
            elif name == "targetSdkVersion":
                doc.target_sdk = decode_int_hex(hex_value, string_value)

        elif element in PERMISSION_TAGS:
            if name == "name" and string_value:
                doc.permissions.append(Permission(string_value, protection_level(string_value)))

        elif element == "application":
            if name == "debuggable":
                doc.debuggable = decode_boolean_hex(hex_value)
            elif name == "allowBackup":
                doc.allow_backup = decode_boolean_hex(hex_value)

        # any element inside an open component, e.g. path-permission, meta-data, action
        if self.component is not None:
            self._route_component_attribute(name, string_value, hex_value)

        if self.intent_filter is not None:
            self._route_intent_filter_attribute(element, name, string_value)

    def _route_component_attribute(self, name, string_value, hex_value):
        component = self.component
        if name == "name":
            component.name = string_value or ""
        elif name == "exported":
            component.exported = decode_boolean_hex(hex_value)
        elif name == "permission":
            component.permission = string_value
        elif name in PROVIDER_ATTRIBUTES and isinstance(component, Provider):
            setattr(component, PROVIDER_ATTRIBUTES[name], string_value)

    def _route_intent_filter_attribute(self, element, name, string_value):
        intent_filter = self.intent_filter
        if element == "action" and name == "name":
            intent_filter.action = string_value
        elif element == "category" and name == "name":
            intent_filter.category = string_value
        elif element == "data" and name in DATA_KEYS and string_value is not None:
            intent_filter.add_data(name, string_value)


def parse_lines(lines: Iterable[str]) -> ManifestDocument:
    parser = TreeParser()
    for line in lines:
        parser.feed(line)
    return parser.finish()


def parse(text: str) -> ManifestDocument:
    """
    Parse xmltree dump text. Malformed lines are skipped; garbage in gives
    a document with defaults, never an exception.
    """
    if not isinstance(text, str):
        raise TypeError(f"xmltree dump must be str, got {type(text).__name__}")
    doc = parse_lines(text.splitlines())
    logger.debug(
        f"Parsed {doc.package_name or '<no package>'}: {len(doc.permissions)} permissions, "
        f"{len(doc.activities)} activities, {len(doc.services)} services, "
        f"{len(doc.receivers)} receivers, {len(doc.providers)} providers, "
        f"{doc.dropped_components} dropped"
    )
    return doc
