#!/usr/bin/env python3
import logging
from pathlib import Path

from lxml import etree

from apkmanifest.models import COMPONENT_TAGS, IntentFilter, ManifestDocument, Permission, Provider
from apkmanifest.permissions import protection_level
from apkmanifest.xmltree import DATA_KEYS, PROVIDER_ATTRIBUTES

"""Reads an already decoded AndroidManifest.xml (jadx / apktool output) into a ManifestDocument"""

logger = logging.getLogger(__name__)

ns = {"android": "http://schemas.android.com/apk/res/android"}
ANDROID = "{%s}" % ns["android"]


class ManifestXMLError(ValueError):
    pass


def android_attr(element, name: str, default=None):
    return element.get(ANDROID + name, default)


def first(values, default=""):
    return values[0] if values else default


def parse_xml_manifest(xml) -> ManifestDocument:
    """Decoded manifest text or bytes -> ManifestDocument, same defaults as the xmltree parser."""
    if isinstance(xml, str):
        # lxml refuses str input that carries an encoding declaration
        xml = xml.encode("utf-8")
    elif not isinstance(xml, bytes):
        raise TypeError(f"manifest XML must be str or bytes, got {type(xml).__name__}")

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(xml, parser=parser)
    except etree.XMLSyntaxError as e:
        raise ManifestXMLError(f"Malformed AndroidManifest.xml: {e}") from e
    if root.tag != "manifest":
        raise ManifestXMLError(f"Root element is <{root.tag}>, expected <manifest>")

    doc = ManifestDocument()
    doc.package_name = root.get("package", "")
    doc.version_code = android_attr(root, "versionCode", "")
    doc.version_name = android_attr(root, "versionName", "")
    doc.min_sdk = first(root.xpath("uses-sdk/@android:minSdkVersion", namespaces=ns))
    doc.target_sdk = first(root.xpath("uses-sdk/@android:targetSdkVersion", namespaces=ns))

    for name in root.xpath("uses-permission/@android:name | uses-permission-sdk-23/@android:name", namespaces=ns):
        if name:
            doc.permissions.append(Permission(name, protection_level(name)))

    application = root.find("application")
    if application is not None:
        doc.debuggable = android_attr(application, "debuggable") == "true"
        doc.allow_backup = android_attr(application, "allowBackup", "true") == "true"
        for element in application.xpath("activity | activity-alias | service | receiver | provider"):
            add_component(doc, element)

    return doc


def add_component(doc: ManifestDocument, element):
    component = COMPONENT_TAGS[element.tag]()
    component.name = android_attr(element, "name", "")
    component.exported = android_attr(element, "exported") == "true"
    component.permission = android_attr(element, "permission")
    if isinstance(component, Provider):
        for attr, field_name in PROVIDER_ATTRIBUTES.items():
            setattr(component, field_name, android_attr(element, attr))

    if component.has_intent_filters:
        for filter_element in element.iterchildren("intent-filter"):
            component.intent_filters.append(read_intent_filter(filter_element))

    if not component.name:
        doc.dropped_components += 1
        logger.debug(f"Dropping unnamed {component.kind}")
        return
    doc.add_component(component)


def read_intent_filter(filter_element) -> IntentFilter:
    intent_filter = IntentFilter()
    for child in filter_element.iterchildren("action", "category", "data"):
        if child.tag == "action":
            intent_filter.action = android_attr(child, "name")
        elif child.tag == "category":
            intent_filter.category = android_attr(child, "name")
        else:
            for key in DATA_KEYS:
                value = android_attr(child, key)
                if value is not None:
                    intent_filter.add_data(key, value)
    return intent_filter


def load_xml_manifest(path) -> ManifestDocument:
    return parse_xml_manifest(Path(path).read_bytes())
