from apkmanifest.badging import merge
from apkmanifest.models import (
    Activity,
    Component,
    IntentFilter,
    ManifestDocument,
    Permission,
    ProtectionLevel,
    Provider,
    Receiver,
    SecurityIssue,
    Service,
    Severity,
)
from apkmanifest.pipeline import build_manifest, inspect_apk, inspect_xml_manifest
from apkmanifest.security import analyze, infer_exported
from apkmanifest.xml_manifest import parse_xml_manifest
from apkmanifest.xmltree import TreeParser, parse

__version__ = "0.1.0"
