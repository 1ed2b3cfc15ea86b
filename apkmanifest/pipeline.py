#!/usr/bin/env python3
import logging
from typing import Optional

from apkmanifest import badging, security, xmltree
from apkmanifest.dumper import dump_badging, dump_xmltree
from apkmanifest.models import ManifestDocument
from apkmanifest.xml_manifest import load_xml_manifest

"""parse -> badging back-fill -> exported inference -> security analysis"""

logger = logging.getLogger(__name__)


def finalize(doc: ManifestDocument) -> ManifestDocument:
    security.infer_exported(doc)
    doc.security_issues = security.analyze(doc)
    logger.info(f"{doc.package_name or '<unknown package>'}: {len(doc.security_issues)} security issues")
    return doc


def build_manifest(xmltree_text: str, badging_text: Optional[str] = None) -> ManifestDocument:
    doc = xmltree.parse(xmltree_text)
    badging.merge(doc, badging_text)
    return finalize(doc)


def inspect_apk(apk_path) -> ManifestDocument:
    """Dump the archive's manifest with aapt2/aapt and analyze it"""
    xmltree_text = dump_xmltree(apk_path)
    return build_manifest(xmltree_text, dump_badging(apk_path))


def inspect_xml_manifest(path) -> ManifestDocument:
    """Analyze a decoded AndroidManifest.xml (e.g. jadx/resources/AndroidManifest.xml)"""
    return finalize(load_xml_manifest(path))
