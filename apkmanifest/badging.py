#!/usr/bin/env python3
import logging
import re
from typing import Optional

from apkmanifest.models import ManifestDocument

"""Back-fills manifest fields from `aapt dump badging` output"""

logger = logging.getLogger(__name__)

# package: name='com.example' versionCode='1' versionName='1.0'
PACKAGE_RE = re.compile(r"package:\s+name='([^']+)'\s+versionCode='([^']+)'\s+versionName='([^']+)'")
MIN_SDK_RE = re.compile(r"sdkVersion:'(\d+)'")
TARGET_SDK_RE = re.compile(r"targetSdkVersion:'(\d+)'")


def merge(doc: ManifestDocument, badging: Optional[str]) -> None:
    """
    Fill only the fields the xmltree dump left empty. Never overwrites,
    never touches components. No text or no match is a no-op.
    """
    if badging is None:
        return
    if not isinstance(badging, str):
        raise TypeError(f"badging output must be str, got {type(badging).__name__}")

    filled = []

    m = PACKAGE_RE.search(badging)
    if m:
        for attr, value in zip(("package_name", "version_code", "version_name"), m.groups()):
            if not getattr(doc, attr):
                setattr(doc, attr, value)
                filled.append(attr)

    m = MIN_SDK_RE.search(badging)
    if m and not doc.min_sdk:
        doc.min_sdk = m.group(1)
        filled.append("min_sdk")

    m = TARGET_SDK_RE.search(badging)
    if m and not doc.target_sdk:
        doc.target_sdk = m.group(1)
        filled.append("target_sdk")

    if filled:
        logger.debug(f"Filled from badging: {', '.join(filled)}")
