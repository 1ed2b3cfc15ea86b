#!/usr/bin/env python3
"""
Configuration

Edit the settings below, or override them with environment variables.
"""

import os

# ============================================================================
# Dumper
# ============================================================================

# Binaries used to dump the compiled manifest. aapt2 is tried first.
AAPT2_BINARY = os.environ.get("APKMANIFEST_AAPT2", "aapt2")
AAPT_BINARY = os.environ.get("APKMANIFEST_AAPT", "aapt")

# Seconds before a dumper run is abandoned
DUMP_TIMEOUT = 60

# Archives the dumper is pointed at
VALID_EXTENSIONS = [".apk", ".aar"]

# ============================================================================
# Report
# ============================================================================

# Library components hidden from the text report unless --show-all is given
IGNORABLE_COMPONENTS = [
    "com.google.android.gms",
    "com.google.firebase",
    "com.google.android.datatransport",
    "androidx.profileinstaller",
    "androidx.startup",
]

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_timeout():
    """Timeout from APKMANIFEST_TIMEOUT, falling back to DUMP_TIMEOUT"""
    value = os.environ.get("APKMANIFEST_TIMEOUT")
    if value:
        try:
            return max(1, int(value))
        except ValueError:
            pass
    return DUMP_TIMEOUT


def get_effective_config():
    """Get the effective configuration with environment overrides applied"""
    return {
        "aapt2": os.environ.get("APKMANIFEST_AAPT2", AAPT2_BINARY),
        "aapt": os.environ.get("APKMANIFEST_AAPT", AAPT_BINARY),
        "timeout": get_timeout(),
        "valid_extensions": VALID_EXTENSIONS,
        "ignorable_components": IGNORABLE_COMPONENTS,
    }
