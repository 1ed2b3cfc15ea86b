#!/usr/bin/env python3
import logging
import subprocess
from pathlib import Path

from apkmanifest.config import get_effective_config

"""Runs aapt2 / aapt against an archive and returns their text output"""

logger = logging.getLogger(__name__)


class DumperError(RuntimeError):
    pass


def run_tool(cmd: list[str], timeout: int) -> str:
    """Run a dumper command, raising DumperError on any failure"""
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout, check=False)
    except FileNotFoundError:
        raise DumperError(f"{cmd[0]} not found - install the Android build-tools and put it on PATH")
    except subprocess.TimeoutExpired:
        raise DumperError(f"{cmd[0]} timed out after {timeout}s")

    if result.returncode != 0:
        raise DumperError(f"{cmd[0]} exited with {result.returncode}: {result.stderr.strip()}")
    return result.stdout


def check_archive(apk_path) -> Path:
    config = get_effective_config()
    path = Path(apk_path)
    if path.suffix.lower() not in config["valid_extensions"]:
        raise DumperError(f"Invalid file type. Supported: {', '.join(config['valid_extensions'])}")
    if not path.is_file():
        raise DumperError(f"Path does not exist: {apk_path}")
    return path


def dump_xmltree(apk_path) -> str:
    """xmltree of AndroidManifest.xml, from aapt2 or else aapt"""
    path = check_archive(apk_path)
    config = get_effective_config()

    try:
        return run_tool(
            [config["aapt2"], "dump", "xmltree", str(path), "--file", "AndroidManifest.xml"],
            config["timeout"],
        )
    except DumperError as e:
        logger.info(f"aapt2 failed, falling back to aapt: {e}")

    try:
        return run_tool([config["aapt"], "dump", "xmltree", str(path), "AndroidManifest.xml"], config["timeout"])
    except DumperError as e:
        raise DumperError(f"Failed to parse manifest. Neither aapt2 nor aapt available: {e}") from e


def dump_badging(apk_path) -> str:
    """Badging output, or "" when aapt cannot produce it"""
    path = check_archive(apk_path)
    config = get_effective_config()
    try:
        return run_tool([config["aapt"], "dump", "badging", str(path)], config["timeout"])
    except DumperError as e:
        logger.info(f"No badging output, continuing without it: {e}")
        return ""
