#!/usr/bin/env python3
import argparse
import json
import logging
import sys
from pathlib import Path

from apkmanifest.config import LOG_FORMAT
from apkmanifest.dumper import DumperError
from apkmanifest.pipeline import build_manifest, inspect_apk, inspect_xml_manifest
from apkmanifest.report import build_payload, format_report
from apkmanifest.xml_manifest import ManifestXMLError

"""Reports manifest information and security issues for an APK"""


def build_parser():
    parser = argparse.ArgumentParser(
        prog="apkmanifest",
        description="Parse an APK's AndroidManifest.xml and report components, permissions and security issues.",
    )
    parser.add_argument("apk", nargs="?", help="APK/AAR to dump with aapt2 (or aapt)")
    parser.add_argument("--xmltree", metavar="FILE", help="use saved `aapt dump xmltree` output instead of an APK")
    parser.add_argument("--badging", metavar="FILE", help="saved `aapt dump badging` output (with --xmltree)")
    parser.add_argument("--xml", metavar="FILE", help="decoded AndroidManifest.xml (jadx/apktool output)")
    parser.add_argument("--json", action="store_true", help="print the manifest and stats as JSON")
    parser.add_argument("--show-all", action="store_true", help="do not hide well-known library components")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def load(args):
    if args.xml:
        return inspect_xml_manifest(args.xml)
    if args.xmltree:
        xmltree_text = Path(args.xmltree).read_text(encoding="utf-8", errors="replace")
        badging_text = None
        if args.badging:
            badging_text = Path(args.badging).read_text(encoding="utf-8", errors="replace")
        return build_manifest(xmltree_text, badging_text)
    return inspect_apk(args.apk)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    sources = [s for s in (args.apk, args.xmltree, args.xml) if s]
    if len(sources) != 1:
        parser.error("pass exactly one of APK, --xmltree or --xml")
    if args.badging and not args.xmltree:
        parser.error("--badging needs --xmltree")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    try:
        doc = load(args)
    except (DumperError, ManifestXMLError, OSError) as e:
        print(f"[*] ERROR: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(build_payload(doc), indent=2))
    else:
        print("\n".join(format_report(doc, show_all=args.show_all)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
