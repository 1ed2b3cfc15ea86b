#!/usr/bin/env python3
from apkmanifest.config import get_effective_config
from apkmanifest.models import ManifestDocument, Severity
from apkmanifest.permissions import format_permissions

"""Text report and JSON payload for an analyzed manifest"""


def qualify_name(name: str, package: str) -> str:
    """
    If name starts with '.', qualify it with package.
    """
    # https://developer.android.com/guide/topics/manifest/manifest-intro#components
    if name.startswith(".") and package:
        return f"{package}{name}"
    return name


def is_ignorable(component_name: str, prefixes=None) -> bool:
    if prefixes is None:
        prefixes = get_effective_config()["ignorable_components"]
    return any(component_name.startswith(prefix) for prefix in prefixes)


def build_payload(doc: ManifestDocument) -> dict:
    return {"manifest": doc.to_dict(), "stats": doc.stats()}


def format_report(doc: ManifestDocument, show_all: bool = False) -> list[str]:
    package = doc.package_name
    lines = [f"[*] FOUND: main package {package or '<unknown>'}"]
    lines.append(f"[*] VERSION: {doc.version_name or '?'} ({doc.version_code or '?'})")
    lines.append(f"[*] SDK: min {doc.min_sdk or '?'}, target {doc.target_sdk or '?'}")
    lines.append("")

    ignorable = get_effective_config()["ignorable_components"]

    def visible(component):
        name = qualify_name(component.name, package)
        return show_all or not is_ignorable(name, ignorable)

    launcher = next((a for a in doc.activities if a.is_launcher), None)
    if launcher is not None and visible(launcher):
        lines.append(f"[*] FOUND: main activity that's a launcher (appears on home screen): {qualify_name(launcher.name, package)}")
        lines.append("")

    for label, components in (
        ("activity", doc.activities),
        ("service", doc.services),
        ("receiver", doc.receivers),
        ("provider", doc.providers),
    ):
        shown = [c for c in components if visible(c)]
        for component in shown:
            exported = " (exported)" if component.exported else ""
            lines.append(f"[*] FOUND: {label}: {qualify_name(component.name, package)}{exported}")
            if label == "receiver":
                for f in component.intent_filters:
                    if f.action:
                        lines.append(f"\t[*] FOUND: receiver action: {f.action}")
            if label == "provider" and component.authorities:
                lines.append(f"\t[*] FOUND: provider authorities: {component.authorities}")
        if shown:
            lines.append("")

    lines.extend(format_permissions(doc.permissions))

    if doc.security_issues:
        lines.append(f"[*] SECURITY ISSUES: {len(doc.security_issues)}")
        for severity in Severity:
            for issue in doc.security_issues:
                if issue.severity != severity:
                    continue
                where = f" [{qualify_name(issue.component, package)}]" if issue.component else ""
                lines.append(f"\t[*] {severity.value.upper()}: {issue.issue}{where}")
        lines.append("")

    if doc.dropped_components:
        lines.append(f"[*] NOTE: {doc.dropped_components} component(s) without a name were skipped")

    return lines
