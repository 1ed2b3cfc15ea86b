#!/usr/bin/env python3
import logging

from apkmanifest.attributes import parse_sdk
from apkmanifest.models import ManifestDocument, ProtectionLevel, SecurityIssue, Severity

"""Rule-based security findings over a parsed manifest"""

logger = logging.getLogger(__name__)

# Android 12: components with intent-filters are no longer exported implicitly
IMPLICIT_EXPORT_MAX_SDK = 31
DANGEROUS_PERMISSION_LIMIT = 5
RECOMMENDED_TARGET_SDK = 28
RECOMMENDED_MIN_SDK = 21

SYSTEM_BROADCAST_PREFIX = "android.intent."


def infer_exported(doc: ManifestDocument) -> None:
    """
    Pre-Android 12 apps export activities and receivers that have an
    intent-filter even without android:exported. Run once, after parsing.
    """
    if parse_sdk(doc.target_sdk) >= IMPLICIT_EXPORT_MAX_SDK:
        return
    for component in [*doc.activities, *doc.receivers]:
        if component.intent_filters and not component.exported:
            component.exported = True
            logger.debug(f"Inferred exported=true for {component.kind} {component.name}")


def analyze(doc: ManifestDocument) -> list[SecurityIssue]:
    """Findings in fixed rule order. Does not modify doc."""
    issues = []

    if doc.debuggable:
        issues.append(SecurityIssue(
            Severity.HIGH,
            "Application is debuggable. This allows attackers to attach debuggers and inspect/modify app behavior at runtime.",
        ))

    if doc.allow_backup:
        issues.append(SecurityIssue(
            Severity.MEDIUM,
            'Application allows backup. User data can be extracted via adb backup. '
            'Consider setting android:allowBackup="false" or implementing BackupAgent.',
        ))

    for activity in doc.activities:
        # launcher entry points are meant to be started by anyone
        if activity.exported and not activity.permission and not activity.is_launcher:
            issues.append(SecurityIssue(
                Severity.HIGH,
                "Exported activity without permission protection. Any app can start this activity.",
                activity.name,
            ))

    for service in doc.services:
        if service.exported and not service.permission:
            issues.append(SecurityIssue(
                Severity.HIGH,
                "Exported service without permission protection. Any app can bind to or start this service.",
                service.name,
            ))

    for receiver in doc.receivers:
        if receiver.exported and receiver.intent_filters:
            system_broadcast = any(
                f.action and f.action.startswith(SYSTEM_BROADCAST_PREFIX) for f in receiver.intent_filters
            )
            if not system_broadcast:
                issues.append(SecurityIssue(
                    Severity.MEDIUM,
                    "Exported broadcast receiver with custom intent-filter. Verify this is intentional.",
                    receiver.name,
                ))

    for provider in doc.providers:
        if provider.exported and not (provider.permission or provider.read_permission or provider.write_permission):
            issues.append(SecurityIssue(
                Severity.HIGH,
                "Exported content provider without permission protection. Any app can read/write data.",
                provider.name,
            ))

    dangerous = [p for p in doc.permissions if p.protection_level == ProtectionLevel.DANGEROUS]
    if len(dangerous) > DANGEROUS_PERMISSION_LIMIT:
        issues.append(SecurityIssue(
            Severity.MEDIUM,
            f"Application requests {len(dangerous)} dangerous permissions. Review if all are necessary.",
        ))

    target_sdk = parse_sdk(doc.target_sdk)
    if 0 < target_sdk < RECOMMENDED_TARGET_SDK:
        issues.append(SecurityIssue(
            Severity.LOW,
            f"Target SDK ({target_sdk}) is below {RECOMMENDED_TARGET_SDK}. App may not enforce runtime permissions properly.",
        ))

    min_sdk = parse_sdk(doc.min_sdk)
    if 0 < min_sdk < RECOMMENDED_MIN_SDK:
        issues.append(SecurityIssue(
            Severity.MEDIUM,
            f"Minimum SDK ({min_sdk}) is below {RECOMMENDED_MIN_SDK} (Lollipop). "
            "App may run on devices without full disk encryption and other security features.",
        ))

    return issues
