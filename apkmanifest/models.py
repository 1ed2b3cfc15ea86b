#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

"""Typed manifest model shared by the xmltree parser, the XML reader and the analyzer"""


class ProtectionLevel(str, Enum):
    NORMAL = "normal"
    DANGEROUS = "dangerous"
    SIGNATURE = "signature"


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass
class Permission:
    name: str
    protection_level: ProtectionLevel = ProtectionLevel.NORMAL

    def to_dict(self) -> dict:
        return {"name": self.name, "protectionLevel": self.protection_level.value}


@dataclass
class IntentFilter:
    """One <intent-filter>; data is the flattened "scheme=.., host=.., path=.." string."""
    action: Optional[str] = None
    category: Optional[str] = None
    data: Optional[str] = None

    def add_data(self, key: str, value: str):
        pair = f"{key}={value}"
        self.data = f"{self.data}, {pair}" if self.data else pair

    def to_dict(self) -> dict:
        return _without_none({"action": self.action, "category": self.category, "data": self.data})


@dataclass
class Component:
    """Shared shape of the four component kinds. Use the subclasses."""
    kind = ""

    name: str = ""
    exported: bool = False
    permission: Optional[str] = None

    @property
    def has_intent_filters(self) -> bool:
        return False

    def to_dict(self) -> dict:
        return _without_none({"name": self.name, "exported": self.exported, "permission": self.permission})


@dataclass
class Activity(Component):
    kind = "activity"

    intent_filters: list[IntentFilter] = field(default_factory=list)

    @property
    def has_intent_filters(self) -> bool:
        return True

    @property
    def is_launcher(self) -> bool:
        return any(
            f.action == "android.intent.action.MAIN" and f.category == "android.intent.category.LAUNCHER"
            for f in self.intent_filters
        )

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["intentFilters"] = [f.to_dict() for f in self.intent_filters]
        return d


@dataclass
class Service(Component):
    kind = "service"


@dataclass
class Receiver(Component):
    kind = "receiver"

    intent_filters: list[IntentFilter] = field(default_factory=list)

    @property
    def has_intent_filters(self) -> bool:
        return True

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["intentFilters"] = [f.to_dict() for f in self.intent_filters]
        return d


@dataclass
class Provider(Component):
    kind = "provider"

    authorities: Optional[str] = None
    read_permission: Optional[str] = None
    write_permission: Optional[str] = None

    def to_dict(self) -> dict:
        d = super().to_dict()
        d.update(_without_none({
            "authorities": self.authorities,
            "readPermission": self.read_permission,
            "writePermission": self.write_permission,
        }))
        return d


# element tag -> component class; activity-alias is reported as an activity
COMPONENT_TAGS = {
    "activity": Activity,
    "activity-alias": Activity,
    "service": Service,
    "receiver": Receiver,
    "provider": Provider,
}


@dataclass
class SecurityIssue:
    severity: Severity
    issue: str
    component: Optional[str] = None

    def to_dict(self) -> dict:
        return _without_none({"severity": self.severity.value, "issue": self.issue, "component": self.component})


@dataclass
class ManifestDocument:
    package_name: str = ""
    version_code: str = ""
    version_name: str = ""
    min_sdk: str = ""
    target_sdk: str = ""
    permissions: list[Permission] = field(default_factory=list)
    activities: list[Activity] = field(default_factory=list)
    services: list[Service] = field(default_factory=list)
    receivers: list[Receiver] = field(default_factory=list)
    providers: list[Provider] = field(default_factory=list)
    debuggable: bool = False
    # platform default when the attribute is missing
    allow_backup: bool = True
    security_issues: list[SecurityIssue] = field(default_factory=list)

    # parse diagnostics, not part of the serialized manifest
    dropped_components: int = 0
    irregular_indent_lines: int = 0

    def add_component(self, component: Component):
        """Append a component to the list matching its kind."""
        {
            "activity": self.activities,
            "service": self.services,
            "receiver": self.receivers,
            "provider": self.providers,
        }[component.kind].append(component)

    def stats(self) -> dict:
        return {
            "permissionCount": len(self.permissions),
            "activityCount": len(self.activities),
            "serviceCount": len(self.services),
            "receiverCount": len(self.receivers),
            "providerCount": len(self.providers),
            "securityIssueCount": len(self.security_issues),
            "droppedComponentCount": self.dropped_components,
        }

    def to_dict(self) -> dict:
        return {
            "package": self.package_name,
            "versionCode": self.version_code,
            "versionName": self.version_name,
            "minSdk": self.min_sdk,
            "targetSdk": self.target_sdk,
            "permissions": [p.to_dict() for p in self.permissions],
            "activities": [a.to_dict() for a in self.activities],
            "services": [s.to_dict() for s in self.services],
            "receivers": [r.to_dict() for r in self.receivers],
            "providers": [p.to_dict() for p in self.providers],
            "securityIssues": [i.to_dict() for i in self.security_issues],
            "debuggable": self.debuggable,
            "allowBackup": self.allow_backup,
        }


def _without_none(d: dict) -> dict:
    return {k: v for k, v in d.items() if v is not None}
