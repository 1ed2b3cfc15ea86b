#!/usr/bin/env python3
from apkmanifest.models import ProtectionLevel

"""Protection levels of the Android permissions an app asks for"""


DANGEROUS_PERMISSIONS = [
    "android.permission.READ_CALENDAR",
    "android.permission.WRITE_CALENDAR",
    "android.permission.CAMERA",
    "android.permission.READ_CONTACTS",
    "android.permission.WRITE_CONTACTS",
    "android.permission.GET_ACCOUNTS",
    "android.permission.ACCESS_FINE_LOCATION",
    "android.permission.ACCESS_COARSE_LOCATION",
    "android.permission.ACCESS_BACKGROUND_LOCATION",
    "android.permission.RECORD_AUDIO",
    "android.permission.READ_PHONE_STATE",
    "android.permission.READ_PHONE_NUMBERS",
    "android.permission.CALL_PHONE",
    "android.permission.ANSWER_PHONE_CALLS",
    "android.permission.READ_CALL_LOG",
    "android.permission.WRITE_CALL_LOG",
    "android.permission.ADD_VOICEMAIL",
    "android.permission.USE_SIP",
    "android.permission.PROCESS_OUTGOING_CALLS",
    "android.permission.BODY_SENSORS",
    "android.permission.ACTIVITY_RECOGNITION",
    "android.permission.SEND_SMS",
    "android.permission.RECEIVE_SMS",
    "android.permission.READ_SMS",
    "android.permission.RECEIVE_WAP_PUSH",
    "android.permission.RECEIVE_MMS",
    "android.permission.READ_EXTERNAL_STORAGE",
    "android.permission.WRITE_EXTERNAL_STORAGE",
    "android.permission.READ_MEDIA_IMAGES",
    "android.permission.READ_MEDIA_VIDEO",
    "android.permission.READ_MEDIA_AUDIO",
    "android.permission.POST_NOTIFICATIONS",
    "android.permission.NEARBY_WIFI_DEVICES",
    "android.permission.BLUETOOTH_SCAN",
    "android.permission.BLUETOOTH_ADVERTISE",
    "android.permission.BLUETOOTH_CONNECT",
]

SIGNATURE_PERMISSIONS = [
    "android.permission.BIND_ACCESSIBILITY_SERVICE",
    "android.permission.BIND_AUTOFILL_SERVICE",
    "android.permission.BIND_CARRIER_SERVICES",
    "android.permission.BIND_CHOOSER_TARGET_SERVICE",
    "android.permission.BIND_CONDITION_PROVIDER_SERVICE",
    "android.permission.BIND_DEVICE_ADMIN",
    "android.permission.BIND_DREAM_SERVICE",
    "android.permission.BIND_INPUT_METHOD",
    "android.permission.BIND_MIDI_DEVICE_SERVICE",
    "android.permission.BIND_NFC_SERVICE",
    "android.permission.BIND_NOTIFICATION_LISTENER_SERVICE",
    "android.permission.BIND_PRINT_SERVICE",
    "android.permission.BIND_QUICK_ACCESS_WALLET_SERVICE",
    "android.permission.BIND_QUICK_SETTINGS_TILE",
    "android.permission.BIND_REMOTEVIEWS",
    "android.permission.BIND_SCREENING_SERVICE",
    "android.permission.BIND_TELECOM_CONNECTION_SERVICE",
    "android.permission.BIND_TEXT_SERVICE",
    "android.permission.BIND_TV_INPUT",
    "android.permission.BIND_VISUAL_VOICEMAIL_SERVICE",
    "android.permission.BIND_VOICE_INTERACTION",
    "android.permission.BIND_VPN_SERVICE",
    "android.permission.BIND_VR_LISTENER_SERVICE",
    "android.permission.BIND_WALLPAPER",
    "android.permission.CLEAR_APP_CACHE",
    "android.permission.MANAGE_DOCUMENTS",
    "android.permission.READ_VOICEMAIL",
    "android.permission.REQUEST_COMPANION_RUN_IN_BACKGROUND",
    "android.permission.REQUEST_COMPANION_USE_DATA_IN_BACKGROUND",
    "android.permission.REQUEST_DELETE_PACKAGES",
    "android.permission.REQUEST_INSTALL_PACKAGES",
    "android.permission.SYSTEM_ALERT_WINDOW",
    "android.permission.WRITE_SETTINGS",
    "android.permission.WRITE_VOICEMAIL",
]

LEVEL_DESCRIPTIONS = {
    ProtectionLevel.NORMAL: "granted automatically",
    ProtectionLevel.DANGEROUS: "require user approval",
    ProtectionLevel.SIGNATURE: "require signature match - so usually needs to be system app",
}


def protection_level(name: str) -> ProtectionLevel:
    """
    Derive the protection level from the permission name alone.
    Unknown BIND_* permissions are treated as signature.
    """
    if name in DANGEROUS_PERMISSIONS:
        return ProtectionLevel.DANGEROUS
    if name in SIGNATURE_PERMISSIONS:
        return ProtectionLevel.SIGNATURE
    if "BIND_" in name:
        return ProtectionLevel.SIGNATURE
    return ProtectionLevel.NORMAL


def categorize(permissions) -> dict:
    """Group Permission entries by level, keeping manifest order inside each group."""
    groups = {level: [] for level in ProtectionLevel}
    for perm in permissions:
        groups[perm.protection_level].append(perm.name)
    return groups


def format_permissions(permissions) -> list[str]:
    groups = categorize(permissions)
    normal = groups[ProtectionLevel.NORMAL]
    dangerous = groups[ProtectionLevel.DANGEROUS]
    signature = groups[ProtectionLevel.SIGNATURE]

    lines = [f"TOTAL: {len(normal)} normal, {len(dangerous)} dangerous, {len(signature)} signature"]
    for level in (ProtectionLevel.NORMAL, ProtectionLevel.DANGEROUS, ProtectionLevel.SIGNATURE):
        if groups[level]:
            lines.append(f"[*] {level.value.upper()} PERMISSIONS ({LEVEL_DESCRIPTIONS[level]})")
            for perm in groups[level]:
                lines.append(f"[*] {perm}")
            lines.append("")
    return lines
