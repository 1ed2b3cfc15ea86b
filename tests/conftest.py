import pytest

SAMPLE_XMLTREE = """\
N: android=http://schemas.android.com/apk/res/android
  E: manifest (line=2)
    A: android:versionCode(0x0101021b)=(type 0x10)0x2a
    A: android:versionName(0x0101021c)="2.1" (Raw: "2.1")
    A: package="com.example.app" (Raw: "com.example.app")
    E: uses-sdk (line=7)
      A: android:minSdkVersion(0x0101020c)=(type 0x10)0x13
      A: android:targetSdkVersion(0x01010270)=(type 0x10)0x1e
    E: uses-permission (line=11)
      A: android:name(0x01010003)="android.permission.INTERNET" (Raw: "android.permission.INTERNET")
    E: uses-permission (line=12)
      A: android:name(0x01010003)="android.permission.CAMERA" (Raw: "android.permission.CAMERA")
    E: application (line=14)
      A: android:label(0x01010001)=@0x7f0f001c
      A: android:allowBackup(0x01010280)=(type 0x12)0x0
      E: activity (line=16)
        A: android:name(0x01010003)=".MainActivity" (Raw: ".MainActivity")
        E: intent-filter (line=17)
          E: action (line=18)
            A: android:name(0x01010003)="android.intent.action.MAIN" (Raw: "android.intent.action.MAIN")
          E: category (line=19)
            A: android:name(0x01010003)="android.intent.category.LAUNCHER" (Raw: "android.intent.category.LAUNCHER")
      E: activity (line=22)
        A: android:name(0x01010003)=".DeepLinkActivity" (Raw: ".DeepLinkActivity")
        E: meta-data (line=23)
          A: android:name(0x01010003)="com.example.meta" (Raw: "com.example.meta")
        E: intent-filter (line=24)
          E: action (line=25)
            A: android:name(0x01010003)="android.intent.action.VIEW" (Raw: "android.intent.action.VIEW")
          E: data (line=26)
            A: android:scheme(0x01010027)="https" (Raw: "https")
            A: android:host(0x01010028)="example.com" (Raw: "example.com")
      E: service (line=30)
        A: android:name(0x01010003)=".SyncService" (Raw: ".SyncService")
        A: android:exported(0x01010010)=(type 0x12)0xffffffff
        A: android:permission(0x01010006)="com.example.BIND_SYNC" (Raw: "com.example.BIND_SYNC")
      E: receiver (line=34)
        A: android:name(0x01010003)=".BootReceiver" (Raw: ".BootReceiver")
        E: intent-filter (line=35)
          E: action (line=36)
            A: android:name(0x01010003)="android.intent.action.BOOT_COMPLETED" (Raw: "android.intent.action.BOOT_COMPLETED")
      E: receiver (line=39)
        A: android:name(0x01010003)=".CustomReceiver" (Raw: ".CustomReceiver")
        E: intent-filter (line=40)
          E: action (line=41)
            A: android:name(0x01010003)="com.example.CUSTOM" (Raw: "com.example.CUSTOM")
      E: provider (line=44)
        A: android:name(0x01010003)=".DataProvider" (Raw: ".DataProvider")
        A: android:exported(0x01010010)=(type 0x12)0xffffffff
        A: android:authorities(0x01010018)="com.example.data" (Raw: "com.example.data")
        A: android:readPermission(0x01010007)="com.example.READ" (Raw: "com.example.READ")
"""

SAMPLE_BADGING = """\
package: name='com.example.app' versionCode='42' versionName='2.1' platformBuildVersionName='13'
sdkVersion:'19'
targetSdkVersion:'30'
uses-permission: name='android.permission.INTERNET'
application-label:'Example'
"""

DEBUGGABLE_APP = """\
E: manifest (line=2)
  A: package="com.test.app" (Raw: "com.test.app")
  E: application (line=5)
    A: android:debuggable(0x0101000f)=(type 0x12)0xffffffff
    E: activity (line=8)
      A: android:name(0x01010003)=".Main" (Raw: ".Main")
      A: android:exported(0x01010010)=(type 0x12)0xffffffff
"""

SAMPLE_XML = """\
<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android"
    android:versionCode="42" android:versionName="2.1" package="com.example.app">
    <uses-sdk android:minSdkVersion="19" android:targetSdkVersion="30"/>
    <uses-permission android:name="android.permission.INTERNET"/>
    <uses-permission android:name="android.permission.CAMERA"/>
    <application android:allowBackup="false">
        <activity android:name=".MainActivity">
            <intent-filter>
                <action android:name="android.intent.action.MAIN"/>
                <category android:name="android.intent.category.LAUNCHER"/>
            </intent-filter>
        </activity>
        <activity android:name=".DeepLinkActivity">
            <!-- deep links -->
            <intent-filter>
                <action android:name="android.intent.action.VIEW"/>
                <data android:scheme="https" android:host="example.com"/>
            </intent-filter>
        </activity>
        <service android:name=".SyncService" android:exported="true" android:permission="com.example.BIND_SYNC"/>
        <receiver android:name=".BootReceiver">
            <intent-filter>
                <action android:name="android.intent.action.BOOT_COMPLETED"/>
            </intent-filter>
        </receiver>
        <receiver android:name=".CustomReceiver">
            <intent-filter>
                <action android:name="com.example.CUSTOM"/>
            </intent-filter>
        </receiver>
        <provider android:name=".DataProvider" android:exported="true"
            android:authorities="com.example.data" android:readPermission="com.example.READ"/>
        <service android:exported="true"/>
    </application>
</manifest>
"""


@pytest.fixture
def sample_xmltree():
    return SAMPLE_XMLTREE


@pytest.fixture
def sample_badging():
    return SAMPLE_BADGING


@pytest.fixture
def debuggable_app():
    return DEBUGGABLE_APP


@pytest.fixture
def sample_xml():
    return SAMPLE_XML


@pytest.fixture
def apk_file(tmp_path):
    path = tmp_path / "app.apk"
    path.write_bytes(b"PK\x03\x04")
    return path
