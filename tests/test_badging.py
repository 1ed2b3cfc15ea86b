import pytest

from apkmanifest.badging import merge
from apkmanifest.models import ManifestDocument
from apkmanifest.xmltree import parse


def test_fills_empty_fields(sample_badging):
    doc = ManifestDocument()
    merge(doc, sample_badging)

    assert doc.package_name == "com.example.app"
    assert doc.version_code == "42"
    assert doc.version_name == "2.1"
    assert doc.min_sdk == "19"
    assert doc.target_sdk == "30"


def test_never_overwrites_parsed_values():
    doc = ManifestDocument(package_name="com.parsed", version_code="7", target_sdk="34")
    merge(doc, "package: name='com.other' versionCode='1' versionName='1.0'\nsdkVersion:'21'\ntargetSdkVersion:'33'\n")

    assert doc.package_name == "com.parsed"
    assert doc.version_code == "7"
    assert doc.version_name == "1.0"
    assert doc.min_sdk == "21"
    assert doc.target_sdk == "34"


def test_target_sdk_line_is_not_read_as_min_sdk():
    doc = ManifestDocument()
    merge(doc, "targetSdkVersion:'33'\n")
    assert doc.min_sdk == ""
    assert doc.target_sdk == "33"


def test_back_fills_xmltree_gaps(sample_badging):
    doc = parse('E: manifest (line=1)\n  A: package="com.example.app" (Raw: "com.example.app")\n')
    merge(doc, sample_badging)
    assert doc.version_name == "2.1"
    assert doc.activities == []


@pytest.mark.parametrize("badging", [None, "", "nothing useful here"])
def test_missing_or_unmatched_badging_is_a_no_op(badging):
    doc = ManifestDocument()
    merge(doc, badging)
    assert doc == ManifestDocument()


def test_non_text_badging_is_rejected():
    with pytest.raises(TypeError):
        merge(ManifestDocument(), b"sdkVersion:'21'")
