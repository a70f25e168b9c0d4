"""Tests for the property-list accessor and bundle discovery."""

import plistlib
from pathlib import Path

import pytest

from boostsec.xcode_results.plist_document import (
    BundleReadError,
    PlistNode,
    list_results,
    load_plist,
)


@pytest.fixture
def node() -> PlistNode:
    """Create a node with one value of each kind."""
    return PlistNode(
        {
            "Name": "Suite",
            "Line": 42,
            "Real": 1.5,
            "Flag": True,
            "Children": [{"Name": "a"}, "not a dict", {"Name": "b"}],
        }
    )


def test_get_string(node: PlistNode) -> None:
    """get_string returns text and renders numbers."""
    assert node.get_string("Name") == "Suite"
    assert node.get_string("Line") == "42"
    assert node.get_string("Flag") is None
    assert node.get_string("Missing") is None


def test_get_double(node: PlistNode) -> None:
    """get_double returns numbers as floats."""
    assert node.get_double("Real") == 1.5
    assert node.get_double("Line") == 42.0
    assert node.get_double("Name") is None
    assert node.get_double("Flag") is None
    assert node.get_double("Missing") is None


def test_get_bool(node: PlistNode) -> None:
    """get_bool falls back to the default."""
    assert node.get_bool("Flag") is True
    assert node.get_bool("Missing") is False
    assert node.get_bool("Missing", True) is True
    assert node.get_bool("Line", True) is True


def test_get_list(node: PlistNode) -> None:
    """get_list keeps dictionary children in order."""
    children = node.get_list("Children")

    assert [child.get_string("Name") for child in children] == ["a", "b"]
    assert node.get_list("Name") == []
    assert node.get_list("Missing") == []


def test_load_plist_xml_and_binary(tmp_path: Path) -> None:
    """load_plist reads XML and binary property lists."""
    xml_file = tmp_path / "xml.plist"
    xml_file.write_bytes(plistlib.dumps({"Key": "xml"}))
    binary_file = tmp_path / "binary.plist"
    binary_file.write_bytes(
        plistlib.dumps({"Key": "binary"}, fmt=plistlib.FMT_BINARY)
    )

    assert load_plist(xml_file).get_string("Key") == "xml"
    assert load_plist(binary_file).get_string("Key") == "binary"


def test_load_plist_missing_file(tmp_path: Path) -> None:
    """load_plist raises BundleReadError for a missing file."""
    with pytest.raises(BundleReadError, match="Cannot read"):
        load_plist(tmp_path / "missing.plist")


@pytest.mark.parametrize(
    "content",
    [
        b"not a plist",
        b"<?xml version='1.0'?><plist><dict><key>A</key>",
    ],
)
def test_load_plist_malformed(tmp_path: Path, content: bytes) -> None:
    """load_plist raises BundleReadError for malformed content."""
    path = tmp_path / "bad.plist"
    path.write_bytes(content)

    with pytest.raises(BundleReadError, match="Invalid property list"):
        load_plist(path)


def test_load_plist_root_not_dict(tmp_path: Path) -> None:
    """load_plist rejects a document whose root is not a dictionary."""
    path = tmp_path / "array.plist"
    path.write_bytes(plistlib.dumps(["a", "b"]))

    with pytest.raises(BundleReadError, match="not a dictionary"):
        load_plist(path)


def test_list_results_matches_pattern(tmp_path: Path) -> None:
    """list_results returns matching files only, excluding directories."""
    (tmp_path / "b_TestSummaries.plist").write_bytes(b"")
    (tmp_path / "a_TestSummaries.plist").write_bytes(b"")
    (tmp_path / "Info.plist").write_bytes(b"")
    (tmp_path / "dir_TestSummaries.plist").mkdir()

    results = list_results(tmp_path)

    assert [path.name for path in results] == [
        "a_TestSummaries.plist",
        "b_TestSummaries.plist",
    ]


def test_list_results_missing_directory(tmp_path: Path) -> None:
    """list_results returns an empty list for a missing directory."""
    assert list_results(tmp_path / "missing") == []
