"""Typed, default-tolerant access to parsed property-list documents."""

import plistlib
from collections.abc import Mapping
from pathlib import Path
from xml.parsers.expat import ExpatError


class BundleReadError(ValueError):
    """Raised when a result bundle file cannot be read or understood."""


class PlistNode:
    """Read-only view over one dictionary of a parsed property list.

    Every accessor returns an explicit absent value (None, the supplied
    default, or an empty list) for a missing or mistyped key.
    """

    def __init__(self, data: Mapping[str, object]) -> None:
        """Wrap a string-keyed mapping."""
        self._data = data

    def get_string(self, key: str) -> str | None:
        """Return the value as text; numbers are rendered, other types are absent."""
        value = self._data.get(key)
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return None

    def get_double(self, key: str) -> float | None:
        """Return a numeric value as float, or None."""
        value = self._data.get(key)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        return None

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return a boolean value, or the default when absent."""
        value = self._data.get(key)
        if isinstance(value, bool):
            return value
        return default

    def get_list(self, key: str) -> list["PlistNode"]:
        """Return the dictionary children of an array value, in order."""
        value = self._data.get(key)
        if not isinstance(value, list):
            return []
        return [PlistNode(item) for item in value if isinstance(item, Mapping)]


def load_plist(path: Path) -> PlistNode:
    """Parse a property-list file.

    Args:
        path: XML or binary property-list file

    Returns:
        Root dictionary of the document

    Raises:
        BundleReadError: If the file is unreadable, malformed, or not a dictionary

    """
    try:
        with path.open("rb") as f:
            data = plistlib.load(f)
    except OSError as e:
        raise BundleReadError(f"Cannot read {path}: {e}") from e
    except (plistlib.InvalidFileException, ExpatError, ValueError) as e:
        raise BundleReadError(f"Invalid property list in {path}: {e}") from e

    if not isinstance(data, Mapping):
        raise BundleReadError(f"Root of {path} is not a dictionary")

    return PlistNode(data)


def list_results(directory: Path, pattern: str = "*TestSummaries.plist") -> list[Path]:
    """List summary files directly inside a directory.

    Args:
        directory: Results directory to scan
        pattern: Glob matched against file names

    Returns:
        Matching regular files sorted by name; empty when the directory
        does not exist

    """
    if not directory.is_dir():
        return []

    return sorted(path for path in directory.glob(pattern) if not path.is_dir())
