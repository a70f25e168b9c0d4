"""Shared fixtures."""

import plistlib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def write_summaries(tmp_path: Path) -> Callable[..., Path]:
    """Return a function writing a document as a TestSummaries plist."""

    def _write(
        root: dict[str, Any], name: str = "action_TestSummaries.plist"
    ) -> Path:
        path = tmp_path / name
        path.write_bytes(plistlib.dumps(root))
        return path

    return _write
