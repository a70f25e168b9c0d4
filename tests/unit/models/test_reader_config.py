"""Tests for reader configuration model."""

import pytest
from pydantic import ValidationError

from boostsec.xcode_results.models.reader_config import ReaderConfig


def test_reader_config_defaults() -> None:
    """ReaderConfig defaults match the Xcode bundle layout."""
    config = ReaderConfig()

    assert config.results_pattern == "*TestSummaries.plist"
    assert config.attachments_dir_name == "Attachments"
    assert config.max_depth == 256
    assert config.result_format == "xcode"


def test_reader_config_rejects_zero_depth() -> None:
    """ReaderConfig requires a positive max_depth."""
    with pytest.raises(ValidationError) as exc_info:
        ReaderConfig(max_depth=0)
    assert "max_depth" in str(exc_info.value)


@pytest.mark.parametrize("pattern", ["", "/tmp/*.plist", "sub/*.plist", ".", ".."])
def test_reader_config_rejects_bad_pattern(pattern: str) -> None:
    """ReaderConfig only accepts patterns for file names in the directory."""
    with pytest.raises(ValidationError) as exc_info:
        ReaderConfig(results_pattern=pattern)
    assert "results_pattern" in str(exc_info.value)
