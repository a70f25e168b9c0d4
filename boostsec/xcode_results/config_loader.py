"""Load reader configuration from YAML files."""

from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from boostsec.xcode_results.models.reader_config import ReaderConfig


def load_reader_config(config_file: Path) -> ReaderConfig:
    """Load reader configuration.

    Unknown keys are ignored; omitted keys keep their defaults.

    Args:
        config_file: YAML mapping of ReaderConfig fields

    Returns:
        Parsed configuration

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not a YAML mapping or a value is invalid

    """
    if not config_file.is_file():
        raise FileNotFoundError(f"Config file not found: {config_file}")

    try:
        data = yaml.safe_load(config_file.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_file}: {e}") from e

    if data is None:
        raise ValueError(f"Empty config file: {config_file}")
    if not isinstance(data, Mapping):
        raise ValueError(
            f"Config file {config_file} must hold a mapping, "
            f"got {type(data).__name__}"
        )

    try:
        return ReaderConfig.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in e.errors()
        )
        raise ValueError(
            f"Invalid reader config schema in {config_file} ({fields}): {e}"
        ) from e
