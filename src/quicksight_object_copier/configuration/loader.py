"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import AwsSettings, CopyContext, FileConfiguration


class ConfigurationError(Exception):
    """Raised when the execution context cannot be established."""


def load_configuration(config_path: Path | str) -> FileConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Unable to read configuration file: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return FileConfiguration(path=path, aws=_parse_aws_section(parsed.get("aws")))


def resolve_copy_context(
    *,
    account_id: str | None,
    region: str | None,
    profile: str | None = None,
    config_path: Path | str | None = None,
) -> CopyContext:
    """Merge command-line values over configuration file values.

    Command-line values win whenever they were given, even when empty. A missing
    account id becomes an empty string so the remote API reports it; an empty or
    missing region or profile is left to the boto3 default resolution chain.
    """
    file_settings = AwsSettings(account_id=None, region=None, profile=None)
    if config_path is not None:
        file_settings = load_configuration(config_path).aws

    resolved_account_id = account_id if account_id is not None else file_settings.account_id
    resolved_region = region if region is not None else file_settings.region
    resolved_profile = profile if profile is not None else file_settings.profile
    return CopyContext(
        account_id=resolved_account_id or "",
        region=resolved_region or None,
        profile=resolved_profile or None,
    )


def _parse_aws_section(value: Any) -> AwsSettings:
    if value is None:
        return AwsSettings(account_id=None, region=None, profile=None)
    section = _require_mapping(value, "aws")
    return AwsSettings(
        account_id=_optional_account_id(section.get("account_id")),
        region=_optional_string(section.get("region"), "aws.region"),
        profile=_optional_string(section.get("profile"), "aws.profile"),
    )


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_account_id(value: Any) -> str | None:
    # Unquoted YAML account ids load as integers; leading zeros are already lost there.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return _optional_string(value, "aws.account_id")


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
