"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AwsSettings:
    """AWS account settings read from a configuration file."""

    account_id: str | None
    region: str | None
    profile: str | None


@dataclass(frozen=True)
class FileConfiguration:
    """Top-level configuration file aggregate."""

    path: Path
    aws: AwsSettings


@dataclass(frozen=True)
class CopyContext:
    """Execution context resolved once at start of a copy run."""

    account_id: str
    region: str | None
    profile: str | None = None
