"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "quicksight-copier.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for quicksight-object-copier.
# Command-line flags (--account-id, --region, --profile) override these values.
# Replace <OPTIONAL> placeholders only when your setup needs them.

aws:
  # Twelve-digit AWS account that owns the QuickSight objects. Quote it.
  account_id: "<REQUIRED>"
  # Region of the QuickSight API endpoint, for example eu-west-1.
  region: "<REQUIRED>"
  # Named profile from ~/.aws/config; omit to use the default credential chain.
  # profile: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
