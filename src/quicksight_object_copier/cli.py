"""Command line interface entry points."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable, Sequence

import click

from quicksight_object_copier.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    resolve_copy_context,
    write_placeholder_configuration,
)
from quicksight_object_copier.copying import (
    CopyExecutionError,
    CopyOutcome,
    CopyRequest,
    copy_analysis,
    copy_data_set,
)
from quicksight_object_copier.remote_access import create_quicksight_gateway

CopyUseCase = Callable[..., CopyOutcome]

_QUIET_LIBRARY_LOGGERS = ("boto3", "botocore", "urllib3")


class CliError(Exception):
    """Custom CLI error."""


def _copy_options(command: Callable) -> Callable:
    options = (
        click.option("--account-id", "account_id", help="AWS account ID"),
        click.option("--region", "region", help="AWS region ID"),
        click.option("--src-id", "src_id", required=True, help="Source object ID"),
        click.option(
            "--dst-id",
            "dst_id",
            required=True,
            help="Destination object ID, also used as its display name",
        ),
        click.option("--profile", "profile", help="Named AWS profile to use"),
        click.option(
            "--config",
            "config_path",
            required=False,
            type=click.Path(path_type=str),
            help="Optional YAML configuration file with aws.account_id/region/profile",
        ),
        click.option(
            "--dry-run",
            is_flag=True,
            default=False,
            help="Read the source object and print the planned writes without creating anything.",
        ),
        click.option("--verbose", is_flag=True, default=False, help="Log each step to stderr."),
    )
    for option in reversed(options):
        command = option(command)
    return command


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="quicksight-object-copier")
def cli() -> None:
    """Copy QuickSight analyses and data sets between identifiers."""


@cli.command(name="copy-analysis")
@_copy_options
def copy_analysis_command(**options) -> None:
    """Copy an analysis with its theme, permissions and definition."""
    _run_copy(copy_analysis, **options)


@cli.command(name="copy-data-set")
@_copy_options
def copy_data_set_command(**options) -> None:
    """Copy a data set with its permissions and refresh properties."""
    _run_copy(copy_data_set, **options)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _run_copy(
    use_case: CopyUseCase,
    *,
    account_id: str | None,
    region: str | None,
    src_id: str,
    dst_id: str,
    profile: str | None,
    config_path: str | None,
    dry_run: bool,
    verbose: bool,
) -> None:
    _configure_logging(verbose)
    try:
        context = resolve_copy_context(
            account_id=account_id,
            region=region,
            profile=profile,
            config_path=config_path,
        )
        outcome = use_case(
            CopyRequest(
                context=context,
                source_id=src_id,
                destination_id=dst_id,
                dry_run=dry_run,
            ),
            gateway_factory=create_quicksight_gateway,
        )
    except (ConfigurationError, CopyExecutionError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(_render_outcome(outcome))


def _render_outcome(outcome: CopyOutcome) -> str:
    if outcome.dry_run:
        planned = [
            {"operation": write.operation, "parameters": write.parameters}
            for write in outcome.writes
        ]
        return json.dumps(planned, indent=2, default=str)
    return outcome.destination_arn or outcome.destination_id


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s", stream=sys.stderr)
    logging.getLogger("quicksight_object_copier").setLevel(logging.INFO)
    for name in _QUIET_LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _invoke(command: click.Command, argv: Sequence[str] | None, prog_name: str | None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    try:
        command.main(args=list(argv), prog_name=prog_name, standalone_mode=False)
    except CliError as exc:
        click.echo(" ".join(str(exc).split()), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    return _invoke(cli, argv, prog_name="quicksight-copier")


def cp_analysis_main(argv: list[str] | None = None) -> int:
    """Standalone analysis copier entry point."""
    return _invoke(copy_analysis_command, argv, prog_name="cp-analysis")


def cp_data_set_main(argv: list[str] | None = None) -> int:
    """Standalone data set copier entry point."""
    return _invoke(copy_data_set_command, argv, prog_name="cp-data-set")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
