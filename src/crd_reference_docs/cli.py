"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from crd_reference_docs.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from crd_reference_docs.run_execution import (
    GenerationRequest,
    RunExecutionError,
    execute_reference_generation,
)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_LOG_HANDLER_NAME = "crd_reference_docs.cli"


class CliError(Exception):
    """Custom CLI error."""


class _ClickEchoHandler(logging.Handler):
    """Logging handler writing through click so it follows the active stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # pylint: disable=broad-except
            self.handleError(record)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="crd-reference-docs")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """Generate CRD schema reference pages for the documentation site."""
    _configure_logging(logging.DEBUG if verbose else logging.WARNING)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML generator configuration with the default settings."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration file",
)
@click.option(
    "--root",
    "root",
    required=False,
    type=click.Path(file_okay=False, path_type=str),
    help="Base directory for relative paths (defaults to the configuration file's directory)",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(file_okay=False, path_type=str),
    help="Override the directory reference pages are written to",
)
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help="Do not write pages; fail when any committed page differs from the generated one.",
)
def generate(
    config_path: str | None, root: str | None, output_dir: str | None, check: bool
) -> None:
    """Render one reference page per CRD resource kind."""
    try:
        outcome = execute_reference_generation(
            GenerationRequest(
                config_path=config_path,
                root=root,
                output_dir=output_dir,
                check=check,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc

    if check:
        drifted = outcome.drifted
        if drifted:
            details = "\n".join(f"  - {page.path} ({page.status.value})" for page in drifted)
            raise CliError(f"Reference pages are out of date:\n{details}")
        click.echo(f"{len(outcome.pages)} reference pages up to date")
        return

    for page in outcome.pages:
        click.echo(str(page.path))


def _configure_logging(level: int) -> None:
    package_logger = logging.getLogger("crd_reference_docs")
    for handler in list(package_logger.handlers):
        if handler.get_name() == _LOG_HANDLER_NAME:
            package_logger.removeHandler(handler)
    handler = _ClickEchoHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    handler.set_name(_LOG_HANDLER_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
