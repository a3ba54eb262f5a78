"""
build-version — CLI entrypoint.

Usage:
    build-version --help
    build-version write
    build-version describe --json
    python -m build_version.main render --version-string v1.2.3
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from build_version import __version__
from build_version.core.errors import BuildVersionError
from build_version.core.observability.logging_config import setup_logging
from build_version.core.services.render import supported_languages


@click.group()
@click.version_option(version=__version__, prog_name="build-version")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to build-version.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """build-version — embed `git describe` output as a build constant."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("BUILD_VERSION_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("BUILD_VERSION_LOG_FILE"),
        log_file_level=os.environ.get("BUILD_VERSION_LOG_FILE_LEVEL"),
    )


def _fail(message: str) -> None:
    click.secho(f"❌ {message}", fg="red", err=True)
    sys.exit(1)


@cli.command()
@click.option(
    "--out-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Output directory (default: $OUT_DIR).",
)
@click.option(
    "--language",
    "-l",
    type=click.Choice(supported_languages()),
    default=None,
    help="Language of the generated constant.",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def write(
    ctx: click.Context,
    out_dir: str | None,
    language: str | None,
    as_json: bool,
) -> None:
    """Write version.<ext> into the output directory if it changed."""
    from build_version.core.config.loader import load_settings
    from build_version.core.use_cases.write_version import write_version_file

    try:
        settings = load_settings(ctx.obj.get("config_path"))
        overrides: dict = {}
        if out_dir:
            overrides["output_directory"] = Path(out_dir)
        if language:
            overrides["language"] = language
        if overrides:
            settings = settings.model_copy(update=overrides)
        result = write_version_file(settings)
    except BuildVersionError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
            sys.exit(1)
        _fail(str(e))
        return

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if ctx.obj.get("quiet"):
        return

    state = "written" if result.written else "unchanged"
    click.secho(f"✅ {result.path} ({state})", fg="green")
    click.echo(f"   GIT_BUILD_VERSION = {result.version!r}")


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def describe(as_json: bool) -> None:
    """Show what `git describe --tags --always` reports here."""
    from build_version.adapters.vcs.git import GitDescriber
    from build_version.core.use_cases.write_version import describe_version

    describer = GitDescriber()
    version = describe_version(describer)

    if as_json:
        click.echo(json.dumps({"version": version}, indent=2))
        return

    if version is not None:
        click.echo(version)
    elif not describer.is_available():
        click.secho(f"⚠️  No git version available ({describer.name} not found on PATH)",
                    fg="yellow")
    else:
        click.secho("⚠️  No git version available", fg="yellow")


@cli.command()
@click.option("--version-string", "-s", default=None, help="Descriptor to embed.")
@click.option("--none", "absent", is_flag=True, help="Render the 'no version' form.")
@click.option(
    "--language",
    "-l",
    type=click.Choice(supported_languages()),
    default=None,
    help="Language of the generated constant.",
)
@click.pass_context
def render(
    ctx: click.Context,
    version_string: str | None,
    absent: bool,
    language: str | None,
) -> None:
    """Print the generated file content without writing anything.

    Uses the current git descriptor unless --version-string or --none
    is given.
    """
    from build_version.core.config.loader import load_settings
    from build_version.core.services.render import render_version
    from build_version.core.use_cases.write_version import describe_version

    if absent and version_string is not None:
        raise click.UsageError("--version-string and --none are mutually exclusive.")

    try:
        settings = load_settings(ctx.obj.get("config_path"))
    except BuildVersionError as e:
        _fail(str(e))
        return

    if absent:
        version = None
    elif version_string is not None:
        version = version_string
    else:
        version = describe_version()

    click.echo(render_version(version, language or settings.language), nl=False)


if __name__ == "__main__":
    cli()
