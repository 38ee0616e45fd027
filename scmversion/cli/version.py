"""cli commands computing the version of a project"""

import json
import sys
from dataclasses import fields
from pathlib import Path

import click

from scmversion.cli.utils.args import build_engine, versioning_options
from scmversion.cli.utils.logging import logger
from scmversion.engine import VersioningEngine
from scmversion.exceptions import VersioningError
from scmversion.model.info import VersionInfo
from scmversion.output import (
    DEFAULT_VERSION_FILE,
    format_display_lines,
    write_version_file,
)

from .debug import add_debug_option

VERSION_FIELDS = [f.name for f in fields(VersionInfo)]


def is_git_command_error(error: Exception) -> bool:
    """Whether ``error`` is a GitPython command failure.

    GitPython is only loaded by the git backend, so it is looked up in
    ``sys.modules`` instead of being imported here.
    """
    git_exc = sys.modules.get("git.exc")
    return git_exc is not None and isinstance(error, git_exc.GitCommandError)


def compute(project_dir: Path, **options) -> VersioningEngine:
    """Build the engine and compute its version, reporting errors to click."""
    engine = build_engine(project_dir, **options)
    try:
        info = engine.info
    except VersioningError as e:
        raise click.ClickException(str(e))
    except Exception as e:
        if is_git_command_error(e):
            raise click.ClickException(str(e))
        raise
    if info == VersionInfo.NONE:
        logger.warning(
            f"No {engine.config.scm} information found in {project_dir}, "
            "no version computed."
        )
    return engine


@add_debug_option
@click.command("show")
@versioning_options
@click.option("--json", "as_json", is_flag=True, help="Print the version as JSON.")
@click.option(
    "--field",
    type=click.Choice(VERSION_FIELDS),
    default=None,
    help="Print a single field of the version.",
)
def show(project_dir: Path, as_json: bool, field, **options):
    """Compute and print the version of a project."""
    engine = compute(project_dir, **options)
    info = engine.info
    if info == VersionInfo.NONE:
        return

    if field is not None:
        click.echo(getattr(info, field))
    elif as_json:
        click.echo(json.dumps(info.as_dict(), indent=2))
    else:
        click.echo(format_display_lines(info), nl=False)


@add_debug_option
@click.command("file")
@versioning_options
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Version file to write. Default: <project>/{DEFAULT_VERSION_FILE}",
)
@click.option("--prefix", type=str, default=None, help="Key prefix of the entries.")
def version_file(project_dir: Path, output, prefix, **options):
    """Write the version of a project to a properties file."""
    engine = compute(project_dir, **options)
    info = engine.info
    if info == VersionInfo.NONE:
        return

    if output is None:
        output = project_dir / DEFAULT_VERSION_FILE
    path = write_version_file(
        info, output, prefix if prefix is not None else engine.config.prefix
    )
    click.echo(f"Version {info.display} written to {path}")
