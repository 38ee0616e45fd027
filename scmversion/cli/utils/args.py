"""Options shared by the commands that compute a version."""

from functools import wraps
from pathlib import Path

import click
from pydantic import ValidationError

from scmversion.config import load_config
from scmversion.display import DisplayModeEnum
from scmversion.engine import VersioningEngine


def versioning_options(cmd):
    """Add the project argument and the configuration overrides to a command."""

    @click.argument(
        "project_dir",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        default=".",
    )
    @click.option("--scm", type=str, default=None, help="SCM backend (git, svn).")
    @click.option(
        "--display-mode",
        type=click.Choice([m.value for m in DisplayModeEnum]),
        default=None,
        help="Display mode of non-release branches.",
    )
    @click.option(
        "--snapshot", type=str, default=None, help="Suffix of the snapshot mode."
    )
    @click.option(
        "--release",
        "releases",
        multiple=True,
        help="Branch type treated as a release line. Can be repeated.",
    )
    @click.option(
        "--branch-env",
        multiple=True,
        help="Environment variable holding the branch on a detached HEAD.",
    )
    @wraps(cmd)
    def wrapper(*args, **kwargs):
        return cmd(*args, **kwargs)

    return wrapper


def build_engine(
    project_dir: Path,
    scm=None,
    display_mode=None,
    snapshot=None,
    releases=(),
    branch_env=(),
) -> VersioningEngine:
    """Build an engine from the configuration files and the command line."""
    try:
        config = load_config(
            project_dir,
            scm=scm,
            display_mode=display_mode,
            snapshot=snapshot,
            releases=list(releases) or None,
            branch_env=list(branch_env) or None,
        )
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e}")
    return VersioningEngine(project_dir, config)
