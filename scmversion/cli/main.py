"""scmversion CLI"""

import click

from scmversion import __version__
from scmversion.cli.version import show, version_file

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="scmversion")
@click.pass_context
def cli(ctx):
    """
    Version identifiers derived from source control branches.
    """
    ctx.ensure_object(dict)


cli.add_command(show)
cli.add_command(version_file)

add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
