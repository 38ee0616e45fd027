"""--debug flag shared by the scmversion group and its commands."""

import click

from .utils.logging import configure_logging


def _set_debug(ctx, param, value: bool):
    root_ctx = ctx.find_root()
    root_ctx.ensure_object(dict)

    # Commands can only switch debug on; the group owns switching it off
    if value or ctx.parent is None:
        root_ctx.obj["DEBUG"] = value
    debug = root_ctx.obj.setdefault("DEBUG", False)

    configure_logging(debug)
    return debug


def add_debug_option(command: click.Command) -> click.Command:
    """Add a ``--debug/--no-debug`` flag as the first parameter of ``command``."""
    if not any(param.name == "debug" for param in command.params):
        command.params.insert(
            0,
            click.Option(
                ["--debug/--no-debug"],
                is_eager=True,
                expose_value=False,
                callback=_set_debug,
                help="Log how the version is computed.",
            ),
        )
    return command
