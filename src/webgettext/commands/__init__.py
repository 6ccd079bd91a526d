"""Subcommand modules for webgettext.

Provides register_commands() which uses deferred imports to keep
``webgettext --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from webgettext.commands.compile_cmd import compile_cmd
    from webgettext.commands.create import create
    from webgettext.commands.update import update

    cli.add_command(create)
    cli.add_command(update)
    cli.add_command(compile_cmd)
