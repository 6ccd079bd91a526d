"""Command: scaffold the catalog tree for every supported locale."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from webgettext.commands._base import GettextCommand

if TYPE_CHECKING:
    from webgettext.commands._context import AppContext

_CREATE_EXAMPLES = """\
  webgettext create
  webgettext --json create
  webgettext -c config/webgettext.toml create"""


@click.command("create", cls=GettextCommand, examples=_CREATE_EXAMPLES)
@click.pass_obj
def create(app: AppContext) -> None:
    """Create locale directories and empty catalogs for every domain."""
    app.emit(app.catalogs.create_locales())
