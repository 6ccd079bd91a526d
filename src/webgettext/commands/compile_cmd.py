"""Command: compile view templates (named compile_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from webgettext.commands._base import GettextCommand

if TYPE_CHECKING:
    from webgettext.commands._context import AppContext

_COMPILE_EXAMPLES = """\
  webgettext compile messages
  webgettext compile frontend templates/frontend templates/shared"""


@click.command("compile", cls=GettextCommand, examples=_COMPILE_EXAMPLES)
@click.argument("domain")
@click.argument("paths", nargs=-1)
@click.pass_obj
def compile_cmd(app: AppContext, domain: str, paths: tuple[str, ...]) -> None:
    """Compile DOMAIN's view templates into sources a message extractor can read.

    PATHS default to the source paths configured for DOMAIN.
    """
    app.emit(app.catalogs.compile_views(domain, paths))
