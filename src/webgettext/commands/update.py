"""Command: refresh catalog headers and compile catalogs to MO."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from webgettext.commands._base import GettextCommand

if TYPE_CHECKING:
    from webgettext.commands._context import AppContext

_UPDATE_EXAMPLES = """\
  webgettext update
  webgettext update --locale es_AR
  webgettext update -l es_AR -l en_US --domain backend
  webgettext update --skip-views"""


@click.command("update", cls=GettextCommand, examples=_UPDATE_EXAMPLES)
@click.option("-l", "--locale", "locales", multiple=True, help="Locale to update (repeatable).")
@click.option("-d", "--domain", "domains", multiple=True, help="Domain to update (repeatable).")
@click.option("--skip-views", is_flag=True, help="Do not recompile view templates first.")
@click.pass_obj
def update(
    app: AppContext,
    locales: tuple[str, ...],
    domains: tuple[str, ...],
    skip_views: bool,
) -> None:
    """Compile views, refresh catalog headers and write MO files."""
    app.emit(app.catalogs.update_locales(locales, domains, compile_views=not skip_views))
