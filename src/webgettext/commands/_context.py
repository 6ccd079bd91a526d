"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy FileSystem initialization and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from webgettext.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from webgettext.config.settings import GettextSettings
    from webgettext.infrastructure.filesystem import FileSystem
    from webgettext.services.catalogs import CatalogService
    from webgettext.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The filesystem helper is built on first use so ``--help`` and
    ``--version`` never touch the project tree.
    """

    def __init__(self, settings: GettextSettings) -> None:
        self.settings = settings
        self._filesystem: FileSystem | None = None

        from webgettext.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def filesystem(self) -> FileSystem:
        if self._filesystem is None:
            from webgettext.infrastructure.filesystem import FileSystem

            self._filesystem = FileSystem(
                self.settings.gettext,
                self.settings.project_root,
                self.settings.storage_root,
            )
        return self._filesystem

    @property
    def catalogs(self) -> CatalogService:
        from webgettext.services.catalogs import CatalogService

        return CatalogService(self.filesystem)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
