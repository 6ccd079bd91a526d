"""CatalogService: scaffolding and refresh of locale catalog trees.

Every method returns a ServiceResult; the CLI emits it as-is.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from webgettext.domain.errors import LocaleFileNotFoundError
from webgettext.infrastructure.filesystem import FileSystem
from webgettext.services.result import (
    CATALOG_NOT_FOUND,
    LOCALE_NOT_SUPPORTED,
    SCAFFOLD_FAILED,
    UNDEFINED_DOMAIN,
    ServiceResult,
)

logger = logging.getLogger(__name__)


class CatalogService:
    """Operations over the catalog tree of one project."""

    def __init__(self, filesystem: FileSystem) -> None:
        self._fs = filesystem
        self._config = filesystem.config

    def create_locales(self) -> ServiceResult:
        """Generate catalogs for every supported locale not yet on disk."""
        op = "create_locales"
        generated = self._fs.generate_locales()
        root = self._fs.get_domain_path()

        if not self._fs.check_directory_structure(check_locales=True):
            return ServiceResult.failure(
                op, SCAFFOLD_FAILED, f"Locale structure under {root} is incomplete", root=str(root)
            )

        warnings: list[str] = []
        if not generated:
            warnings.append("Every supported locale already exists; nothing generated")
        return ServiceResult(
            ok=True,
            op=op,
            data={"root": str(root), "generated": [str(path) for path in generated]},
            warnings=warnings,
        )

    def compile_views(self, domain: str, view_paths: Sequence[str] = ()) -> ServiceResult:
        """Compile *view_paths* (default: the domain's sources) for *domain*."""
        op = "compile_views"
        if domain not in self._config.all_domains:
            return ServiceResult.failure(
                op, UNDEFINED_DOMAIN, f"Domain '{domain}' is not registered", domain=domain
            )

        paths = list(view_paths) or self._config.get_sources_from_domain(domain)
        if not self._fs.compile_views(paths, domain):
            return ServiceResult.failure(
                op, SCAFFOLD_FAILED, f"Compiling views for {domain} failed", paths=paths
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "domain": domain,
                "paths": paths,
                "output": str(self._fs.storage_path / domain),
            },
        )

    def update_locales(
        self,
        locales: Sequence[str] = (),
        domains: Sequence[str] = (),
        *,
        compile_views: bool = True,
    ) -> ServiceResult:
        """Refresh and compile the catalogs of *locales* x *domains*.

        Empty selections mean every supported locale / configured domain.
        """
        op = "update_locales"
        target_locales = list(locales) or list(self._config.supported_locales)
        target_domains = list(domains) or self._config.all_domains

        unsupported = [code for code in target_locales if code not in self._config.supported_locales]
        if unsupported:
            return ServiceResult.failure(
                op,
                LOCALE_NOT_SUPPORTED,
                f"Locale {unsupported[0]} is not supported",
                locales=unsupported,
            )
        undefined = [name for name in target_domains if name not in self._config.all_domains]
        if undefined:
            return ServiceResult.failure(
                op,
                UNDEFINED_DOMAIN,
                f"Domain '{undefined[0]}' is not registered",
                domains=undefined,
            )
        if not self._fs.check_directory_structure():
            root = self._fs.get_domain_path()
            return ServiceResult.failure(
                op,
                CATALOG_NOT_FOUND,
                f"No catalog tree at {root}; run 'webgettext create' first",
                root=str(root),
            )

        warnings: list[str] = []
        compiled: list[str] = []
        if compile_views:
            for domain in target_domains:
                sources = self._config.get_sources_from_domain(domain)
                if self._fs.compile_views(sources, domain):
                    compiled.append(domain)
                else:
                    warnings.append(f"Compiling views for {domain} failed")

        updated: list[str] = []
        for locale in target_locales:
            locale_path = self._fs.get_domain_path(locale)
            for domain in target_domains:
                try:
                    self._fs.update_locale(locale_path, locale, domain)
                except LocaleFileNotFoundError as exc:
                    return ServiceResult.failure(op, CATALOG_NOT_FOUND, str(exc), path=exc.path)
                updated.append(f"{locale}/{domain}")

        logger.debug("Updated %d catalogs", len(updated))
        return ServiceResult(
            ok=True,
            op=op,
            data={"updated": updated, "compiled_views": compiled},
            warnings=warnings,
        )
