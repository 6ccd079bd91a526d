"""Filesystem operations for locale catalog trees.

INVARIANT: Files are truth. A catalog tree on disk has the layout
``<translations_path>/<locale>/LC_MESSAGES/<domain>.{po,mo}``
(``<locale>/C/LC_MESSAGES`` in custom-locale mode) and every configured
path is relative to the project base path.

Scaffolding calls return booleans rather than raising; callers check them.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

import polib
from jinja2 import TemplateSyntaxError

from webgettext import __version__
from webgettext.config.models import GettextConfig
from webgettext.domain.errors import LocaleFileNotFoundError
from webgettext.domain.locales import CUSTOM_LOCALE, plural_forms
from webgettext.infrastructure.templates import (
    build_extraction_environment,
    find_templates,
    render_extractable,
)

logger = logging.getLogger(__name__)

MESSAGES_DIR = "LC_MESSAGES"


class FileSystem:
    """Path resolution and scaffolding for one project's catalogs.

    Args:
        config: The gettext configuration.
        base_path: Project root; configured paths are relative to it.
        storage_path: Where compiled views are written.
    """

    def __init__(self, config: GettextConfig, base_path: Path, storage_path: Path) -> None:
        self._config = config
        self.base_path = Path(base_path).resolve()
        self.storage_path = Path(storage_path).resolve()

    @property
    def config(self) -> GettextConfig:
        return self._config

    # ------------------------------------------------------------------
    # Path resolution
    # ------------------------------------------------------------------

    def get_domain_path(self, locale: str | None = None) -> Path:
        """Return the translations root, or one locale's directory in it."""
        path = self.base_path / self._config.translations_path
        if locale:
            path = path / locale
        return path

    def get_catalog_dir(self, locale_path: Path) -> Path:
        """Return the directory holding a locale's PO/MO files."""
        if self._config.custom_locale:
            return Path(locale_path) / CUSTOM_LOCALE / MESSAGES_DIR
        return Path(locale_path) / MESSAGES_DIR

    def get_relative_path(self, path: Path | str, start: Path | str) -> str:
        """Return *path* relative to *start* in POSIX form.

        Directories end with ``/``: a direct subdirectory ``unit`` of
        *start* yields ``"unit/"``.
        """
        relative = Path(os.path.relpath(Path(path), Path(start))).as_posix()
        if Path(path).is_dir() and not relative.endswith("/"):
            relative += "/"
        return relative

    # ------------------------------------------------------------------
    # Directories
    # ------------------------------------------------------------------

    @staticmethod
    def create_directory(path: Path) -> bool:
        """Create *path* and its parents; False if the OS refuses."""
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError:
            logger.error("Cannot create directory %s", path, exc_info=True)
            return False
        return True

    @staticmethod
    def clear_directory(path: Path | str) -> bool:
        """Delete *path* recursively. Returns False if it did not exist."""
        target = Path(path)
        if not target.is_dir():
            return False
        shutil.rmtree(target)
        return True

    def check_directory_structure(self, check_locales: bool = False) -> bool:
        """Verify the translations root (and optionally every locale) exists."""
        if not self.get_domain_path().is_dir():
            return False
        if not check_locales:
            return True

        for locale in self._config.supported_locales:
            catalog_dir = self.get_catalog_dir(self.get_domain_path(locale))
            if not catalog_dir.is_dir():
                return False
            for domain in self._config.all_domains:
                if not (catalog_dir / f"{domain}.po").is_file():
                    return False
        return True

    # ------------------------------------------------------------------
    # View compilation
    # ------------------------------------------------------------------

    def compile_views(self, view_paths: Iterable[Path | str], domain: str) -> bool:
        """Compile the templates under *view_paths* into extractable sources.

        Output lands in ``<storage>/<domain>/`` mirroring each template's
        path relative to the base path, with a ``.py`` suffix appended.
        """
        env = build_extraction_environment()
        target_root = self.storage_path / domain
        encoding = self._config.encoding

        for view_path in view_paths:
            view_dir = self.base_path / view_path
            if not view_dir.is_dir():
                logger.warning("View directory %s does not exist, skipping", view_dir)
                continue

            for template in find_templates(view_dir):
                relative = template.relative_to(self.base_path)
                target = target_root / relative.with_name(f"{relative.name}.py")
                try:
                    source = template.read_text(encoding=encoding)
                    compiled = render_extractable(env, source, relative.as_posix())
                except TemplateSyntaxError as exc:
                    logger.error("Cannot compile %s: %s", template, exc)
                    return False
                except OSError:
                    logger.error("Cannot read %s", template, exc_info=True)
                    return False

                if not self.create_directory(target.parent):
                    return False
                try:
                    target.write_text(compiled, encoding=encoding)
                except OSError:
                    logger.error("Cannot write %s", target, exc_info=True)
                    return False
                logger.debug("Compiled %s -> %s", relative, target)

        return True

    # ------------------------------------------------------------------
    # Catalogs
    # ------------------------------------------------------------------

    def _po_header(self, catalog_dir: Path, locale: str, domain: str) -> dict[str, str]:
        config = self._config
        timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M%z")
        base_path = config.relative_path or self.get_relative_path(self.base_path, catalog_dir)

        header = {
            "Project-Id-Version": config.project,
            "POT-Creation-Date": timestamp,
            "PO-Revision-Date": timestamp,
            "Last-Translator": config.translator,
            "Language-Team": config.translator,
            "Language": locale,
            "MIME-Version": "1.0",
            "Content-Type": f"text/plain; charset={config.encoding}",
            "Content-Transfer-Encoding": "8bit",
            "Plural-Forms": plural_forms(locale),
            "X-Generator": f"webgettext {__version__}",
            "X-Poedit-KeywordsList": ";".join(config.keywords_list),
            "X-Poedit-Basepath": base_path,
            "X-Poedit-SourceCharset": config.encoding,
        }

        compiled_views = Path(os.path.relpath(self.storage_path / domain, self.base_path))
        search_paths = [*config.get_sources_from_domain(domain), compiled_views.as_posix()]
        for index, search_path in enumerate(search_paths):
            header[f"X-Poedit-SearchPath-{index}"] = search_path
        return header

    def create_po_file(
        self, path: Path, locale: str, domain: str, *, write: bool = True
    ) -> polib.POFile:
        """Build an empty catalog with a fresh header; save it when *write*."""
        po = polib.POFile(encoding=self._config.encoding)
        po.metadata = self._po_header(Path(path).parent, locale, domain)
        if write:
            po.save(str(path))
            logger.debug("Created catalog %s", path)
        return po

    def add_locale(self, locale_path: Path, locale: str) -> bool:
        """Create one locale's catalog directory and seed a PO per domain."""
        catalog_dir = self.get_catalog_dir(locale_path)
        if not self.create_directory(catalog_dir):
            return False
        for domain in self._config.all_domains:
            self.create_po_file(catalog_dir / f"{domain}.po", locale, domain)
        return True

    def generate_locales(self) -> list[Path]:
        """Scaffold every supported locale that is not on disk yet.

        Returns the directory of each locale generated by this call.
        """
        if not self.create_directory(self.get_domain_path()):
            return []

        generated: list[Path] = []
        for locale in self._config.supported_locales:
            locale_path = self.get_domain_path(locale)
            if locale_path.exists():
                continue
            if self.add_locale(locale_path, locale):
                generated.append(locale_path)
        return generated

    def update_locale(self, locale_path: Path, locale: str, domain: str) -> bool:
        """Refresh a catalog's header and compile it to MO.

        Every existing entry is kept; only the header is rewritten.

        Raises:
            LocaleFileNotFoundError: If the PO catalog does not exist.
        """
        po_path = self.get_catalog_dir(locale_path) / f"{domain}.po"
        if not po_path.is_file():
            raise LocaleFileNotFoundError(str(po_path))

        po = polib.pofile(str(po_path), encoding=self._config.encoding)
        header = self._po_header(po_path.parent, locale, domain)
        if "POT-Creation-Date" in po.metadata:
            header["POT-Creation-Date"] = po.metadata["POT-Creation-Date"]
        po.metadata = header

        po.save(str(po_path))
        po.save_as_mofile(str(po_path.with_suffix(".mo")))
        logger.debug("Updated catalog %s (%d translated)", po_path, len(po.translated_entries()))
        return True
