"""Gettext: binds text domains and keeps the active locale.

A locale switch is a fixed sequence: export the native locale, persist
the code to the session, re-bind every configured domain for the new
locale, restore the default domain, and (optionally) tell the framework.
A failure anywhere in that sequence puts the session, the cached locale
and the bound catalogs back on the fallback locale, and surfaces as
:class:`LocaleSwitchError`.

INVARIANT: every bound domain is declared in the configuration.
INVARIANT: the binder mutates process state; use one binder per worker.
"""

from __future__ import annotations

import gettext
import logging
import traceback
from pathlib import Path
from typing import TYPE_CHECKING

from webgettext.config.logging import bind_locale
from webgettext.domain.errors import (
    DomainBindingError,
    DomainCharsetSpecificationError,
    LocaleNotSupportedError,
    LocaleSwitchError,
    UndefinedDomainError,
)
from webgettext.domain.locales import CUSTOM_LOCALE, gettext_locale
from webgettext.infrastructure import runtime

if TYPE_CHECKING:
    from webgettext.config.models import GettextConfig
    from webgettext.infrastructure.adapters import FrameworkAdapter
    from webgettext.infrastructure.filesystem import FileSystem
    from webgettext.infrastructure.session import SessionHandler

logger = logging.getLogger(__name__)


def _failure_location(exc: BaseException) -> str:
    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return "<unknown>"
    last = frames[-1]
    return f"{last.filename}:{last.lineno}"


class Gettext:
    """Domain/locale binder.

    Construction reads the locale from *session* (defaulting to the
    configured locale) and switches to it immediately, so a new binder is
    always fully bound.

    Raises:
        LocaleNotSupportedError: If the session holds an unsupported locale.
        LocaleSwitchError: If binding the initial locale fails.
    """

    def __init__(
        self,
        config: GettextConfig,
        session: SessionHandler,
        adapter: FrameworkAdapter,
        filesystem: FileSystem,
    ) -> None:
        self._config = config
        self._session = session
        self._adapter = adapter
        self._filesystem = filesystem

        self._domain = config.domain
        self._encoding = config.encoding
        self._locale: str = config.fallback_locale
        # Bound domain -> its catalog for the active locale, in binding order.
        self._bound: dict[str, gettext.NullTranslations] = {}

        self.set_locale(session.get(config.locale))

    def __str__(self) -> str:
        return self._locale

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def config(self) -> GettextConfig:
        return self._config

    @property
    def adapter(self) -> FrameworkAdapter:
        return self._adapter

    @property
    def filesystem(self) -> FileSystem:
        return self._filesystem

    @property
    def locale(self) -> str:
        """The active locale code."""
        return self._locale

    @property
    def domain(self) -> str:
        """The active (default) text domain."""
        return self._domain

    @property
    def encoding(self) -> str:
        return self._encoding

    @encoding.setter
    def encoding(self, encoding: str) -> None:
        # Applied on the next locale switch.
        self._encoding = encoding

    @property
    def bound_domains(self) -> list[str]:
        return list(self._bound)

    # ------------------------------------------------------------------
    # Locale
    # ------------------------------------------------------------------

    def is_locale_supported(self, locale: str | None) -> bool:
        """True if *locale* is one of the configured supported locales."""
        if not locale:
            return False
        return locale in self._config.supported_locales

    def set_locale(self, locale: str | None) -> str:
        """Switch every native category, binding and the session to *locale*.

        Returns the locale now active.

        Raises:
            LocaleNotSupportedError: If *locale* is not supported. Nothing
                changes in this case.
            LocaleSwitchError: If any step of the switch fails. The cached
                locale, the session and the bound catalogs are on the
                fallback locale afterwards.
        """
        if not self.is_locale_supported(locale):
            raise LocaleNotSupportedError(locale)
        assert locale is not None

        try:
            native = gettext_locale(locale, self._encoding, custom=self._config.custom_locale)
            runtime.set_process_locale(native)

            self._locale = locale
            self._session.set(locale)

            # Catalogs are per locale: forget the previous bindings.
            self._bound.clear()
            for domain in self._config.all_domains:
                self.add_domain(domain)

            self.with_default_domain(self._domain)

            if self._config.sync_framework:
                self._adapter.set_locale(locale)
        except Exception as exc:
            fallback = self._config.fallback_locale
            logger.error("Switching to locale %s failed, fell back to %s", locale, fallback)
            self._restore_fallback(fallback)
            raise LocaleSwitchError(
                f"{_failure_location(exc)}: {exc}", fallback_locale=fallback
            ) from exc

        logger.debug("Locale set to %s (native %s)", locale, native)
        return self._locale

    def _restore_fallback(self, fallback: str) -> None:
        """Leave session, catalogs and native locale on *fallback*.

        Catalogs loaded for the failed locale are dropped first. Re-binding
        the fallback is best effort: if it fails too, the bound set stays
        empty and the next translation binds on demand.
        """
        self._locale = fallback
        self._bound.clear()
        try:
            self._session.set(fallback)
            native = gettext_locale(fallback, self._encoding, custom=self._config.custom_locale)
            runtime.set_process_locale(native)
            for domain in self._config.all_domains:
                self.add_domain(domain)
            self.with_default_domain(self._domain)
        except Exception:
            self._bound.clear()
            logger.warning("Re-binding fallback locale %s failed", fallback, exc_info=True)
            return

        if self._config.sync_framework:
            try:
                self._adapter.set_locale(fallback)
            except Exception:
                logger.warning("Framework rejected fallback locale %s", fallback, exc_info=True)

    # ------------------------------------------------------------------
    # Domains
    # ------------------------------------------------------------------

    def add_domain(self, domain: str) -> Gettext:
        """Bind *domain* for the active locale. No-op if already bound.

        Raises:
            UndefinedDomainError: If *domain* is not configured.
            DomainBindingError: If the domain directory cannot be bound.
            DomainCharsetSpecificationError: If the encoding is rejected.
        """
        if domain in self._bound:
            return self

        self._assert_domain_is_defined(domain)

        domain_path = self._filesystem.get_domain_path()
        language = self._locale
        if self._config.custom_locale:
            domain_path = domain_path / self._locale
            language = CUSTOM_LOCALE

        self._bind_to_domain(domain, self._encoding, domain_path)
        self._bound[domain] = runtime.load_translations(domain, domain_path, language)
        logger.debug("Bound domain %s at %s", domain, domain_path)
        return self

    def with_default_domain(self, domain: str) -> Gettext:
        """Bind *domain* if needed and make it the active text domain.

        Its catalog is installed as the builtin ``_``.
        """
        self.add_domain(domain)
        self._domain = runtime.textdomain(domain)
        self._bound[domain].install()
        bind_locale(self._locale, self._domain)
        return self

    def _bind_to_domain(self, domain: str, encoding: str, domain_path: Path) -> str:
        path = Path(domain_path)
        real_path = path.resolve() if path.is_dir() else None

        bound = runtime.bindtextdomain(domain, str(real_path or path))
        if real_path is None or bound != str(real_path):
            raise DomainBindingError(domain, str(path))

        if runtime.bind_textdomain_codeset(domain, encoding) != encoding:
            raise DomainCharsetSpecificationError(domain, encoding)

        return domain

    def _assert_domain_is_defined(self, domain: str) -> None:
        if domain not in self._config.all_domains:
            raise UndefinedDomainError(domain)

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    def translations(self, domain: str | None = None) -> gettext.NullTranslations:
        """Return the catalog of *domain* (default: active) for the active locale.

        The returned object carries its own locale, so it can be handed to
        code that must not depend on process-wide gettext state.
        """
        name = domain or self._domain
        self.add_domain(name)
        return self._bound[name]

    def gettext(self, message: str) -> str:
        return self.translations().gettext(message)

    def ngettext(self, singular: str, plural: str, count: int) -> str:
        return self.translations().ngettext(singular, plural, count)

    def pgettext(self, context: str, message: str) -> str:
        return self.translations().pgettext(context, message)

    def dgettext(self, domain: str, message: str) -> str:
        """Translate *message* from *domain* without changing the active domain."""
        return self.translations(domain).gettext(message)
