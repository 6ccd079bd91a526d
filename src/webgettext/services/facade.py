"""WebGettext: the application-facing facade over the binder.

Usage::

    translator = Gettext(config, MappingSessionHandler(session), adapter, filesystem)
    i18n = WebGettext(translator)
    i18n.set_domain("backend")
    i18n.translate("Backend string with php echo")
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from webgettext.domain.errors import LocaleNotSupportedError, LocaleSwitchError
from webgettext.domain.locales import display_name, locale_language
from webgettext.services.result import (
    LOCALE_NOT_SUPPORTED,
    LOCALE_SWITCH_FAILED,
    ServiceResult,
)
from webgettext.services.selector import LanguageSelector

if TYPE_CHECKING:
    from webgettext.services.binder import Gettext


class WebGettext:
    """Convenience wrapper exposing locale, domain and translate helpers."""

    def __init__(self, translator: Gettext) -> None:
        self._translator = translator

    @property
    def translator(self) -> Gettext:
        return self._translator

    # --- Encoding ---

    @property
    def encoding(self) -> str:
        return self._translator.encoding

    def set_encoding(self, encoding: str) -> WebGettext:
        self._translator.encoding = encoding
        return self

    # --- Locale ---

    @property
    def locale(self) -> str:
        return self._translator.locale

    def set_locale(self, locale: str) -> WebGettext:
        """Switch locale; a no-op when *locale* is already active."""
        if locale != self._translator.locale:
            self._translator.set_locale(locale)
        return self

    def switch_locale(self, locale: str) -> ServiceResult:
        """Non-raising form of :meth:`set_locale`.

        On failure the result carries the locale left in effect under
        ``error.detail["locale"]``.
        """
        try:
            self.set_locale(locale)
        except LocaleNotSupportedError as exc:
            return ServiceResult.failure(
                "switch_locale",
                LOCALE_NOT_SUPPORTED,
                str(exc),
                requested=locale,
                locale=self._translator.locale,
            )
        except LocaleSwitchError as exc:
            return ServiceResult.failure(
                "switch_locale",
                LOCALE_SWITCH_FAILED,
                str(exc),
                requested=locale,
                locale=exc.fallback_locale,
            )
        return ServiceResult(
            ok=True,
            op="switch_locale",
            data={"locale": self.locale, "domain": self.domain},
        )

    def get_locale_language(self) -> str:
        """Language part of the active locale (``"es"`` for ``"es_AR"``)."""
        return locale_language(self.locale)

    def get_locale_name(self) -> str:
        """Active locale's name in its own language (``"español (Argentina)"``)."""
        return display_name(self.locale)

    @property
    def supported_locales(self) -> list[str]:
        return list(self._translator.config.supported_locales)

    def is_locale_supported(self, locale: str | None) -> bool:
        return self._translator.is_locale_supported(locale)

    def get_selector(self, labels: Mapping[str, str] | None = None) -> LanguageSelector:
        return LanguageSelector(self, labels)

    # --- Domain ---

    @property
    def domain(self) -> str:
        return self._translator.domain

    def set_domain(self, domain: str) -> WebGettext:
        """Make *domain* the active text domain.

        Raises:
            UndefinedDomainError: If *domain* is not configured.
        """
        self._translator.with_default_domain(domain)
        return self

    # --- Translation ---

    def translate(self, message: str, *args: object) -> str:
        """Translate *message*; ``%``-format it with *args* when given."""
        translated = self._translator.gettext(message)
        if args:
            return translated % args
        return translated

    def translate_plural(self, singular: str, plural: str, count: int) -> str:
        return self._translator.ngettext(singular, plural, count)

    def translate_plural_inline(self, message: str, count: int) -> str:
        """Translate a ``"singular|plural"`` message for *count*."""
        singular, _sep, plural = message.partition("|")
        return self.translate_plural(singular, plural or singular, count)
