"""Exception hierarchy for locale and text-domain binding.

Every error raised by webgettext derives from :class:`GettextError`, so
callers can catch the family in one place and still tell the cases apart.
"""

from __future__ import annotations


class GettextError(Exception):
    """Base class for webgettext failures."""


class LocaleNotSupportedError(GettextError):
    """The requested locale is not listed in ``supported_locales``."""

    def __init__(self, locale: str | None) -> None:
        super().__init__(f"Locale {locale} is not supported")
        self.locale = locale


class UndefinedDomainError(GettextError):
    """The text domain is not declared in the configuration."""

    def __init__(self, domain: str) -> None:
        super().__init__(f"Domain '{domain}' is not registered")
        self.domain = domain


class DomainBindingError(GettextError):
    """Binding a text domain did not resolve to the expected directory."""

    def __init__(self, domain: str, domain_path: str) -> None:
        super().__init__(f"Binding to domain {domain} at path {domain_path} has failed")
        self.domain = domain
        self.domain_path = domain_path


class DomainCharsetSpecificationError(GettextError):
    """The runtime rejected the codeset requested for a text domain."""

    def __init__(self, domain: str, encoding: str) -> None:
        super().__init__(f"Specifying charset {encoding} for domain {domain} has failed")
        self.domain = domain
        self.encoding = encoding


class LocaleSwitchError(GettextError):
    """A locale switch failed part-way; the fallback locale is now active.

    The message is prefixed with ``<file>:<line>`` of the frame that failed
    and the original exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, fallback_locale: str) -> None:
        super().__init__(message)
        self.fallback_locale = fallback_locale


class LocaleFileNotFoundError(GettextError):
    """A locale catalog expected on disk could not be read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"I can't read {path}, verify your locale structure")
        self.path = path
