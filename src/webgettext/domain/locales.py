"""Pure helpers around locale codes.

No I/O and no process state: everything here maps strings to strings.
"""

from __future__ import annotations

from babel import Locale, UnknownLocaleError
from babel.messages.plurals import get_plural

# Language identifier used for every locale in custom-locale mode.
CUSTOM_LOCALE = "C"

# Plural rule for locales Babel has no data for.
_DEFAULT_PLURAL_FORMS = "nplurals=2; plural=(n != 1);"


def gettext_locale(locale: str, encoding: str, *, custom: bool = False) -> str:
    """Return the native locale string, e.g. ``es_AR.UTF-8``.

    In custom-locale mode the identifier is always ``C`` and only the
    encoding suffix varies.
    """
    code = CUSTOM_LOCALE if custom else locale
    return f"{code}.{encoding}"


def locale_language(locale: str) -> str:
    """Return the language part of a locale code (``"es"`` for ``"es_AR"``)."""
    return locale.replace("-", "_").split("_", 1)[0].split(".", 1)[0]


def plural_forms(locale: str) -> str:
    """Return the ``Plural-Forms`` header value for *locale*."""
    try:
        rule = get_plural(locale)
    except (UnknownLocaleError, ValueError):
        return _DEFAULT_PLURAL_FORMS
    return rule.plural_forms


def display_name(locale: str) -> str:
    """Return the locale's name in its own language, or the code itself."""
    try:
        name = Locale.parse(locale).get_display_name()
    except (UnknownLocaleError, ValueError):
        return locale
    return name or locale
