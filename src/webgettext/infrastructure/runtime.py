"""Thin wrappers over the process-wide gettext and locale state.

Each call mirrors its C counterpart (``setlocale``, ``bindtextdomain``,
``bind_textdomain_codeset``, ``textdomain``) and touches two layers:
the C library through :mod:`locale` where the platform exposes it, and
Python's :mod:`gettext` module, which is what ``gettext.gettext`` and
friends read.

INVARIANT: everything here mutates process state. One binder per
worker process.
"""

from __future__ import annotations

import codecs
import gettext
import locale
import logging
import os
from pathlib import Path

from webgettext.domain.locales import CUSTOM_LOCALE

logger = logging.getLogger(__name__)

# Environment variables exported on every locale switch, in lookup order.
LOCALE_ENV_VARS = ("LC_ALL", "LANGUAGE")


def set_process_locale(value: str) -> bool:
    """Export *value* and apply it to every native locale category.

    ``LC_ALL`` covers collate, ctype, monetary, numeric, time and messages.
    Returns False when the C library does not know the locale; the
    environment is exported regardless so catalog lookup still follows it.
    """
    for name in LOCALE_ENV_VARS:
        os.environ[name] = value
    try:
        locale.setlocale(locale.LC_ALL, value)
    except locale.Error:
        logger.warning("Native locale %s is not available on this system", value)
        return False
    return True


def bindtextdomain(domain: str, localedir: str) -> str:
    """Bind *domain* to *localedir* and return the directory now bound."""
    native = getattr(locale, "bindtextdomain", None)
    if native is not None:
        native(domain, localedir)
    return gettext.bindtextdomain(domain, localedir)


def bind_textdomain_codeset(domain: str, codeset: str) -> str | None:
    """Set the output charset of *domain*; return the codeset now in effect.

    Returns None when Python has no codec for *codeset*.
    """
    try:
        codecs.lookup(codeset)
    except LookupError:
        return None
    native = getattr(locale, "bind_textdomain_codeset", None)
    if native is None:
        return codeset
    return native(domain, codeset)


def textdomain(domain: str) -> str:
    """Make *domain* the process default and return it."""
    native = getattr(locale, "textdomain", None)
    if native is not None:
        native(domain)
    return gettext.textdomain(domain)


def load_translations(domain: str, localedir: Path, language: str) -> gettext.NullTranslations:
    """Load the catalog of *domain* for *language* under *localedir*.

    Falls back to :class:`gettext.NullTranslations` when no MO file
    exists. The ``C`` language used by custom-locale mode is read directly,
    since :func:`gettext.find` stops searching when it reaches ``C``.
    """
    if language == CUSTOM_LOCALE:
        mofile = localedir / CUSTOM_LOCALE / "LC_MESSAGES" / f"{domain}.mo"
        if not mofile.is_file():
            return gettext.NullTranslations()
        with mofile.open("rb") as fp:
            return gettext.GNUTranslations(fp)
    return gettext.translation(domain, str(localedir), languages=[language], fallback=True)
