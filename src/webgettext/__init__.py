"""webgettext: gettext text domains and per-request locales for web applications."""

__version__ = "0.1.0"
