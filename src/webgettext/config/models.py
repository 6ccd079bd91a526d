"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ``webgettext.toml`` only
contains overrides. A fresh project needs only ``supported_locales``
and its ``domains`` table.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

DEFAULT_KEYWORDS: list[str] = [
    "_",
    "gettext",
    "ngettext:1,2",
    "pgettext:1c,2",
    "npgettext:1c,2,3",
    "dgettext:2",
    "dngettext:2,3",
]


class GettextConfig(BaseModel):
    """[gettext] section.

    Attributes:
        locale: Default locale, used when the session holds none.
        fallback_locale: Locale restored when a locale switch fails.
        supported_locales: Ordered list of locale codes the project ships.
        encoding: Charset for native locales, bindings and catalogs.
        domain: Default text domain.
        domains: Domain name -> source paths, relative to the base path.
        translations_path: Catalog tree root, relative to the base path.
        storage_path: Compiled view output, relative to the base path.
        relative_path: ``X-Poedit-Basepath`` override for new catalogs.
        custom_locale: Bind native categories as ``C.<encoding>`` and keep
            one catalog tree per locale.
        sync_framework: Push every locale switch to the framework adapter.
    """

    model_config = {"frozen": True}

    locale: str = "en_US"
    fallback_locale: str = "en_US"
    supported_locales: list[str] = Field(default_factory=lambda: ["en_US"])
    encoding: str = "UTF-8"
    domain: str = "messages"
    domains: dict[str, list[str]] = Field(
        default_factory=lambda: {"messages": ["templates"]}
    )
    translations_path: str = "lang/i18n"
    storage_path: str = "storage/gettext"
    relative_path: str | None = None
    project: str = "MultilanguageProject"
    translator: str = "James Translator <james@translations.colm>"
    keywords_list: list[str] = Field(default_factory=lambda: list(DEFAULT_KEYWORDS))
    session_identifier: str = "webgettext-locale"
    custom_locale: bool = False
    sync_framework: bool = True

    @model_validator(mode="after")
    def _check_locales(self) -> GettextConfig:
        if not self.supported_locales:
            msg = "supported_locales must list at least one locale"
            raise ValueError(msg)
        if self.locale not in self.supported_locales:
            msg = f"Default locale {self.locale!r} is not in supported_locales"
            raise ValueError(msg)
        return self

    @property
    def all_domains(self) -> list[str]:
        """Default domain first, then every declared domain in order."""
        names = [self.domain]
        names.extend(name for name in self.domains if name != self.domain)
        return names

    def get_sources_from_domain(self, domain: str) -> list[str]:
        """Return the source paths declared for *domain* (empty if unknown)."""
        return list(self.domains.get(domain, []))

    def with_overrides(self, **changes: Any) -> GettextConfig:
        """Return a validated copy with *changes* applied."""
        data = self.model_dump()
        data.update(changes)
        return GettextConfig.model_validate(data)
