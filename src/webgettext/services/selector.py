"""LanguageSelector: HTML list of links to every supported locale."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from markupsafe import Markup

from webgettext.infrastructure.templates import build_template_environment

if TYPE_CHECKING:
    from webgettext.services.facade import WebGettext

TEMPLATE_NAME = "language_selector.html"


class LanguageSelector:
    """Render ``<ul class="language-selector">`` for the active facade.

    The active locale is rendered as ``<strong>``, every other locale as
    a link to ``/lang/<code>``. *labels* maps locale codes to display
    text; unlabelled locales show their code.

    Projects override the markup by placing ``language_selector.html``
    under ``.webgettext/templates/selector/`` in the application path.
    """

    def __init__(self, gettext: WebGettext, labels: Mapping[str, str] | None = None) -> None:
        self._gettext = gettext
        self.labels = dict(labels or {})

    def render(self) -> Markup:
        translator = self._gettext.translator
        env = build_template_environment(
            "selector", project_root=translator.adapter.get_application_path()
        )
        locales = [
            {"code": code, "label": self.labels.get(code, code)}
            for code in self._gettext.supported_locales
        ]
        html = env.get_template(TEMPLATE_NAME).render(
            locales=locales, current=self._gettext.locale
        )
        return Markup(html.strip())

    def __str__(self) -> str:
        return str(self.render())

    def __html__(self) -> str:
        return str(self.render())
