"""Factory for wiring a facade from settings.

Usage::

    settings = GettextSettings.from_cli()
    i18n = create_gettext(settings, session=MappingSessionHandler(request.session))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from webgettext.infrastructure.adapters import ContextAdapter, FrameworkAdapter
from webgettext.infrastructure.filesystem import FileSystem
from webgettext.infrastructure.session import MappingSessionHandler, SessionHandler
from webgettext.services.binder import Gettext
from webgettext.services.facade import WebGettext

if TYPE_CHECKING:
    from webgettext.config.settings import GettextSettings


def create_gettext(
    settings: GettextSettings,
    *,
    session: SessionHandler | None = None,
    adapter: FrameworkAdapter | None = None,
) -> WebGettext:
    """Build the filesystem helper, binder and facade for *settings*.

    Args:
        settings: Resolved settings; paths hang off ``project_root``.
        session: Locale storage (default: a fresh in-memory session).
        adapter: Framework adapter (default: :class:`ContextAdapter`
            rooted at the project).

    Raises:
        LocaleNotSupportedError: If the session holds an unsupported locale.
        LocaleSwitchError: If the initial locale cannot be bound.
    """
    config = settings.gettext
    filesystem = FileSystem(config, settings.project_root, settings.storage_root)
    if session is None:
        session = MappingSessionHandler(key=config.session_identifier)
    if adapter is None:
        adapter = ContextAdapter(settings.project_root)
    return WebGettext(Gettext(config, session, adapter, filesystem))
