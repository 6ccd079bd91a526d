"""Framework adapter boundary.

The binder pushes every locale switch through an adapter so the host
application's own localization state (date formatting, validation
messages, template globals) follows along.
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Protocol, runtime_checkable

# ── Context variables ────────────────────────────────────────────────

_current_locale: ContextVar[str | None] = ContextVar("_current_locale", default=None)


def current_locale() -> str | None:
    """Locale most recently pushed by a :class:`ContextAdapter` in this context."""
    return _current_locale.get()


# ── Adapters ─────────────────────────────────────────────────────────


@runtime_checkable
class FrameworkAdapter(Protocol):
    """What the binder needs from the host framework."""

    def set_locale(self, locale: str) -> None: ...

    def get_locale(self) -> str | None: ...

    def get_application_path(self) -> Path: ...


class ContextAdapter:
    """Adapter that keeps the framework-side locale in a ContextVar.

    Each thread or asyncio task sees the value set in its own context,
    so request handlers can read :func:`current_locale` safely.
    """

    def __init__(self, application_path: Path | str) -> None:
        self._application_path = Path(application_path)

    def set_locale(self, locale: str) -> None:
        _current_locale.set(locale)

    def get_locale(self) -> str | None:
        return _current_locale.get()

    def get_application_path(self) -> Path:
        return self._application_path
