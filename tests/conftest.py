"""Shared pytest fixtures and test helpers for webgettext tests."""

from __future__ import annotations

import builtins
import gettext
import locale
import logging
import os
import shutil
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from webgettext.config.discovery import CONFIG_ENV_VAR
from webgettext.config.models import GettextConfig
from webgettext.infrastructure.adapters import ContextAdapter
from webgettext.infrastructure.filesystem import FileSystem
from webgettext.infrastructure.session import MappingSessionHandler
from webgettext.services.binder import Gettext
from webgettext.services.facade import WebGettext

FIXTURES = Path(__file__).parent / "fixtures"

TEST_CONFIG: dict[str, Any] = {
    "locale": "es_AR",
    "fallback_locale": "en_US",
    "supported_locales": ["en_US", "es_AR", "it_IT"],
    "encoding": "UTF-8",
    "domain": "messages",
    "domains": {
        "messages": ["views/messages", "views/misc"],
        "frontend": ["controllers", "views/frontend"],
        "backend": ["views/backend"],
    },
    "translations_path": "lang/i18n",
    "project": "TestProject",
}

# Locales that ship catalogs under tests/fixtures/project/translations.
TRANSLATED_LOCALES = ("en_US", "es_AR")


@pytest.fixture(autouse=True)
def _restore_gettext_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Undo the process-wide changes a binder or CLI invocation makes."""
    for name in ("LC_ALL", "LANGUAGE"):
        monkeypatch.setenv(name, os.environ.get(name, ""))
    monkeypatch.setattr(builtins, "_", getattr(builtins, "_", None), raising=False)
    monkeypatch.setattr(gettext, "_localedirs", dict(gettext._localedirs))
    monkeypatch.setattr(gettext, "_current_domain", gettext._current_domain)
    saved_locale = locale.setlocale(locale.LC_ALL)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    locale.setlocale(locale.LC_ALL, saved_locale)
    root.handlers = handlers
    root.setLevel(level)
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Copy of the fixture project: views, controllers and PO catalogs."""
    root = tmp_path / "project"
    shutil.copytree(FIXTURES / "project", root)
    return root


@pytest.fixture
def gettext_config() -> GettextConfig:
    return GettextConfig.model_validate(TEST_CONFIG)


@pytest.fixture
def filesystem(gettext_config: GettextConfig, project_root: Path) -> FileSystem:
    """FileSystem over an empty ``lang/i18n`` tree."""
    return FileSystem(gettext_config, project_root, project_root / "storage")


@pytest.fixture
def translated_filesystem(gettext_config: GettextConfig, project_root: Path) -> FileSystem:
    """FileSystem over the fixture catalogs, compiled to MO."""
    config = gettext_config.with_overrides(translations_path="translations")
    fs = FileSystem(config, project_root, project_root / "storage")
    for code in TRANSLATED_LOCALES:
        for domain in config.all_domains:
            assert fs.update_locale(fs.get_domain_path(code), code, domain)
    return fs


@pytest.fixture
def session_storage() -> dict[str, Any]:
    return {}


@pytest.fixture
def session(session_storage: dict[str, Any]) -> MappingSessionHandler:
    return MappingSessionHandler(session_storage, key="webgettext-locale")


@pytest.fixture
def adapter(project_root: Path) -> ContextAdapter:
    return ContextAdapter(project_root)


@pytest.fixture
def binder(
    translated_filesystem: FileSystem,
    session: MappingSessionHandler,
    adapter: ContextAdapter,
) -> Gettext:
    """Binder over the fixture catalogs; the empty session yields ``es_AR``."""
    return Gettext(translated_filesystem.config, session, adapter, translated_filesystem)


@pytest.fixture
def facade(binder: Gettext) -> WebGettext:
    return WebGettext(binder)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_project_config(root: Path, **overrides: Any) -> Path:
    """Write a ``webgettext.toml`` for the fixture project and return its path."""
    config = {**TEST_CONFIG, **overrides}
    lines = ["[gettext]"]
    for key, value in config.items():
        if key == "domains":
            continue
        lines.append(f"{key} = {_toml_value(value)}")
    lines.append("")
    lines.append("[gettext.domains]")
    for name, paths in config["domains"].items():
        lines.append(f"{name} = {_toml_value(paths)}")
    path = root / "webgettext.toml"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def _toml_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "[" + ", ".join(_toml_value(item) for item in value) + "]"
    return f'"{value}"'


# ---------------------------------------------------------------------------
# CLI fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run commands from inside the fixture project with its webgettext.toml."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    write_project_config(project_root)
    monkeypatch.chdir(project_root)
    return project_root
