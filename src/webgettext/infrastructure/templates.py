"""Shared Jinja2 environments: packaged templates and view extraction."""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    select_autoescape,
)

# Suffixes treated as view templates when compiling a view directory.
TEMPLATE_SUFFIXES = frozenset({".html", ".htm", ".jinja", ".jinja2", ".j2", ".txt", ".xml"})


def build_template_environment(group: str, *, project_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with project overrides before packaged defaults.

    Overrides are loaded from ``.webgettext/templates/`` inside the project.
    Both a namespaced directory (for example ``.webgettext/templates/selector/``)
    and the shared root are searched.
    """

    loaders: list[BaseLoader] = []
    if project_root is not None:
        template_root = project_root / ".webgettext" / "templates"
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("webgettext", f"templates/{group}"))
    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(default_for_string=True, default=True),
        keep_trailing_newline=True,
    )


def build_extraction_environment() -> Environment:
    """Environment that understands ``{% trans %}`` and the gettext calls."""
    return Environment(extensions=["jinja2.ext.i18n"], keep_trailing_newline=True)


def find_templates(view_dir: Path) -> list[Path]:
    """Return every view template below *view_dir*, sorted."""
    return sorted(
        path
        for path in view_dir.rglob("*")
        if path.is_file() and path.suffix in TEMPLATE_SUFFIXES
    )


def render_extractable(env: Environment, source: str, name: str) -> str:
    """Rewrite a template as Python calls a message extractor understands.

    Each translatable string becomes one ``gettext(...)``-style call
    annotated with the template line it came from. Non-literal arguments
    (plural counts, variables) are emitted as ``None``.

    Raises:
        jinja2.TemplateSyntaxError: If *source* does not parse.
    """
    lines = [f"# Extracted from {name}. Regenerated on every compile."]
    for lineno, funcname, message in env.extract_translations(source):
        args = message if isinstance(message, tuple) else (message,)
        rendered = ", ".join(repr(arg) for arg in args)
        lines.append(f"{funcname}({rendered})  # {name}:{lineno}")
    return "\n".join(lines) + "\n"
