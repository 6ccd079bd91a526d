"""Tests for the shared Jinja2 environments."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import TemplateSyntaxError

from webgettext.infrastructure.templates import (
    build_extraction_environment,
    build_template_environment,
    find_templates,
    render_extractable,
)


class TestTemplateEnvironment:
    def test_packaged_template(self) -> None:
        env = build_template_environment("selector")
        html = env.get_template("language_selector.html").render(
            locales=[{"code": "en_US", "label": "en_US"}], current="en_US"
        )
        assert '<strong class="active en_US">en_US</strong>' in html

    def test_project_override_wins(self, tmp_path: Path) -> None:
        override = tmp_path / ".webgettext" / "templates" / "selector"
        override.mkdir(parents=True)
        (override / "language_selector.html").write_text("custom", encoding="utf-8")
        env = build_template_environment("selector", project_root=tmp_path)
        assert env.get_template("language_selector.html").render() == "custom"

    def test_autoescape(self) -> None:
        env = build_template_environment("selector")
        assert env.from_string("{{ v }}").render(v="<b>") == "&lt;b&gt;"


class TestFindTemplates:
    def test_filters_and_sorts(self, tmp_path: Path) -> None:
        (tmp_path / "sub").mkdir()
        (tmp_path / "b.html").write_text("")
        (tmp_path / "sub" / "a.j2").write_text("")
        (tmp_path / "notes.md").write_text("")
        found = [path.relative_to(tmp_path).as_posix() for path in find_templates(tmp_path)]
        assert found == ["b.html", "sub/a.j2"]


class TestRenderExtractable:
    def test_annotates_calls(self) -> None:
        env = build_extraction_environment()
        source = '<p>{{ _("Hi") }}</p>\n{{ pgettext("menu", "File") }}\n'
        output = render_extractable(env, source, "views/x.html")
        lines = output.splitlines()
        assert lines[0] == "# Extracted from views/x.html. Regenerated on every compile."
        assert lines[1] == "_('Hi')  # views/x.html:1"
        assert lines[2] == "pgettext('menu', 'File')  # views/x.html:2"

    def test_template_without_messages(self) -> None:
        env = build_extraction_environment()
        assert render_extractable(env, "<p>plain</p>", "a.html").count("\n") == 1

    def test_syntax_error(self) -> None:
        env = build_extraction_environment()
        with pytest.raises(TemplateSyntaxError):
            render_extractable(env, "{% if %}", "a.html")
