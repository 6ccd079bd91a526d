"""Tests for FileSystem: path resolution, scaffolding, catalogs, views."""

from __future__ import annotations

from pathlib import Path

import polib
import pytest

from webgettext.domain.errors import LocaleFileNotFoundError
from webgettext.infrastructure.filesystem import FileSystem


class TestPaths:
    def test_domain_path(self, filesystem: FileSystem, project_root: Path) -> None:
        assert filesystem.get_domain_path() == project_root.resolve() / "lang" / "i18n"
        assert filesystem.get_domain_path("es_AR").name == "es_AR"

    def test_catalog_dir(self, filesystem: FileSystem) -> None:
        locale_path = filesystem.get_domain_path("es_AR")
        assert filesystem.get_catalog_dir(locale_path) == locale_path / "LC_MESSAGES"

    def test_catalog_dir_custom_locale(self, filesystem: FileSystem) -> None:
        config = filesystem.config.with_overrides(custom_locale=True)
        fs = FileSystem(config, filesystem.base_path, filesystem.storage_path)
        locale_path = fs.get_domain_path("es_AR")
        assert fs.get_catalog_dir(locale_path) == locale_path / "C" / "LC_MESSAGES"

    def test_relative_path_of_directory(self, filesystem: FileSystem, tmp_path: Path) -> None:
        (tmp_path / "unit").mkdir()
        assert filesystem.get_relative_path(tmp_path / "unit", tmp_path) == "unit/"

    def test_relative_path_of_file(self, filesystem: FileSystem, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("")
        assert filesystem.get_relative_path(tmp_path / "a.txt", tmp_path) == "a.txt"

    def test_relative_path_upwards(self, filesystem: FileSystem, tmp_path: Path) -> None:
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert filesystem.get_relative_path(tmp_path, nested) == "../../"


class TestDirectories:
    def test_create_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "x" / "y"
        assert FileSystem.create_directory(target) is True
        assert target.is_dir()

    def test_clear_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "tree"
        (target / "nested").mkdir(parents=True)
        (target / "nested" / "file.txt").write_text("data")
        assert FileSystem.clear_directory(target) is True
        assert not target.exists()

    def test_clear_missing_directory(self, tmp_path: Path) -> None:
        assert FileSystem.clear_directory(tmp_path / "missing") is False

    def test_structure_missing(self, filesystem: FileSystem) -> None:
        assert filesystem.check_directory_structure() is False
        assert filesystem.check_directory_structure(check_locales=True) is False


class TestGenerateLocales:
    def test_generates_every_supported_locale(self, filesystem: FileSystem) -> None:
        generated = filesystem.generate_locales()
        assert [path.name for path in generated] == ["en_US", "es_AR", "it_IT"]
        for path in generated:
            assert path.is_dir()
            assert "i18n" in str(path)
        assert filesystem.check_directory_structure(check_locales=True) is True

    def test_seeds_one_catalog_per_domain(self, filesystem: FileSystem) -> None:
        filesystem.generate_locales()
        catalog_dir = filesystem.get_catalog_dir(filesystem.get_domain_path("it_IT"))
        names = sorted(path.name for path in catalog_dir.iterdir())
        assert names == ["backend.po", "frontend.po", "messages.po"]

    def test_second_run_generates_nothing(self, filesystem: FileSystem) -> None:
        filesystem.generate_locales()
        assert filesystem.generate_locales() == []

    def test_only_missing_locales(self, filesystem: FileSystem) -> None:
        filesystem.generate_locales()
        FileSystem.clear_directory(filesystem.get_domain_path("it_IT"))
        assert [path.name for path in filesystem.generate_locales()] == ["it_IT"]


class TestPoHeader:
    @pytest.fixture
    def backend_po(self, filesystem: FileSystem) -> polib.POFile:
        filesystem.generate_locales()
        catalog_dir = filesystem.get_catalog_dir(filesystem.get_domain_path("es_AR"))
        return polib.pofile(str(catalog_dir / "backend.po"))

    def test_identity(self, backend_po: polib.POFile) -> None:
        meta = backend_po.metadata
        assert meta["Project-Id-Version"] == "TestProject"
        assert meta["Language"] == "es_AR"
        assert meta["Content-Type"] == "text/plain; charset=UTF-8"
        assert meta["Plural-Forms"] == "nplurals=2; plural=(n != 1);"
        assert meta["X-Generator"].startswith("webgettext ")

    def test_poedit_headers(self, backend_po: polib.POFile) -> None:
        meta = backend_po.metadata
        assert meta["X-Poedit-Basepath"] == "../../../../"
        assert meta["X-Poedit-SourceCharset"] == "UTF-8"
        assert meta["X-Poedit-KeywordsList"].split(";")[:2] == ["_", "gettext"]
        assert meta["X-Poedit-SearchPath-0"] == "views/backend"
        assert meta["X-Poedit-SearchPath-1"] == "storage/backend"
        assert "X-Poedit-SearchPath-2" not in meta

    def test_relative_path_override(self, filesystem: FileSystem) -> None:
        config = filesystem.config.with_overrides(relative_path="../../app")
        fs = FileSystem(config, filesystem.base_path, filesystem.storage_path)
        po = fs.create_po_file(Path("unused.po"), "es_AR", "messages", write=False)
        assert po.metadata["X-Poedit-Basepath"] == "../../app"
        assert po.metadata["X-Poedit-SearchPath-0"] == "views/messages"
        assert po.metadata["X-Poedit-SearchPath-1"] == "views/misc"

    def test_create_without_write(self, filesystem: FileSystem, tmp_path: Path) -> None:
        target = tmp_path / "never.po"
        filesystem.create_po_file(target, "en_US", "messages", write=False)
        assert not target.exists()


class TestUpdateLocale:
    def test_compiles_mo(self, filesystem: FileSystem) -> None:
        filesystem.generate_locales()
        locale_path = filesystem.get_domain_path("es_AR")
        assert filesystem.update_locale(locale_path, "es_AR", "backend") is True
        assert (filesystem.get_catalog_dir(locale_path) / "backend.mo").is_file()

    def test_keeps_entries_and_creation_date(self, filesystem: FileSystem) -> None:
        filesystem.generate_locales()
        locale_path = filesystem.get_domain_path("es_AR")
        po_path = filesystem.get_catalog_dir(locale_path) / "messages.po"
        po = polib.pofile(str(po_path))
        po.metadata["POT-Creation-Date"] = "2020-01-01 00:00+0000"
        po.metadata["Language"] = "stale"
        po.append(polib.POEntry(msgid="Hello", msgstr="Hola"))
        po.save(str(po_path))

        filesystem.update_locale(locale_path, "es_AR", "messages")

        updated = polib.pofile(str(po_path))
        assert updated.metadata["POT-Creation-Date"] == "2020-01-01 00:00+0000"
        assert updated.metadata["Language"] == "es_AR"
        assert updated.find("Hello").msgstr == "Hola"

    def test_missing_catalog(self, filesystem: FileSystem) -> None:
        locale_path = filesystem.get_domain_path("es_AR")
        with pytest.raises(LocaleFileNotFoundError, match="verify your locale structure"):
            filesystem.update_locale(locale_path, "es_AR", "messages")


class TestCompileViews:
    def test_writes_extractable_sources(self, filesystem: FileSystem) -> None:
        assert filesystem.compile_views(["views/frontend", "views/misc"], "frontend") is True
        output = filesystem.storage_path / "frontend" / "views" / "frontend" / "home.html.py"
        text = output.read_text(encoding="utf-8")
        assert "_('Frontend string with php echo')  # views/frontend/home.html:1" in text
        assert "ngettext('%(num)d apple', '%(num)d apples', None)" in text

        footer = filesystem.storage_path / "frontend" / "views" / "misc" / "footer.html.py"
        assert "gettext('Footer text')" in footer.read_text(encoding="utf-8")

    def test_missing_directory_is_skipped(self, filesystem: FileSystem) -> None:
        assert filesystem.compile_views(["does/not/exist"], "messages") is True
        assert not (filesystem.storage_path / "messages").exists()

    def test_syntax_error_fails(self, filesystem: FileSystem, project_root: Path) -> None:
        broken = project_root / "views" / "broken"
        broken.mkdir()
        (broken / "bad.html").write_text("{% trans %}unterminated", encoding="utf-8")
        assert filesystem.compile_views(["views/broken"], "messages") is False
