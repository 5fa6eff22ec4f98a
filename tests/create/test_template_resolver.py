"""Tests for resolve_template and the templates shipped with nezu."""

import pytest

from nezu.create.selection import ArchetypeSelection, Language, ProjectType
from nezu.create.template_resolver import PROJECT_TEMPLATES_DIR, resolve_template

LIBRARY_SELECTIONS = [
    ArchetypeSelection(ProjectType.LIBRARY, Language.JAVASCRIPT),
    ArchetypeSelection(ProjectType.LIBRARY, Language.TYPESCRIPT),
]


@pytest.mark.unit
class TestResolutionTable:

    def test_library_javascript(self, tmp_path):
        selection = ArchetypeSelection(ProjectType.LIBRARY, Language.JAVASCRIPT)
        assert resolve_template(selection, templates_dir=tmp_path) == tmp_path / "library" / "javascript"

    def test_library_typescript(self, tmp_path):
        selection = ArchetypeSelection(ProjectType.LIBRARY, Language.TYPESCRIPT)
        assert resolve_template(selection, templates_dir=tmp_path) == tmp_path / "library" / "typescript"

    @pytest.mark.parametrize("language", list(Language))
    def test_react_spa_is_unavailable(self, language):
        selection = ArchetypeSelection(ProjectType.REACT_SPA, language)
        assert resolve_template(selection) is None

    def test_resolution_does_not_depend_on_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = resolve_template(LIBRARY_SELECTIONS[0])
        assert path.is_absolute()
        assert PROJECT_TEMPLATES_DIR in path.parents


@pytest.mark.unit
class TestShippedTemplates:

    @pytest.mark.parametrize("selection", LIBRARY_SELECTIONS, ids=lambda s: s.language.value)
    def test_template_exists_on_disk(self, selection):
        assert resolve_template(selection).is_dir()

    @pytest.mark.parametrize("selection", LIBRARY_SELECTIONS, ids=lambda s: s.language.value)
    def test_template_ships_undotted_ignore_file(self, selection):
        template = resolve_template(selection)
        assert (template / "gitignore").is_file()
        assert not (template / ".gitignore").exists()

    @pytest.mark.parametrize("selection", LIBRARY_SELECTIONS, ids=lambda s: s.language.value)
    def test_template_has_package_json(self, selection):
        assert (resolve_template(selection) / "package.json").is_file()
