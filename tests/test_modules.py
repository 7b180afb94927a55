"""Tests for library modules and the module catalog (projsync.modules)."""

from __future__ import annotations

from pathlib import Path

import pytest

from projsync.exporters.makefile import MakefileExporter
from projsync.manifest import ManifestGroup
from projsync.models import ExporterSettings, FlagState
from projsync.modules import LibraryModule, ModuleInfo, ModuleList

pytestmark = pytest.mark.unit


@pytest.fixture
def module_list(module_catalog: Path) -> ModuleList:
    modules = ModuleList()
    modules.rescan(module_catalog)
    return modules


class TestModuleList:
    def test_rescan_finds_modules_sorted(self, module_list: ModuleList):
        assert module_list.ids() == ["juce_core", "juce_events", "juce_gui"]

    def test_rescan_missing_folder(self, tmp_path: Path):
        modules = ModuleList()
        modules.rescan(tmp_path / "nowhere")
        assert modules.ids() == []

    def test_rescan_skips_invalid_description(self, module_catalog: Path, capsys):
        broken = module_catalog / "broken"
        broken.mkdir()
        (broken / "module_info.json").write_text('{"name": "no id"}', encoding="utf-8")

        modules = ModuleList()
        modules.rescan(module_catalog)

        assert "broken" not in modules.ids()
        assert len(modules.ids()) == 3
        assert "Skipping module description" in capsys.readouterr().out

    def test_find(self, module_list: ModuleList):
        assert module_list.find("juce_events").id == "juce_events"
        assert module_list.find("juce_audio") is None

    def test_create_required_modules_keeps_project_order(self, module_list: ModuleList, make_project):
        project = make_project(modules=["juce_gui", "juce_core"])
        assert [m.id for m in module_list.create_required_modules(project)] == ["juce_gui", "juce_core"]

    def test_create_required_modules_skips_unknown(self, module_list: ModuleList, make_project, capsys):
        project = make_project(modules=["juce_core", "juce_missing"])
        required = module_list.create_required_modules(project)

        assert [m.id for m in required] == ["juce_core"]
        assert "juce_missing" in capsys.readouterr().out


class TestLibraryModule:
    def test_config_flags_resolved_in_declared_order(self, module_list: ModuleList, project):
        flags = module_list.find("juce_core").get_config_flags(project)
        assert [(f.symbol, f.value) for f in flags] == [
            ("JUCE_FORCE_DEBUG", FlagState.ENABLED),
            ("JUCE_LOG_ASSERTIONS", FlagState.DEFAULT),
        ]
        assert flags[0].description == "Force debug mode"

    def test_module_without_flags(self, module_list: ModuleList, project):
        assert module_list.find("juce_events").get_config_flags(project) == []

    def test_write_includes_default_header(self, module_list: ModuleList, project):
        text = module_list.find("juce_core").write_includes(project)
        assert text == '#include "../modules/juce_core/juce_core.h"\n'

    def test_write_includes_multiple_headers(self, module_list: ModuleList, project):
        text = module_list.find("juce_gui").write_includes(project)
        assert text == (
            '#include "../modules/juce_gui/juce_gui.h"\n'
            '#include "../modules/juce_gui/juce_gui_extra.h"\n'
        )

    def test_prepare_exporter(self, module_list: ModuleList, project, save_context, module_catalog: Path):
        exporter = MakefileExporter(
            project, ExporterSettings(type="makefile", target_folder="Builds/Linux")
        )
        exporter.install_generated_group(ManifestGroup(name="Juce Library Code"))

        module_list.find("juce_core").prepare_exporter(exporter, save_context)

        assert module_catalog.resolve() in exporter.extra_search_paths
        assert exporter.libraries == ["pthread"]
        core_group = exporter.generated_group.find_group("juce_core")
        assert [item.name for item in core_group.iter_files()] == ["juce_core.cpp"]

    def test_prepare_exporter_appends_config_content_once(self, project, save_context, tmp_path: Path):
        module = LibraryModule(
            ModuleInfo(id="juce_extra", app_config_content="#define JUCE_EXTRA_THING 1"),
            tmp_path / "juce_extra",
        )
        exporter = MakefileExporter(
            project, ExporterSettings(type="makefile", target_folder="Builds/Linux")
        )

        module.prepare_exporter(exporter, save_context)
        module.prepare_exporter(exporter, save_context)

        assert save_context.extra_app_config_content == "#define JUCE_EXTRA_THING 1\n"

    def test_prepare_exporter_keeps_content_contained_in_another_module(self, project, save_context, tmp_path: Path):
        longer = LibraryModule(
            ModuleInfo(id="juce_a", app_config_content="#define JUCE_FEATURE 1\n#define JUCE_FEATURE_EXTRA 1"),
            tmp_path / "juce_a",
        )
        shorter = LibraryModule(
            ModuleInfo(id="juce_b", app_config_content="#define JUCE_FEATURE 1"),
            tmp_path / "juce_b",
        )
        exporter = MakefileExporter(
            project, ExporterSettings(type="makefile", target_folder="Builds/Linux")
        )

        longer.prepare_exporter(exporter, save_context)
        shorter.prepare_exporter(exporter, save_context)

        assert save_context.extra_app_config_content == (
            "#define JUCE_FEATURE 1\n#define JUCE_FEATURE_EXTRA 1\n"
            "\n"
            "#define JUCE_FEATURE 1\n"
        )
