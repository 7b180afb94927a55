"""Shared pytest fixtures for the projsync test suite.

Provides reusable fixtures for:
- Temporary project folders and module catalogs
- Ready-made ``Project`` instances
- In-memory modules with configurable flags and include text
- Recording and failing exporters for exporter-stage tests
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from projsync.context import SaveContext
from projsync.errors import SaveError
from projsync.exporters.base import ProjectExporter
from projsync.manifest import ManifestGroup
from projsync.models import ConfigFlag, ExporterSettings, FlagState, Project
from projsync.modules import Module


# ---------------------------------------------------------------------------
# In-memory collaborators
# ---------------------------------------------------------------------------

class FakeModule(Module):
    """A module whose flags, include text and exporter preparation are scripted."""

    def __init__(
        self,
        module_id: str,
        flags: Optional[list[str]] = None,
        include_text: Optional[str] = None,
        prepare: Optional[Callable[[ProjectExporter, SaveContext], None]] = None,
    ) -> None:
        self._id = module_id
        self.flag_symbols = flags or []
        self.include_text = (
            include_text if include_text is not None else f'#include "{module_id}/{module_id}.h"\n'
        )
        self.prepare = prepare
        self.prepared: list[str] = []

    @property
    def id(self) -> str:
        return self._id

    def get_config_flags(self, project: Project) -> list[ConfigFlag]:
        return [
            ConfigFlag(symbol=symbol, value=project.get_config_flag(symbol))
            for symbol in self.flag_symbols
        ]

    def write_includes(self, project: Project) -> str:
        return self.include_text

    def prepare_exporter(self, exporter: ProjectExporter, context: SaveContext) -> None:
        self.prepared.append(exporter.name)
        if self.prepare is not None:
            self.prepare(exporter, context)


class RecordingExporter(ProjectExporter):
    """Captures the manifest it was given instead of writing a build file.

    Writes ``<target>/output.txt`` listing the manifest files so tests can
    check the produced tree.
    """

    type_name = "recording"
    default_name = "Recording"

    def __init__(self, *args: Any, fail: bool = False, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.fail = fail
        self.create_calls = 0
        self.seen_files: list[Path] = []

    def create(self) -> None:
        self.create_calls += 1
        self.seen_files = [item.path for group in self.groups for item in group.iter_files()]
        if self.fail:
            raise SaveError(f"{self.name} exploded")
        listing = "\n".join(sorted(path.name for path in self.seen_files)) + "\n"
        self.write_file("output.txt", listing)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Temporary folder holding a project document (auto-cleanup)."""
    folder = tmp_path / "MyApp"
    folder.mkdir()
    yield folder


@pytest.fixture
def project_file(project_dir: Path) -> Path:
    return project_dir / "MyApp.json"


def _write_module(root: Path, info: dict[str, Any], files: dict[str, str]) -> Path:
    folder = root / info["id"]
    folder.mkdir(parents=True)
    (folder / "module_info.json").write_text(json.dumps(info, indent=2), encoding="utf-8")
    for name, text in files.items():
        (folder / name).write_text(text, encoding="utf-8")
    return folder


@pytest.fixture
def module_catalog(project_dir: Path) -> Path:
    """A ``modules/`` catalog next to the project with three modules.

    * ``juce_core``    -- two flags, one source file, links ``pthread``
    * ``juce_events``  -- no flags
    * ``juce_gui``     -- one flag, two public headers
    """
    root = project_dir / "modules"
    _write_module(
        root,
        {
            "id": "juce_core",
            "name": "JUCE core classes",
            "config_flags": [
                {"symbol": "JUCE_FORCE_DEBUG", "description": "Force debug mode"},
                {"symbol": "JUCE_LOG_ASSERTIONS", "description": "Log assertions"},
            ],
            "compile": ["juce_core.cpp"],
            "libraries": ["pthread"],
        },
        {"juce_core.h": "// core\n", "juce_core.cpp": "// core impl\n"},
    )
    _write_module(
        root,
        {"id": "juce_events", "name": "JUCE events"},
        {"juce_events.h": "// events\n"},
    )
    _write_module(
        root,
        {
            "id": "juce_gui",
            "include": ["juce_gui.h", "juce_gui_extra.h"],
            "config_flags": [{"symbol": "JUCE_USE_XSHM"}],
        },
        {"juce_gui.h": "// gui\n", "juce_gui_extra.h": "// gui extra\n"},
    )
    yield root


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

@pytest.fixture
def make_project(project_file: Path) -> Callable[..., Project]:
    """Factory for projects located at ``project_file``."""

    def _make(**overrides: Any) -> Project:
        fields: dict[str, Any] = {
            "name": "My App",
            "version": "1.2.3",
            "project_uid": "Ab12Cd",
        }
        fields.update(overrides)
        project = Project(**fields)
        project.file = project_file
        return project

    return _make


@pytest.fixture
def project(make_project) -> Project:
    """A project requiring the three catalog modules, with one flag enabled."""
    return make_project(
        modules=["juce_core", "juce_events", "juce_gui"],
        config_flags={"JUCE_FORCE_DEBUG": FlagState.ENABLED},
    )


@pytest.fixture
def save_context(project: Project, project_dir: Path) -> SaveContext:
    return SaveContext(
        project=project,
        generated_code_folder=project_dir / "JuceLibraryCode",
        generated_group=ManifestGroup(name="Juce Library Code", id="__jucelibfiles"),
    )


# ---------------------------------------------------------------------------
# Exporters
# ---------------------------------------------------------------------------

@pytest.fixture
def make_module() -> Callable[..., FakeModule]:
    return FakeModule


@pytest.fixture
def recording_exporters() -> dict[str, Any]:
    """An exporter factory creating ``RecordingExporter`` instances.

    Targets whose name starts with ``fail`` raise ``SaveError`` from
    ``create()``.  Every instance created is kept in ``["created"]``.
    """
    created: list[RecordingExporter] = []

    def factory(project: Project, index: int) -> RecordingExporter:
        settings = project.exporters[index]
        exporter = RecordingExporter(project, settings, fail=settings.name.startswith("fail"))
        created.append(exporter)
        return exporter

    return {"factory": factory, "created": created}


@pytest.fixture
def make_targets() -> Callable[..., list[ExporterSettings]]:
    """Build ``ExporterSettings`` for names, each in ``Builds/<name>``."""

    def _make(*names: str, type: str = "makefile") -> list[ExporterSettings]:
        return [
            ExporterSettings(type=type, name=name, target_folder=f"Builds/{name}")
            for name in names
        ]

    return _make
