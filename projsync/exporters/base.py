"""Exporter protocol: one native build file per toolchain target.

An exporter is built per requested target.  Before ``create()`` runs, the
exporter runner gives it a private copy of the generated-files manifest and
lets the project type and every module prepare it; ``create()`` then renders
the toolchain's build file from that state.  Exporters report failure by
raising ``SaveError``.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Optional

from .. import errors
from ..errors import SaveError
from ..generators.templates import TemplateRenderer
from ..manifest import ManifestGroup
from ..models import ExporterSettings, Project
from ..writer import overwrite_file_if_different

if TYPE_CHECKING:
    from ..context import SaveContext
    from ..modules import Module
    from ..project_types import ProjectType

# Extensions a toolchain compiles; everything else in the manifest is a header
# or resource that is only referenced.
COMPILE_EXTENSIONS = frozenset({".c", ".cc", ".cpp", ".cxx", ".m", ".mm"})


class ProjectExporter(ABC):
    """Base class for toolchain exporters."""

    type_name: ClassVar[str] = ""
    default_name: ClassVar[str] = ""

    def __init__(
        self,
        project: Project,
        settings: ExporterSettings,
        renderer: Optional[TemplateRenderer] = None,
        tool_name: str = "projsync",
    ) -> None:
        self.project = project
        self.settings = settings
        self.renderer = renderer or TemplateRenderer()
        self.tool_name = tool_name
        self.target_kind = "executable"
        self.extra_search_paths: list[Path] = []
        self.defines: list[str] = list(settings.extra_defines)
        self.libraries: list[str] = []
        self.groups: list[ManifestGroup] = []
        self.generated_group = ManifestGroup(name="")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"

    # -- Identity ----------------------------------------------------------

    @property
    def name(self) -> str:
        return self.settings.name or self.default_name

    @property
    def target_folder(self) -> Path:
        return self.project.project_folder / self.settings.target_folder

    @property
    def target_name(self) -> str:
        return "".join(self.project.name.split()) or "Project"

    # -- Preparation -------------------------------------------------------

    def add_to_extra_search_paths(self, path: str | Path) -> None:
        resolved = Path(path).resolve()
        if resolved not in self.extra_search_paths:
            self.extra_search_paths.append(resolved)

    def add_define(self, define: str) -> None:
        if define not in self.defines:
            self.defines.append(define)

    def add_library(self, library: str) -> None:
        if library not in self.libraries:
            self.libraries.append(library)

    def install_generated_group(self, group: ManifestGroup) -> None:
        """Use *group* as this exporter's working generated-files manifest."""
        self.generated_group = group

    def prepare(
        self,
        project_type: "ProjectType",
        modules: Sequence["Module"],
        context: "SaveContext",
    ) -> None:
        """Let the project type, then each module, adjust this exporter."""
        project_type.prepare_exporter(self)
        for module in modules:
            module.prepare_exporter(self, context)

    def add_group(self, group: ManifestGroup) -> None:
        self.groups.append(group)

    # -- Helpers for create() ----------------------------------------------

    def relative_path(self, path: str | Path) -> str:
        """*path* relative to the target folder, with forward slashes."""
        return Path(os.path.relpath(Path(path), self.target_folder)).as_posix()

    def source_files(self) -> list[Path]:
        """Project sources followed by manifest files, duplicates dropped."""
        files: list[Path] = [self.project.resolve(source) for source in self.project.sources]
        for group in self.groups:
            for item in group.iter_files():
                if item.path not in files:
                    files.append(item.path)
        return files

    def compile_files(self) -> list[Path]:
        """Source files a toolchain should compile."""
        compiled: list[Path] = []
        flagged = {item.path for group in self.groups for item in group.iter_files() if not item.compile}
        for path in self.source_files():
            if path.suffix.lower() in COMPILE_EXTENSIONS and path not in flagged:
                compiled.append(path)
        return compiled

    def write_file(self, filename: str, content: str) -> Path:
        """Diff-and-write a file in the target folder.

        Raises:
            SaveError: If the file could not be written.
        """
        path = self.target_folder / filename
        if not overwrite_file_if_different(path, content.encode("utf-8")):
            raise SaveError(errors.file_unwritable(path))
        return path

    @abstractmethod
    def create(self) -> None:
        """Write this exporter's build files.

        Raises:
            SaveError: If any output could not be produced.
        """
