"""Runs every requested exporter with an isolated manifest.

Each exporter gets a fresh deep copy of the canonical generated-files
manifest, so additions made while preparing one toolchain never show up in
the canonical tree or in another toolchain's output.  A failing exporter is
recorded in the save's error list and the remaining exporters still run.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Optional

from .. import errors
from ..context import SaveContext
from ..errors import SaveError
from ..generators.templates import TemplateRenderer
from ..models import Project
from ..modules import Module
from ..project_types import ProjectType
from ..utils import console
from .base import ProjectExporter
from .cmake import CMakeExporter
from .makefile import MakefileExporter

EXPORTER_TYPES: dict[str, type[ProjectExporter]] = {
    cls.type_name: cls for cls in (MakefileExporter, CMakeExporter)
}

ExporterFactory = Callable[[Project, int], ProjectExporter]


def create_exporter(
    project: Project,
    index: int,
    renderer: Optional[TemplateRenderer] = None,
    tool_name: str = "projsync",
) -> ProjectExporter:
    """Instantiate the exporter for ``project.exporters[index]``."""
    settings = project.exporters[index]
    exporter_cls = EXPORTER_TYPES.get(settings.type)
    if exporter_cls is None:
        raise ValueError(f"Unknown exporter type: {settings.type!r}")
    return exporter_cls(project, settings, renderer=renderer, tool_name=tool_name)


class ExporterRunner:
    """Drives the exporter stage of a save."""

    def __init__(
        self,
        context: SaveContext,
        project_type: ProjectType,
        exporter_factory: Optional[ExporterFactory] = None,
    ) -> None:
        self.context = context
        self.project_type = project_type
        self.exporter_factory = exporter_factory or create_exporter

    def run(self, modules: Sequence[Module]) -> None:
        """Create every exporter listed by the project, in list order."""
        project = self.context.project
        for index in range(len(project.exporters)):
            exporter = self.exporter_factory(project, index)
            console.print(f"Writing files for: {exporter.name}")
            self.run_exporter(exporter, modules)

    def run_exporter(self, exporter: ProjectExporter, modules: Sequence[Module]) -> None:
        try:
            exporter.target_folder.mkdir(parents=True, exist_ok=True)
        except OSError:
            self.context.add_error(errors.target_folder_unwritable(exporter.target_folder))
            return

        exporter.add_to_extra_search_paths(self.context.generated_code_folder)

        working_group = self.context.generated_group.snapshot()
        exporter.install_generated_group(working_group)
        exporter.prepare(self.project_type, modules, self.context)

        working_group.sort_recursively()
        exporter.add_group(working_group)

        try:
            exporter.create()
        except SaveError as error:
            self.context.add_error(error.message)
