"""Project types and their exporter preparation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .exporters.base import ProjectExporter


class ProjectType:
    """What kind of binary a project builds."""

    name = ""
    description = ""
    target_kind = "executable"
    defines: tuple[str, ...] = ()

    def prepare_exporter(self, exporter: "ProjectExporter") -> None:
        exporter.target_kind = self.target_kind
        for define in self.defines:
            exporter.add_define(define)


class GuiApp(ProjectType):
    name = "guiapp"
    description = "GUI Application"


class ConsoleApp(ProjectType):
    name = "consoleapp"
    description = "Console Application"
    defines = ("JUCE_STANDALONE_APPLICATION=1",)


class StaticLibrary(ProjectType):
    name = "library"
    description = "Static Library"
    target_kind = "static_library"


PROJECT_TYPES: dict[str, type[ProjectType]] = {
    cls.name: cls for cls in (GuiApp, ConsoleApp, StaticLibrary)
}


def get_project_type(name: str) -> ProjectType:
    """Instantiate the project type registered as *name*."""
    try:
        return PROJECT_TYPES[name]()
    except KeyError:
        raise ValueError(f"Unknown project type: {name!r}") from None
