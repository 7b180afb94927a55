"""CMake exporter."""

from __future__ import annotations

from .base import ProjectExporter


class CMakeExporter(ProjectExporter):
    """Writes a ``CMakeLists.txt`` into the target folder."""

    type_name = "cmake"
    default_name = "CMake"
    TEMPLATE = "exporters/CMakeLists.txt.j2"

    def create(self) -> None:
        content = self.renderer.render(
            self.TEMPLATE,
            {
                "tool_name": self.tool_name,
                "target_name": self.target_name,
                "target_kind": self.target_kind,
                "sources": [self.relative_path(path) for path in self.compile_files()],
                "search_paths": [self.relative_path(path) for path in self.extra_search_paths],
                "defines": self.defines,
                "libraries": self.libraries,
            },
        )
        self.write_file("CMakeLists.txt", content)
