"""GNU Make exporter."""

from __future__ import annotations

import shlex

from .base import ProjectExporter


class MakefileExporter(ProjectExporter):
    """Writes a ``Makefile`` into the target folder."""

    type_name = "makefile"
    default_name = "Linux Makefile"
    TEMPLATE = "exporters/Makefile.j2"

    @property
    def target_file(self) -> str:
        if self.target_kind == "static_library":
            return f"lib{self.target_name}.a"
        return self.target_name

    def create(self) -> None:
        objects = [
            {"object": f"{path.stem}_{index}.o", "source": self.relative_path(path)}
            for index, path in enumerate(self.compile_files())
        ]
        cppflags = [shlex.quote(f"-D{define}") for define in self.defines]
        cppflags += [shlex.quote(f"-I{self.relative_path(path)}") for path in self.extra_search_paths]
        ldflags = [shlex.quote(f"-l{library}") for library in self.libraries]

        content = self.renderer.render(
            self.TEMPLATE,
            {
                "tool_name": self.tool_name,
                "target_file": self.target_file,
                "target_kind": self.target_kind,
                "cppflags": " ".join(cppflags),
                "ldflags": " ".join(ldflags),
                "objects": objects,
            },
        )
        self.write_file("Makefile", content)
