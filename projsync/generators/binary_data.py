"""Embedding of resource files as C++ source.

Turns the project's resource files into a ``BinaryData.cpp`` / ``BinaryData.h``
pair: every resource becomes a byte array plus a ``<name>Size`` constant
inside a namespace named after the class name.
"""

from __future__ import annotations

from pathlib import Path

from ..models import Project
from ..utils import c_identifier

_BANNER = [
    "/* " + "=" * 88,
    "",
    "   This is an auto-generated file: Any edits you make may be overwritten!",
    "",
    "*/",
    "",
]

# Array values per source line.
_BYTES_PER_LINE = 40


class ResourceFile:
    """The set of resource files a project embeds."""

    def __init__(self, project: Project, class_name: str = "BinaryData") -> None:
        self.project = project
        self.class_name = class_name
        self.files: list[Path] = [project.resolve(path) for path in project.resources]

    def num_files(self) -> int:
        return len(self.files)

    def variable_names(self) -> list[str]:
        """A unique C identifier per resource, derived from its file name."""
        names: list[str] = []
        seen: set[str] = set()
        for path in self.files:
            base = c_identifier(path.name)
            name = base
            suffix = 2
            while name in seen:
                name = f"{base}{suffix}"
                suffix += 1
            seen.add(name)
            names.append(name)
        return names

    def generate(self, header_filename: str) -> tuple[str, str]:
        """Return ``(cpp_text, header_text)``.

        Raises:
            OSError: If a resource file cannot be read.
        """
        contents = [path.read_bytes() for path in self.files]
        names = self.variable_names()
        return (
            self._build_cpp(header_filename, names, contents),
            self._build_header(names, contents),
        )

    # -- Builders ----------------------------------------------------------

    def _header_guard(self) -> str:
        return f"{self.class_name.upper()}_H_{c_identifier(self.project.project_uid).upper()}_INCLUDED"

    def _build_header(self, names: list[str], contents: list[bytes]) -> str:
        guard = self._header_guard()
        lines = list(_BANNER)
        lines += [f"#ifndef {guard}", f"#define {guard}", "", f"namespace {self.class_name}", "{"]
        for name, data in zip(names, contents):
            lines.append(f"    extern const char*   {name};")
            lines.append(f"    const int            {name}Size = {len(data)};")
            lines.append("")
        lines += ["}", "", f"#endif  // {guard}"]
        return "\n".join(lines) + "\n"

    def _build_cpp(self, header_filename: str, names: list[str], contents: list[bytes]) -> str:
        lines = list(_BANNER)
        lines += [f'#include "{header_filename}"', "", f"namespace {self.class_name}", "{", ""]
        for index, (path, name, data) in enumerate(zip(self.files, names, contents)):
            array_name = f"temp_binary_data_{index}"
            lines.append(f"//================== {path.name} ==================")
            lines.append(f"static const unsigned char {array_name}[] =")
            lines += _byte_array_lines(data)
            lines.append("")
            lines.append(f"const char* {name} = (const char*) {array_name};")
            lines.append("")
        lines.append("}")
        return "\n".join(lines) + "\n"


def _byte_array_lines(data: bytes) -> list[str]:
    """Format *data* as a brace-enclosed, zero-terminated initialiser."""
    values = [str(byte) for byte in data] + ["0"]
    rows = [
        ",".join(values[start:start + _BYTES_PER_LINE])
        for start in range(0, len(values), _BYTES_PER_LINE)
    ]
    return ["{ " + ",\n  ".join(rows) + " };"]
