"""Library modules and the module catalog.

A module contributes three things to a save: the config flags it declares
(rendered into the configuration header), the include statements for its
public headers (rendered into the aggregate header), and per-exporter
preparation (search paths, source files, link libraries).

The catalog is a folder of module folders, each described by a
``module_info.json`` file.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, Field, ValidationError

from .models import ConfigFlag, Project
from .utils import create_include_statement, print_warning

if TYPE_CHECKING:
    from .context import SaveContext
    from .exporters.base import ProjectExporter


# ---------------------------------------------------------------------------
# Catalog models
# ---------------------------------------------------------------------------

class ConfigFlagInfo(BaseModel):
    """A flag declaration in ``module_info.json``."""
    symbol: str = Field(..., description="Macro name")
    description: str = Field(default="", description="What the flag controls")


class ModuleInfo(BaseModel):
    """Contents of a ``module_info.json`` file."""
    id: str = Field(..., description="Module id, e.g. 'juce_core'")
    name: str = Field(default="", description="Human-readable module name")
    version: str = Field(default="")
    description: str = Field(default="")
    include: list[str] = Field(
        default_factory=list,
        description="Public headers, relative to the module folder; defaults to '<id>.h'",
    )
    config_flags: list[ConfigFlagInfo] = Field(default_factory=list)
    compile: list[str] = Field(
        default_factory=list, description="Source files to compile, relative to the module folder"
    )
    libraries: list[str] = Field(default_factory=list, description="Libraries to link against")
    app_config_content: str = Field(
        default="", description="Raw text the module adds to the configuration header"
    )


# ---------------------------------------------------------------------------
# Module interface
# ---------------------------------------------------------------------------

class Module(ABC):
    """A module a project requires."""

    @property
    @abstractmethod
    def id(self) -> str:
        ...

    @abstractmethod
    def get_config_flags(self, project: Project) -> list[ConfigFlag]:
        """Flags this module declares, resolved against *project*, in display order."""

    @abstractmethod
    def write_includes(self, project: Project) -> str:
        """Include directives for the aggregate header, newline-terminated."""

    @abstractmethod
    def prepare_exporter(self, exporter: "ProjectExporter", context: "SaveContext") -> None:
        """Contribute module-specific settings to *exporter* before it runs."""


class LibraryModule(Module):
    """A module backed by a folder in the module catalog."""

    def __init__(self, info: ModuleInfo, folder: Path) -> None:
        self.info = info
        self.folder = folder

    def __repr__(self) -> str:
        return f"LibraryModule({self.info.id!r})"

    @property
    def id(self) -> str:
        return self.info.id

    def header_paths(self) -> list[Path]:
        headers = self.info.include or [f"{self.info.id}.h"]
        return [self.folder / header for header in headers]

    def get_config_flags(self, project: Project) -> list[ConfigFlag]:
        return [
            ConfigFlag(
                symbol=flag.symbol,
                description=flag.description,
                value=project.get_config_flag(flag.symbol),
            )
            for flag in self.info.config_flags
        ]

    def write_includes(self, project: Project) -> str:
        return "".join(
            create_include_statement(header, project.generated_code_path) + "\n"
            for header in self.header_paths()
        )

    def prepare_exporter(self, exporter: "ProjectExporter", context: "SaveContext") -> None:
        exporter.add_to_extra_search_paths(self.folder.parent)

        if self.info.compile:
            group = exporter.generated_group.add_group(self.id)
            for source in self.info.compile:
                group.add_file(self.folder / source, compile=True)

        for library in self.info.libraries:
            exporter.add_library(library)

        content = self.info.app_config_content.strip()
        if content and content not in context.app_config_blocks:
            context.app_config_blocks.add(content)
            if context.extra_app_config_content:
                context.extra_app_config_content += "\n"
            context.extra_app_config_content += content + "\n"


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class ModuleList:
    """All modules found in a catalog folder."""

    INFO_FILENAME = "module_info.json"

    def __init__(self) -> None:
        self.modules: list[LibraryModule] = []

    def rescan(self, folder: str | Path) -> None:
        """Reload the catalog from ``<folder>/*/module_info.json``.

        Unreadable or invalid descriptions are reported and skipped.
        """
        self.modules = []
        root = Path(folder)
        if not root.is_dir():
            return

        for info_path in sorted(root.glob(f"*/{self.INFO_FILENAME}")):
            try:
                info = ModuleInfo.model_validate_json(info_path.read_text(encoding="utf-8"))
            except (OSError, ValidationError) as exc:
                print_warning(f"Skipping module description {info_path}: {exc}")
                continue
            self.modules.append(LibraryModule(info, info_path.parent.resolve()))

    def ids(self) -> list[str]:
        return [module.id for module in self.modules]

    def find(self, module_id: str) -> Optional[LibraryModule]:
        for module in self.modules:
            if module.id == module_id:
                return module
        return None

    def create_required_modules(self, project: Project) -> list[Module]:
        """Modules the project requires, in the project's order.

        Ids missing from the catalog are reported and left out.
        """
        required: list[Module] = []
        for module_id in project.modules:
            module = self.find(module_id)
            if module is None:
                print_warning(f"Module '{module_id}' is not in the module catalog")
                continue
            required.append(module)
        return required
