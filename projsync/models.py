"""Pydantic v2 models for the project description.

Defines the project document that the save pipeline reads: identity and
version, the ordered list of required modules, configuration-flag overrides,
exporter targets, embedded resources and source files.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FlagState(str, Enum):
    """Tri-state value of a configuration flag."""
    ENABLED = "enabled"
    DISABLED = "disabled"
    DEFAULT = "default"


ExporterType = Literal["makefile", "cmake"]
ProjectTypeName = Literal["guiapp", "consoleapp", "library"]


# ---------------------------------------------------------------------------
# Config flags
# ---------------------------------------------------------------------------

class ConfigFlag(BaseModel):
    """A configuration flag declared by a module, resolved against a project."""
    symbol: str = Field(..., description="Macro name, emitted verbatim")
    description: str = Field(default="", description="What the flag controls")
    value: FlagState = Field(default=FlagState.DEFAULT, description="Resolved tri-state value")


# ---------------------------------------------------------------------------
# Exporter targets
# ---------------------------------------------------------------------------

class ExporterSettings(BaseModel):
    """One requested toolchain target."""
    type: ExporterType = Field(..., description="Registered exporter type")
    name: str = Field(default="", description="Display name; defaults to the type's own name")
    target_folder: str = Field(
        ..., description="Output folder, relative to the project folder"
    )
    extra_defines: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Project
# ---------------------------------------------------------------------------

class Project(BaseModel):
    """The root project description.

    ``file`` is the on-disk location of the project document.  It is not
    part of the serialised form; the save pipeline repoints it at the new
    location and restores it if the save fails.
    """

    name: str = Field(..., description="Project name")
    version: str = Field(default="1.0.0", description="Dotted version string")
    project_uid: str = Field(..., description="Unique id used in header guards")
    project_type: ProjectTypeName = Field(default="guiapp")
    modules: list[str] = Field(
        default_factory=list, description="Required module ids, in display order"
    )
    config_flags: dict[str, FlagState] = Field(
        default_factory=dict, description="Project-level flag overrides by symbol"
    )
    exporters: list[ExporterSettings] = Field(default_factory=list)
    resources: list[str] = Field(
        default_factory=list, description="Files embedded as binary data, relative to the project folder"
    )
    sources: list[str] = Field(
        default_factory=list, description="Project source files, relative to the project folder"
    )
    app_config_filename: str = Field(default="AppConfig.h")
    juce_header_filename: str = Field(default="JuceHeader.h")
    generated_code_folder: str = Field(default="JuceLibraryCode")

    file: Optional[Path] = Field(default=None, exclude=True)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def project_folder(self) -> Path:
        """Folder containing the project document."""
        if self.file is None:
            raise ValueError(f"Project '{self.name}' has no file location")
        return self.file.parent

    @property
    def generated_code_path(self) -> Path:
        return self.project_folder / self.generated_code_folder

    def resolve(self, relative_path: str) -> Path:
        """Resolve a project-relative path to an absolute one."""
        return (self.project_folder / relative_path).resolve()

    def get_config_flag(self, symbol: str) -> FlagState:
        """Return the project's override for *symbol*, or ``DEFAULT``."""
        return self.config_flags.get(symbol, FlagState.DEFAULT)

    def set_config_flag(self, symbol: str, value: FlagState) -> None:
        if value == FlagState.DEFAULT:
            self.config_flags.pop(symbol, None)
        else:
            self.config_flags[symbol] = value

    def version_as_hex(self) -> str:
        """Encode the version as ``0x`` + hex of ``(major<<16)+(minor<<8)+patch``.

        A fourth segment shifts the value left by another byte.
        """
        segments = [_leading_int(s) for s in self.version.split(".")]
        segments += [0] * (3 - len(segments))
        value = (segments[0] << 16) + (segments[1] << 8) + segments[2]
        if len(segments) >= 4:
            value = (value << 8) + segments[3]
        return f"0x{value:x}"

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_json_bytes(self) -> bytes:
        """Canonical serialised form written by the save pipeline."""
        return (self.model_dump_json(indent=2) + "\n").encode("utf-8")

    @classmethod
    def load(cls, path: str | Path) -> "Project":
        """Load a project document and point ``file`` at it."""
        file_path = Path(path).resolve()
        project = cls.model_validate_json(file_path.read_text(encoding="utf-8"))
        project.file = file_path
        return project


def _leading_int(segment: str) -> int:
    digits = ""
    for char in segment.strip():
        if not char.isdigit():
            break
        digits += char
    return int(digits) if digits else 0
