"""State threaded through the stages of a single save."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .manifest import ManifestGroup
from .models import Project


@dataclass
class SaveContext:
    """Everything one ``ProjectSaver.save()`` call accumulates.

    Stages receive the context explicitly instead of sharing ambient state:
    they append to ``errors``, register files into ``generated_group`` and
    record what they produced so later stages can refer to it.
    """

    project: Project
    generated_code_folder: Path
    generated_group: ManifestGroup
    extra_app_config_content: str = ""
    app_config_blocks: set[str] = field(default_factory=set)
    errors: list[str] = field(default_factory=list)
    app_config_file: Optional[Path] = None
    binary_data_cpp: Optional[Path] = None
    binary_data_header: Optional[Path] = None

    @property
    def ok(self) -> bool:
        """``True`` while no error has been recorded."""
        return not self.errors

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def first_error(self) -> str:
        return self.errors[0] if self.errors else ""
