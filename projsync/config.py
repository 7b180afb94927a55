"""projsync configuration.

Centralised, typed configuration for the save pipeline.  All settings use
Pydantic v2 models so they can be validated at construction time and
serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

# Names that survive a clean-out of the generated-code folder: version-control
# metadata and build-system files that users keep next to generated code.
DEFAULT_KEEP_NAMES: list[str] = [".svn", ".cvs", ".git", ".hg", "CMakeLists.txt"]


class Config(BaseModel):
    """Global projsync configuration.

    Instances are typically created once by the CLI entry point (or by a
    caller embedding ``ProjectSaver``) and then passed through the rest of
    the system.
    """

    modules_dir: Optional[Path] = Field(
        default=None,
        description="Module catalog folder; defaults to <project folder>/modules",
    )
    keep_names: list[str] = Field(
        default_factory=lambda: list(DEFAULT_KEEP_NAMES),
        description="Entries never deleted from the generated-code folder",
    )
    readme_filename: str = Field(default="ReadMe.txt")
    binary_data_name: str = Field(
        default="BinaryData", description="Base name of the embedded-resource source/header pair"
    )
    generated_group_name: str = Field(default="Juce Library Code")
    generated_group_id: str = Field(default="__jucelibfiles")
    tool_name: str = Field(default="projsync", description="Name used in generated banners")
    extra_app_config_content: str = Field(
        default="", description="Raw text appended to the configuration header"
    )

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def modules_path(self, project_folder: Path) -> Path:
        """Folder scanned for ``module_info.json`` catalog entries."""
        if self.modules_dir is not None:
            return self.modules_dir
        return project_folder / "modules"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            PROJSYNC_MODULES_DIR, PROJSYNC_KEEP_NAMES (comma-separated),
            PROJSYNC_TOOL_NAME, PROJSYNC_EXTRA_APP_CONFIG (path to a file
            whose text is appended to the configuration header).
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("PROJSYNC_MODULES_DIR"):
            kwargs["modules_dir"] = Path(os.environ["PROJSYNC_MODULES_DIR"])
        if os.environ.get("PROJSYNC_KEEP_NAMES"):
            kwargs["keep_names"] = [
                name.strip()
                for name in os.environ["PROJSYNC_KEEP_NAMES"].split(",")
                if name.strip()
            ]
        if os.environ.get("PROJSYNC_TOOL_NAME"):
            kwargs["tool_name"] = os.environ["PROJSYNC_TOOL_NAME"]
        if os.environ.get("PROJSYNC_EXTRA_APP_CONFIG"):
            extra_path = Path(os.environ["PROJSYNC_EXTRA_APP_CONFIG"])
            kwargs["extra_app_config_content"] = extra_path.read_text(encoding="utf-8")

        return cls(**kwargs)
