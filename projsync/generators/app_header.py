"""Aggregate ("umbrella") header generation.

Renders ``JuceHeader.h``, the single header user code includes: it pulls in
the configuration header, every module's own headers, the binary-data
header, and exposes the project's name and version as constants.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Optional

from ..models import Project
from ..utils import create_include_statement
from .banner import autogen_warning_comment
from .templates import TemplateRenderer

if TYPE_CHECKING:
    from ..modules import Module


class AppHeaderGenerator:
    """Generates the project's aggregate header."""

    GUARD_PREFIX = "__APPHEADERFILE_"
    GUARD_SUFFIX = "__"
    TEMPLATE = "JuceHeader.h.j2"

    def __init__(self, renderer: Optional[TemplateRenderer] = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def header_guard(self, project: Project) -> str:
        return f"{self.GUARD_PREFIX}{project.project_uid.upper()}{self.GUARD_SUFFIX}"

    def generate(
        self,
        project: Project,
        modules: Sequence["Module"],
        has_app_config: bool,
        binary_data_header: Optional[str] = None,
    ) -> str:
        """Return the full header text.

        Args:
            project: Supplies name, version and unique id.
            modules: Modules in display order.  Each one contributes its own
                include text, inserted verbatim.
            has_app_config: Whether the configuration header exists.
            binary_data_header: File name of the binary-data header, or
                ``None`` if no resources were embedded.
        """
        context = {
            "autogen_warning": autogen_warning_comment(),
            "header_guard": self.header_guard(project),
            "app_config_include": (
                create_include_statement(project.app_config_filename) if has_app_config else None
            ),
            "module_includes": [module.write_includes(project) for module in modules],
            "binary_data_include": (
                create_include_statement(binary_data_header) if binary_data_header else None
            ),
            "project_name": project.name,
            "version_string": project.version,
            "version_number": project.version_as_hex(),
        }
        return self.renderer.render(self.TEMPLATE, context)
