"""Configuration header generation.

Builds the ``AppConfig.h`` text: one availability macro per module, then a
block of config-flag definitions for every module that declares flags.  The
output depends only on the project and the module list, so saving an
unchanged project reproduces the file byte for byte and the writer skips it.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..models import ConfigFlag, FlagState, Project
from .banner import AUTOGEN_WARNING_LINES, SECTION_SEPARATOR

if TYPE_CHECKING:
    from ..modules import Module


class AppConfigGenerator:
    """Generates the project's configuration header."""

    GUARD_PREFIX = "__JUCE_APPCONFIG_"
    GUARD_SUFFIX = "__"
    MODULE_AVAILABLE_PREFIX = "#define JUCE_MODULE_AVAILABLE_"
    # Gap between the longest module id and the value column.
    COLUMN_MARGIN = 5

    def __init__(self, tool_name: str = "projsync") -> None:
        self.tool_name = tool_name

    def header_guard(self, project: Project) -> str:
        return f"{self.GUARD_PREFIX}{project.project_uid.upper()}{self.GUARD_SUFFIX}"

    def generate(
        self,
        project: Project,
        modules: Sequence["Module"],
        extra_content: str = "",
    ) -> str:
        """Return the full header text.

        Args:
            project: Supplies the unique id.
            modules: Modules in display order; the order is kept as-is.
            extra_content: Raw text appended before the closing guard.
        """
        guard = self.header_guard(project)

        lines = list(AUTOGEN_WARNING_LINES)
        lines += [
            f"    If you want to change any of these values, use {self.tool_name} to do so,",
            "    rather than editing this file directly!",
            "",
            "    Any commented-out settings will assume their default values.",
            "",
            "*/",
            "",
            f"#ifndef {guard}",
            f"#define {guard}",
            "",
            SECTION_SEPARATOR,
        ]

        lines += _module_available_lines(modules, self.MODULE_AVAILABLE_PREFIX, self.COLUMN_MARGIN)
        lines.append("")

        blocks: list[list[str]] = []
        for module in modules:
            flags = module.get_config_flags(project)
            if flags:
                blocks.append(
                    _flag_block(module.id, [_flag_line(flag) for flag in flags])
                )

        for index, block in enumerate(blocks):
            if index > 0:
                lines.append("")
            lines += block

        extra = extra_content.rstrip()
        if extra:
            lines += ["", extra]

        lines += ["", f"#endif  // {guard}"]
        return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Line builders
# ---------------------------------------------------------------------------

def _module_available_lines(modules: Sequence["Module"], prefix: str, margin: int) -> list[str]:
    """One ``available`` macro per module, values aligned in one column."""
    longest = max((len(module.id) for module in modules), default=0)
    return [
        f"{prefix}{module.id}{' ' * (longest + margin - len(module.id))} 1"
        for module in modules
    ]


def _flag_block(module_id: str, flag_lines: list[str]) -> list[str]:
    return [SECTION_SEPARATOR, f"// {module_id} flags:", "", *flag_lines]


def _flag_line(flag: ConfigFlag) -> str:
    symbol, value = flag.symbol, flag.value
    if value == FlagState.ENABLED:
        return f"#define    {symbol} 1"
    if value == FlagState.DISABLED:
        return f"#define    {symbol} 0"
    # unset
    return f"//#define  {symbol}"
