"""Comment banner shared by every generated header."""

from __future__ import annotations

# Generated headers must start with this text verbatim; hand-written tooling
# greps for it to tell generated files apart.
AUTOGEN_WARNING_LINES: tuple[str, ...] = (
    "/*",
    "",
    "    IMPORTANT! This file is auto-generated each time you save your",
    "    project - if you alter its contents, your changes may be overwritten!",
    "",
)

SECTION_SEPARATOR = "//" + "=" * 78


def autogen_warning_comment() -> str:
    """The opening of the banner comment, ending with a blank line."""
    return "\n".join(AUTOGEN_WARNING_LINES) + "\n"
