"""Static ReadMe placed in the generated-code folder."""

from __future__ import annotations

from typing import Optional

from .templates import TemplateRenderer


class ReadmeGenerator:
    """Explains to users that the generated-code folder is disposable."""

    TEMPLATE = "ReadMe.txt.j2"

    def __init__(self, tool_name: str = "projsync", renderer: Optional[TemplateRenderer] = None) -> None:
        self.tool_name = tool_name
        self.renderer = renderer or TemplateRenderer()

    def generate(self) -> str:
        return self.renderer.render(self.TEMPLATE, {"tool_name": self.tool_name})
