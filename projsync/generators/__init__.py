"""projsync generators -- deterministic text for every generated file.

Generators only build text; the save pipeline writes their output through
``ArtifactWriter`` so unchanged files are never touched.

Key classes:
    AppConfigGenerator  - Configuration header (module macros + config flags)
    AppHeaderGenerator  - Aggregate header included by user code
    ResourceFile        - Embedded-resource source/header pair
    ReadmeGenerator     - ReadMe explaining the generated-code folder
    TemplateRenderer    - Jinja2 rendering shared by the template-based outputs
"""

from .app_config import AppConfigGenerator
from .app_header import AppHeaderGenerator
from .binary_data import ResourceFile
from .readme import ReadmeGenerator
from .templates import TemplateRenderer

__all__ = [
    "AppConfigGenerator",
    "AppHeaderGenerator",
    "ResourceFile",
    "ReadmeGenerator",
    "TemplateRenderer",
]
