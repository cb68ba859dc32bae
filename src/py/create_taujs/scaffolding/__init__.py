"""Project scaffolding for create-taujs.

The template catalog describes every file of a new τjs application; the
generator renders and writes it under a fresh project directory.
"""

from create_taujs.scaffolding.generator import generate_project
from create_taujs.scaffolding.templates import TEMPLATE_CATALOG, TemplateFile, TemplateKind

__all__ = ["TEMPLATE_CATALOG", "TemplateFile", "TemplateKind", "generate_project"]
