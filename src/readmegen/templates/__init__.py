"""readmegen template rendering.

Templates are plain UTF-8 markdown containing {{KEY}} placeholders.
Substitution is literal and single-pass: substituted values are never
expanded again, and unknown placeholders are left untouched.
"""

from readmegen.templates.builtin import BUILTIN_TEMPLATE
from readmegen.templates.renderer import DocumentRenderer, TemplateLoader, render_template

__all__ = ["BUILTIN_TEMPLATE", "DocumentRenderer", "TemplateLoader", "render_template"]
