"""Template loading and placeholder substitution.

Renders the metadata map into README markdown. Substitution is literal:
every {{KEY}} whose KEY is in the map is replaced by its value in a single
pass, so a value that itself contains {{...}} is written out verbatim.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from readmegen.errors import OutputWriteError, TemplateError
from readmegen.templates.builtin import BUILTIN_TEMPLATE

logger = logging.getLogger(__name__)


def placeholder(key: str) -> str:
    """Return the template token for a key."""
    return "{{" + key + "}}"


def render_template(template: str, meta: Mapping[str, str]) -> str:
    """Replace every known placeholder in template.

    Args:
        template: Template text
        meta: Placeholder key to value

    Returns:
        Rendered text; unknown placeholders are passed through unchanged
    """
    if not meta:
        return template

    # Longest tokens first so alternation never stops at a shorter prefix
    tokens = sorted((placeholder(key) for key in meta), key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(token) for token in tokens))

    return pattern.sub(lambda match: meta[match.group(0)[2:-2]], template)


@dataclass(frozen=True)
class LoadedTemplate:
    """Template text and where it came from.

    Attributes:
        content: Template text
        path: Custom template path, or None for the built-in template
    """

    content: str
    path: Path | None = None

    @property
    def is_builtin(self) -> bool:
        """Return True if the built-in template is in use."""
        return self.path is None


class TemplateLoader:
    """Loads the custom template if present, otherwise the built-in one."""

    def __init__(self, template_path: Path) -> None:
        """Initialize the loader.

        Args:
            template_path: Location of the custom template
        """
        self.template_path = template_path

    def load(self) -> LoadedTemplate:
        """Load the template.

        Returns:
            The custom template when the file exists, else the built-in one

        Raises:
            TemplateError: If the custom template exists but cannot be read
        """
        if not self.template_path.exists():
            logger.info("No custom template found, using built-in template")
            return LoadedTemplate(content=BUILTIN_TEMPLATE)

        logger.info("Using custom template: %s", self.template_path.name)
        try:
            # Line endings are kept as written
            content = self.template_path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateError(self.template_path, str(e)) from e

        return LoadedTemplate(content=content, path=self.template_path)


class DocumentRenderer:
    """Renders a metadata map into README markdown.

    Usage:
        renderer = DocumentRenderer(TemplateLoader(root / "readme-template.md"))
        renderer.render_to_file(meta, root / "README.md")
    """

    def __init__(self, loader: TemplateLoader) -> None:
        self.loader = loader

    def render(self, meta: Mapping[str, str], template: LoadedTemplate | None = None) -> str:
        """Render the metadata map into markdown.

        Args:
            meta: Complete metadata map
            template: Preloaded template (loaded via the loader when None)

        Returns:
            Rendered markdown
        """
        if template is None:
            template = self.loader.load()

        rendered = render_template(template.content, meta)
        logger.debug("Rendered README (%d characters)", len(rendered))
        return rendered

    def render_to_file(
        self,
        meta: Mapping[str, str],
        output_path: Path,
        template: LoadedTemplate | None = None,
    ) -> Path:
        """Render the metadata map and write it as UTF-8.

        The file is overwritten on every run.

        Returns:
            Path to written file

        Raises:
            OutputWriteError: If the file cannot be written
        """
        content = self.render(meta, template)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(content.encode("utf-8"))
        except OSError as e:
            raise OutputWriteError(output_path, str(e)) from e

        logger.debug("Wrote README to %s", output_path)
        return output_path
