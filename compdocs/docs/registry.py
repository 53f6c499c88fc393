"""Template registry for component documentation.

Templates are loaded from compdocs/docs/templates/*.md.j2 (or the
COMPDOCS_TEMPLATES_DIR override) and cached at startup.
"""

import logging
from pathlib import Path
from typing import Optional

from .. import settings

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """Registry for markdown document templates.

    Loads Jinja2 templates from disk and caches them by name
    (component.md.j2 -> component).
    """

    def __init__(self, templates_dir: Optional[Path] = None):
        """Initialize the registry.

        Args:
            templates_dir: Path to templates directory (default: settings.TEMPLATES_DIR)
        """
        self.templates_dir = templates_dir or settings.TEMPLATES_DIR
        self._templates: dict[str, str] = {}
        self._load_templates()

    def _load_templates(self) -> None:
        """Load all Jinja2 templates from the templates directory."""
        if not self.templates_dir.exists():
            logger.warning(f"Templates directory not found: {self.templates_dir}")
            return

        for template_file in sorted(self.templates_dir.glob("*.md.j2")):
            name = template_file.name[: -len(".md.j2")]
            self._templates[name] = template_file.read_text(encoding="utf-8")
            logger.debug(f"Loaded template: {name}")

        logger.info(f"TemplateRegistry: Loaded {len(self._templates)} templates")

    def get_template(self, name: str) -> Optional[str]:
        """Get template source by name, or None if not found."""
        return self._templates.get(name)

    def list_templates(self) -> list[str]:
        """List all available template names."""
        return list(self._templates.keys())

    def reload(self) -> None:
        """Reload all templates from disk."""
        self._templates.clear()
        self._load_templates()


# Global singleton instance
_registry: Optional[TemplateRegistry] = None


def get_template_registry() -> TemplateRegistry:
    """Get the global TemplateRegistry singleton."""
    global _registry
    if _registry is None:
        _registry = TemplateRegistry()
    return _registry
