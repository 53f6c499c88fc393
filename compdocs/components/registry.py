"""Component registry — loads component specifications from YAML files.

Follows the usual definitions registry pattern:
- One YAML file per component in definitions/
- Lazy loading with _loaded guard
- In-memory dict keyed by (type, name)
- Global singleton via get_component_registry()
"""

import logging
from pathlib import Path
from typing import Optional

import yaml

from .. import settings
from .schemas import ComponentSpec, ComponentSummary, ComponentType

logger = logging.getLogger(__name__)


class ComponentRegistry:
    """Registry of component specifications loaded from YAML files."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        self.definitions_dir = definitions_dir or settings.DEFINITIONS_DIR
        self._components: dict[tuple[str, str], ComponentSpec] = {}
        self._loaded = False

    def load(self) -> None:
        """Load all component specifications from YAML files."""
        if self._loaded:
            return

        if not self.definitions_dir.exists():
            logger.warning(
                f"Component definitions directory not found: {self.definitions_dir}"
            )
            self._loaded = True
            return

        for yaml_file in sorted(self.definitions_dir.glob("*.yaml")):
            try:
                with open(yaml_file, "r") as f:
                    data = yaml.safe_load(f)
                if data is None:
                    continue
                spec = ComponentSpec.model_validate(data)
                if spec.key in self._components:
                    logger.warning(f"Duplicate component {spec.key} in {yaml_file}, replacing")
                self._components[spec.key] = spec
                logger.debug(f"Loaded component: {spec.type.value}/{spec.name}")
            except Exception as e:
                logger.error(f"Failed to load component from {yaml_file}: {e}")

        self._loaded = True
        logger.info(
            f"Loaded {len(self._components)} components from {self.definitions_dir}"
        )

    def get(self, component_type: str, name: str) -> Optional[ComponentSpec]:
        """Get a component specification by type and name."""
        self.load()
        return self._components.get((ComponentType(component_type).value, name))

    def list_all(self) -> list[ComponentSpec]:
        """List all component specifications, ordered by type then name."""
        self.load()
        return [self._components[key] for key in sorted(self._components)]

    def list_summaries(self) -> list[ComponentSummary]:
        """List component summaries."""
        return [
            ComponentSummary(
                name=c.name,
                type=c.type,
                status=c.status,
                summary=c.summary,
                field_count=len(c.config.children),
            )
            for c in self.list_all()
        ]

    def list_keys(self) -> list[tuple[str, str]]:
        """List all (type, name) keys."""
        self.load()
        return sorted(self._components.keys())

    def for_type(self, component_type: str) -> list[ComponentSpec]:
        """Get all components of one type, ordered by name."""
        type_value = ComponentType(component_type).value
        return [c for c in self.list_all() if c.type.value == type_value]

    def count(self) -> int:
        """Get total number of components."""
        self.load()
        return len(self._components)

    def reload(self) -> None:
        """Force reload all definitions."""
        self._loaded = False
        self._components.clear()
        self.load()


# Global registry instance
_registry: Optional[ComponentRegistry] = None


def get_component_registry() -> ComponentRegistry:
    """Get the global component registry instance."""
    global _registry
    if _registry is None:
        _registry = ComponentRegistry()
        _registry.load()
    return _registry
