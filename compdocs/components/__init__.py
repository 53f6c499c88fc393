"""Component specifications.

- definitions/  - One YAML file per component
- schemas.py    - Pydantic models for component specs
- registry.py   - ComponentRegistry for loading definitions
"""

from .registry import ComponentRegistry, get_component_registry
from .schemas import (
    AnnotatedExample,
    ComponentSpec,
    ComponentSummary,
    ComponentType,
    Status,
)

__all__ = [
    "AnnotatedExample",
    "ComponentRegistry",
    "ComponentSpec",
    "ComponentSummary",
    "ComponentType",
    "Status",
    "get_component_registry",
]
