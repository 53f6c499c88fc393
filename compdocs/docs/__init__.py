"""Component document composition.

Architecture:
- templates/   - Jinja2 markdown templates (component page, field docs macro)
- registry.py  - TemplateRegistry for loading templates
- composer.py  - ComponentDocComposer for rendering component specs
"""

from .composer import (
    ComponentDocComposer,
    ComposedDocument,
    FieldDocEntry,
    get_doc_composer,
    render_component_markdown,
)
from .registry import TemplateRegistry, get_template_registry

__all__ = [
    "ComponentDocComposer",
    "ComposedDocument",
    "FieldDocEntry",
    "TemplateRegistry",
    "get_doc_composer",
    "get_template_registry",
    "render_component_markdown",
]
