"""Component document composer using Jinja2 templates.

Renders a ComponentSpec into a markdown page:
- Front matter and maturity admonition from component metadata
- Common/advanced config examples generated from the full example
- Flattened field reference and annotated example tabs
"""

import json
import logging
from typing import Any, Optional

from jinja2 import Environment, FunctionLoader, TemplateError
from pydantic import BaseModel

from ..components.schemas import ComponentSpec
from ..config_examples.encoding import encode_example, marshal_yaml
from ..config_examples.generator import gen_example_configs
from ..exceptions import RenderError, ValidationError
from ..fields.schemas import FieldKind, FieldSpec, flatten_children_for_docs
from .registry import TemplateRegistry, get_template_registry

logger = logging.getLogger(__name__)

_KIND_LABELS = {
    FieldKind.MAP: "object",
    FieldKind.ARRAY: "array",
    FieldKind.TWO_D_ARRAY: "two-dimensional array",
}


class FieldDocEntry(BaseModel):
    """A flattened field as presented in the field reference."""

    full_name: str
    type_label: str
    spec: FieldSpec


class ComposedDocument(BaseModel):
    """A rendered component page."""

    name: str
    type: str
    markdown: str
    common_config: str
    advanced_config: str

    def as_bytes(self) -> bytes:
        """The markdown document encoded as UTF-8."""
        return self.markdown.encode("utf-8")


class ComponentDocComposer:
    """Composes markdown documents from component specs.

    Usage:
        composer = ComponentDocComposer()
        doc = composer.compose(spec, nest=True)
        Path("http_server.md").write_bytes(doc.as_bytes())
    """

    def __init__(self, registry: Optional[TemplateRegistry] = None):
        """Initialize the composer.

        Args:
            registry: TemplateRegistry instance (default: global singleton)
        """
        self.registry = registry or get_template_registry()

        self.env = Environment(
            loader=FunctionLoader(self.registry.get_template),
            autoescape=False,  # We're generating markdown, not HTML
            trim_blocks=True,
            lstrip_blocks=True,
        )

        self.env.filters["json"] = lambda value: json.dumps(value, ensure_ascii=False)
        self.env.filters["field_examples"] = _field_examples

    def compose(
        self,
        spec: ComponentSpec,
        nest: bool = True,
        full_example: Any = None,
    ) -> ComposedDocument:
        """Render a component spec into a markdown document.

        Args:
            spec: The component to document
            nest: Nest config examples under the component type key
            full_example: Full example config (default: spec.full_example())

        Returns:
            ComposedDocument with the rendered markdown

        Raises:
            ValidationError: If the summary contains a blank line
            EncodingError: If the full example cannot be encoded
            SerializationError: If a config example cannot be serialized
            RenderError: If the template is missing or fails to render
        """
        component_type = spec.type.value

        if "\n\n" in "\n".join(spec.summary.splitlines()):
            raise ValidationError(component_type, spec.name, "has a summary containing empty lines")

        if full_example is None:
            full_example = spec.full_example()

        common_config, advanced_config = gen_example_configs(
            component_type, spec.config, nest, full_example
        )

        context = self._build_context(spec, common_config, advanced_config)

        template_name = "component"
        try:
            template = self.env.get_template(template_name)
            rendered = template.render(**context)
        except TemplateError as e:
            raise RenderError(f"Template rendering error for {component_type} '{spec.name}': {e}") from e

        logger.debug(
            f"Composed {component_type} doc '{spec.name}': "
            f"fields={len(context['fields'])}, examples={len(spec.examples)}, "
            f"len={len(rendered)}"
        )

        return ComposedDocument(
            name=spec.name,
            type=component_type,
            markdown=rendered,
            common_config=common_config,
            advanced_config=advanced_config,
        )

    def _build_context(
        self,
        spec: ComponentSpec,
        common_config: str,
        advanced_config: str,
    ) -> dict[str, Any]:
        """Build the context dictionary for Jinja2 rendering."""
        context: dict[str, Any] = {
            "name": spec.name,
            "type": spec.type.value,
            "status": spec.status.value,
            "version": spec.version,
            "summary": spec.summary,
            "description": _strip_leading_newline(spec.description),
            "footnotes": _strip_leading_newline(spec.footnotes),
            "examples": spec.examples,
            "categories": json.dumps(spec.categories, ensure_ascii=False) if spec.categories else "",
            "common_config": common_config,
            "advanced_config": advanced_config,
        }

        context["fields"] = [
            FieldDocEntry(
                full_name=flattened.full_name,
                type_label=_KIND_LABELS.get(flattened.spec.kind, flattened.spec.type.value),
                spec=flattened.spec.model_copy(update={"kind": FieldKind.SCALAR}),
            )
            for flattened in flatten_children_for_docs(spec.config.children)
        ]

        return context


def _strip_leading_newline(text: str) -> str:
    return text[1:] if text.startswith("\n") else text


def _field_examples(examples: list[Any], field_name: str) -> str:
    """Render each field example as a ``name: value`` YAML snippet."""
    return "\n".join(
        marshal_yaml(encode_example({field_name: example})) for example in examples
    )


# Global composer instance
_composer: Optional[ComponentDocComposer] = None


def get_doc_composer() -> ComponentDocComposer:
    """Get the global ComponentDocComposer instance."""
    global _composer
    if _composer is None:
        _composer = ComponentDocComposer()
    return _composer


def render_component_markdown(
    spec: ComponentSpec,
    nest: bool = True,
    full_example: Any = None,
) -> bytes:
    """Render a component spec into UTF-8 markdown bytes."""
    return get_doc_composer().compose(spec, nest, full_example).as_bytes()
