"""Component specification schemas.

A ComponentSpec describes one configurable unit: its identity, maturity,
prose documentation, annotated examples and the FieldSpec tree of its
config. Specs are loaded from YAML definitions by ComponentRegistry.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from ..fields.schemas import FieldSpec, FieldType


class ComponentType(str, Enum):
    """Category of component, also the key its config nests under."""

    INPUT = "input"
    OUTPUT = "output"
    PROCESSOR = "processor"
    BUFFER = "buffer"
    CACHE = "cache"
    RATE_LIMIT = "rate_limit"
    METRICS = "metrics"
    TRACER = "tracer"
    SCANNER = "scanner"


class Status(str, Enum):
    """Maturity of a component."""

    STABLE = "stable"
    BETA = "beta"
    EXPERIMENTAL = "experimental"
    DEPRECATED = "deprecated"


class AnnotatedExample(BaseModel):
    """A titled usage example shown in the component's Examples tabs."""

    title: str
    summary: str = ""
    config: str = Field(
        default="",
        description="YAML config text, rendered verbatim",
    )


class ComponentSpec(BaseModel):
    """Everything needed to document one component."""

    # Identity
    name: str = Field(
        ...,
        description="Component name (snake_case, e.g. 'http_client')",
    )
    type: ComponentType
    status: Status = Status.STABLE
    version: str = Field(
        default="",
        description="Version the component was introduced in",
    )
    categories: list[str] = Field(default_factory=list)

    # Prose
    summary: str = Field(
        default="",
        description="Short summary; must not contain blank lines",
    )
    description: str = ""
    footnotes: str = ""
    examples: list[AnnotatedExample] = Field(default_factory=list)

    # Config
    config: FieldSpec = Field(
        default_factory=lambda: FieldSpec(type=FieldType.OBJECT),
        description="Root of the config field tree",
    )
    config_example: Optional[Any] = Field(
        default=None,
        description="Full example config. Derived from field defaults when omitted",
    )

    @property
    def key(self) -> tuple[str, str]:
        """Registry key: (type, name)."""
        return (self.type.value, self.name)

    def full_example(self) -> Any:
        """The declared full example, or one built from field defaults."""
        if self.config_example is not None:
            return self.config_example
        return self.config.default_example()


class ComponentSummary(BaseModel):
    """Lightweight summary for listings."""

    name: str
    type: ComponentType
    status: Status
    summary: str
    field_count: int
