"""Field specification schemas.

A component's configuration is described by a tree of FieldSpecs. Each
node declares its name, value type, structural kind and whether it is an
advanced or deprecated field. Children are declared in display order:
the position of a child within its parent's ``children`` list is the
order used when rendering configuration examples.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class FieldKind(str, Enum):
    """Structural kind of a field's value."""

    SCALAR = "scalar"
    MAP = "map"
    ARRAY = "array"
    TWO_D_ARRAY = "2darray"


class FieldType(str, Enum):
    """Value type of a field (or of its elements for composite kinds)."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    OBJECT = "object"
    UNKNOWN = "unknown"


_ZERO_VALUES: dict[FieldType, Any] = {
    FieldType.STRING: "",
    FieldType.INT: 0,
    FieldType.FLOAT: 0.0,
    FieldType.BOOL: False,
    FieldType.UNKNOWN: None,
}


class AnnotatedOption(BaseModel):
    """An accepted value of an enumerated field, with a short explanation."""

    value: str
    summary: str = ""


class FieldSpec(BaseModel):
    """Declarative description of one configuration field."""

    # Identity
    name: str = Field(
        default="",
        description="Field name as it appears in config (empty for a root spec)",
    )
    type: FieldType = Field(
        default=FieldType.UNKNOWN,
        description="Value type, or element type for map/array kinds",
    )
    kind: FieldKind = Field(
        default=FieldKind.SCALAR,
        description="Structural kind: a single value, a map, an array or an array of arrays",
    )
    description: str = ""

    # Value hints
    default: Any = Field(
        default=None,
        description="Default value. Only meaningful when explicitly set, see has_default",
    )
    examples: list[Any] = Field(default_factory=list)
    options: list[str] = Field(default_factory=list)
    annotated_options: list[AnnotatedOption] = Field(default_factory=list)

    # Visibility
    is_advanced: bool = Field(
        default=False,
        description="Hidden from the common config example",
    )
    is_deprecated: bool = Field(
        default=False,
        description="Hidden from every config example and from field docs",
    )
    is_optional: bool = False
    version: Optional[str] = Field(
        default=None,
        description="Version the field was introduced in",
    )

    children: list["FieldSpec"] = Field(
        default_factory=list,
        description="Child fields in declaration order (object, map and array of objects)",
    )

    @field_validator("children")
    @classmethod
    def _unique_child_names(cls, children: list["FieldSpec"]) -> list["FieldSpec"]:
        seen: set[str] = set()
        for child in children:
            if child.name in seen:
                raise ValueError(f"duplicate child field name: {child.name}")
            seen.add(child.name)
        return children

    @property
    def has_default(self) -> bool:
        """Whether a default was declared, including an explicit null."""
        return "default" in self.model_fields_set

    def get_child(self, name: str) -> Optional["FieldSpec"]:
        """Look up a direct child by name."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def default_example(self) -> Any:
        """Build an example value for this field out of declared defaults.

        Optional children without a default are left out. Fields without a
        default fall back to an empty collection for composite kinds and to
        the zero value of their type otherwise.
        """
        if self.has_default:
            return self.default
        if self.kind == FieldKind.MAP:
            return {}
        if self.kind in (FieldKind.ARRAY, FieldKind.TWO_D_ARRAY):
            return []
        if self.children:
            return {
                child.name: child.default_example()
                for child in self.children
                if child.has_default or not child.is_optional
            }
        if self.type == FieldType.OBJECT:
            return {}
        return _ZERO_VALUES[self.type]


class FlattenedField(BaseModel):
    """A field paired with its dotted path from the config root."""

    full_name: str
    spec: FieldSpec


def flatten_children_for_docs(children: list[FieldSpec]) -> list[FlattenedField]:
    """Flatten a field tree depth-first into documentable entries.

    Deprecated fields (and everything beneath them) are skipped. Array
    parents contribute ``[]``, arrays of arrays ``[][]`` and maps
    ``.<name>`` to the paths of their children, e.g.
    ``tls.client_certs[].cert``.
    """
    flattened: list[FlattenedField] = []

    def _recurse(path: str, fields: list[FieldSpec]) -> None:
        for field in fields:
            if field.is_deprecated:
                continue
            full_name = path + field.name
            flattened.append(FlattenedField(full_name=full_name, spec=field))
            if not field.children:
                continue
            if field.kind == FieldKind.ARRAY:
                full_name += "[]"
            elif field.kind == FieldKind.TWO_D_ARRAY:
                full_name += "[][]"
            elif field.kind == FieldKind.MAP:
                full_name += ".<name>"
            _recurse(full_name + ".", field.children)

    _recurse("", children)
    return flattened
