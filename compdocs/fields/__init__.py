"""Field specification model and example filters.

- schemas.py  - FieldSpec tree, kinds, types and docs flattening
- filters.py  - Common and advanced field filters
"""

from .filters import FieldFilter, advanced_filter, common_filter
from .schemas import (
    AnnotatedOption,
    FieldKind,
    FieldSpec,
    FieldType,
    FlattenedField,
    flatten_children_for_docs,
)

__all__ = [
    "AnnotatedOption",
    "FieldFilter",
    "FieldKind",
    "FieldSpec",
    "FieldType",
    "FlattenedField",
    "advanced_filter",
    "common_filter",
    "flatten_children_for_docs",
]
