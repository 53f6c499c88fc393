"""Field filters deciding which fields appear in a config example."""

from typing import Callable

from .schemas import FieldSpec

FieldFilter = Callable[[FieldSpec], bool]


def common_filter(field: FieldSpec) -> bool:
    """Keep fields that are neither advanced nor deprecated."""
    return not field.is_advanced and not field.is_deprecated


def advanced_filter(field: FieldSpec) -> bool:
    """Keep every field that is not deprecated."""
    return not field.is_deprecated
