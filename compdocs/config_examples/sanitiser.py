"""Filtering and reordering of encoded config examples.

The walk visits an encoded example alongside the FieldSpec tree that
describes it. At every mapping it keeps only the fields accepted by the
active filter, puts them in declaration order, and descends into composite
values. New nodes are built along the way; the input tree is left as is.

Rules applied at each mapping:

- a declared field accepted by the filter is kept;
- a declared field rejected by the filter is kept only when some declared
  descendant was kept, and then holds only those descendants;
- fields nested under a deprecated field are treated as deprecated;
- undeclared keys are kept, after the declared ones, in their original
  order;
- when removal is enabled the type discriminator key is dropped from every
  mapping where it is not a declared field, including mappings nested under
  undeclared keys.
"""

from typing import Optional

from pydantic import BaseModel, Field
from yaml.nodes import MappingNode, Node, SequenceNode

from .. import settings
from ..fields.filters import FieldFilter
from ..fields.schemas import FieldKind, FieldSpec


class SanitiseConfig(BaseModel):
    """Options for a single sanitise walk."""

    field_filter: FieldFilter = Field(
        ...,
        description="Predicate deciding whether a field is shown",
    )
    remove_type_field: bool = Field(
        default=False,
        description="Drop the type discriminator key from mappings where it is not a declared field",
    )
    type_field: str = Field(
        default_factory=lambda: settings.TYPE_FIELD,
        description="Name of the type discriminator key",
    )


def sanitise_node(config_spec: FieldSpec, node: Node, conf: SanitiseConfig) -> Node:
    """Return a filtered, spec-ordered copy of an encoded example.

    Args:
        config_spec: Root field spec of the component's config
        node: Encoded example (see encoding.encode_example)
        conf: Filter and type field options

    Returns:
        New node tree shaped like ``node``
    """
    sanitised, _ = _sanitise_value(node, config_spec.kind, config_spec.children, conf, False)
    return sanitised


def _sanitise_value(
    node: Node,
    kind: FieldKind,
    children: list[FieldSpec],
    conf: SanitiseConfig,
    deprecated: bool,
) -> tuple[Node, bool]:
    """Sanitise one value. Also reports whether any declared field was kept."""
    if node.id == "mapping":
        if kind == FieldKind.SCALAR:
            return _sanitise_mapping(node, children, conf, deprecated)
        if kind == FieldKind.MAP:
            retained = False
            pairs = []
            for key_node, value_node in node.value:
                if _is_type_key(key_node, conf):
                    continue
                new_value, kept = _sanitise_value(
                    value_node, FieldKind.SCALAR, children, conf, deprecated
                )
                retained = retained or kept
                pairs.append((key_node, new_value))
            return _copy_mapping(node, pairs), retained

    elif node.id == "sequence" and kind in (FieldKind.ARRAY, FieldKind.TWO_D_ARRAY):
        element_kind = FieldKind.SCALAR if kind == FieldKind.ARRAY else FieldKind.ARRAY
        retained = False
        items = []
        for item in node.value:
            new_item, kept = _sanitise_value(item, element_kind, children, conf, deprecated)
            retained = retained or kept
            items.append(new_item)
        return SequenceNode(
            node.tag, items, start_mark=node.start_mark, end_mark=node.end_mark,
            flow_style=node.flow_style,
        ), retained

    # Scalars, and values whose shape doesn't match their spec
    return _strip_type_fields(node, conf), False


def _sanitise_mapping(
    node: MappingNode,
    children: list[FieldSpec],
    conf: SanitiseConfig,
    deprecated: bool,
) -> tuple[MappingNode, bool]:
    positions = {child.name: i for i, child in enumerate(children)}

    declared: list[tuple[int, tuple[Node, Node]]] = []
    undeclared: list[tuple[Node, Node]] = []

    for key_node, value_node in node.value:
        position: Optional[int] = None
        if key_node.id == "scalar":
            position = positions.get(key_node.value)

        if position is None:
            if _is_type_key(key_node, conf):
                continue
            undeclared.append((key_node, _strip_type_fields(value_node, conf)))
            continue

        child = children[position]
        child_deprecated = deprecated or child.is_deprecated
        new_value, descendants_kept = _sanitise_value(
            value_node, child.kind, child.children, conf, child_deprecated
        )
        if not (_accepts(conf, child, child_deprecated) or descendants_kept):
            continue
        declared.append((position, (key_node, new_value)))

    declared.sort(key=lambda entry: entry[0])
    pairs = [pair for _, pair in declared] + undeclared
    return _copy_mapping(node, pairs), bool(declared)


def _accepts(conf: SanitiseConfig, field: FieldSpec, deprecated: bool) -> bool:
    if deprecated and not field.is_deprecated:
        field = field.model_copy(update={"is_deprecated": True})
    return conf.field_filter(field)


def _copy_mapping(node: MappingNode, pairs: list[tuple[Node, Node]]) -> MappingNode:
    return MappingNode(
        node.tag, pairs, start_mark=node.start_mark, end_mark=node.end_mark,
        flow_style=node.flow_style,
    )


def _is_type_key(key_node: Node, conf: SanitiseConfig) -> bool:
    return conf.remove_type_field and key_node.id == "scalar" and key_node.value == conf.type_field


def _strip_type_fields(node: Node, conf: SanitiseConfig) -> Node:
    """Copy an undescribed subtree, dropping the type key from its mappings."""
    if not conf.remove_type_field:
        return node
    if node.id == "mapping":
        pairs = [
            (key_node, _strip_type_fields(value_node, conf))
            for key_node, value_node in node.value
            if not _is_type_key(key_node, conf)
        ]
        return _copy_mapping(node, pairs)
    if node.id == "sequence":
        return SequenceNode(
            node.tag, [_strip_type_fields(item, conf) for item in node.value],
            start_mark=node.start_mark, end_mark=node.end_mark, flow_style=node.flow_style,
        )
    return node
