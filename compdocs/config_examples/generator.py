"""Common and advanced config example generation.

Both snippets come from the same full example: the advanced snippet keeps
every non-deprecated field, the common snippet additionally hides advanced
fields. Each is built from a fresh encoding of the example.
"""

import logging
from typing import Any

from yaml.nodes import Node

from ..fields.filters import FieldFilter, advanced_filter, common_filter
from ..fields.schemas import FieldSpec
from .encoding import encode_example, marshal_yaml, wrap_node
from .sanitiser import SanitiseConfig, sanitise_node

logger = logging.getLogger(__name__)


def create_ordered_config(
    component_type: str,
    config_spec: FieldSpec,
    raw_example: Any,
    field_filter: FieldFilter,
) -> Node:
    """Encode an example and reduce it to the fields accepted by a filter.

    Args:
        component_type: Type identifier of the component (e.g. "input")
        config_spec: Root field spec of the component's config
        raw_example: Full example config value
        field_filter: Predicate deciding which fields are shown

    Returns:
        Filtered YAML node tree in field declaration order

    Raises:
        EncodingError: If the example cannot be encoded
    """
    node = encode_example(raw_example, component_type)
    conf = SanitiseConfig(field_filter=field_filter, remove_type_field=True)
    return sanitise_node(config_spec, node, conf)


def gen_example_configs(
    component_type: str,
    config_spec: FieldSpec,
    nest: bool,
    full_example: Any,
) -> tuple[str, str]:
    """Generate the common and advanced YAML snippets for a component.

    Args:
        component_type: Type identifier, used as the wrapping key when nesting
        config_spec: Root field spec of the component's config
        nest: Wrap each snippet under a single ``component_type`` key
        full_example: Full example config value

    Returns:
        (common_config, advanced_config) as YAML text

    Raises:
        EncodingError: If the example cannot be encoded
        SerializationError: If a filtered view cannot be serialized
    """
    advanced = create_ordered_config(component_type, config_spec, full_example, advanced_filter)
    common = create_ordered_config(component_type, config_spec, full_example, common_filter)

    if nest:
        advanced = wrap_node(component_type, advanced)
        common = wrap_node(component_type, common)

    common_config = marshal_yaml(common)
    advanced_config = marshal_yaml(advanced)

    logger.debug(
        f"Generated {component_type} config examples: "
        f"common_len={len(common_config)}, advanced_len={len(advanced_config)}, nest={nest}"
    )
    return common_config, advanced_config
