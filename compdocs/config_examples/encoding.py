"""YAML node encoding and serialization for config examples.

Examples are encoded into PyYAML's node graph (ScalarNode, MappingNode,
SequenceNode) so that they can be filtered and reordered without losing
the representation chosen for each scalar, then serialized straight from
the node graph.
"""

import io
import logging
from typing import Any

import yaml
from yaml.nodes import MappingNode, Node, ScalarNode
from yaml.representer import RepresenterError
from yaml.resolver import BaseResolver

from ..exceptions import EncodingError, SerializationError

logger = logging.getLogger(__name__)


class ExampleDumper(yaml.SafeDumper):
    """Block-style safe dumper for documentation snippets.

    Never emits anchors or aliases, and indents block sequences beneath
    their parent key.
    """

    def ignore_aliases(self, data: Any) -> bool:
        return True

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)


def encode_example(raw_example: Any, component_type: str = "") -> Node:
    """Encode a raw example value into a YAML node tree.

    Mapping keys keep their insertion order.

    Raises:
        EncodingError: If the value (or anything nested in it) has no safe
            YAML representation, or refers to itself.
    """
    dumper = ExampleDumper(io.StringIO(), default_flow_style=False, sort_keys=False)
    try:
        return dumper.represent_data(raw_example)
    except RepresenterError as e:
        raise EncodingError(component_type, str(e)) from e
    except RecursionError as e:
        raise EncodingError(component_type, "example value is self-referential") from e
    finally:
        dumper.dispose()


def wrap_node(key: str, node: Node) -> MappingNode:
    """Nest a node beneath a single-key mapping."""
    key_node = ScalarNode(BaseResolver.DEFAULT_SCALAR_TAG, key)
    return MappingNode(BaseResolver.DEFAULT_MAPPING_TAG, [(key_node, node)], flow_style=False)


def marshal_yaml(node: Node) -> str:
    """Serialize a node tree as block-style YAML with two-space indentation.

    Raises:
        SerializationError: If the emitter rejects the node tree.
    """
    try:
        return yaml.serialize(
            node,
            Dumper=ExampleDumper,
            indent=2,
            width=120,
            allow_unicode=True,
        )
    except yaml.YAMLError as e:
        logger.error(f"Failed to serialize config example: {e}")
        raise SerializationError(f"Failed to serialize config example: {e}") from e
