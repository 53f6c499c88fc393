"""Config example generation.

Turns one full example config into the two snippets shown in component
docs: common fields only, and all non-deprecated fields.

- encoding.py   - Example value <-> YAML node tree
- sanitiser.py  - Spec-driven filtering and reordering of node trees
- generator.py  - Common/advanced snippet pair
"""

from .encoding import encode_example, marshal_yaml
from .generator import create_ordered_config, gen_example_configs
from .sanitiser import SanitiseConfig, sanitise_node

__all__ = [
    "SanitiseConfig",
    "create_ordered_config",
    "encode_example",
    "gen_example_configs",
    "marshal_yaml",
    "sanitise_node",
]
