"""Environment-driven settings for the documentation renderer."""

import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).parent

TEMPLATES_DIR = Path(
    os.environ.get("COMPDOCS_TEMPLATES_DIR", PACKAGE_DIR / "docs" / "templates")
)
DEFINITIONS_DIR = Path(
    os.environ.get("COMPDOCS_DEFINITIONS_DIR", PACKAGE_DIR / "components" / "definitions")
)

# Synthetic discriminator key stripped from encoded examples
TYPE_FIELD = os.environ.get("COMPDOCS_TYPE_FIELD", "type")
