"""Component Docs - Documentation Renderer for Component Specifications.

Renders declarative component specifications into markdown documents:
- Field specifications (types, kinds, advanced/deprecated flags)
- Common and advanced configuration examples derived from a full example
- Component metadata, examples and field reference tables
"""

__version__ = "0.1.0"
