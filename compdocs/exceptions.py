"""Exceptions raised while rendering component documentation.

Exception hierarchy::

    ComponentDocsError
        EncodingError (example value cannot be encoded as a YAML node)
        SerializationError (filtered view cannot be emitted as text)
        ValidationError (component metadata rejected, also ValueError)
        RenderError (document template failed)
"""


class ComponentDocsError(Exception):
    """Base exception for all documentation rendering errors."""


class EncodingError(ComponentDocsError):
    """A raw example value could not be converted into a YAML node tree.

    Attributes:
        component_type: Type identifier of the component being rendered.
    """

    def __init__(self, component_type: str, reason: str) -> None:
        super().__init__(f"Failed to encode {component_type} config example: {reason}")
        self.component_type = component_type
        self.reason = reason


class SerializationError(ComponentDocsError):
    """A filtered example view could not be serialized to YAML text."""


class ValidationError(ComponentDocsError, ValueError):
    """Component metadata violates a documentation formatting rule.

    Attributes:
        component_type: Type identifier of the offending component.
        component_name: Name of the offending component.
    """

    def __init__(self, component_type: str, component_name: str, reason: str) -> None:
        super().__init__(f"{component_type} component '{component_name}' {reason}")
        self.component_type = component_type
        self.component_name = component_name
        self.reason = reason


class RenderError(ComponentDocsError):
    """The document template could not be loaded or rendered."""


__all__ = [
    "ComponentDocsError",
    "EncodingError",
    "RenderError",
    "SerializationError",
    "ValidationError",
]
