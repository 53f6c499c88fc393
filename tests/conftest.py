"""Shared pytest fixtures for the compdocs test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from compdocs.components.schemas import ComponentSpec, ComponentType
from compdocs.docs.composer import ComponentDocComposer
from compdocs.docs.registry import TemplateRegistry
from compdocs.fields.schemas import FieldKind, FieldSpec, FieldType

# pylint: disable=redefined-outer-name


@pytest.fixture(scope="session")
def definitions_dir() -> Path:
    """Return the directory holding the bundled component definitions."""

    return Path(__file__).parent.parent / "compdocs" / "components" / "definitions"


@pytest.fixture
def abc_config() -> FieldSpec:
    """Root spec declaring ``a`` (common), ``b`` (advanced), ``c`` (deprecated)."""

    return FieldSpec(
        type=FieldType.OBJECT,
        children=[
            FieldSpec(name="a", type=FieldType.INT, default=1),
            FieldSpec(name="b", type=FieldType.INT, default=2, is_advanced=True),
            FieldSpec(name="c", type=FieldType.INT, default=3, is_deprecated=True),
        ],
    )


@pytest.fixture
def nested_config() -> FieldSpec:
    """Root spec mixing objects, arrays of objects, maps and 2D arrays."""

    return FieldSpec(
        type=FieldType.OBJECT,
        children=[
            FieldSpec(name="url", type=FieldType.STRING, default=""),
            FieldSpec(
                name="tls",
                type=FieldType.OBJECT,
                is_advanced=True,
                children=[
                    FieldSpec(name="enabled", type=FieldType.BOOL, default=False),
                    FieldSpec(name="skip_verify", type=FieldType.BOOL, default=False, is_advanced=True),
                ],
            ),
            FieldSpec(
                name="headers",
                type=FieldType.OBJECT,
                kind=FieldKind.ARRAY,
                children=[
                    FieldSpec(name="key", type=FieldType.STRING),
                    FieldSpec(name="value", type=FieldType.STRING),
                    FieldSpec(name="sensitive", type=FieldType.BOOL, is_advanced=True),
                ],
            ),
            FieldSpec(
                name="resources",
                type=FieldType.OBJECT,
                kind=FieldKind.MAP,
                children=[
                    FieldSpec(name="path", type=FieldType.STRING),
                    FieldSpec(name="mode", type=FieldType.STRING, is_advanced=True),
                ],
            ),
            FieldSpec(
                name="grid",
                type=FieldType.OBJECT,
                kind=FieldKind.TWO_D_ARRAY,
                children=[
                    FieldSpec(name="x", type=FieldType.INT),
                    FieldSpec(name="legacy", type=FieldType.INT, is_deprecated=True),
                ],
            ),
            FieldSpec(
                name="auth",
                type=FieldType.OBJECT,
                is_deprecated=True,
                children=[FieldSpec(name="user", type=FieldType.STRING)],
            ),
        ],
    )


@pytest.fixture
def abc_component(abc_config: FieldSpec) -> ComponentSpec:
    """A small processor component over the ``a``/``b``/``c`` config."""

    return ComponentSpec(
        name="abc",
        type=ComponentType.PROCESSOR,
        summary="Does a, b and sometimes c.",
        config=abc_config,
        config_example={"c": 3, "a": 1, "b": 2},
    )


@pytest.fixture
def template_registry() -> TemplateRegistry:
    """Template registry over the bundled templates."""

    return TemplateRegistry()


@pytest.fixture
def composer(template_registry: TemplateRegistry) -> ComponentDocComposer:
    """Document composer over the bundled templates."""

    return ComponentDocComposer(template_registry)
