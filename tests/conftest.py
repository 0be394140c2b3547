"""Shared pytest fixtures for inlineQL unit tests."""
from __future__ import annotations

import pytest

from inlineql.config import RenderConfig
from inlineql.render.printer import ParameterPrinter


@pytest.fixture(scope="session")
def printer() -> ParameterPrinter:
    """Printer with the built-in registry and default config."""
    return ParameterPrinter()


@pytest.fixture(scope="session")
def shallow_printer() -> ParameterPrinter:
    """Printer that allows only two levels of container nesting."""
    return ParameterPrinter(config=RenderConfig(max_depth=2))


@pytest.fixture(scope="session")
def marker_printer() -> ParameterPrinter:
    """Printer that substitutes markers for unrenderable parameters."""
    return ParameterPrinter(config=RenderConfig.builder().markers().build())
