import pytest

from downtimedetector.registry import EnumRegistry


@pytest.fixture(scope="function")
def enum_registry():
    """A fresh registry FOR EACH function using this fixture"""
    registry = EnumRegistry()
    yield registry
    registry.reset()
