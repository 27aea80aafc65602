"""Shared test fixtures for minecraft-config-utils tests."""
import pytest

from minecraft_config_utils.registries import WorldRegistry


@pytest.fixture
def worlds():
    return WorldRegistry.from_names(["world", "world_nether"])
