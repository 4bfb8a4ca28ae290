import pytest

from smarthome.registry import DeviceRegistry
from smarthome.settings import load_settings


@pytest.fixture
def settings():
    return load_settings()


@pytest.fixture
def registry(settings):
    return DeviceRegistry.from_settings(settings)
