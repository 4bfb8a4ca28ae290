import json
import logging
import os

SETTINGS_ENV = 'SMARTHOME_SETTINGS'
LOG_LEVEL_ENV = 'SMARTHOME_LOG_LEVEL'

LOG_FORMAT = '[%(name)s] %(message)s'


class SettingsError(ValueError):
    """Raised when the settings file describes an impossible device set"""


def load_settings(filePath='settings.json'):
    if not os.path.isabs(filePath):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        filePath = os.path.join(base_dir, filePath)
    with open(filePath, 'r') as f:
        settings = json.load(f)
    if not isinstance(settings.get('devices'), dict):
        raise SettingsError(f"{filePath}: missing 'devices' section")
    return settings


def resolve_settings_path(default='settings.json'):
    """SMARTHOME_SETTINGS wins over the bundled settings file"""
    return os.environ.get(SETTINGS_ENV) or default


def configure_logging(settings):
    """
    Send diagnostics to stderr so stdout carries only command output.
    SMARTHOME_LOG_LEVEL overrides the 'log_level' entry.
    """
    level_name = os.environ.get(LOG_LEVEL_ENV) or settings.get('log_level', 'WARNING')
    level = logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        raise SettingsError(f"Unknown log level: {level_name}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level
