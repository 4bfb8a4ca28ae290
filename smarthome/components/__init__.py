from smarthome.components.base import Kind, SmartDevice, Status
from smarthome.components.light import BrightnessLevel, Light, LightColor
from smarthome.components.camera import Camera
from smarthome.components.heater import Heater

__all__ = [
    'Kind',
    'Status',
    'SmartDevice',
    'Light',
    'BrightnessLevel',
    'LightColor',
    'Camera',
    'Heater',
]
