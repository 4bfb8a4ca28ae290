from enum import Enum

from smarthome.components.base import Kind, SmartDevice, Status, format_bool


class BrightnessLevel(Enum):
    HIGH = 'HIGH'
    MEDIUM = 'MEDIUM'
    LOW = 'LOW'


class LightColor(Enum):
    WHITE = 'WHITE'
    YELLOW = 'YELLOW'


class Light(SmartDevice):
    """Chargeable light with a brightness level and a color"""

    KIND = Kind.LIGHT

    def __init__(self, device_id, status=Status.ON, charging=False,
                 brightness=BrightnessLevel.LOW, color=LightColor.YELLOW):
        super().__init__(device_id, status, charging)
        self.brightness = brightness
        self.color = color

    def set_brightness(self, brightness):
        self.brightness = brightness
        return True

    def set_color(self, color):
        self.color = color
        return True

    def display_status(self):
        return (f"Light {self.device_id} is {self.status.value}, "
                f"the color is {self.color.value}, "
                f"the charging status is {format_bool(self.charging)}, "
                f"and the brightness level is {self.brightness.value}.")
