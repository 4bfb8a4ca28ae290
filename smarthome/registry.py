"""Device registry - owns the fixed set of devices created at startup"""

import logging

from smarthome.components import (
    BrightnessLevel,
    Camera,
    Heater,
    Kind,
    Light,
    LightColor,
    Status,
)
from smarthome.settings import SettingsError

logger = logging.getLogger('REGISTRY')

# Ids are handed out in this order, one contiguous range per kind
KIND_ORDER = (Kind.LIGHT, Kind.CAMERA, Kind.HEATER)

SETTINGS_KEYS = {
    Kind.LIGHT: 'light',
    Kind.CAMERA: 'camera',
    Kind.HEATER: 'heater',
}

DEFAULT_COUNTS = {
    Kind.LIGHT: 4,
    Kind.CAMERA: 2,
    Kind.HEATER: 4,
}


def _enum_setting(enum_cls, value, key):
    try:
        return enum_cls[value]
    except KeyError:
        raise SettingsError(f"Invalid {key} '{value}'") from None


def _ranged_setting(value, low, high, key):
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise SettingsError(f"{key} must be an integer in [{low}, {high}], got {value!r}")
    return value


def _bool_setting(value, key):
    if not isinstance(value, bool):
        raise SettingsError(f"{key} must be true or false, got {value!r}")
    return value


def _build_light(device_id, s):
    return Light(
        device_id,
        status=_enum_setting(Status, s.get('power', 'ON'), 'power'),
        charging=_bool_setting(s.get('charging', False), 'charging'),
        brightness=_enum_setting(BrightnessLevel, s.get('brightness', 'LOW'), 'brightness'),
        color=_enum_setting(LightColor, s.get('color', 'YELLOW'), 'color'),
    )


def _build_camera(device_id, s):
    return Camera(
        device_id,
        status=_enum_setting(Status, s.get('power', 'ON'), 'power'),
        charging=_bool_setting(s.get('charging', False), 'charging'),
        recording=_bool_setting(s.get('recording', False), 'recording'),
        angle=_ranged_setting(s.get('angle', 45), Camera.MIN_ANGLE, Camera.MAX_ANGLE, 'angle'),
    )


def _build_heater(device_id, s):
    return Heater(
        device_id,
        status=_enum_setting(Status, s.get('power', 'ON'), 'power'),
        temperature=_ranged_setting(s.get('temperature', 20), Heater.MIN_TEMPERATURE,
                                    Heater.MAX_TEMPERATURE, 'temperature'),
    )


BUILDERS = {
    Kind.LIGHT: _build_light,
    Kind.CAMERA: _build_camera,
    Kind.HEATER: _build_heater,
}


class DeviceRegistry:
    """
    Ordered collection of devices indexed by id.

    Ids are contiguous per kind, so the range an id falls into is the
    authoritative answer to "what kind is device N". Mutators assume the
    caller already checked kind, power and value ranges; they never
    reject anything themselves.
    """

    def __init__(self, devices):
        self._devices = list(devices)
        self._ranges = {}
        for index, device in enumerate(self._devices):
            if device.device_id != index:
                raise SettingsError(f"Device ids must be contiguous, got {device.device_id} at {index}")
            low, high = self._ranges.get(device.KIND, (index, index))
            if high < index - 1:
                raise SettingsError(f"{device.KIND.label} ids are not contiguous")
            self._ranges[device.KIND] = (low, index)

    @classmethod
    def from_settings(cls, settings):
        """Build the startup device set described by the 'devices' section"""
        device_settings = settings.get('devices', {})
        devices = []
        for kind in KIND_ORDER:
            s = device_settings.get(SETTINGS_KEYS[kind], {})
            count = s.get('count', DEFAULT_COUNTS[kind])
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise SettingsError(f"{kind.label} count must be a non-negative integer, got {count!r}")
            for _ in range(count):
                device = BUILDERS[kind](len(devices), s)
                devices.append(device)
                logger.debug(f"{kind.label} {device.device_id} ({device.status.value})")
        return cls(devices)

    # ========== LOOKUP ==========

    def device_count(self):
        return len(self._devices)

    def contains(self, device_id):
        return 0 <= device_id < len(self._devices)

    def kind_of(self, device_id):
        """Kind owning the id range device_id falls into, or None"""
        if not self.contains(device_id):
            return None
        return self._devices[device_id].KIND

    def range_of(self, kind):
        """Inclusive (low, high) id range of a kind, or None if it has no devices"""
        return self._ranges.get(kind)

    def get(self, device_id):
        if not self.contains(device_id):
            raise KeyError(device_id)
        return self._devices[device_id]

    def __len__(self):
        return len(self._devices)

    # ========== POWER ==========

    def set_power(self, device_id, on):
        device = self.get(device_id)
        return device.turn_on() if on else device.turn_off()

    def is_powered(self, device_id):
        return self.get(device_id).is_on()

    # ========== CHARGING (Light, Camera) ==========

    def is_chargeable(self, device_id):
        return self.get(device_id).is_chargeable()

    def is_charging(self, device_id):
        return self.get(device_id).is_charging()

    def start_charging(self, device_id):
        return self.get(device_id).start_charging()

    def stop_charging(self, device_id):
        return self.get(device_id).stop_charging()

    # ========== CAMERA ==========

    def is_recording(self, device_id):
        return self.get(device_id).is_recording()

    def start_recording(self, device_id):
        return self.get(device_id).start_recording()

    def stop_recording(self, device_id):
        return self.get(device_id).stop_recording()

    def set_angle(self, device_id, angle):
        return self.get(device_id).set_angle(angle)

    # ========== HEATER ==========

    def set_temperature(self, device_id, temperature):
        return self.get(device_id).set_temperature(temperature)

    # ========== LIGHT ==========

    def set_brightness(self, device_id, brightness):
        return self.get(device_id).set_brightness(brightness)

    def set_color(self, device_id, color):
        return self.get(device_id).set_color(color)

    # ========== STATUS ==========

    def describe(self, device_id):
        return self.get(device_id).display_status()

    def describe_all(self):
        return [device.display_status() for device in self._devices]
