"""Base device class shared by every smart device kind"""

from enum import Enum


class Kind(Enum):
    LIGHT = 'Light'
    CAMERA = 'Camera'
    HEATER = 'Heater'

    @property
    def label(self):
        return self.value


class Status(Enum):
    OFF = 'OFF'
    ON = 'ON'


def format_bool(value):
    """Status lines spell booleans in lowercase"""
    return 'true' if value else 'false'


class SmartDevice:
    """
    Base class for all simulated devices.

    Every device carries an immutable id, an on/off status and a KIND tag.
    The chargeable facet is optional: subclasses that support it keep a
    bool in `charging`, the others leave it as None.
    """

    KIND = None

    def __init__(self, device_id, status=Status.ON, charging=None):
        self._device_id = device_id
        self.status = status
        self.charging = charging

    @property
    def device_id(self):
        return self._device_id

    # ========== POWER ==========

    def turn_on(self):
        self.status = Status.ON
        return True

    def turn_off(self):
        self.status = Status.OFF
        return True

    def is_on(self):
        return self.status == Status.ON

    # ========== CHARGING ==========

    def is_chargeable(self):
        return self.charging is not None

    def is_charging(self):
        return bool(self.charging)

    def start_charging(self):
        self.charging = True
        return True

    def stop_charging(self):
        self.charging = False
        return True

    # ========== STATUS ==========

    def display_status(self):
        raise NotImplementedError("Subclasses must implement display_status()")

    def __repr__(self):
        return f"<{type(self).__name__} {self._device_id} {self.status.value}>"
