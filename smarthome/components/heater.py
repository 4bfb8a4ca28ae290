from smarthome.components.base import Kind, SmartDevice, Status


class Heater(SmartDevice):
    """Heater with a target temperature; not chargeable"""

    KIND = Kind.HEATER

    MIN_TEMPERATURE = 15
    MAX_TEMPERATURE = 30

    def __init__(self, device_id, status=Status.ON, temperature=20):
        super().__init__(device_id, status)
        self.temperature = temperature

    def set_temperature(self, temperature):
        self.temperature = temperature
        return True

    def display_status(self):
        return (f"Heater {self.device_id} is {self.status.value} "
                f"and the temperature is {self.temperature}.")
