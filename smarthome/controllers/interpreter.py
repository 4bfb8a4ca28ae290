"""
Command interpreter - validates and executes one console line at a time.

Checks run in a fixed order and the first failure wins:

  1. token count / integer syntax      -> Invalid command
  2. kind name and id agree            -> The smart device was not found
  3. device is on (attribute changes)  -> You can't change the status ...
  4. device kind supports the command  -> ... is not a camera / chargeable
  5. device is not already in state    -> ... is already on / is not charging
  6. numeric argument in range         -> ... should be in the range [a, b]
  7. enum argument is a member         -> The brightness can only be ...

Confirmations echo the kind name exactly as typed. Capability failures
(and the "is not charging/recording" replies) name the kind owning the
id range instead.
"""

import logging
import re

from smarthome.components import BrightnessLevel, Camera, Heater, Kind, LightColor
from smarthome.controllers.errors import (
    AlreadyInStateError,
    CapabilityError,
    CommandError,
    DeviceNotFoundError,
    DeviceOffError,
    InvalidChoiceError,
    InvalidCommandError,
    NotInStateError,
    ValueOutOfRangeError,
)

logger = logging.getLogger('INTERPRETER')

INTEGER_PATTERN = re.compile(r'-?[0-9]+')

BRIGHTNESS_CHOICES = 'The brightness can only be one of "LOW", "MEDIUM", or "HIGH"'
COLOR_CHOICES = 'The light color can only be "YELLOW" or "WHITE"'


def is_integer(text):
    return INTEGER_PATTERN.fullmatch(text) is not None


def tokenize(line):
    """
    Split on single spaces. Trailing empty tokens are dropped, so
    "end " is still the one-token command "end"; an empty line gives [''].
    """
    tokens = line.rstrip('\r\n').split(' ')
    while len(tokens) > 1 and tokens[-1] == '':
        tokens.pop()
    return tokens


class ParsedLine:
    """Tokens of one input line plus the captured device reference"""

    def __init__(self, line):
        self.tokens = tokenize(line)
        self.name = self.tokens[0]
        self.type_name = None
        self.device_id = None
        # Captured before dispatch whatever the command turns out to be
        if len(self.tokens) >= 3 and is_integer(self.tokens[2]):
            self.type_name = self.tokens[1]
            self.device_id = int(self.tokens[2])

    def __len__(self):
        return len(self.tokens)

    def __getitem__(self, index):
        return self.tokens[index]


class CommandInterpreter:
    """
    Runs the validation chain for each line against a DeviceRegistry.

    Holds no state between lines apart from the registry it mutates and
    the `running` flag cleared by `end`.
    """

    def __init__(self, registry):
        self.registry = registry
        self.running = False
        self._handlers = {
            'DisplayAllStatus': self._display_all_status,
            'TurnOn': self._turn_on,
            'TurnOff': self._turn_off,
            'StartCharging': self._start_charging,
            'StopCharging': self._stop_charging,
            'SetTemperature': self._set_temperature,
            'SetBrightness': self._set_brightness,
            'SetColor': self._set_color,
            'SetAngle': self._set_angle,
            'StartRecording': self._start_recording,
            'StopRecording': self._stop_recording,
            'end': self._end,
        }

    # ========== LOOP ==========

    def run(self, read_line=input, write_line=print):
        """Process lines until `end` or end of input"""
        self.running = True
        while self.running:
            try:
                line = read_line()
            except EOFError:
                logger.debug("End of input, stopping")
                break
            try:
                for out in self.execute(line):
                    write_line(out)
            except Exception:
                logger.exception(f"Unexpected failure while handling {line!r}")
        self.running = False

    def execute(self, line):
        """Handle one line and return the output lines it produces"""
        parsed = ParsedLine(line)
        logger.debug(f"> {line.rstrip()}")
        handler = self._handlers.get(parsed.name)
        try:
            if handler is None:
                raise InvalidCommandError()
            return handler(parsed)
        except CommandError as e:
            logger.debug(f"{parsed.name!r} rejected ({type(e).__name__})")
            return [str(e)]

    # ========== VALIDATION STEPS ==========

    def _require_tokens(self, parsed, count, *integer_positions):
        if len(parsed) != count:
            raise InvalidCommandError()
        for position in integer_positions:
            if not is_integer(parsed[position]):
                raise InvalidCommandError()

    def _require_device(self, parsed):
        """The named kind must own the id range the id falls into"""
        kind = self.registry.kind_of(parsed.device_id)
        if kind is None or kind.label != parsed.type_name:
            raise DeviceNotFoundError()

    def _require_known_id(self, parsed):
        """Range-only lookup: the kind name is not compared"""
        if not self.registry.contains(parsed.device_id):
            raise DeviceNotFoundError()

    def _require_powered_on(self, parsed):
        if not self.registry.is_powered(parsed.device_id):
            raise DeviceOffError(parsed.type_name, parsed.device_id)

    def _require_kind(self, parsed, kind):
        if self.registry.kind_of(parsed.device_id) != kind:
            raise CapabilityError(self._actual_kind_name(parsed), parsed.device_id, f"a {kind.label.lower()}")

    def _require_chargeable(self, parsed):
        if not self.registry.is_chargeable(parsed.device_id):
            raise CapabilityError(self._actual_kind_name(parsed), parsed.device_id, "chargeable")

    def _actual_kind_name(self, parsed):
        return self.registry.kind_of(parsed.device_id).label

    # ========== COMMANDS ==========

    def _display_all_status(self, parsed):
        self._require_tokens(parsed, 1)
        return self.registry.describe_all()

    def _end(self, parsed):
        self._require_tokens(parsed, 1)
        self.running = False
        return []

    def _turn_on(self, parsed):
        self._require_tokens(parsed, 3, 2)
        self._require_device(parsed)
        if self.registry.is_powered(parsed.device_id):
            raise AlreadyInStateError(parsed.type_name, parsed.device_id, "on")
        self.registry.set_power(parsed.device_id, True)
        return [f"{parsed.type_name} {parsed.device_id} is on"]

    def _turn_off(self, parsed):
        self._require_tokens(parsed, 3, 2)
        self._require_device(parsed)
        if not self.registry.is_powered(parsed.device_id):
            raise AlreadyInStateError(parsed.type_name, parsed.device_id, "off")
        self.registry.set_power(parsed.device_id, False)
        return [f"{parsed.type_name} {parsed.device_id} is off"]

    def _start_charging(self, parsed):
        self._require_tokens(parsed, 3, 2)
        self._require_device(parsed)
        self._require_chargeable(parsed)
        if self.registry.is_charging(parsed.device_id):
            raise AlreadyInStateError(parsed.type_name, parsed.device_id, "charging")
        self.registry.start_charging(parsed.device_id)
        return [f"{parsed.type_name} {parsed.device_id} is charging"]

    def _stop_charging(self, parsed):
        self._require_tokens(parsed, 3, 2)
        self._require_device(parsed)
        self._require_chargeable(parsed)
        if not self.registry.is_charging(parsed.device_id):
            raise NotInStateError(self._actual_kind_name(parsed), parsed.device_id, "charging")
        self.registry.stop_charging(parsed.device_id)
        return [f"{parsed.type_name} {parsed.device_id} stopped charging"]

    def _set_temperature(self, parsed):
        self._require_tokens(parsed, 4, 2, 3)
        self._require_device(parsed)
        self._require_powered_on(parsed)
        self._require_kind(parsed, Kind.HEATER)
        temperature = int(parsed[3])
        if not Heater.MIN_TEMPERATURE <= temperature <= Heater.MAX_TEMPERATURE:
            raise ValueOutOfRangeError(Kind.HEATER.label, parsed.device_id, "temperature",
                                       Heater.MIN_TEMPERATURE, Heater.MAX_TEMPERATURE)
        self.registry.set_temperature(parsed.device_id, temperature)
        return [f"{parsed.type_name} {parsed.device_id} temperature is set to {temperature}"]

    def _set_brightness(self, parsed):
        self._require_tokens(parsed, 4, 2)
        self._require_device(parsed)
        self._require_powered_on(parsed)
        self._require_kind(parsed, Kind.LIGHT)
        try:
            brightness = BrightnessLevel[parsed[3]]
        except KeyError:
            raise InvalidChoiceError(BRIGHTNESS_CHOICES) from None
        self.registry.set_brightness(parsed.device_id, brightness)
        return [f"{parsed.type_name} {parsed.device_id} brightness level is set to {brightness.value}"]

    def _set_color(self, parsed):
        self._require_tokens(parsed, 4, 2)
        self._require_device(parsed)
        self._require_powered_on(parsed)
        self._require_kind(parsed, Kind.LIGHT)
        try:
            color = LightColor[parsed[3]]
        except KeyError:
            raise InvalidChoiceError(COLOR_CHOICES) from None
        self.registry.set_color(parsed.device_id, color)
        return [f"{parsed.type_name} {parsed.device_id} color is set to {color.value}"]

    def _set_angle(self, parsed):
        self._require_tokens(parsed, 4, 2, 3)
        self._require_device(parsed)
        self._require_powered_on(parsed)
        self._require_kind(parsed, Kind.CAMERA)
        angle = int(parsed[3])
        if not Camera.MIN_ANGLE <= angle <= Camera.MAX_ANGLE:
            raise ValueOutOfRangeError(Kind.CAMERA.label, parsed.device_id, "angle",
                                       Camera.MIN_ANGLE, Camera.MAX_ANGLE)
        self.registry.set_angle(parsed.device_id, angle)
        return [f"{parsed.type_name} {parsed.device_id} angle is set to {angle}"]

    def _start_recording(self, parsed):
        self._require_tokens(parsed, 3, 2)
        self._require_device(parsed)
        self._require_powered_on(parsed)
        self._require_kind(parsed, Kind.CAMERA)
        if self.registry.is_recording(parsed.device_id):
            raise AlreadyInStateError(parsed.type_name, parsed.device_id, "recording")
        self.registry.start_recording(parsed.device_id)
        return [f"{parsed.type_name} {parsed.device_id} started recording"]

    def _stop_recording(self, parsed):
        self._require_tokens(parsed, 3, 2)
        # Only the id range is checked here, "StopRecording Light 4" reaches camera 4
        self._require_known_id(parsed)
        self._require_powered_on(parsed)
        self._require_kind(parsed, Kind.CAMERA)
        if not self.registry.is_recording(parsed.device_id):
            raise NotInStateError(self._actual_kind_name(parsed), parsed.device_id, "recording")
        self.registry.stop_recording(parsed.device_id)
        return [f"{parsed.type_name} {parsed.device_id} stopped recording"]
