"""
Command rejections.

Each validation step of the interpreter raises one of these; the text of
the exception is exactly the line printed back to the operator.
"""


class CommandError(Exception):
    """Base class for every rejected command"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class InvalidCommandError(CommandError):
    """Unknown command, wrong token count or a malformed integer"""

    def __init__(self):
        super().__init__("Invalid command")


class DeviceNotFoundError(CommandError):
    """Id outside the range of the kind the command named"""

    def __init__(self):
        super().__init__("The smart device was not found")


class DeviceOffError(CommandError):
    def __init__(self, type_name, device_id):
        super().__init__(f"You can't change the status of the {type_name} {device_id} while it is off")


class CapabilityError(CommandError):
    def __init__(self, kind_name, device_id, capability):
        super().__init__(f"{kind_name} {device_id} is not {capability}")


class AlreadyInStateError(CommandError):
    def __init__(self, type_name, device_id, state):
        super().__init__(f"{type_name} {device_id} is already {state}")


class NotInStateError(CommandError):
    def __init__(self, kind_name, device_id, state):
        super().__init__(f"{kind_name} {device_id} is not {state}")


class ValueOutOfRangeError(CommandError):
    def __init__(self, kind_name, device_id, attribute, low, high):
        super().__init__(f"{kind_name} {device_id} {attribute} should be in the range [{low}, {high}]")


class InvalidChoiceError(CommandError):
    """Enumerated argument outside its allowed members"""
