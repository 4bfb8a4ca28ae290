from smarthome.controllers.interpreter import CommandInterpreter, ParsedLine, tokenize
from smarthome.controllers.errors import CommandError

__all__ = [
    'CommandInterpreter',
    'CommandError',
    'ParsedLine',
    'tokenize',
]
