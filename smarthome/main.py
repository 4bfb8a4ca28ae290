#!/usr/bin/env python3
"""
Smart Home - command console
"""

import logging
import sys

from smarthome.settings import configure_logging, load_settings, resolve_settings_path
from smarthome.registry import DeviceRegistry
from smarthome.controllers import CommandInterpreter

logger = logging.getLogger('SYSTEM')


def main():
    """Main entry point"""
    # Load settings
    settings = load_settings(resolve_settings_path())
    configure_logging(settings)

    # Create devices and interpreter
    registry = DeviceRegistry.from_settings(settings)
    interpreter = CommandInterpreter(registry)
    logger.info(f"{registry.device_count()} devices ready")

    # Main loop
    try:
        interpreter.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")

    logger.info("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
