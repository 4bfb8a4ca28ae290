import sys

from smarthome.main import main

sys.exit(main())
