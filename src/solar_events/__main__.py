import sys

from solar_events.cli import main

sys.exit(main())
