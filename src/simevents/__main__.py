import sys

from simevents.cli import main

sys.exit(main())
