import sys

from collapsesimulator.cli import main

sys.exit(main())
