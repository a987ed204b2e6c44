import sys

from gpsnmea.cli import main

sys.exit(main())
