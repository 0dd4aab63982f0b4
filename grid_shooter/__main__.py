import sys

from grid_shooter.cli import main

sys.exit(main())
