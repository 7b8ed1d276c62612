import sys

from summit_pathfinder.cli import main

sys.exit(main())
