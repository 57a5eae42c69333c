import sys

from staging_planner.cli import main

sys.exit(main())
