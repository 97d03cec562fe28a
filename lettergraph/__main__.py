"""Allow `python -m lettergraph`."""

import sys

from lettergraph.cli import main

sys.exit(main())
