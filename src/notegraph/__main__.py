import sys

from notegraph.cli import main

sys.exit(main())
