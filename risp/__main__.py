import sys

from risp.cli import main

sys.exit(main())
