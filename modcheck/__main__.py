import sys

from modcheck.cli import main

sys.exit(main())
