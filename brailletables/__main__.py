import sys

from brailletables.cli import main

sys.exit(main())
