import sys

from sparselife.cli import main

sys.exit(main())
