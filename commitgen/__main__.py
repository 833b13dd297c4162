"""Allow running as: python -m commitgen"""

import sys

from commitgen.cli.main import main

sys.exit(main())
