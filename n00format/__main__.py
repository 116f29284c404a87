import sys

from n00format.cli.main import main

sys.exit(main())
