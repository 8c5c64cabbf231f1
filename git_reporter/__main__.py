import sys

from git_reporter.cli import main

sys.exit(main())
