import sys

from portfolio_terminal.cli import main

sys.exit(main())
