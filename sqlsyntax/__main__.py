import sys

from sqlsyntax.shell.cli import main

sys.exit(main())
