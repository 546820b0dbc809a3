import sys

from pi.table.cli import main

sys.exit(main())
