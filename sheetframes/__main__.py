import sys

from sheetframes.cli import main

sys.exit(main())
