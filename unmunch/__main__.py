import sys

from unmunch.cli import main

sys.exit(main())
