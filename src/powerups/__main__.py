import sys

from powerups.cli._dispatcher import main

sys.exit(main())
