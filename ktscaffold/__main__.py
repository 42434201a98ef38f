import sys

from ktscaffold.cli import main

sys.exit(main())
