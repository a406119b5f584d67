import sys

from MkTree.cli import main

sys.exit(main())
