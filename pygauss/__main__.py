import sys

from pygauss.cli import main

sys.exit(main())
