import sys

from fwjs.cli import main

sys.exit(main())
