import sys

from lisk.repl import main

sys.exit(main())
