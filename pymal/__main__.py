import sys

from pymal.repl import main

sys.exit(main())
