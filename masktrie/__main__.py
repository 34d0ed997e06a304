import sys

from masktrie.cli import main

sys.exit(main())
