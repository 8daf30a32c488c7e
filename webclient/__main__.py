import sys

from webclient.cli import main

sys.exit(main())
