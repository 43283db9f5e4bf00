import sys

from unitranslit.cli import main

sys.exit(main())
