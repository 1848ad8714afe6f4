import sys

from polyspiral.cli import main

sys.exit(main())
