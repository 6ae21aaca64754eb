import sys

from isofamilies.cli import main

sys.exit(main())
