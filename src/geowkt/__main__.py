import sys

from geowkt.cli import main

sys.exit(main())
