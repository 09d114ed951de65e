import sys

from ngonplot.cli import main

sys.exit(main())
