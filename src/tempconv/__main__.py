import sys

from tempconv.cli import main

sys.exit(main())
