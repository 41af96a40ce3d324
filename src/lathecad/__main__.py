import sys

from lathecad.cli import main

sys.exit(main())
