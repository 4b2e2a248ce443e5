import sys

from numclass_api.cli import main

sys.exit(main())
