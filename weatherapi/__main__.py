import sys

from weatherapi.cli import main

sys.exit(main())
