import sys

from cryptounit.cli import main

sys.exit(main())
