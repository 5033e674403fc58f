import sys

from payment_gateways.entrypoints.cli import main

sys.exit(main())
