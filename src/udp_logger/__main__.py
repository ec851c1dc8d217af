"""Entry point for ``python -m udp_logger``."""
import sys

from udp_logger.cli import main

sys.exit(main())
