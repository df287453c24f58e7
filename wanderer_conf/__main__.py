"""Allow ``python -m wanderer_conf``."""
import sys

from wanderer_conf.cli import main

sys.exit(main())
