"""Allow ``python -m ontology_table``."""

import sys

from .main import main

sys.exit(main())
