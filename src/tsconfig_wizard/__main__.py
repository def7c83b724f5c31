"""Uruchomienie przez ``python -m tsconfig_wizard``."""

import sys

from tsconfig_wizard.cli import main

sys.exit(main())
