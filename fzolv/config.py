"""Default values for the fzolv demo and logging setup."""

from __future__ import annotations

import logging

GREETING = "Hi from Fzolv :)"
BANNER = "===============>"

DEMO_X = 1.5
DEMO_Y = 3.5

DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
