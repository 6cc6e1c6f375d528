"""Constants and defaults.

Note: Keep business thresholds here so settings modules and tests share them.
"""

from datetime import time

DEFAULT_CLOCK_IN_EARLIEST = time(9, 30)
DEFAULT_LUNCH_WINDOW_START = time(13, 0)
DEFAULT_LUNCH_WINDOW_END = time(15, 0)
DEFAULT_MIN_LUNCH_MINUTES = 30

DEFAULT_GATE_REFRESH_SECONDS = 30
DEFAULT_HISTORY_PAGE_SIZE = 10

ALL_COLABORADORES = "todos"
EMPTY_TIME = "--:--"
