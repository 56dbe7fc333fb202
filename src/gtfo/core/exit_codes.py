from __future__ import annotations

OK = 0
FAILURES_FOUND = 1
ERR_USAGE = 2
ERR_DECODE = 3
ERR_TEMPLATE = 4
ERR_CONFIG = 5
ERR_INTERNAL = 99
