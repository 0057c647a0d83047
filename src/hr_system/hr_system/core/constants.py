"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_HISTORY_LIMIT = 30
DEFAULT_LIST_LIMIT = 200
HOURS_PRECISION = 4
MONEY_QUANTUM = "0.01"
# Largest magnitude a DECIMAL(12, 2) column holds.
MONEY_MAX = "9999999999.99"
