from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Largest budget (in whole currency units) the bill selector builds a table for
KNAPSACK_CAPACITY_CAP: Final[int] = 200_000

MIN_IMPACT_SCORE: Final[int] = 1
MAX_IMPACT_SCORE: Final[int] = 100

DEFAULT_LEAD_MAX_DISTANCE: Final[int] = 2
LOW_STOCK_ALERT_LIMIT: Final[int] = 5
ANALYTICS_UPCOMING_LIMIT: Final[int] = 5
