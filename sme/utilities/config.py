"""Configuration management for the SME suite."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from sme.utilities import constants

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Finance
KNAPSACK_CAPACITY_CAP: Final[int] = int(
    os.getenv('SME_KNAPSACK_CAPACITY_CAP', str(constants.KNAPSACK_CAPACITY_CAP))
)

# Reporting
ANALYTICS_UPCOMING_LIMIT: Final[int] = int(
    os.getenv('SME_ANALYTICS_UPCOMING_LIMIT', str(constants.ANALYTICS_UPCOMING_LIMIT))
)

# CRM
LEAD_MAX_DISTANCE: Final[int] = int(
    os.getenv('SME_LEAD_MAX_DISTANCE', str(constants.DEFAULT_LEAD_MAX_DISTANCE))
)

# Inventory Alerts
LOW_STOCK_ALERT_LIMIT: Final[int] = int(
    os.getenv('SME_LOW_STOCK_ALERT_LIMIT', str(constants.LOW_STOCK_ALERT_LIMIT))
)
