"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_SESSION_DAYS = 7
DEFAULT_NOTIFICATION_LIMIT = 200
NOTIFICATION_RETENTION_DAYS = 30

DEFAULT_ROLE_DISPLAY_NAME = "User"
DEFAULT_ROLE_COLOR = "text-gray-600 bg-gray-100"

HOURLY_RATE = Decimal("15")
FULL_DAY_HOURS = 8
FULL_DAY_RATE = Decimal("100")
TAX_RATE = Decimal("0.10")
