"""Payroll constants.

Note: Keep business numbers here so calculator and aggregator agree on them.
"""

from decimal import Decimal

PRORATION_BASE_DAYS = Decimal("30")
STANDARD_WORKDAY_HOURS = Decimal("8")
OVERTIME_THRESHOLD_HOURS = Decimal("9")

PRESENT_DAY_UNIT = Decimal("0.5")

DEFAULT_LIST_LIMIT = 500

# Scales of the salary_records columns; inputs are rounded to these before computing.
HOURS_SCALE = Decimal("0.01")
MONEY_SCALE = Decimal("0.01")
FIGURE_SCALE = Decimal("0.000001")
