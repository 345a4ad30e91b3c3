"""Regulatory constants from the EPA Construction General Permit (CGP 2022).

Every threshold used by the detector, the deadline calculator, the validator and
the tests is defined here once. Do not re-declare these values inline.
"""

from __future__ import annotations

# CGP Part 4.2: a storm event of 0.25" or more triggers an inspection.
RAIN_THRESHOLD_INCHES = 0.25

# The triggered inspection must be completed within this many hours.
INSPECTION_WINDOW_HOURS = 24

DEFAULT_WORKDAY_START_HOUR = 7
DEFAULT_WORKDAY_END_HOUR = 17

MAINTENANCE_WINDOW_DAYS = 7

# Per violation; EPA civil penalties range $25,000 - $50,000 per day.
MIN_FINE_PER_VIOLATION = 25000
MAX_FINE_PER_VIOLATION = 50000

# OSHA 29 CFR 1926.501: fall protection above this height (feet).
FALL_PROTECTION_HEIGHT_FEET = 6

# TCEQ guidance for construction sites.
TX_MIN_BMP_COUNT = 5
