"""
Core math modules для igbo_calendar

Лунная фаза и правила длины года. Чистые функции без состояния.
"""

# Moon Phase
from igbo_calendar.core.math.moon_phase import (
    NORMALIZATION_HOUR_UTC,
    PHASE_BUCKET_COUNT,
    PHASE_BUCKETS,
    REFERENCE_NEW_MOON_UTC,
    SECONDS_PER_DAY,
    SYNODIC_MONTH_DAYS,
    DateLike,
    illumination_fraction,
    moon_age_days,
    phase_bucket,
    phase_fraction,
    phase_info,
    to_utc_instant,
)

# Leap Cycle
from igbo_calendar.core.math.leap_cycle import (
    ANCHOR_YEAR,
    LAST_MONTH_DAYS,
    LEAP_CYCLE_YEARS,
    MONTHS_IN_YEAR,
    STANDARD_MONTH_DAYS,
    days_in_month,
    is_leap_year,
    month_lengths,
    year_length,
)

__all__ = [
    # Moon Phase — Constants
    "NORMALIZATION_HOUR_UTC",
    "PHASE_BUCKET_COUNT",
    "PHASE_BUCKETS",
    "REFERENCE_NEW_MOON_UTC",
    "SECONDS_PER_DAY",
    "SYNODIC_MONTH_DAYS",
    # Moon Phase — Types
    "DateLike",
    # Moon Phase — Functions
    "illumination_fraction",
    "moon_age_days",
    "phase_bucket",
    "phase_fraction",
    "phase_info",
    "to_utc_instant",
    # Leap Cycle — Constants
    "ANCHOR_YEAR",
    "LAST_MONTH_DAYS",
    "LEAP_CYCLE_YEARS",
    "MONTHS_IN_YEAR",
    "STANDARD_MONTH_DAYS",
    # Leap Cycle — Functions
    "days_in_month",
    "is_leap_year",
    "month_lengths",
    "year_length",
]
