"""
Domain models and value objects.

Contains the calendar entities: IgboYear, IgboMonth, IgboDay, MoonPhaseInfo
and the label registry.
"""

from igbo_calendar.core.domain.moon import MoonPhaseInfo, MoonStage
from igbo_calendar.core.domain.registry import (
    DEFAULT_MARKET_ALIASES,
    DEFAULT_MARKET_CYCLE,
    DEFAULT_MONTHS,
    DEFAULT_REGISTRY,
    MARKET_CYCLE_LENGTH,
    CalendarRegistry,
    MonthLabel,
)
from igbo_calendar.core.domain.year import (
    CONTRACT_SCHEMA_VERSION,
    WEEKDAY_NAMES,
    GregorianSpan,
    IgboDay,
    IgboMonth,
    IgboYear,
    weekday_name,
)

__all__ = [
    # Moon
    "MoonPhaseInfo",
    "MoonStage",
    # Registry
    "DEFAULT_MARKET_ALIASES",
    "DEFAULT_MARKET_CYCLE",
    "DEFAULT_MONTHS",
    "DEFAULT_REGISTRY",
    "MARKET_CYCLE_LENGTH",
    "CalendarRegistry",
    "MonthLabel",
    # Year
    "CONTRACT_SCHEMA_VERSION",
    "WEEKDAY_NAMES",
    "GregorianSpan",
    "IgboDay",
    "IgboMonth",
    "IgboYear",
    "weekday_name",
]
