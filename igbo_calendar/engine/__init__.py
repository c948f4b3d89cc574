"""Engine — сборка года игбо из leaf-компонентов.

- new_moon: выравнивание начала года на новолуние
- market_days: 4-дневный цикл рыночных дней
- year_builder: оркестратор (13 месяцев, фаза Луны, рыночные дни)
"""

from .market_days import (
    DEFAULT_CHECKPOINT,
    MarketCheckpoint,
    MarketDayCycler,
    market_day_for_date,
    market_day_index_for_date,
    resolve_market_index,
)
from .new_moon import DEFAULT_WINDOW_DAYS, align_to_new_moon, approximate_year_start
from .year_builder import (
    DEFAULT_ANCHOR_MARKET_DAY,
    YearBuilder,
    YearBuilderConfig,
    build_year,
    year_label,
)

__all__ = [
    "DEFAULT_CHECKPOINT",
    "MarketCheckpoint",
    "MarketDayCycler",
    "market_day_for_date",
    "market_day_index_for_date",
    "resolve_market_index",
    "DEFAULT_WINDOW_DAYS",
    "align_to_new_moon",
    "DEFAULT_ANCHOR_MARKET_DAY",
    "YearBuilder",
    "YearBuilderConfig",
    "build_year",
    "approximate_year_start",
    "year_label",
]
