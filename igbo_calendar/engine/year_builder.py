"""YearBuilder — сборка полного года игбо (hybrid lunisolar model).

Порядок сборки:
1. is_leap по 3-летнему циклу (core.math.leap_cycle)
2. year_start = ближайшее к приблизительной дате новолуние (engine.new_moon)
3. Цикл рыночных дней от anchor_market_day (engine.market_days)
4. 13 месяцев: 12 × 28 дней + месяц 13 (29 или 30 дней); каждому дню —
   григорианская дата, день недели, рыночный день, фаза Луны
5. IgboYear + метка "Igbo Year {start}/{end}"

Состояние итерации (текущая дата + позиция рыночного цикла) передаётся явно
через неизменяемый курсор; у YearBuilder нет изменяемых полей.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Final, List, NamedTuple, Optional, Tuple

from igbo_calendar.core.domain.registry import DEFAULT_REGISTRY, CalendarRegistry
from igbo_calendar.core.domain.year import (
    GregorianSpan,
    IgboDay,
    IgboMonth,
    IgboYear,
    weekday_name,
)
from igbo_calendar.core.math.leap_cycle import (
    ANCHOR_YEAR,
    LEAP_CYCLE_YEARS,
    MONTHS_IN_YEAR,
    days_in_month,
    is_leap_year,
)
from igbo_calendar.core.math.moon_phase import DateLike, phase_info, to_utc_instant
from igbo_calendar.engine.market_days import MarketDayCycler
from igbo_calendar.engine.new_moon import DEFAULT_WINDOW_DAYS, align_to_new_moon

logger = logging.getLogger(__name__)


# Рыночный день первого дня Ọnwa Mbụ по умолчанию
DEFAULT_ANCHOR_MARKET_DAY: Final[str] = "Afo"

# Метка года: год начала и год через 11 месяцев
YEAR_LABEL_SPAN_MONTHS: Final[int] = 11


@dataclass(frozen=True)
class YearBuilderConfig:
    """Конфигурация YearBuilder.

    - window_days: полуширина окна поиска новолуния
    - anchor_year / leap_cycle: параметры 3-летней коррекции
    - registry: метки месяцев и рыночных дней
    """

    window_days: int = DEFAULT_WINDOW_DAYS
    anchor_year: int = ANCHOR_YEAR
    leap_cycle: int = LEAP_CYCLE_YEARS
    registry: CalendarRegistry = field(default_factory=lambda: DEFAULT_REGISTRY)


class _DayCursor(NamedTuple):
    """Состояние fold'а: дата следующего дня и позиция рыночного цикла."""

    current_date: date
    market_position: int


def year_label(year_start: date) -> str:
    """Метка года для отображения.

    Returns:
        "Igbo Year {год year_start}/{год year_start + 11 месяцев}"
    """
    # Прибавление 11 месяцев меняет год, только если year_start не в январе
    end_year = year_start.year + (year_start.month - 1 + YEAR_LABEL_SPAN_MONTHS) // 12
    return f"Igbo Year {year_start.year}/{end_year}"


def _as_calendar_date(value: DateLike) -> date:
    # datetime сводится к календарной дате в UTC
    if isinstance(value, datetime):
        return to_utc_instant(value).date()
    return value


class YearBuilder:
    """Оркестратор сборки года игбо.

    Композиция leaf-компонентов:
    - leap_cycle (is_leap_year, days_in_month)
    - new_moon (align_to_new_moon)
    - market_days (MarketDayCycler)
    - moon_phase (phase_info)

    Результат детерминирован: одинаковые входы → одинаковый IgboYear.
    """

    def __init__(self, config: Optional[YearBuilderConfig] = None):
        """
        Args:
            config: конфигурация (default: YearBuilderConfig())
        """
        self.config = config or YearBuilderConfig()

    def build_year(
        self,
        approx_start_date: DateLike,
        igbo_year_index: int,
        anchor_market_day: str = DEFAULT_ANCHOR_MARKET_DAY,
    ) -> IgboYear:
        """Сборка полного года.

        Args:
            approx_start_date: Приблизительная григорианская дата начала года
                (только seed для поиска новолуния)
            igbo_year_index: Логический индекс года игбо (например, 2025)
            anchor_market_day: Рыночный день первого дня Ọnwa Mbụ
                (неизвестное имя → первая метка цикла)

        Returns:
            IgboYear: 13 месяцев, 365 или 366 дней
        """
        config = self.config

        is_leap = is_leap_year(igbo_year_index, config.anchor_year, config.leap_cycle)
        year_start = align_to_new_moon(_as_calendar_date(approx_start_date), config.window_days)
        cycler = MarketDayCycler(anchor_market_day, config.registry)

        cursor = _DayCursor(current_date=year_start, market_position=cycler.position)
        months: List[IgboMonth] = []
        for month_index in range(1, MONTHS_IN_YEAR + 1):
            month, cursor = self._build_month(month_index, is_leap, cursor, cycler)
            months.append(month)

        year = IgboYear(
            year_index=igbo_year_index,
            year_start=year_start,
            is_leap=is_leap,
            label=year_label(year_start),
            months=tuple(months),
        )

        logger.info(
            "built igbo year %d: start=%s end=%s leap=%s days=%d label=%r",
            igbo_year_index,
            year.year_start.isoformat(),
            year.year_end.isoformat(),
            is_leap,
            year.total_days(),
            year.label,
        )
        return year

    def _build_month(
        self,
        month_index: int,
        is_leap: bool,
        cursor: _DayCursor,
        cycler: MarketDayCycler,
    ) -> Tuple[IgboMonth, _DayCursor]:
        """Сборка месяца; возвращает месяц и курсор на следующий день."""
        day_count = days_in_month(month_index, is_leap)
        labels = self.config.registry.month(month_index)

        days: List[IgboDay] = []
        for igbo_day in range(1, day_count + 1):
            day, cursor = self._build_day(igbo_day, cursor, cycler)
            days.append(day)

        month = IgboMonth(
            index=month_index,
            name=labels.name,
            gloss=labels.gloss,
            theme=labels.theme,
            day_count=day_count,
            gregorian_span=GregorianSpan(
                start=days[0].gregorian_date, end=days[-1].gregorian_date
            ),
            days=tuple(days),
        )
        return month, cursor

    @staticmethod
    def _build_day(
        igbo_day: int,
        cursor: _DayCursor,
        cycler: MarketDayCycler,
    ) -> Tuple[IgboDay, _DayCursor]:
        current_date = cursor.current_date
        moon = phase_info(current_date)
        market_day, next_position = cycler.step(cursor.market_position)

        day = IgboDay(
            igbo_day=igbo_day,
            gregorian_date=current_date,
            weekday=weekday_name(current_date),
            market_day=market_day,
            moon_symbol=moon.symbol,
            moon_stage=moon.stage_label,
            illumination_percent=moon.illumination_percent,
            phase_fraction=moon.phase_fraction,
        )
        return day, _DayCursor(current_date + timedelta(days=1), next_position)


def build_year(
    approx_start_date: DateLike,
    igbo_year_index: int,
    anchor_market_day: str = DEFAULT_ANCHOR_MARKET_DAY,
    config: Optional[YearBuilderConfig] = None,
) -> IgboYear:
    """Сборка года с конфигурацией по умолчанию (см. YearBuilder.build_year)."""
    return YearBuilder(config).build_year(approx_start_date, igbo_year_index, anchor_market_day)
