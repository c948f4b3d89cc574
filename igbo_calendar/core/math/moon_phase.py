"""
MoonPhase — Фаза Луны по средней синодической модели

Модуль вычисляет фазу Луны на дату без эфемерид:
- Опорное новолуние: 2000-01-06 18:14 UTC
- Средний синодический месяц: 29.53058867 дня
- Календарная дата нормализуется к полудню UTC (убирает дрейф внутри суток)

ФОРМУЛЫ:
    days = (ts - ts_ref) / 86400
    age = days mod SYNODIC_MONTH_DAYS,  age ∈ [0, SYNODIC_MONTH_DAYS)
    phase_fraction = age / SYNODIC_MONTH_DAYS
    illumination = 0.5 * (1 - cos(2π * phase_fraction))

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. phase_fraction всегда в [0, 1) для любой даты
2. Функции чистые и детерминированные, исключений для валидных дат нет
"""

import math
from datetime import date, datetime, timezone
from typing import Final, Tuple, Union

from igbo_calendar.core.domain.moon import MoonPhaseInfo, MoonStage


# =============================================================================
# АСТРОНОМИЧЕСКИЕ КОНСТАНТЫ
# =============================================================================

# Средний синодический месяц (дни)
SYNODIC_MONTH_DAYS: Final[float] = 29.53058867

# Опорное новолуние
REFERENCE_NEW_MOON_UTC: Final[datetime] = datetime(2000, 1, 6, 18, 14, 0, tzinfo=timezone.utc)

SECONDS_PER_DAY: Final[float] = 86400.0

# Час нормализации календарной даты (UTC)
NORMALIZATION_HOUR_UTC: Final[int] = 12

# Количество bucket'ов стадий (ширина 1/8 = 0.125)
PHASE_BUCKET_COUNT: Final[int] = 8

# Стадии в порядке возрастания phase_fraction
PHASE_BUCKETS: Final[Tuple[Tuple[str, MoonStage], ...]] = (
    ("🌑", MoonStage.NEW_MOON),
    ("🌒", MoonStage.WAXING_CRESCENT),
    ("🌓", MoonStage.FIRST_QUARTER),
    ("🌔", MoonStage.WAXING_GIBBOUS),
    ("🌕", MoonStage.FULL_MOON),
    ("🌖", MoonStage.WANING_GIBBOUS),
    ("🌗", MoonStage.LAST_QUARTER),
    ("🌘", MoonStage.WANING_CRESCENT),
)


DateLike = Union[date, datetime]


# =============================================================================
# НОРМАЛИЗАЦИЯ ВРЕМЕНИ
# =============================================================================


def to_utc_instant(value: DateLike) -> datetime:
    """
    Приведение даты к моменту времени в UTC.

    - date → полдень UTC этой даты
    - naive datetime → считается UTC
    - aware datetime → конвертируется в UTC

    Args:
        value: Календарная дата или момент времени

    Returns:
        Aware datetime в UTC
    """
    # datetime — подкласс date, проверяем первым
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    return datetime(
        value.year, value.month, value.day, NORMALIZATION_HOUR_UTC, 0, 0, tzinfo=timezone.utc
    )


# =============================================================================
# ФАЗА ЛУНЫ
# =============================================================================


def phase_fraction(value: DateLike) -> float:
    """
    Доля синодического месяца на дату.

    Args:
        value: Календарная дата (нормализуется к полудню UTC) или datetime

    Returns:
        phase_fraction ∈ [0, 1): 0 = новолуние, 0.5 = полнолуние

    Examples:
        >>> phase_fraction(REFERENCE_NEW_MOON_UTC)
        0.0
    """
    instant = to_utc_instant(value)
    days = (instant - REFERENCE_NEW_MOON_UTC).total_seconds() / SECONDS_PER_DAY

    age = math.fmod(days, SYNODIC_MONTH_DAYS)
    if age < 0:
        age += SYNODIC_MONTH_DAYS
    # -tiny + period может округлиться ровно до period
    if age >= SYNODIC_MONTH_DAYS:
        age -= SYNODIC_MONTH_DAYS

    return age / SYNODIC_MONTH_DAYS


def moon_age_days(value: DateLike) -> float:
    """Возраст Луны в днях от последнего новолуния"""
    return phase_fraction(value) * SYNODIC_MONTH_DAYS


def illumination_fraction(fraction: float) -> float:
    """
    Освещённая доля диска.

    Формула: 0.5 * (1 - cos(2π * phase_fraction))

    Args:
        fraction: phase_fraction ∈ [0, 1)

    Returns:
        Доля освещённости ∈ [0, 1]
    """
    return 0.5 * (1.0 - math.cos(2.0 * math.pi * fraction))


def _round_half_up(value: float) -> int:
    """Округление .5 вверх (round() в Python — банковское)"""
    return int(math.floor(value + 0.5))


def phase_bucket(fraction: float) -> Tuple[str, MoonStage]:
    """
    Символ и стадия для phase_fraction.

    8 равных bucket'ов; индекс ограничен сверху, чтобы fraction == 1.0
    не выходил за пределы таблицы.
    """
    index = int(math.floor(fraction * PHASE_BUCKET_COUNT))
    index = max(0, min(index, PHASE_BUCKET_COUNT - 1))
    return PHASE_BUCKETS[index]


def phase_info(value: DateLike) -> MoonPhaseInfo:
    """
    Метаданные фазы Луны для отображения.

    Args:
        value: Календарная дата или datetime

    Returns:
        MoonPhaseInfo (symbol, stage_label, illumination_percent, phase_fraction)
    """
    fraction = phase_fraction(value)
    symbol, stage = phase_bucket(fraction)
    illumination_percent = _round_half_up(100.0 * illumination_fraction(fraction))

    return MoonPhaseInfo(
        phase_fraction=fraction,
        symbol=symbol,
        stage_label=stage,
        illumination_percent=max(0, min(illumination_percent, 100)),
        age_days=fraction * SYNODIC_MONTH_DAYS,
        is_waxing=fraction < 0.5,
    )
