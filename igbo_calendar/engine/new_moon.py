"""new_moon — выравнивание начала года на ближайшее новолуние.

Ọnwa Mbụ (месяц 1) начинается в день наблюдаемого новолуния. Приблизительная
дата начала года "подтягивается" к дню с минимальной phase_fraction внутри
окна ±window_days.

Поиск — явный линейный перебор 2 * window_days + 1 кандидатов.
"""

import logging
from datetime import date, timedelta
from typing import Final, List, Optional

from igbo_calendar.core.domain.registry import DEFAULT_REGISTRY, CalendarRegistry
from igbo_calendar.core.math.moon_phase import moon_age_days, phase_fraction
from igbo_calendar.engine.market_days import (
    DEFAULT_CHECKPOINT,
    MarketCheckpoint,
    market_day_index_for_date,
    resolve_market_index,
)

logger = logging.getLogger(__name__)


# Окно поиска по умолчанию (дни в каждую сторону)
DEFAULT_WINDOW_DAYS: Final[int] = 5


def align_to_new_moon(target_date: date, window_days: int = DEFAULT_WINDOW_DAYS) -> date:
    """Ближайшая к новолунию дата в окне [target - window, target + window].

    Кандидаты перебираются по возрастанию смещения; при равенстве
    phase_fraction побеждает первый (детерминированный tie-break).

    Args:
        target_date: Приблизительная дата начала года
        window_days: Полуширина окна в днях (default 5).
            0 → возвращается target_date без изменений;
            отрицательное значение → кандидатов нет, возвращается target_date.

    Returns:
        Дата с минимальной phase_fraction
    """
    best_date = target_date
    best_fraction: Optional[float] = None
    best_offset = 0

    for offset in range(-window_days, window_days + 1):
        candidate = target_date + timedelta(days=offset)
        fraction = phase_fraction(candidate)

        if best_fraction is None or fraction < best_fraction:
            best_fraction = fraction
            best_date = candidate
            best_offset = offset

    logger.debug(
        "aligned %s to new moon %s (offset=%+d, phase=%s, window=%d)",
        target_date.isoformat(),
        best_date.isoformat(),
        best_offset,
        "n/a" if best_fraction is None else f"{best_fraction:.4f}",
        window_days,
    )
    return best_date


# =============================================================================
# SEED ДЛЯ ГРИГОРИАНСКОГО ГОДА
# =============================================================================

# Окно поиска seed: 15..28 февраля (третья неделя февраля ± неделя)
SEED_SCAN_MONTH: Final[int] = 2
SEED_SCAN_FIRST_DAY: Final[int] = 15
SEED_SCAN_LAST_DAY: Final[int] = 28

# Возраст Луны (дни), при котором день считается "около новолуния":
# age <= SEED_MAX_WAXING_AGE_DAYS или age >= SEED_MIN_WANING_AGE_DAYS
SEED_MAX_WAXING_AGE_DAYS: Final[float] = 1.25
SEED_MIN_WANING_AGE_DAYS: Final[float] = 28.25

# Seed, если в окне нет дня около новолуния
SEED_FALLBACK_DAY: Final[int] = 18


def approximate_year_start(
    gregorian_year: int,
    preferred_market_day: Optional[str] = None,
    checkpoint: MarketCheckpoint = DEFAULT_CHECKPOINT,
    registry: CalendarRegistry = DEFAULT_REGISTRY,
) -> date:
    """Приблизительное начало года игбо, если известен только григорианский год.

    Кандидаты — дни 15..28 февраля с возрастом Луны ≤ 1.25 или ≥ 28.25 дня.
    Результат — seed для align_to_new_moon, а не окончательное начало года.

    Args:
        gregorian_year: Григорианский год (1..9999)
        preferred_market_day: Желаемый рыночный день начала года; выбирается
            первый кандидат с этим рыночным днём (по контрольной точке)
        checkpoint: Контрольная точка рыночного цикла
        registry: Реестр меток

    Returns:
        Подходящий кандидат; иначе первый кандидат; если кандидатов нет — 18 февраля

    Raises:
        ValueError: Если год вне диапазона datetime.date
    """
    candidates: List[date] = []
    for day in range(SEED_SCAN_FIRST_DAY, SEED_SCAN_LAST_DAY + 1):
        candidate = date(gregorian_year, SEED_SCAN_MONTH, day)
        age = moon_age_days(candidate)
        if age <= SEED_MAX_WAXING_AGE_DAYS or age >= SEED_MIN_WANING_AGE_DAYS:
            candidates.append(candidate)

    if not candidates:
        return date(gregorian_year, SEED_SCAN_MONTH, SEED_FALLBACK_DAY)

    if preferred_market_day is not None and preferred_market_day.strip():
        wanted = resolve_market_index(preferred_market_day, registry)
        for candidate in candidates:
            if market_day_index_for_date(candidate, checkpoint, registry) == wanted:
                return candidate
        logger.debug(
            "no new moon candidate in February %d falls on %s, using %s",
            gregorian_year,
            preferred_market_day,
            candidates[0].isoformat(),
        )

    return candidates[0]
