"""
LeapCycle — Коррекция года игбо по 3-летнему циклу

Структура года:
- Месяцы 1–12: по 28 дней
- Месяц 13: 29 дней, в год коррекции — 30
- Год коррекции: (igbo_year_index - ANCHOR_YEAR) mod LEAP_CYCLE_YEARS == 0

ВАЖНО: Григорианские високосные годы НЕ влияют на коррекцию. Дополнительный
день добавляется только к месяцу 13 и только по 3-летнему циклу.
"""

from typing import Final, Tuple


# =============================================================================
# ПАРАМЕТРЫ ЦИКЛА
# =============================================================================

# Первый реализованный год (сам является годом коррекции)
ANCHOR_YEAR: Final[int] = 2025

# Период коррекции (лет)
LEAP_CYCLE_YEARS: Final[int] = 3

MONTHS_IN_YEAR: Final[int] = 13
STANDARD_MONTH_DAYS: Final[int] = 28
LAST_MONTH_DAYS: Final[int] = 29


# =============================================================================
# LEAP RULE
# =============================================================================


def is_leap_year(
    igbo_year_index: int,
    anchor_year: int = ANCHOR_YEAR,
    cycle: int = LEAP_CYCLE_YEARS,
) -> bool:
    """
    Является ли год игбо годом коррекции.

    Годы на расстоянии, кратном cycle, от anchor_year (в обе стороны)
    считаются годами коррекции; anchor_year — тоже.

    Args:
        igbo_year_index: Логический индекс года игбо
        anchor_year: Опорный год (default: 2025)
        cycle: Период в годах (default: 3)

    Returns:
        True для года коррекции

    Raises:
        ValueError: Если cycle <= 0

    Examples:
        >>> is_leap_year(2025)
        True
        >>> is_leap_year(2026)
        False
        >>> is_leap_year(2022)
        True
    """
    if cycle <= 0:
        raise ValueError(f"cycle must be positive, got {cycle}")

    return (igbo_year_index - anchor_year) % cycle == 0


# =============================================================================
# ДЛИНЫ МЕСЯЦЕВ
# =============================================================================


def days_in_month(month_index: int, is_leap: bool) -> int:
    """
    Количество дней в месяце года игбо.

    Args:
        month_index: Номер месяца 1..13
        is_leap: Флаг года коррекции

    Returns:
        28 для месяцев 1–12; 29 (или 30 в год коррекции) для месяца 13

    Raises:
        ValueError: Если month_index вне 1..13
    """
    if not 1 <= month_index <= MONTHS_IN_YEAR:
        raise ValueError(f"month_index must be 1..{MONTHS_IN_YEAR}, got {month_index}")

    if month_index < MONTHS_IN_YEAR:
        return STANDARD_MONTH_DAYS

    return LAST_MONTH_DAYS + (1 if is_leap else 0)


def month_lengths(is_leap: bool) -> Tuple[int, ...]:
    """Длины всех 13 месяцев по порядку"""
    return tuple(days_in_month(m, is_leap) for m in range(1, MONTHS_IN_YEAR + 1))


def year_length(is_leap: bool) -> int:
    """365 для обычного года (12 × 28 + 29), 366 для года коррекции"""
    return sum(month_lengths(is_leap))
