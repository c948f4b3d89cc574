"""
IgboYear — Модель материализованного года игбо

Immutable Pydantic модели результата YearBuilder:
- IgboDay: один день (григорианская дата, день недели, рыночный день, Луна)
- GregorianSpan: григорианский диапазон месяца (только для отображения)
- IgboMonth: месяц 1..13 с метками из реестра и списком дней
- IgboYear: 13 месяцев + метка года и флаг leap

ИНВАРИАНТЫ (проверяются при создании модели):
1. В году ровно 13 месяцев, индексы 1..13 по порядку
2. В месяце len(days) == day_count, igbo_day идёт 1..day_count
3. Даты строго последовательны (шаг 1 день), в том числе на границах месяцев
4. Первый день года совпадает с year_start
"""

from datetime import date, timedelta
from typing import Any, Dict, Final, Iterator, List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from igbo_calendar.core.domain.moon import MoonStage


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Версия JSON контракта igbo_year (см. core/contracts/schema/igbo_year.json)
CONTRACT_SCHEMA_VERSION: Final[str] = "1"

# Названия дней недели, индекс = date.weekday() (0 = Monday)
WEEKDAY_NAMES: Final[Tuple[str, ...]] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

YEAR_MONTH_COUNT: Final[int] = 13


def weekday_name(day: date) -> str:
    """Английское название дня недели (не зависит от locale)"""
    return WEEKDAY_NAMES[day.weekday()]


# =============================================================================
# DAY / MONTH MODELS
# =============================================================================


class IgboDay(BaseModel):
    """Один день года игбо"""

    igbo_day: int = Field(..., ge=1, le=30, description="Номер дня в месяце")
    gregorian_date: date = Field(..., description="Григорианская дата")
    weekday: str = Field(..., description="День недели (Monday..Sunday)")
    market_day: str = Field(..., min_length=1, description="Рыночный день (Eke/Orie/Afo/Nkwo)")

    # Луна (полдень UTC этой даты)
    moon_symbol: str = Field(..., min_length=1, description="Символ фазы")
    moon_stage: MoonStage = Field(..., description="Стадия Луны")
    illumination_percent: int = Field(..., ge=0, le=100, description="Освещённость, %")
    phase_fraction: float = Field(..., ge=0.0, lt=1.0, description="Доля синодического месяца")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_weekday(self) -> "IgboDay":
        """weekday должен соответствовать gregorian_date"""
        expected = weekday_name(self.gregorian_date)
        if self.weekday != expected:
            raise ValueError(
                f"weekday {self.weekday!r} does not match {self.gregorian_date} ({expected})"
            )
        return self


class GregorianSpan(BaseModel):
    """Григорианский диапазон месяца [start, end] включительно"""

    start: date = Field(..., description="Первый день месяца")
    end: date = Field(..., description="Последний день месяца")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_order(self) -> "GregorianSpan":
        if self.end < self.start:
            raise ValueError(f"span end {self.end} precedes start {self.start}")
        return self

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


class IgboMonth(BaseModel):
    """
    Месяц года игбо.

    Метки name/gloss/theme берутся из CalendarRegistry по индексу.
    """

    index: int = Field(..., ge=1, le=YEAR_MONTH_COUNT, description="Номер месяца 1..13")
    name: str = Field(..., min_length=1, description="Название месяца")
    gloss: str = Field(..., min_length=1, description="Перевод названия")
    theme: str = Field(..., min_length=1, description="Тематика")
    day_count: int = Field(..., ge=28, le=30, description="Количество дней")
    gregorian_span: GregorianSpan = Field(..., description="Григорианский диапазон")
    days: Tuple[IgboDay, ...] = Field(..., description="Дни месяца по порядку")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_days(self) -> "IgboMonth":
        """
        Проверка согласованности дней месяца.

        - len(days) == day_count
        - igbo_day = 1..day_count
        - даты идут подряд
        - gregorian_span совпадает с первым/последним днём
        """
        if len(self.days) != self.day_count:
            raise ValueError(
                f"month {self.index}: {len(self.days)} days, expected {self.day_count}"
            )

        for position, day in enumerate(self.days, start=1):
            if day.igbo_day != position:
                raise ValueError(
                    f"month {self.index}: day at position {position} has igbo_day {day.igbo_day}"
                )

        for previous, current in zip(self.days, self.days[1:]):
            if current.gregorian_date - previous.gregorian_date != timedelta(days=1):
                raise ValueError(
                    f"month {self.index}: dates not consecutive "
                    f"({previous.gregorian_date} → {current.gregorian_date})"
                )

        first = self.days[0].gregorian_date
        last = self.days[-1].gregorian_date
        if self.gregorian_span.start != first or self.gregorian_span.end != last:
            raise ValueError(
                f"month {self.index}: span {self.gregorian_span.start}..{self.gregorian_span.end} "
                f"does not match days {first}..{last}"
            )
        return self

    def find_day(self, day: date) -> Optional[IgboDay]:
        """IgboDay для григорианской даты или None, если дата вне месяца"""
        if not self.gregorian_span.contains(day):
            return None
        return self.days[(day - self.gregorian_span.start).days]


# =============================================================================
# YEAR MODEL
# =============================================================================


class IgboYear(BaseModel):
    """
    Полностью материализованный год игбо.

    Создаётся YearBuilder.build_year, дальше не изменяется (frozen=True).
    Слой отображения получает готовые данные и не пересчитывает календарь.
    """

    year_index: int = Field(..., description="Логический индекс года (например, 2025)")
    year_start: date = Field(..., description="Первый день Ọnwa Mbụ (выровнен на новолуние)")
    is_leap: bool = Field(..., description="Год коррекции (месяц 13 = 30 дней)")
    label: str = Field(..., min_length=1, description="Метка года для отображения")
    months: Tuple[IgboMonth, ...] = Field(..., description="13 месяцев по порядку")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_structure(self) -> "IgboYear":
        """
        Проверка структуры года.

        - ровно 13 месяцев с индексами 1..13
        - год начинается с year_start
        - месяцы стыкуются без пропусков и перекрытий
        """
        if len(self.months) != YEAR_MONTH_COUNT:
            raise ValueError(f"year must have {YEAR_MONTH_COUNT} months, got {len(self.months)}")

        for position, month in enumerate(self.months, start=1):
            if month.index != position:
                raise ValueError(f"month at position {position} has index {month.index}")

        if self.months[0].gregorian_span.start != self.year_start:
            raise ValueError(
                f"first month starts {self.months[0].gregorian_span.start}, "
                f"year_start is {self.year_start}"
            )

        for previous, current in zip(self.months, self.months[1:]):
            expected = previous.gregorian_span.end + timedelta(days=1)
            if current.gregorian_span.start != expected:
                raise ValueError(
                    f"month {current.index} starts {current.gregorian_span.start}, "
                    f"expected {expected}"
                )
        return self

    @property
    def year_end(self) -> date:
        """Последний день месяца 13"""
        return self.months[-1].gregorian_span.end

    def total_days(self) -> int:
        """
        Количество дней в году.

        Returns:
            365 (12 × 28 + 29) или 366 для года коррекции
        """
        return sum(month.day_count for month in self.months)

    def iter_days(self) -> Iterator[IgboDay]:
        """Все дни года по порядку, через границы месяцев"""
        for month in self.months:
            yield from month.days

    def find_day(self, day: date) -> Optional[Tuple[IgboMonth, IgboDay]]:
        """
        Поиск григорианской даты внутри года.

        Используется слоем отображения для подсветки "сегодня".

        Args:
            day: Григорианская дата

        Returns:
            (IgboMonth, IgboDay) или None, если дата вне года
        """
        for month in self.months:
            found = month.find_day(day)
            if found is not None:
                return month, found
        return None

    def to_contract(self) -> Dict[str, Any]:
        """
        Сериализация в JSON контракт igbo_year.

        Даты — ISO строки YYYY-MM-DD, стадии Луны — строковые значения.

        Returns:
            dict, соответствующий схеме igbo_year.json
        """
        data = self.model_dump(mode="json")
        months: List[Dict[str, Any]] = data.pop("months")
        return {
            "schema_version": CONTRACT_SCHEMA_VERSION,
            **data,
            "year_end": self.year_end.isoformat(),
            "total_days": self.total_days(),
            "months": months,
        }
