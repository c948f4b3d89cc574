"""
CalendarRegistry — Справочник меток календаря

Названия месяцев и цикл рыночных дней хранятся как данные, а не как логику.
YearBuilder получает реестр через конфигурацию, поэтому в тестах метки можно
подменить, не трогая алгоритмы.

Канонический цикл рыночных дней: Eke → Orie → Afo → Nkwo.
"""

from typing import Dict, Final, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MONTHS_IN_REGISTRY: Final[int] = 13
MARKET_CYCLE_LENGTH: Final[int] = 4


# =============================================================================
# MODELS
# =============================================================================


class MonthLabel(BaseModel):
    """Метки одного месяца (ключ — порядковый номер 1..13)"""

    index: int = Field(..., ge=1, le=MONTHS_IN_REGISTRY, description="Номер месяца")
    name: str = Field(..., min_length=1, description="Название месяца на игбо")
    gloss: str = Field(..., min_length=1, description="Перевод названия")
    theme: str = Field(..., min_length=1, description="Тематика месяца")

    model_config = {"frozen": True}


class CalendarRegistry(BaseModel):
    """
    Реестр меток календаря.

    Содержит:
    - months: 13 MonthLabel в порядке 1..13
    - market_cycle: 4 рыночных дня в каноническом порядке
    - market_aliases: орфографические варианты → каноническая метка
    """

    months: Tuple[MonthLabel, ...] = Field(..., description="Метки месяцев 1..13")
    market_cycle: Tuple[str, ...] = Field(..., description="Цикл рыночных дней")
    market_aliases: Dict[str, str] = Field(
        default_factory=dict, description="Варианты написания (lowercase) → метка цикла"
    )

    model_config = {"frozen": True}

    @field_validator("months")
    @classmethod
    def validate_months(cls, v: Tuple[MonthLabel, ...]) -> Tuple[MonthLabel, ...]:
        """Ровно 13 месяцев, индексы 1..13 по порядку"""
        if len(v) != MONTHS_IN_REGISTRY:
            raise ValueError(f"registry must define {MONTHS_IN_REGISTRY} months, got {len(v)}")
        for position, label in enumerate(v, start=1):
            if label.index != position:
                raise ValueError(
                    f"month label at position {position} has index {label.index}"
                )
        return v

    @field_validator("market_cycle")
    @classmethod
    def validate_market_cycle(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Ровно 4 непустые уникальные метки"""
        if len(v) != MARKET_CYCLE_LENGTH:
            raise ValueError(
                f"market cycle must have {MARKET_CYCLE_LENGTH} labels, got {len(v)}"
            )
        if any(not label.strip() for label in v):
            raise ValueError("market cycle labels must be non-empty")
        if len(set(v)) != len(v):
            raise ValueError(f"market cycle labels must be unique: {v}")
        return v

    @model_validator(mode="after")
    def validate_aliases(self) -> "CalendarRegistry":
        """Каждый alias должен указывать на метку из market_cycle"""
        for alias, target in self.market_aliases.items():
            if target not in self.market_cycle:
                raise ValueError(f"alias {alias!r} points to unknown market day {target!r}")
        return self

    def month(self, index: int) -> MonthLabel:
        """
        Метки месяца по номеру.

        Raises:
            ValueError: Если index вне 1..13
        """
        if not 1 <= index <= MONTHS_IN_REGISTRY:
            raise ValueError(f"month index must be 1..{MONTHS_IN_REGISTRY}, got {index}")
        return self.months[index - 1]


# =============================================================================
# DEFAULT REGISTRY
# =============================================================================

DEFAULT_MONTHS: Final[Tuple[MonthLabel, ...]] = (
    MonthLabel(index=1, name="Ọnwa Mbụ", gloss="First Moon", theme="New beginnings"),
    MonthLabel(index=2, name="Ọnwa Abụọ", gloss="Second Moon", theme="Stability"),
    MonthLabel(index=3, name="Ọnwa Ife Eke", gloss="Light of Eke", theme="Awakening"),
    MonthLabel(index=4, name="Ọnwa Anọ", gloss="Fourth Moon", theme="Growth"),
    MonthLabel(index=5, name="Ọnwa Agwụ", gloss="Moon of Agwụ", theme="Spiritual insight"),
    MonthLabel(index=6, name="Ọnwa Ifejiọkụ", gloss="Yam Deity Moon", theme="Agriculture"),
    MonthLabel(index=7, name="Ọnwa Alọm Chi", gloss="Personal Spirit", theme="Reflection"),
    MonthLabel(index=8, name="Ọnwa Ilo Mmụọ", gloss="Spirits Retreat", theme="Cleansing"),
    MonthLabel(index=9, name="Ọnwa Ana", gloss="Earth Moon", theme="Grounding"),
    MonthLabel(index=10, name="Ọnwa Okike", gloss="Creation", theme="Renewal"),
    MonthLabel(index=11, name="Ọnwa Ajana", gloss="Harvest Cleansing", theme="Harvest"),
    MonthLabel(index=12, name="Ọnwa Ede Ajana", gloss="End of Ajana", theme="Completion"),
    MonthLabel(index=13, name="Ọnwa Ụzọ Alụsị", gloss="Path of Deities", theme="Transition"),
)

DEFAULT_MARKET_CYCLE: Final[Tuple[str, ...]] = ("Eke", "Orie", "Afo", "Nkwo")

# Варианты написания с тонами/подточечными гласными (ключи в lowercase)
DEFAULT_MARKET_ALIASES: Final[Dict[str, str]] = {
    "ọrie": "Orie",
    "orié": "Orie",
    "afọ": "Afo",
    "afó": "Afo",
    "nkwọ": "Nkwo",
    "ńkwọ": "Nkwo",
    "kwọ": "Nkwo",
}

DEFAULT_REGISTRY: Final[CalendarRegistry] = CalendarRegistry(
    months=DEFAULT_MONTHS,
    market_cycle=DEFAULT_MARKET_CYCLE,
    market_aliases=DEFAULT_MARKET_ALIASES,
)
