"""
MoonPhaseInfo — Модель фазы Луны на конкретную дату

Immutable Pydantic модель, описывающая фазу Луны для отображения:
- phase_fraction: доля синодического месяца (0 = новолуние, 0.5 = полнолуние)
- symbol / stage_label: одна из 8 фаз (bucket шириной 0.125)
- illumination_percent: освещённость диска 0..100
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class MoonStage(str, Enum):
    """Стадия Луны (8 равных bucket'ов по phase_fraction)"""

    NEW_MOON = "New Moon"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL_MOON = "Full Moon"
    WANING_GIBBOUS = "Waning Gibbous"
    LAST_QUARTER = "Last Quarter"
    WANING_CRESCENT = "Waning Crescent"


# =============================================================================
# MODELS
# =============================================================================


class MoonPhaseInfo(BaseModel):
    """
    Фаза Луны на дату.

    Вычисляется в core.math.moon_phase.phase_info, здесь только данные.
    """

    phase_fraction: float = Field(
        ..., ge=0.0, lt=1.0, description="Доля синодического месяца [0, 1)"
    )
    symbol: str = Field(..., min_length=1, description="Символ фазы (emoji)")
    stage_label: MoonStage = Field(..., description="Название стадии")
    illumination_percent: int = Field(
        ..., ge=0, le=100, description="Освещённость диска в процентах"
    )

    # Вспомогательные величины
    age_days: float = Field(..., ge=0.0, description="Возраст Луны в днях от новолуния")
    is_waxing: bool = Field(..., description="True для растущей Луны (phase_fraction < 0.5)")

    model_config = {"frozen": True}
