"""
igbo_calendar — гибридный лунно-солнечный календарь игбо.

13 месяцев: 12 × 28 дней + месяц 13 (29 дней, 30 в год коррекции по
3-летнему циклу). Начало года выравнивается на новолуние, каждому дню
соответствует рыночный день 4-дневного цикла Eke/Orie/Afo/Nkwo.
"""

from igbo_calendar.core.domain import IgboDay, IgboMonth, IgboYear, MoonPhaseInfo
from igbo_calendar.engine import YearBuilder, YearBuilderConfig, build_year

__version__ = "1.0.0"

__all__ = [
    "IgboDay",
    "IgboMonth",
    "IgboYear",
    "MoonPhaseInfo",
    "YearBuilder",
    "YearBuilderConfig",
    "build_year",
    "__version__",
]
