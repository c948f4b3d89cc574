"""
Contract Validation Module

Модуль для валидации JSON контрактов igbo_calendar.
"""

from .validators import (
    IGBO_YEAR_SCHEMA,
    SCHEMA_DIR,
    ContractValidator,
    IgboYearValidator,
    SchemaLoader,
    default_loader,
    format_error,
    validate_igbo_year,
)

__all__ = [
    # Constants
    "IGBO_YEAR_SCHEMA",
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IgboYearValidator",
    # Functions
    "default_loader",
    "format_error",
    "validate_igbo_year",
]
