"""
Тесты для core.math.moon_phase

Проверяет:
1. phase_fraction ∈ [0, 1) для дат до и после опорного новолуния
2. Нормализацию date → полдень UTC и обработку datetime (naive / aware)
3. Bucket'ы стадий (включая clamp для fraction == 1.0)
4. Освещённость и округление half-up
5. phase_info на известных датах
"""

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from igbo_calendar.core.domain import MoonPhaseInfo, MoonStage
from igbo_calendar.core.math import (
    PHASE_BUCKETS,
    REFERENCE_NEW_MOON_UTC,
    SYNODIC_MONTH_DAYS,
    illumination_fraction,
    moon_age_days,
    phase_bucket,
    phase_fraction,
    phase_info,
    to_utc_instant,
)
from igbo_calendar.core.math.moon_phase import _round_half_up


def circular_distance(a: float, b: float) -> float:
    """Расстояние между долями фазы на окружности [0, 1)"""
    d = abs(a - b) % 1.0
    return min(d, 1.0 - d)


# =============================================================================
# NORMALIZATION
# =============================================================================


class TestToUtcInstant:
    """Тесты нормализации времени"""

    def test_date_normalized_to_noon_utc(self):
        instant = to_utc_instant(date(2025, 2, 28))
        assert instant == datetime(2025, 2, 28, 12, 0, tzinfo=timezone.utc)

    def test_naive_datetime_treated_as_utc(self):
        instant = to_utc_instant(datetime(2025, 2, 28, 3, 30))
        assert instant == datetime(2025, 2, 28, 3, 30, tzinfo=timezone.utc)
        assert instant.tzinfo is timezone.utc

    def test_aware_datetime_converted_to_utc(self):
        lagos = timezone(timedelta(hours=1))
        instant = to_utc_instant(datetime(2025, 2, 28, 13, 0, tzinfo=lagos))
        assert instant == datetime(2025, 2, 28, 12, 0, tzinfo=timezone.utc)

    def test_noon_datetime_matches_date(self):
        """date и naive datetime в полдень дают одну и ту же фазу"""
        assert phase_fraction(datetime(2025, 2, 28, 12, 0)) == phase_fraction(date(2025, 2, 28))


# =============================================================================
# PHASE FRACTION
# =============================================================================


class TestPhaseFraction:
    """Тесты phase_fraction"""

    def test_reference_instant_is_zero(self):
        assert phase_fraction(REFERENCE_NEW_MOON_UTC) == 0.0

    def test_reference_date_is_near_new_moon(self):
        """Полдень 2000-01-06 — за ~6 часов до опорного новолуния"""
        fraction = phase_fraction(date(2000, 1, 6))
        assert circular_distance(fraction, 0.0) < 0.01
        assert fraction > 0.99

    def test_one_synodic_month_later_returns_to_zero(self):
        later = REFERENCE_NEW_MOON_UTC + timedelta(days=SYNODIC_MONTH_DAYS)
        assert circular_distance(phase_fraction(later), 0.0) < 1e-9

    def test_half_month_is_full_moon(self):
        later = REFERENCE_NEW_MOON_UTC + timedelta(days=SYNODIC_MONTH_DAYS / 2)
        assert phase_fraction(later) == pytest.approx(0.5, abs=1e-9)

    def test_known_new_moon_2025_02_28(self):
        """2025-02-28: возраст Луны ~0.73 дня"""
        assert phase_fraction(date(2025, 2, 28)) == pytest.approx(0.024625, abs=1e-4)
        assert moon_age_days(date(2025, 2, 28)) == pytest.approx(0.7272, abs=1e-3)

    def test_day_before_known_new_moon_wraps(self):
        assert phase_fraction(date(2025, 2, 27)) == pytest.approx(0.99076, abs=1e-4)

    @pytest.mark.parametrize(
        "value",
        [
            date(1900, 1, 1),
            date(1999, 12, 31),
            date(2000, 1, 6),
            date(2025, 2, 28),
            date(2100, 6, 15),
            datetime(1969, 7, 20, 20, 17),
            datetime(2000, 1, 6, 18, 13, 59, tzinfo=timezone.utc),
        ],
    )
    def test_fraction_always_in_unit_interval(self, value):
        fraction = phase_fraction(value)
        assert 0.0 <= fraction < 1.0

    def test_consecutive_days_advance_by_one_day(self):
        """Шаг 1 день = 1 / синодический месяц (по модулю 1)"""
        step = 1.0 / SYNODIC_MONTH_DAYS
        start = date(2025, 3, 1)
        for offset in range(60):
            current = phase_fraction(start + timedelta(days=offset))
            following = phase_fraction(start + timedelta(days=offset + 1))
            assert circular_distance(following - current, step) < 1e-9

    def test_deterministic(self):
        assert phase_fraction(date(2031, 8, 9)) == phase_fraction(date(2031, 8, 9))


# =============================================================================
# BUCKETS / ILLUMINATION
# =============================================================================


class TestPhaseBucket:
    """Тесты выбора стадии"""

    @pytest.mark.parametrize(
        "fraction,expected",
        [
            (0.0, MoonStage.NEW_MOON),
            (0.124, MoonStage.NEW_MOON),
            (0.125, MoonStage.WAXING_CRESCENT),
            (0.25, MoonStage.FIRST_QUARTER),
            (0.375, MoonStage.WAXING_GIBBOUS),
            (0.5, MoonStage.FULL_MOON),
            (0.625, MoonStage.WANING_GIBBOUS),
            (0.75, MoonStage.LAST_QUARTER),
            (0.875, MoonStage.WANING_CRESCENT),
            (0.999999, MoonStage.WANING_CRESCENT),
        ],
    )
    def test_bucket_boundaries(self, fraction, expected):
        _, stage = phase_bucket(fraction)
        assert stage == expected

    def test_fraction_one_is_clamped(self):
        """fraction == 1.0 (округление) не выходит за таблицу"""
        assert phase_bucket(1.0) == PHASE_BUCKETS[-1]

    def test_eight_distinct_symbols(self):
        symbols = [symbol for symbol, _ in PHASE_BUCKETS]
        assert len(symbols) == 8
        assert len(set(symbols)) == 8


class TestIllumination:
    """Тесты освещённости"""

    def test_new_moon_is_dark(self):
        assert illumination_fraction(0.0) == pytest.approx(0.0)

    def test_full_moon_is_lit(self):
        assert illumination_fraction(0.5) == pytest.approx(1.0)

    def test_quarters_half_lit(self):
        assert illumination_fraction(0.25) == pytest.approx(0.5)
        assert illumination_fraction(0.75) == pytest.approx(0.5)

    @pytest.mark.parametrize(
        "value,expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (99.5, 100), (0.0, 0)],
    )
    def test_round_half_up(self, value, expected):
        assert _round_half_up(value) == expected


# =============================================================================
# PHASE INFO
# =============================================================================


class TestPhaseInfo:
    """Тесты phase_info"""

    def test_new_moon_2025_02_28(self):
        info = phase_info(date(2025, 2, 28))

        assert info.symbol == "🌑"
        assert info.stage_label == MoonStage.NEW_MOON
        assert info.illumination_percent == 1
        assert info.is_waxing is True
        assert info.age_days == pytest.approx(0.7272, abs=1e-3)

    def test_full_moon_2025_03_15(self):
        info = phase_info(date(2025, 3, 15))

        assert info.symbol == "🌕"
        assert info.stage_label == MoonStage.FULL_MOON
        assert info.illumination_percent == 99
        assert info.is_waxing is False

    def test_waxing_gibbous_2025_03_14(self):
        info = phase_info(date(2025, 3, 14))

        assert info.stage_label == MoonStage.WAXING_GIBBOUS
        assert info.illumination_percent == 100
        assert info.is_waxing is True

    def test_info_consistent_with_fraction(self):
        day = date(2030, 11, 2)
        info = phase_info(day)

        assert info.phase_fraction == phase_fraction(day)
        assert info.age_days == pytest.approx(moon_age_days(day))
        assert (info.symbol, info.stage_label) == phase_bucket(info.phase_fraction)
        assert 0 <= info.illumination_percent <= 100

    def test_info_is_frozen(self):
        info = phase_info(date(2025, 2, 28))
        with pytest.raises(ValidationError):
            info.illumination_percent = 50

    def test_model_rejects_fraction_one(self):
        with pytest.raises(ValidationError):
            MoonPhaseInfo(
                phase_fraction=1.0,
                symbol="🌑",
                stage_label=MoonStage.NEW_MOON,
                illumination_percent=0,
                age_days=0.0,
                is_waxing=True,
            )

    def test_json_dump_uses_stage_label_string(self):
        data = phase_info(date(2025, 2, 28)).model_dump(mode="json")
        assert data["stage_label"] == "New Moon"
