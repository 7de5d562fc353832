"""Tests for environment-driven settings."""

from decimal import Decimal

import pytest

from nis_payroll.calculators.contributions import FlatRateSchedule
from nis_payroll.config import PayPolicy, Settings

ENV_VARS = (
    "NIS_EMPLOYEE_RATE",
    "NIS_EMPLOYER_RATE",
    "NIS_MAX_WEEKLY_WAGE",
    "STANDARD_WEEKLY_HOURS",
    "WORKING_DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "WEEKS_PER_YEAR",
    "DAILY_RATE_DIVISOR",
    "STANDARD_DAY_HOURS",
    "PAY_DAY_LAG_DAYS",
    "HOST",
    "PORT",
    "DEBUG",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Isolate from inherited variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env):
        settings = Settings.from_env()

        assert settings.nis_employee_rate == Decimal("0.03")
        assert settings.nis_employer_rate == Decimal("0.0625")
        assert settings.nis_max_weekly_wage is None
        assert settings.port == 8000
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.policy() == PayPolicy()

    def test_overrides(self, clean_env):
        clean_env.setenv("NIS_EMPLOYEE_RATE", "0.04")
        clean_env.setenv("NIS_MAX_WEEKLY_WAGE", "1500")
        clean_env.setenv("WORKING_DAYS_PER_WEEK", "5")
        clean_env.setenv("PAY_DAY_LAG_DAYS", "3")
        clean_env.setenv("LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.nis_employee_rate == Decimal("0.04")
        assert settings.nis_max_weekly_wage == Decimal("1500")
        assert settings.policy().working_days_per_week == Decimal("5")
        assert settings.policy().pay_day_lag_days == 3
        assert settings.log_level == "DEBUG"

    def test_default_schedule(self, clean_env):
        clean_env.setenv("NIS_MAX_WEEKLY_WAGE", "800")

        schedule = Settings.from_env().default_schedule()

        assert isinstance(schedule, FlatRateSchedule)
        assert schedule.contributions(Decimal("1000")).employee_amount == Decimal("24.00")
