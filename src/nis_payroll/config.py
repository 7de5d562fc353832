"""Configuration management for the NIS payroll engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING

from dotenv import load_dotenv

if TYPE_CHECKING:
    from nis_payroll.calculators.contributions import FlatRateSchedule


@dataclass(frozen=True)
class PayPolicy:
    """Conversion conventions used to normalise pay to a weekly wage.

    These are policy choices rather than statutory formulas, so they are
    kept configurable instead of hardcoded in the calculators.
    """

    standard_weekly_hours: Decimal = Decimal("40")
    working_days_per_week: Decimal = Decimal("6")
    months_per_year: Decimal = Decimal("12")
    weeks_per_year: Decimal = Decimal("52")
    daily_rate_divisor: Decimal = Decimal("30")
    standard_day_hours: Decimal = Decimal("8")
    pay_day_lag_days: int = 7


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    nis_employee_rate: Decimal
    nis_employer_rate: Decimal
    nis_max_weekly_wage: Decimal | None
    standard_weekly_hours: Decimal
    working_days_per_week: Decimal
    months_per_year: Decimal
    weeks_per_year: Decimal
    daily_rate_divisor: Decimal
    standard_day_hours: Decimal
    pay_day_lag_days: int
    host: str
    port: int
    debug: bool
    log_level: str

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        max_wage = os.getenv("NIS_MAX_WEEKLY_WAGE")

        return cls(
            nis_employee_rate=Decimal(os.getenv("NIS_EMPLOYEE_RATE", "0.03")),
            nis_employer_rate=Decimal(os.getenv("NIS_EMPLOYER_RATE", "0.0625")),
            nis_max_weekly_wage=Decimal(max_wage) if max_wage else None,
            standard_weekly_hours=Decimal(os.getenv("STANDARD_WEEKLY_HOURS", "40")),
            working_days_per_week=Decimal(os.getenv("WORKING_DAYS_PER_WEEK", "6")),
            months_per_year=Decimal(os.getenv("MONTHS_PER_YEAR", "12")),
            weeks_per_year=Decimal(os.getenv("WEEKS_PER_YEAR", "52")),
            daily_rate_divisor=Decimal(os.getenv("DAILY_RATE_DIVISOR", "30")),
            standard_day_hours=Decimal(os.getenv("STANDARD_DAY_HOURS", "8")),
            pay_day_lag_days=int(os.getenv("PAY_DAY_LAG_DAYS", "7")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def policy(self) -> PayPolicy:
        """Build the pay policy used by the calculators."""
        return PayPolicy(
            standard_weekly_hours=self.standard_weekly_hours,
            working_days_per_week=self.working_days_per_week,
            months_per_year=self.months_per_year,
            weeks_per_year=self.weeks_per_year,
            daily_rate_divisor=self.daily_rate_divisor,
            standard_day_hours=self.standard_day_hours,
            pay_day_lag_days=self.pay_day_lag_days,
        )

    def default_schedule(self) -> FlatRateSchedule:
        """Build the flat contribution schedule configured for this host."""
        from nis_payroll.calculators.contributions import FlatRateSchedule

        return FlatRateSchedule(
            employee_rate=self.nis_employee_rate,
            employer_rate=self.nis_employer_rate,
            max_weekly_wage=self.nis_max_weekly_wage,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
