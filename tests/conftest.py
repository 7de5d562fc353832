"""Pytest fixtures for payroll engine tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from nis_payroll.calculators.contributions import (
    EarningsClass,
    EarningsClassSchedule,
    FlatRateSchedule,
)
from nis_payroll.calculators.engine import PayrollEngine
from nis_payroll.calculators.types import Employee, EmploymentType, ShiftConfig
from nis_payroll.config import PayPolicy
from nis_payroll.periods.generator import PeriodGenerator
from nis_payroll.periods.types import PayPeriod


@pytest.fixture
def policy() -> PayPolicy:
    """Default pay policy (40h week, 6-day week, 12/52 months)."""
    return PayPolicy()


@pytest.fixture
def flat_schedule() -> FlatRateSchedule:
    """3% employee / 6.25% employer flat schedule."""
    return FlatRateSchedule(employee_rate=Decimal("0.03"), employer_rate=Decimal("0.0625"))


@pytest.fixture
def class_schedule() -> EarningsClassSchedule:
    """Small banded schedule with a gap between II and III."""
    return EarningsClassSchedule(
        [
            EarningsClass("I", Decimal("200.00"), Decimal("339.99"), Decimal("7.50"), Decimal("15.00")),
            EarningsClass("II", Decimal("340.00"), Decimal("499.99"), Decimal("12.00"), Decimal("24.00")),
            EarningsClass("III", Decimal("600.00"), Decimal("799.99"), Decimal("20.00"), Decimal("40.00")),
        ]
    )


@pytest.fixture
def engine(flat_schedule, policy) -> PayrollEngine:
    return PayrollEngine(flat_schedule, policy)


@pytest.fixture
def hourly_employee() -> Employee:
    return Employee(
        employee_id="emp-hourly",
        employment_type=EmploymentType.HOURLY,
        employee_number="EMP001",
        first_name="Asha",
        last_name="Ramdial",
        hourly_rate=Decimal("25.00"),
    )


@pytest.fixture
def daily_employee() -> Employee:
    return Employee(
        employee_id="emp-daily",
        employment_type=EmploymentType.DAILY,
        employee_number="EMP002",
        daily_rate=Decimal("200.00"),
    )


@pytest.fixture
def weekly_employee() -> Employee:
    return Employee(
        employee_id="emp-weekly",
        employment_type=EmploymentType.WEEKLY,
        employee_number="EMP003",
        weekly_rate=Decimal("1200.00"),
    )


@pytest.fixture
def monthly_employee() -> Employee:
    return Employee(
        employee_id="emp-monthly",
        employment_type=EmploymentType.MONTHLY,
        employee_number="EMP004",
        monthly_salary=Decimal("5000.00"),
    )


@pytest.fixture
def day_shift() -> ShiftConfig:
    return ShiftConfig(
        name="Day",
        base_rate=Decimal("250.00"),
        hours_label="7am - 3pm",
        hourly_rate=Decimal("31.25"),
        is_default=True,
    )


@pytest.fixture
def night_shift() -> ShiftConfig:
    return ShiftConfig(name="Night", base_rate=Decimal("300.00"), hours_label="11pm - 7am")


@pytest.fixture
def shift_employee(day_shift, night_shift) -> Employee:
    return Employee(
        employee_id="emp-shift",
        employment_type=EmploymentType.SHIFT_BASED,
        employee_number="EMP005",
        shifts=(day_shift, night_shift),
    )


@pytest.fixture
def january_period(hourly_employee, policy) -> PayPeriod:
    """Wed 2024-01-10 to Mon 2024-01-22, three Monday-start weeks."""
    return PeriodGenerator(policy).generate(date(2024, 1, 10), date(2024, 1, 22), hourly_employee)
