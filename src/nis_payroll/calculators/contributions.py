"""NIS contribution schedules and the contribution calculator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Protocol

from nis_payroll.calculators.money import round_to_cents
from nis_payroll.calculators.types import ZERO, ContributionAmounts

logger = logging.getLogger(__name__)


class ContributionSchedule(Protocol):
    """Protocol for statutory contribution schedules.

    A schedule maps a weekly-equivalent wage to employee and employer
    contribution amounts. Callers never see how the amounts are derived,
    so a flat-rate schedule can be swapped for a banded table freely.
    """

    def contributions(self, weekly_wage: Decimal) -> ContributionAmounts:
        """Return the rounded contributions due on weekly_wage."""
        ...


@dataclass(frozen=True)
class FlatRateSchedule:
    """Flat percentage schedule, optionally capped at a weekly wage ceiling."""

    employee_rate: Decimal  # As decimal, e.g. 0.03 for 3%
    employer_rate: Decimal
    max_weekly_wage: Decimal | None = None  # None = no ceiling

    def contributions(self, weekly_wage: Decimal) -> ContributionAmounts:
        if weekly_wage <= 0:
            return ContributionAmounts(ZERO, ZERO)

        base = weekly_wage
        if self.max_weekly_wage is not None:
            base = min(weekly_wage, self.max_weekly_wage)

        # Each share is rounded on its own so neither depends on the other
        return ContributionAmounts(
            employee_amount=round_to_cents(base * self.employee_rate),
            employer_amount=round_to_cents(base * self.employer_rate),
        )


@dataclass(frozen=True)
class EarningsClass:
    """A weekly earnings band with fixed contribution amounts."""

    name: str
    min_weekly_earnings: Decimal
    max_weekly_earnings: Decimal
    employee_contribution: Decimal
    employer_contribution: Decimal

    def contains(self, weekly_wage: Decimal) -> bool:
        return self.min_weekly_earnings <= weekly_wage <= self.max_weekly_earnings


class EarningsClassSchedule:
    """Banded schedule that looks contributions up by earnings class.

    Lookup rules:
    - The class whose inclusive band contains the wage wins
    - Wages above every band use the highest class
    - Wages below every band contribute nothing
    """

    def __init__(self, classes: list[EarningsClass]):
        self.classes = sorted(classes, key=lambda c: c.min_weekly_earnings)

    def find_class(self, weekly_wage: Decimal) -> EarningsClass | None:
        """Find the earnings class for a weekly wage."""
        for cls in self.classes:
            if cls.contains(weekly_wage):
                return cls

        # Highest class whose lower bound the wage reaches (covers the top band and gaps)
        reached = [c for c in self.classes if c.min_weekly_earnings <= weekly_wage]
        return reached[-1] if reached else None

    def contributions(self, weekly_wage: Decimal) -> ContributionAmounts:
        earnings_class = self.find_class(weekly_wage)
        if earnings_class is None:
            return ContributionAmounts(ZERO, ZERO)

        return ContributionAmounts(
            employee_amount=round_to_cents(earnings_class.employee_contribution),
            employer_amount=round_to_cents(earnings_class.employer_contribution),
            earnings_class=earnings_class.name,
        )


def schedule_from_payload(payload: dict[str, Any]) -> FlatRateSchedule | EarningsClassSchedule:
    """Build a schedule from a JSON config payload.

    Payload structure:
    {
        "type": "flat",
        "employee_rate": 0.03,
        "employer_rate": 0.0625,
        "max_weekly_wage": 1500  // optional
    }
    or
    {
        "type": "earnings_class",
        "classes": [
            {"class": "I", "min": 200, "max": 339.99, "employee": 7.5, "employer": 15.0},
            ...
        ]
    }
    """
    if not isinstance(payload, dict):
        raise ValueError("Contribution schedule must be a JSON object")
    schedule_type = payload.get("type", "flat")

    if schedule_type == "flat":
        return FlatRateSchedule(
            employee_rate=Decimal(str(payload["employee_rate"])),
            employer_rate=Decimal(str(payload["employer_rate"])),
            max_weekly_wage=(
                Decimal(str(payload["max_weekly_wage"]))
                if payload.get("max_weekly_wage") is not None
                else None
            ),
        )

    if schedule_type == "earnings_class":
        entries = payload.get("classes", [])
        if not isinstance(entries, list):
            raise ValueError("Earnings classes must be a list")
        classes = []
        for i, c in enumerate(entries):
            if not isinstance(c, dict):
                raise ValueError(f"Earnings class {i} must be an object")
            classes.append(
                EarningsClass(
                    name=str(c["class"]),
                    min_weekly_earnings=Decimal(str(c["min"])),
                    max_weekly_earnings=Decimal(str(c["max"])),
                    employee_contribution=Decimal(str(c["employee"])),
                    employer_contribution=Decimal(str(c["employer"])),
                )
            )
        if not classes:
            raise ValueError("Earnings class schedule requires at least one class")
        return EarningsClassSchedule(classes)

    raise ValueError(f"Unknown contribution schedule type '{schedule_type}'")


class ContributionCalculator:
    """Applies a contribution schedule to a weekly-equivalent wage."""

    @staticmethod
    def calculate(weekly_wage: Decimal, schedule: ContributionSchedule) -> ContributionAmounts:
        """Calculate employee and employer contributions for weekly_wage."""
        amounts = schedule.contributions(weekly_wage)
        logger.debug(
            "NIS on weekly wage %s: employee=%s employer=%s class=%s",
            weekly_wage,
            amounts.employee_amount,
            amounts.employer_amount,
            amounts.earnings_class,
        )
        return amounts
