"""CSV export of pay periods, one row per week."""

from __future__ import annotations

import csv
import io
from datetime import date
from decimal import Decimal
from typing import Iterator, TextIO

from nis_payroll.calculators.money import round_to_cents
from nis_payroll.periods.types import PayPeriod, WeeklyRecord

EXPORT_HEADER = [
    "Week #",
    "Week Start",
    "Week End",
    "Pay Day",
    "Pay/(8hr)dy",
    "Recorded Days",
    "Calculated Pay",
    "NIS Employee Contribution",
    "Calc Pay less NIS",
    "Recorded Pay",
    "NIS Employer Contribution",
    "Total NIS Cont.",
    "Net Pay",
]


def format_date(value: date) -> str:
    """Format a date as DD/MM/YYYY."""
    return value.strftime("%d/%m/%Y")


def format_amount(value: Decimal) -> str:
    """Format currency to 2 places with no thousands separator."""
    return f"{round_to_cents(value):f}"


def format_quantity(value: Decimal) -> str:
    """Format a day count without trailing zeros, e.g. 5 or 4.5."""
    normalized = value.normalize()
    return f"{normalized:f}" if normalized != normalized.to_integral() else str(int(normalized))


class PeriodExporter:
    """Builds export rows in the fixed column order.

    Columns: week number, week start, week end, pay day, 8-hour daily rate,
    recorded days, calculated pay, NIS employee, calculated pay less NIS,
    recorded pay, NIS employer, total NIS, net pay.
    """

    @staticmethod
    def row(week: WeeklyRecord) -> list[str]:
        return [
            str(week.week_number),
            format_date(week.week_start),
            format_date(week.week_end),
            format_date(week.pay_day),
            format_amount(week.daily_rate_8hr),
            format_quantity(week.recorded_days_worked),
            format_amount(week.calculated_pay),
            format_amount(week.nis_employee),
            format_amount(week.calc_pay_less_nis),
            format_amount(week.recorded_pay),
            format_amount(week.nis_employer),
            format_amount(week.total_nis),
            format_amount(week.net_pay),
        ]

    @classmethod
    def rows(cls, period: PayPeriod) -> Iterator[list[str]]:
        """Yield one row per week, in week order."""
        for week in period.weeks:
            yield cls.row(week)

    @classmethod
    def write_csv(cls, period: PayPeriod, stream: TextIO, include_header: bool = True) -> None:
        """Write the period as CSV onto a caller-supplied text stream."""
        writer = csv.writer(stream, lineterminator="\n")
        if include_header:
            writer.writerow(EXPORT_HEADER)
        writer.writerows(cls.rows(period))

    @classmethod
    def to_csv(cls, period: PayPeriod) -> str:
        """Return CSV content as a string."""
        output = io.StringIO()
        cls.write_csv(period, output)
        return output.getvalue()

    @staticmethod
    def export_filename(period: PayPeriod) -> str:
        """File name such as payroll_EMP001_2024-01-10.csv."""
        number = period.employee.employee_number or period.employee.employee_id
        return f"payroll_{number}_{period.start_date.isoformat()}.csv"
