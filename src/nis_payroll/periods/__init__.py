"""Weekly pay periods: generation, recalculation, totals and export."""

from nis_payroll.periods.aggregator import PeriodAggregator
from nis_payroll.periods.export import EXPORT_HEADER, PeriodExporter
from nis_payroll.periods.generator import PeriodGenerator
from nis_payroll.periods.state_machine import WeekStatusMachine
from nis_payroll.periods.types import PayPeriod, PeriodTotals, WeeklyRecord, WeekStatus

__all__ = [
    "EXPORT_HEADER",
    "PayPeriod",
    "PeriodAggregator",
    "PeriodExporter",
    "PeriodGenerator",
    "PeriodTotals",
    "WeekStatus",
    "WeekStatusMachine",
    "WeeklyRecord",
]
