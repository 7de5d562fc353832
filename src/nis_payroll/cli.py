"""Payroll Command Line Interface.

Provides offline tools for:
- Input validation
- Single payroll calculations
- Pay period generation and export

Usage:
    python -m nis_payroll.cli validate --employee emp.json --hours 40
    python -m nis_payroll.cli calculate --employee emp.json --hours 40
    python -m nis_payroll.cli calculate --employee emp.json --shift Day:5 --shift Night:1:2.5
    python -m nis_payroll.cli export-period --employee emp.json --start 2024-01-10 --end 2024-01-22 --days 5,6,4
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Callable, TextIO

from nis_payroll.api.schemas import (
    CalculationResponse,
    EmployeeSchema,
    PayPeriodSchema,
    PeriodTotalsResponse,
    ValidationErrorItem,
)
from nis_payroll.calculators.contributions import ContributionSchedule, schedule_from_payload
from nis_payroll.calculators.engine import PayrollEngine
from nis_payroll.calculators.types import Employee, PayrollInput, ShiftOccurrence
from nis_payroll.calculators.validator import InputValidator
from nis_payroll.config import get_settings
from nis_payroll.errors import InvalidPayrollInputError, PayrollError
from nis_payroll.periods.aggregator import PeriodAggregator
from nis_payroll.periods.export import PeriodExporter
from nis_payroll.periods.generator import PeriodGenerator

logger = logging.getLogger(__name__)


def parse_date(s: str) -> date:
    """Parse ISO date string."""
    return date.fromisoformat(s)


def parse_decimal(s: str) -> Decimal:
    """Parse a decimal amount."""
    try:
        return Decimal(s)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {s!r}")


def parse_shift(s: str) -> ShiftOccurrence:
    """Parse NAME[:OCCURRENCES[:EXTRA_HOURS]]."""
    name, _, rest = s.partition(":")
    occurrences, _, extra_hours = rest.partition(":")
    try:
        return ShiftOccurrence(
            shift_name=name,
            occurrences=Decimal(occurrences or "1"),
            extra_hours=Decimal(extra_hours or "0"),
        )
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid shift spec: {s!r}")


def parse_days_list(s: str) -> list[Decimal]:
    """Parse a comma-separated list of days worked per week."""
    return [parse_decimal(part.strip()) for part in s.split(",") if part.strip()]


class PayrollCli:
    """Payroll Command Line Interface."""

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="python -m nis_payroll.cli",
            description="NIS payroll calculation tools",
        )
        parser.add_argument(
            "--log-level",
            type=str.upper,
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            default=None,
            help="Logging level (default: $LOG_LEVEL)",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        for name, help_text in (
            ("validate", "Validate an employee and worked time"),
            ("calculate", "Calculate pay for one employee"),
        ):
            cmd = subparsers.add_parser(name, help=help_text)
            self._add_employee_arguments(cmd)
            self._add_input_arguments(cmd)

        export = subparsers.add_parser(
            "export-period",
            help="Generate a weekly pay period and export it",
        )
        self._add_employee_arguments(export)
        export.add_argument(
            "--start",
            type=parse_date,
            required=True,
            help="Period start date (YYYY-MM-DD)",
        )
        export.add_argument(
            "--end",
            type=parse_date,
            required=True,
            help="Period end date (YYYY-MM-DD)",
        )
        export.add_argument(
            "--days",
            type=parse_days_list,
            default=[],
            help="Comma-separated days worked per week, in week order",
        )
        export.add_argument(
            "--format",
            type=str,
            choices=["csv", "json"],
            default="csv",
            help="Output format",
        )
        export.add_argument(
            "--output",
            type=Path,
            help="Write to this file instead of stdout",
        )

        return parser

    @staticmethod
    def _add_employee_arguments(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument(
            "--employee",
            type=Path,
            required=True,
            help="Path to employee JSON",
        )
        cmd.add_argument(
            "--schedule",
            type=Path,
            help="Path to contribution schedule JSON (default: configured flat rates)",
        )

    @staticmethod
    def _add_input_arguments(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("--hours", type=parse_decimal, default=Decimal("0"), help="Hours worked")
        cmd.add_argument("--days", type=parse_decimal, default=Decimal("0"), help="Days worked")
        cmd.add_argument(
            "--allowances", type=parse_decimal, default=Decimal("0"), help="Other allowances"
        )
        cmd.add_argument(
            "--deductions", type=parse_decimal, default=Decimal("0"), help="Other deductions"
        )
        cmd.add_argument(
            "--shift",
            type=parse_shift,
            action="append",
            default=[],
            metavar="NAME[:COUNT[:EXTRA_HOURS]]",
            help="Worked shift occurrences (repeatable)",
        )

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        if not parsed.command:
            self.parser.print_help(self.stderr)
            return 1

        settings = get_settings()
        logging.basicConfig(
            level=(parsed.log_level or settings.log_level).upper(), stream=self.stderr
        )

        # Dispatch to command handler
        handlers: dict[str, Callable[[argparse.Namespace], int]] = {
            "validate": self._cmd_validate,
            "calculate": self._cmd_calculate,
            "export-period": self._cmd_export_period,
        }

        try:
            return handlers[parsed.command](parsed)
        except InvalidPayrollInputError as e:
            for error in e.errors:
                print(f"ERROR: {error}", file=self.stderr)
            return 1
        except PayrollError as e:
            print(f"ERROR: {e}", file=self.stderr)
            return 1
        except (OSError, ValueError) as e:
            print(f"ERROR: {e}", file=self.stderr)
            return 1

    def _load_employee(self, path: Path) -> Employee:
        return EmployeeSchema.model_validate_json(path.read_text()).to_domain()

    def _load_schedule(self, path: Path | None) -> ContributionSchedule:
        if path is None:
            return get_settings().default_schedule()
        return schedule_from_payload(json.loads(path.read_text()))

    @staticmethod
    def _build_input(args: argparse.Namespace) -> PayrollInput:
        return PayrollInput(
            hours_worked=args.hours,
            days_worked=args.days,
            other_allowances=args.allowances,
            other_deductions=args.deductions,
            shifts_worked=tuple(args.shift),
        )

    def _cmd_validate(self, args: argparse.Namespace) -> int:
        """Validate an employee/input pair."""
        errors = InputValidator.validate(self._load_employee(args.employee), self._build_input(args))
        payload = {
            "valid": not errors,
            "errors": [ValidationErrorItem.from_error(e).model_dump() for e in errors],
        }
        print(json.dumps(payload, indent=2), file=self.stdout)
        return 0 if not errors else 1

    def _cmd_calculate(self, args: argparse.Namespace) -> int:
        """Calculate pay for one employee."""
        engine = PayrollEngine(self._load_schedule(args.schedule), get_settings().policy())
        result = engine.calculate(self._load_employee(args.employee), self._build_input(args))
        print(CalculationResponse.from_result(result).model_dump_json(indent=2), file=self.stdout)
        return 0

    def _cmd_export_period(self, args: argparse.Namespace) -> int:
        """Generate a period, apply per-week days worked and export it."""
        policy = get_settings().policy()
        employee = self._load_employee(args.employee)
        period = PeriodGenerator(policy).generate(args.start, args.end, employee)

        if len(args.days) > period.total_weeks:
            raise ValueError(
                f"{len(args.days)} weekly day counts given for a {period.total_weeks}-week period"
            )

        aggregator = PeriodAggregator(self._load_schedule(args.schedule), policy)
        for index, days in enumerate(args.days):
            week_input = PayrollInput.from_days_worked(days, day_hours=policy.standard_day_hours)
            period = aggregator.recalculate_week(period, index, week_input)

        if args.format == "json":
            content = json.dumps(
                {
                    "period": PayPeriodSchema.from_domain(period).model_dump(mode="json"),
                    "totals": PeriodTotalsResponse.from_totals(
                        PeriodAggregator.aggregate(period)
                    ).model_dump(mode="json"),
                },
                indent=2,
            )
        else:
            content = PeriodExporter.to_csv(period)

        if args.output:
            args.output.write_text(content)
            logger.info(
                "Wrote %s for %s to %s",
                period.name,
                employee.display_name or employee.employee_id,
                args.output,
            )
        else:
            self.stdout.write(content)
        return 0


def main() -> int:
    """CLI entry point."""
    cli = PayrollCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
