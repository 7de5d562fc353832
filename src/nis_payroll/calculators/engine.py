"""Payroll calculation engine - main orchestrator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from nis_payroll.calculators.contributions import ContributionCalculator, ContributionSchedule
from nis_payroll.calculators.gross_pay import GrossPayResolver
from nis_payroll.calculators.result_builder import PayrollResultBuilder
from nis_payroll.calculators.types import Employee, PayrollCalculationResult, PayrollInput
from nis_payroll.calculators.validator import InputValidator
from nis_payroll.config import PayPolicy
from nis_payroll.errors import InvalidPayrollInputError, PayrollError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class EmployeeCalculation:
    """Outcome of calculating one employee inside a batch."""

    employee_id: str
    result: PayrollCalculationResult | None
    errors: list[PayrollError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.result is not None and not self.errors


@dataclass
class BatchCalculationResult:
    """Result of calculating several employees with one schedule."""

    calculations: list[EmployeeCalculation]
    total_gross: Decimal = Decimal("0")
    total_nis_employee: Decimal = Decimal("0")
    total_nis_employer: Decimal = Decimal("0")
    total_net: Decimal = Decimal("0")
    error_count: int = 0


class PayrollEngine:
    """Main payroll calculation engine.

    Calculation pipeline (stable order per employee):
    1) Validate employee rate configuration and input
    2) Resolve gross pay and weekly-equivalent wage
    3) Apply the contribution schedule to the weekly wage
    4) Assemble lines and net pay

    The engine holds only its schedule and policy; it keeps no state
    between calls.
    """

    def __init__(self, schedule: ContributionSchedule, policy: PayPolicy | None = None):
        self.schedule = schedule
        self.policy = policy or PayPolicy()
        self.validator = InputValidator()
        self.resolver = GrossPayResolver(self.policy)
        self.contribution_calculator = ContributionCalculator()
        self.result_builder = PayrollResultBuilder()

    def validate(self, employee: Employee, payroll_input: PayrollInput) -> list[ValidationError]:
        """Return validation errors for the pair (empty if valid)."""
        return self.validator.validate(employee, payroll_input)

    def calculate(self, employee: Employee, payroll_input: PayrollInput) -> PayrollCalculationResult:
        """Calculate pay for one employee.

        Raises:
            InvalidPayrollInputError: If the pair fails validation
        """
        errors = self.validate(employee, payroll_input)
        if errors:
            logger.warning(
                "Rejected calculation for employee %s: %s",
                employee.employee_id,
                "; ".join(str(e) for e in errors),
            )
            raise InvalidPayrollInputError(errors)

        gross = self.resolver.resolve(employee, payroll_input)
        contributions = self.contribution_calculator.calculate(gross.weekly_wage, self.schedule)
        result = self.result_builder.build(gross, contributions, payroll_input)

        logger.debug(
            "Calculated employee %s: gross=%s net=%s",
            employee.employee_id,
            result.gross_pay,
            result.net_pay,
        )
        return result

    def calculate_many(
        self, items: list[tuple[Employee, PayrollInput]]
    ) -> BatchCalculationResult:
        """Calculate several employees, collecting failures per employee.

        Validation failures are recorded field by field. Any other payroll
        error (for example a shift list with no default) is recorded as a
        single entry. Neither stops the rest of the batch.
        """
        batch = BatchCalculationResult(calculations=[])

        for employee, payroll_input in items:
            try:
                result = self.calculate(employee, payroll_input)
            except InvalidPayrollInputError as e:
                batch.calculations.append(
                    EmployeeCalculation(employee.employee_id, None, list(e.errors))
                )
                batch.error_count += 1
                continue
            except PayrollError as e:
                logger.warning("Calculation failed for employee %s: %s", employee.employee_id, e)
                batch.calculations.append(EmployeeCalculation(employee.employee_id, None, [e]))
                batch.error_count += 1
                continue

            batch.calculations.append(EmployeeCalculation(employee.employee_id, result))
            batch.total_gross += result.gross_pay
            batch.total_nis_employee += result.nis_employee_contribution
            batch.total_nis_employer += result.nis_employer_contribution
            batch.total_net += result.net_pay

        return batch
