"""Payroll result assembly from signed pay lines."""

from __future__ import annotations

import hashlib
import json
from decimal import Decimal

from nis_payroll.calculators.money import round_to_cents
from nis_payroll.calculators.types import (
    ZERO,
    ContributionAmounts,
    GrossPay,
    LineType,
    PayLine,
    PayrollCalculationResult,
    PayrollInput,
)
from nis_payroll.errors import LineSignError


class PayrollResultBuilder:
    """Builds payroll results from signed lines.

    Sign conventions (non-negotiable):
    - EARNING: positive
    - ALLOWANCE: positive
    - DEDUCTION: negative
    - NIS_EMPLOYEE: negative
    - NIS_EMPLOYER: positive (employer liability, excluded from net)

    Net pay is never clamped; deductions larger than gross give a negative
    net, which is a reportable result.
    """

    @staticmethod
    def build_lines(
        gross: GrossPay,
        contributions: ContributionAmounts,
        payroll_input: PayrollInput,
    ) -> list[PayLine]:
        """Create the signed lines for one calculation."""
        lines = [
            PayLine(LineType.EARNING, abs(gross.gross_pay), "Gross pay"),
        ]
        if payroll_input.other_allowances:
            lines.append(
                PayLine(
                    LineType.ALLOWANCE,
                    round_to_cents(abs(payroll_input.other_allowances)),
                    "Other allowances",
                )
            )
        lines.append(
            PayLine(
                LineType.NIS_EMPLOYEE,
                -abs(contributions.employee_amount),
                "NIS contribution (employee)",
            )
        )
        if payroll_input.other_deductions:
            lines.append(
                PayLine(
                    LineType.DEDUCTION,
                    -round_to_cents(abs(payroll_input.other_deductions)),
                    "Other deductions",
                )
            )
        lines.append(
            PayLine(
                LineType.NIS_EMPLOYER,
                abs(contributions.employer_amount),
                "NIS contribution (employer)",
            )
        )
        return lines

    @staticmethod
    def calculate_net_from_lines(lines: list[PayLine]) -> Decimal:
        """Calculate net pay from lines.

        NET = Σ(EARNING) + Σ(ALLOWANCE) + Σ(DEDUCTION) + Σ(NIS_EMPLOYEE)

        Note: NIS_EMPLOYER is excluded from net calculation (it's a liability).
        """
        net = ZERO
        for line in lines:
            if line.line_type != LineType.NIS_EMPLOYER:
                net += line.amount
        return round_to_cents(net)

    @staticmethod
    def validate_line_signs(lines: list[PayLine]) -> list[str]:
        """Validate that all lines have correct signs.

        Returns list of error messages (empty if all valid).
        """
        errors: list[str] = []

        for i, line in enumerate(lines):
            if line.line_type in (LineType.EARNING, LineType.ALLOWANCE, LineType.NIS_EMPLOYER):
                if line.amount < 0:
                    errors.append(
                        f"Line {i} ({line.line_type.value}) has negative amount {line.amount}, expected positive"
                    )
            elif line.line_type in (LineType.DEDUCTION, LineType.NIS_EMPLOYEE):
                if line.amount > 0:
                    errors.append(
                        f"Line {i} ({line.line_type.value}) has positive amount {line.amount}, expected negative"
                    )

        return errors

    @classmethod
    def build(
        cls,
        gross: GrossPay,
        contributions: ContributionAmounts,
        payroll_input: PayrollInput,
    ) -> PayrollCalculationResult:
        """Assemble the final result for one calculation.

        Raises:
            LineSignError: If any assembled line has the wrong sign
        """
        lines = cls.build_lines(gross, contributions, payroll_input)

        sign_errors = cls.validate_line_signs(lines)
        if sign_errors:
            raise LineSignError(sign_errors)

        return PayrollCalculationResult(
            gross_pay=gross.gross_pay,
            weekly_wage=gross.weekly_wage,
            nis_employee_contribution=contributions.employee_amount,
            nis_employer_contribution=contributions.employer_amount,
            other_allowances=round_to_cents(payroll_input.other_allowances),
            other_deductions=round_to_cents(payroll_input.other_deductions),
            net_pay=cls.calculate_net_from_lines(lines),
            earnings_class=contributions.earnings_class,
            lines=tuple(lines),
        )

    @staticmethod
    def compute_fingerprint(result: PayrollCalculationResult) -> str:
        """Compute deterministic hash of a result's lines.

        Identical inputs produce identical fingerprints, which lets a host
        detect that a stored result is stale.
        """
        canonical = [line.to_canonical_dict() for line in result.lines]
        json_str = json.dumps(canonical, sort_keys=True)
        return hashlib.sha256(json_str.encode()).hexdigest()[:32]
