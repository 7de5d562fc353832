"""Tests for payroll result assembly."""

from decimal import Decimal

import pytest

from nis_payroll.calculators.result_builder import PayrollResultBuilder
from nis_payroll.calculators.types import (
    ContributionAmounts,
    GrossPay,
    LineType,
    PayLine,
    PayrollInput,
)
from nis_payroll.errors import LineSignError


def _gross(amount: str) -> GrossPay:
    return GrossPay(gross_pay=Decimal(amount), weekly_wage=Decimal(amount))


class TestPayrollResultBuilder:
    """Test signed line assembly and net pay."""

    def test_line_signs(self):
        """Earnings and employer NIS positive; deductions and employee NIS negative."""
        lines = PayrollResultBuilder.build_lines(
            _gross("1000.00"),
            ContributionAmounts(Decimal("30.00"), Decimal("62.50")),
            PayrollInput(other_allowances=Decimal("50"), other_deductions=Decimal("20")),
        )

        by_type = {line.line_type: line.amount for line in lines}
        assert by_type[LineType.EARNING] == Decimal("1000.00")
        assert by_type[LineType.ALLOWANCE] == Decimal("50.00")
        assert by_type[LineType.NIS_EMPLOYEE] == Decimal("-30.00")
        assert by_type[LineType.DEDUCTION] == Decimal("-20.00")
        assert by_type[LineType.NIS_EMPLOYER] == Decimal("62.50")
        assert PayrollResultBuilder.validate_line_signs(lines) == []

    def test_zero_adjustments_omitted(self):
        """No allowance or deduction lines when both are zero."""
        lines = PayrollResultBuilder.build_lines(
            _gross("1000.00"),
            ContributionAmounts(Decimal("30.00"), Decimal("62.50")),
            PayrollInput(),
        )

        assert [line.line_type for line in lines] == [
            LineType.EARNING,
            LineType.NIS_EMPLOYEE,
            LineType.NIS_EMPLOYER,
        ]

    def test_calculate_net_from_lines(self):
        """Employer NIS is excluded from net."""
        lines = [
            PayLine(LineType.EARNING, Decimal("1000.00")),
            PayLine(LineType.ALLOWANCE, Decimal("100.00")),
            PayLine(LineType.NIS_EMPLOYEE, Decimal("-30.00")),
            PayLine(LineType.DEDUCTION, Decimal("-70.00")),
            PayLine(LineType.NIS_EMPLOYER, Decimal("62.50")),  # Not in net
        ]

        # Net = 1000 + 100 - 30 - 70 = 1000
        assert PayrollResultBuilder.calculate_net_from_lines(lines) == Decimal("1000.00")

    def test_validate_line_signs_reports_bad_lines(self):
        lines = [
            PayLine(LineType.EARNING, Decimal("-1.00")),
            PayLine(LineType.DEDUCTION, Decimal("5.00")),
            PayLine(LineType.NIS_EMPLOYER, Decimal("3.00")),
        ]

        errors = PayrollResultBuilder.validate_line_signs(lines)

        assert len(errors) == 2
        assert "Line 0 (EARNING)" in errors[0]
        assert "Line 1 (DEDUCTION)" in errors[1]

    def test_build_result(self):
        result = PayrollResultBuilder.build(
            _gross("1000.00"),
            ContributionAmounts(Decimal("30.00"), Decimal("62.50")),
            PayrollInput(other_allowances=Decimal("25"), other_deductions=Decimal("10.005")),
        )

        assert result.other_allowances == Decimal("25.00")
        assert result.other_deductions == Decimal("10.01")
        assert result.net_pay == Decimal("984.99")  # 1000 + 25 - 30 - 10.01
        assert result.total_nis_contribution == Decimal("92.50")
        assert result.gross_less_nis == Decimal("970.00")

    def test_negative_net_is_not_clamped(self):
        """Deductions above gross produce a negative net."""
        result = PayrollResultBuilder.build(
            _gross("1000.00"),
            ContributionAmounts(Decimal("30.00"), Decimal("62.50")),
            PayrollInput(other_deductions=Decimal("1500")),
        )

        assert result.net_pay == Decimal("-530.00")

    def test_build_rejects_wrong_signs(self):
        """A line builder that emits a negative earning fails the build."""

        class BrokenBuilder(PayrollResultBuilder):
            @staticmethod
            def build_lines(gross, contributions, payroll_input):
                return [
                    PayLine(LineType.EARNING, -gross.gross_pay),
                    PayLine(LineType.NIS_EMPLOYEE, -contributions.employee_amount),
                ]

        with pytest.raises(LineSignError) as exc_info:
            BrokenBuilder.build(
                _gross("1000.00"),
                ContributionAmounts(Decimal("30.00"), Decimal("62.50")),
                PayrollInput(),
            )

        assert exc_info.value.code == "LINE_SIGN_VIOLATION"
        assert exc_info.value.violations == [
            "Line 0 (EARNING) has negative amount -1000.00, expected positive"
        ]


class TestFingerprint:
    """Result fingerprints are deterministic."""

    def test_same_result_same_fingerprint(self):
        args = (
            _gross("1000.00"),
            ContributionAmounts(Decimal("30.00"), Decimal("62.50")),
            PayrollInput(),
        )

        first = PayrollResultBuilder.build(*args)
        second = PayrollResultBuilder.build(*args)

        assert PayrollResultBuilder.compute_fingerprint(first) == (
            PayrollResultBuilder.compute_fingerprint(second)
        )
        assert len(PayrollResultBuilder.compute_fingerprint(first)) == 32

    def test_different_result_different_fingerprint(self):
        contributions = ContributionAmounts(Decimal("30.00"), Decimal("62.50"))

        first = PayrollResultBuilder.build(_gross("1000.00"), contributions, PayrollInput())
        second = PayrollResultBuilder.build(_gross("1000.01"), contributions, PayrollInput())

        assert PayrollResultBuilder.compute_fingerprint(first) != (
            PayrollResultBuilder.compute_fingerprint(second)
        )
