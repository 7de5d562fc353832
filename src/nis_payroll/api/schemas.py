"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from nis_payroll.calculators.result_builder import PayrollResultBuilder
from nis_payroll.calculators.types import (
    Employee,
    EmploymentType,
    PayrollCalculationResult,
    PayrollInput,
    ShiftConfig,
    ShiftOccurrence,
)
from nis_payroll.errors import ValidationError
from nis_payroll.periods.types import PayPeriod, PeriodTotals, WeeklyRecord, WeekStatus


# ============================================================================
# Employee schemas
# ============================================================================


class ShiftSchema(BaseModel):
    """A configured shift."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    base_rate: Decimal
    hours_label: str = ""
    hourly_rate: Decimal | None = None
    is_default: bool = False

    def to_domain(self) -> ShiftConfig:
        return ShiftConfig(**self.model_dump())


class EmployeeSchema(BaseModel):
    """Employee record with rate configuration."""

    model_config = ConfigDict(from_attributes=True)

    employee_id: str
    employment_type: EmploymentType
    employee_number: str = ""
    first_name: str = ""
    last_name: str = ""
    nis_number: str | None = None
    hourly_rate: Decimal | None = None
    daily_rate: Decimal | None = None
    weekly_rate: Decimal | None = None
    monthly_salary: Decimal | None = None
    shifts: list[ShiftSchema] = Field(default_factory=list)

    def to_domain(self) -> Employee:
        data = self.model_dump(exclude={"shifts"})
        return Employee(**data, shifts=tuple(s.to_domain() for s in self.shifts))

    @classmethod
    def from_domain(cls, employee: Employee) -> "EmployeeSchema":
        return cls(
            employee_id=employee.employee_id,
            employment_type=employee.employment_type,
            employee_number=employee.employee_number,
            first_name=employee.first_name,
            last_name=employee.last_name,
            nis_number=employee.nis_number,
            hourly_rate=employee.hourly_rate,
            daily_rate=employee.daily_rate,
            weekly_rate=employee.weekly_rate,
            monthly_salary=employee.monthly_salary,
            shifts=[ShiftSchema.model_validate(s) for s in employee.shifts],
        )


# ============================================================================
# Calculation schemas
# ============================================================================


class ShiftOccurrenceSchema(BaseModel):
    """Worked occurrences of one shift."""

    shift_name: str
    occurrences: Decimal = Decimal("1")
    extra_hours: Decimal = Decimal("0")


class PayrollInputSchema(BaseModel):
    """Worked time and adjustments.

    Negative values are accepted here and reported by the engine's
    validator as field errors.
    """

    hours_worked: Decimal = Decimal("0")
    days_worked: Decimal = Decimal("0")
    other_allowances: Decimal = Decimal("0")
    other_deductions: Decimal = Decimal("0")
    shifts_worked: list[ShiftOccurrenceSchema] = Field(default_factory=list)

    def to_domain(self) -> PayrollInput:
        return PayrollInput(
            hours_worked=self.hours_worked,
            days_worked=self.days_worked,
            other_allowances=self.other_allowances,
            other_deductions=self.other_deductions,
            shifts_worked=tuple(
                ShiftOccurrence(s.shift_name, s.occurrences, s.extra_hours)
                for s in self.shifts_worked
            ),
        )


class CalculateRequest(BaseModel):
    """Schema for a single payroll calculation."""

    employee: EmployeeSchema
    input: PayrollInputSchema = Field(default_factory=PayrollInputSchema)
    schedule: dict[str, Any] | None = None  # Defaults to the configured flat schedule


class ValidationErrorItem(BaseModel):
    """A field-level validation failure."""

    field: str
    reason: str

    @classmethod
    def from_error(cls, error: ValidationError) -> "ValidationErrorItem":
        return cls(field=error.field, reason=error.reason)


class ValidateResponse(BaseModel):
    """Schema for validation results."""

    valid: bool
    errors: list[ValidationErrorItem]


class PayLineResponse(BaseModel):
    """Schema for a signed pay line."""

    line_type: str
    amount: Decimal
    explanation: str | None = None


class CalculationResponse(BaseModel):
    """Schema for a payroll calculation result."""

    gross_pay: Decimal
    weekly_wage: Decimal
    nis_employee_contribution: Decimal
    nis_employer_contribution: Decimal
    total_nis_contribution: Decimal
    other_allowances: Decimal
    other_deductions: Decimal
    net_pay: Decimal
    earnings_class: str | None = None
    lines: list[PayLineResponse]
    fingerprint: str  # sha256 prefix of the canonical lines

    @classmethod
    def from_result(cls, result: PayrollCalculationResult) -> "CalculationResponse":
        return cls(
            gross_pay=result.gross_pay,
            weekly_wage=result.weekly_wage,
            nis_employee_contribution=result.nis_employee_contribution,
            nis_employer_contribution=result.nis_employer_contribution,
            total_nis_contribution=result.total_nis_contribution,
            other_allowances=result.other_allowances,
            other_deductions=result.other_deductions,
            net_pay=result.net_pay,
            earnings_class=result.earnings_class,
            lines=[
                PayLineResponse(
                    line_type=line.line_type.value,
                    amount=line.amount,
                    explanation=line.explanation,
                )
                for line in result.lines
            ],
            fingerprint=PayrollResultBuilder.compute_fingerprint(result),
        )


# ============================================================================
# Period schemas
# ============================================================================


class WeeklyRecordSchema(BaseModel):
    """Schema for one week of a pay period."""

    model_config = ConfigDict(from_attributes=True)

    week_number: int
    week_start: date
    week_end: date
    pay_day: date
    daily_rate_8hr: Decimal
    recorded_days_worked: Decimal = Decimal("0")
    calculated_pay: Decimal = Decimal("0")
    recorded_pay: Decimal = Decimal("0")
    nis_employee: Decimal = Decimal("0")
    nis_employer: Decimal = Decimal("0")
    net_pay: Decimal = Decimal("0")
    status: WeekStatus = WeekStatus.CALCULATED
    recorded_pay_overridden: bool = False

    def to_domain(self) -> WeeklyRecord:
        return WeeklyRecord(**self.model_dump())


class PayPeriodSchema(BaseModel):
    """Schema for a pay period carried between stateless requests."""

    start_date: date
    end_date: date
    name: str = ""
    employee: EmployeeSchema
    weeks: list[WeeklyRecordSchema]

    def to_domain(self) -> PayPeriod:
        return PayPeriod(
            start_date=self.start_date,
            end_date=self.end_date,
            employee=self.employee.to_domain(),
            weeks=tuple(w.to_domain() for w in self.weeks),
            name=self.name,
        )

    @classmethod
    def from_domain(cls, period: PayPeriod) -> "PayPeriodSchema":
        return cls(
            start_date=period.start_date,
            end_date=period.end_date,
            name=period.name,
            employee=EmployeeSchema.from_domain(period.employee),
            weeks=[WeeklyRecordSchema.model_validate(w) for w in period.weeks],
        )


class PeriodTotalsResponse(BaseModel):
    """Schema for period totals."""

    model_config = ConfigDict(from_attributes=True)

    calculated_pay: Decimal
    recorded_pay: Decimal
    nis_employee: Decimal
    nis_employer: Decimal
    total_nis: Decimal
    net_pay: Decimal
    recorded_days_worked: Decimal
    week_count: int
    complete_weeks: int

    @classmethod
    def from_totals(cls, totals: PeriodTotals) -> "PeriodTotalsResponse":
        return cls.model_validate(totals)


class PeriodResponse(BaseModel):
    """Schema for a period together with its current totals."""

    period: PayPeriodSchema
    totals: PeriodTotalsResponse


class GeneratePeriodRequest(BaseModel):
    """Schema for generating a new pay period."""

    employee: EmployeeSchema
    start_date: date
    end_date: date


class RecalculateWeekRequest(BaseModel):
    """Schema for recalculating one week of a period."""

    period: PayPeriodSchema
    week_index: int
    input: PayrollInputSchema = Field(default_factory=PayrollInputSchema)
    schedule: dict[str, Any] | None = None


class OverrideRecordedPayRequest(BaseModel):
    """Schema for setting (or clearing, with null) a week's recorded pay."""

    period: PayPeriodSchema
    week_index: int
    recorded_pay: Decimal | None = None


class PeriodRequest(BaseModel):
    """Schema for operations that only need the period."""

    period: PayPeriodSchema


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str
    code: str
    errors: list[ValidationErrorItem] = Field(default_factory=list)
