"""Pay period endpoints.

The API is stateless: each request carries the period it operates on and
each response returns the updated period with freshly folded totals.
"""

from fastapi import APIRouter, status
from fastapi.responses import Response

from nis_payroll.api.dependencies import AppSettings, Policy, resolve_schedule
from nis_payroll.api.schemas import (
    ErrorResponse,
    GeneratePeriodRequest,
    OverrideRecordedPayRequest,
    PayPeriodSchema,
    PeriodRequest,
    PeriodResponse,
    PeriodTotalsResponse,
    RecalculateWeekRequest,
)
from nis_payroll.periods.aggregator import PeriodAggregator
from nis_payroll.periods.export import PeriodExporter
from nis_payroll.periods.generator import PeriodGenerator
from nis_payroll.periods.types import PayPeriod

router = APIRouter(prefix="/periods", tags=["periods"])


def _period_response(period: PayPeriod) -> PeriodResponse:
    return PeriodResponse(
        period=PayPeriodSchema.from_domain(period),
        totals=PeriodTotalsResponse.from_totals(PeriodAggregator.aggregate(period)),
    )


@router.post(
    "",
    response_model=PeriodResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
def generate_period(payload: GeneratePeriodRequest, policy: Policy) -> PeriodResponse:
    """Decompose a date range into Monday-to-Sunday weekly records."""
    period = PeriodGenerator(policy).generate(
        payload.start_date,
        payload.end_date,
        payload.employee.to_domain(),
    )
    return _period_response(period)


@router.post(
    "/recalculate-week",
    response_model=PeriodResponse,
    responses={422: {"model": ErrorResponse}},
)
def recalculate_week(
    payload: RecalculateWeekRequest,
    settings: AppSettings,
    policy: Policy,
) -> PeriodResponse:
    """Recalculate one week from the supplied worked time."""
    aggregator = PeriodAggregator(resolve_schedule(payload.schedule, settings), policy)
    period = aggregator.recalculate_week(
        payload.period.to_domain(),
        payload.week_index,
        payload.input.to_domain(),
    )
    return _period_response(period)


@router.post(
    "/override",
    response_model=PeriodResponse,
    responses={422: {"model": ErrorResponse}},
)
def override_recorded_pay(payload: OverrideRecordedPayRequest) -> PeriodResponse:
    """Set a week's recorded pay by hand, or clear it with null."""
    period = payload.period.to_domain()
    if payload.recorded_pay is None:
        period = PeriodAggregator.clear_override(period, payload.week_index)
    else:
        period = PeriodAggregator.override_recorded_pay(
            period, payload.week_index, payload.recorded_pay
        )
    return _period_response(period)


@router.post("/totals", response_model=PeriodTotalsResponse)
def period_totals(payload: PeriodRequest) -> PeriodTotalsResponse:
    """Fold the period's weeks into totals."""
    return PeriodTotalsResponse.from_totals(
        PeriodAggregator.aggregate(payload.period.to_domain())
    )


@router.post("/export", response_class=Response)
def export_period(payload: PeriodRequest) -> Response:
    """Export the period as CSV, one row per week."""
    period = payload.period.to_domain()
    filename = PeriodExporter.export_filename(period)
    return Response(
        content=PeriodExporter.to_csv(period),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
