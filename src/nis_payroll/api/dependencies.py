"""FastAPI dependencies for dependency injection."""

from decimal import InvalidOperation
from typing import Annotated, Any

from fastapi import Depends, HTTPException

from nis_payroll.calculators.contributions import ContributionSchedule, schedule_from_payload
from nis_payroll.config import PayPolicy, Settings, get_settings


def get_policy(settings: Annotated[Settings, Depends(get_settings)]) -> PayPolicy:
    """Get the configured pay policy."""
    return settings.policy()


def resolve_schedule(payload: dict[str, Any] | None, settings: Settings) -> ContributionSchedule:
    """Use the request's schedule payload, or the configured flat schedule."""
    if payload is None:
        return settings.default_schedule()
    try:
        return schedule_from_payload(payload)
    except (KeyError, TypeError, ValueError, InvalidOperation) as e:
        raise HTTPException(
            status_code=422,
            detail=f"Invalid contribution schedule: {e}",
        )


# Type aliases for cleaner dependency injection
AppSettings = Annotated[Settings, Depends(get_settings)]
Policy = Annotated[PayPolicy, Depends(get_policy)]
