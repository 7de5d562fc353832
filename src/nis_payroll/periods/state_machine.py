"""Weekly record state machine with transition validation."""

from __future__ import annotations

from nis_payroll.errors import InvalidTransitionError
from nis_payroll.periods.types import WeekStatus


class WeekStatusMachine:
    """State machine for weekly record status transitions.

    Allowed transitions:
    - calculated → recorded (manual recorded pay)
    - calculated → complete (week recalculated)
    - recorded → complete
    - recorded → calculated (override cleared before recalculation)
    - complete → complete (recalculated again, or overridden after completion)
    """

    VALID_TRANSITIONS: dict[WeekStatus, list[WeekStatus]] = {
        WeekStatus.CALCULATED: [WeekStatus.RECORDED, WeekStatus.COMPLETE],
        WeekStatus.RECORDED: [WeekStatus.CALCULATED, WeekStatus.RECORDED, WeekStatus.COMPLETE],
        WeekStatus.COMPLETE: [WeekStatus.COMPLETE],
    }

    @classmethod
    def can_transition(cls, from_status: WeekStatus, to_status: WeekStatus) -> bool:
        """Check if a transition is valid."""
        allowed = cls.VALID_TRANSITIONS.get(from_status, [])
        return to_status in allowed

    @classmethod
    def validate_transition(cls, from_status: WeekStatus, to_status: WeekStatus) -> None:
        """Validate a transition, raising InvalidTransitionError if invalid."""
        if not cls.can_transition(from_status, to_status):
            raise InvalidTransitionError(from_status.value, to_status.value)

    @classmethod
    def after_override(cls, status: WeekStatus) -> WeekStatus:
        """Status a week takes when its recorded pay is set by hand."""
        to_status = WeekStatus.COMPLETE if status == WeekStatus.COMPLETE else WeekStatus.RECORDED
        cls.validate_transition(status, to_status)
        return to_status

    @classmethod
    def after_recalculation(cls, status: WeekStatus) -> WeekStatus:
        """Status a week takes when it is recalculated."""
        cls.validate_transition(status, WeekStatus.COMPLETE)
        return WeekStatus.COMPLETE

    @classmethod
    def after_clear_override(cls, status: WeekStatus) -> WeekStatus:
        """Status a week takes when its manual recorded pay is removed."""
        if status != WeekStatus.RECORDED:
            return status
        cls.validate_transition(status, WeekStatus.CALCULATED)
        return WeekStatus.CALCULATED
