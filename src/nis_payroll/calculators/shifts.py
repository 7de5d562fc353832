"""Shift list editing with the single-default invariant."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable

from nis_payroll.calculators.types import ShiftConfig
from nis_payroll.errors import ShiftNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def validate_shift(shift: ShiftConfig) -> list[ValidationError]:
    """Validate a single shift configuration.

    Returns list of errors (empty if valid).
    """
    errors: list[ValidationError] = []
    if not shift.name.strip():
        errors.append(ValidationError("name", "Shift name is required"))
    if shift.base_rate <= 0:
        errors.append(ValidationError("base_rate", "Base rate must be greater than 0"))
    if shift.hourly_rate is not None and shift.hourly_rate <= 0:
        errors.append(ValidationError("hourly_rate", "Hourly rate must be greater than 0"))
    return errors


class ShiftList:
    """Indexed list of an employee's shifts.

    Invariant: whenever the list is non-empty, exactly one shift has
    is_default set. Every mutating method restores it before returning:
    - The first shift added becomes the default
    - Adding or updating a shift as default clears every other flag
    - Removing the default promotes the first remaining shift
    - Clearing the default flag promotes the first other shift, if any
    """

    def __init__(self, shifts: Iterable[ShiftConfig] = ()):
        self._shifts: list[ShiftConfig] = []
        for shift in shifts:
            self.add(shift)

    def __len__(self) -> int:
        return len(self._shifts)

    def __iter__(self):
        return iter(self._shifts)

    def __getitem__(self, index: int) -> ShiftConfig:
        return self._shifts[index]

    @property
    def shifts(self) -> tuple[ShiftConfig, ...]:
        """Snapshot suitable for Employee.shifts."""
        return tuple(self._shifts)

    @property
    def default_index(self) -> int | None:
        return next((i for i, s in enumerate(self._shifts) if s.is_default), None)

    @property
    def default(self) -> ShiftConfig | None:
        index = self.default_index
        return None if index is None else self._shifts[index]

    def index_of(self, name: str) -> int:
        for i, shift in enumerate(self._shifts):
            if shift.name == name:
                return i
        raise ShiftNotFoundError(name)

    def add(self, shift: ShiftConfig) -> int:
        """Append a shift and return its index.

        Raises:
            ValidationError: If the shift's name or rates are invalid
        """
        errors = validate_shift(shift)
        if errors:
            raise errors[0]

        self._shifts.append(replace(shift, is_default=False))
        index = len(self._shifts) - 1

        if shift.is_default or index == 0:
            self.set_default(index)
        return index

    def remove(self, index: int) -> ShiftConfig:
        """Remove and return the shift at index."""
        removed = self._shifts.pop(index)
        if self._shifts and removed.is_default:
            self._shifts[0] = replace(self._shifts[0], is_default=True)
            logger.debug("Promoted shift '%s' to default", self._shifts[0].name)
        return removed

    def set_default(self, index: int) -> None:
        """Make the shift at index the only default."""
        target = self._shifts[index]  # IndexError before any flag changes
        self._shifts = [
            replace(s, is_default=(i == index)) for i, s in enumerate(self._shifts)
        ]
        logger.debug("Default shift set to '%s'", target.name)

    def update(self, index: int, **changes: Any) -> ShiftConfig:
        """Replace fields of the shift at index.

        Raises:
            ValidationError: If the updated shift is invalid
        """
        make_default = changes.pop("is_default", None)
        updated = replace(self._shifts[index], **changes)
        errors = validate_shift(updated)
        if errors:
            raise errors[0]
        self._shifts[index] = updated

        if make_default is True:
            self.set_default(index)
        elif make_default is False and updated.is_default and len(self._shifts) > 1:
            other = 0 if index != 0 else 1
            self.set_default(other)

        return self._shifts[index]
