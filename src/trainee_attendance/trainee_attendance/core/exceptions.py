from __future__ import annotations

from typing import Optional

from .enums import ReasonCode


class DomainError(Exception):
    """Base exception for business rule violations.

    Subclasses set ``reason``; the base class has none.
    """

    reason: Optional[ReasonCode] = None

    def __init__(self, message: str = "", *, reason: ReasonCode | None = None):
        super().__init__(message or self.__class__.__doc__)
        if reason is not None:
            self.reason = reason


class AuthorizationError(DomainError):
    """Actor lacks the capability required for this action."""

    reason = ReasonCode.UNAUTHORIZED


class NotWorkDayError(DomainError):
    """Today is not a training day for the actor's course."""

    reason = ReasonCode.NOT_WORK_DAY


class AlreadyPunchedError(DomainError):
    """Today's attendance has already been recorded."""

    reason = ReasonCode.ALREADY_PUNCHED


class NoPriorPunchInError(DomainError):
    """No punch-in is recorded for today."""

    reason = ReasonCode.NO_PRIOR_PUNCH_IN


class InvalidTimeOrderError(DomainError):
    """End time must not be earlier than start time."""

    reason = ReasonCode.INVALID_TIME_ORDER


class MalformedTimeError(DomainError):
    """Time value is not a valid HH:MM time of day."""

    reason = ReasonCode.MALFORMED_TIME


class RecordNotFoundError(DomainError):
    """Attendance record could not be resolved."""

    reason = ReasonCode.NOT_FOUND


class DataIntegrityError(Exception):
    """Stored data violates a uniqueness invariant.

    Not a DomainError: operations let it propagate instead of turning it into a result.
    """
