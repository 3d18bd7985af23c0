from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import ReasonCode
from .exceptions import DomainError


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a service operation: either accepted or a typed failure."""

    ok: bool
    reason: Optional[ReasonCode] = None
    message: str = ""

    @classmethod
    def accepted(cls) -> "OperationResult":
        return cls(ok=True)

    @classmethod
    def failed(cls, error: DomainError) -> "OperationResult":
        return cls(ok=False, reason=error.reason, message=str(error))
