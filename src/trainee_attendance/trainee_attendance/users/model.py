from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Actor:
    """Identity of whoever drives an operation.

    Note: Resolved by the caller (session lookup) and passed in explicitly.
    """

    user_id: int
    role: Role
    course_id: Optional[int] = None
    account_id: Optional[int] = None
    user_name: str = ""

    @property
    def is_trainee(self) -> bool:
        return self.role == Role.TRAINEE
