from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Worker:
    """Domain entity: a person who clocks in at the kiosk.

    Note: Plain data object (no DB access code here).
    """

    worker_id: str
    pin: str
    full_name: str
    role: Role
    email: Optional[str] = None
    phone: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None

    def to_public(self) -> dict:
        return {
            "id": self.worker_id,
            "full_name": self.full_name,
            "role": self.role.value,
            "email": self.email,
            "phone": self.phone,
            "is_active": self.is_active,
        }


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a kiosk PIN login."""

    worker: Worker
    is_admin: bool
