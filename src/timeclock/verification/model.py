from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class VerificationCode:
    """A login code issued to a worker. Only the hash of the code is kept."""

    code_id: str
    worker_id: str
    code_hash: str
    expires_at: datetime
    created_at: datetime
    used_at: Optional[datetime] = None


@dataclass(frozen=True)
class IssuedCode:
    """Returned to the issuer once; the plain code is never stored."""

    worker_id: str
    code: str
    expires_at: datetime
