from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from .model import VerificationCode


class VerificationCodeRepository(Protocol):
    def add_code(self, *, worker_id: str, code_hash: str, expires_at: datetime, created_at: datetime) -> VerificationCode:
        raise NotImplementedError

    def get_latest_unused(self, worker_id: str) -> Optional[VerificationCode]:
        """Most recently issued code that has not been consumed (expired ones included)."""

        raise NotImplementedError

    def mark_used(self, code_id: str, *, used_at: datetime) -> bool:
        """Consume a code. Returns False if it was already used."""

        raise NotImplementedError
