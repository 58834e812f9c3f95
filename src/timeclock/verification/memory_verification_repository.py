from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import as_utc
from ..database.memory import MemoryStore
from .model import VerificationCode
from .repository import VerificationCodeRepository


class InMemoryVerificationCodeRepository(VerificationCodeRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def add_code(self, *, worker_id: str, code_hash: str, expires_at: datetime, created_at: datetime) -> VerificationCode:
        self._store.pause("default")
        code = VerificationCode(
            code_id=self._store.next_id("code"),
            worker_id=worker_id,
            code_hash=code_hash,
            expires_at=as_utc(expires_at),
            created_at=as_utc(created_at),
        )
        self._store.verification_codes.append(code)
        return code

    def get_latest_unused(self, worker_id: str) -> Optional[VerificationCode]:
        self._store.pause("default")
        latest = None
        for c in self._store.verification_codes:
            if c.worker_id != worker_id or c.used_at is not None:
                continue
            if latest is None or c.created_at >= latest.created_at:
                latest = c
        return latest

    def mark_used(self, code_id: str, *, used_at: datetime) -> bool:
        self._store.pause("default")
        codes = self._store.verification_codes
        for i, c in enumerate(codes):
            if c.code_id == code_id:
                if c.used_at is not None:
                    return False
                codes[i] = replace(c, used_at=as_utc(used_at))
                return True
        return False
