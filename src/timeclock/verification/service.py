from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_utc
from ..common.validators import optional_email
from ..core.constants import VERIFICATION_CODE_LENGTH, VERIFICATION_CODE_TTL_MINUTES
from ..core.exceptions import (
    AuthenticationError,
    CodeExpiredError,
    CodeMismatchError,
    CodeNotFoundError,
    ValidationError,
)
from ..workers.model import Worker
from ..workers.repository import WorkerRepository
from .model import IssuedCode
from .repository import VerificationCodeRepository

logger = logging.getLogger(__name__)


def generate_code() -> str:
    return f"{secrets.randbelow(10 ** VERIFICATION_CODE_LENGTH):0{VERIFICATION_CODE_LENGTH}d}"


class VerificationService:
    """Use case: dashboard login with a short-lived numeric code.

    Several unused codes may exist for one worker; only the most recent one is
    ever trusted.
    """

    def __init__(
        self,
        codes: VerificationCodeRepository,
        workers: WorkerRepository,
        *,
        ttl_minutes: int = VERIFICATION_CODE_TTL_MINUTES,
    ):
        self._codes = codes
        self._workers = workers
        self._ttl = timedelta(minutes=int(ttl_minutes))

    def send_verification_code(self, worker_id: str, *, now: datetime | None = None) -> IssuedCode:
        now = now or now_utc()
        code = generate_code()
        stored = self._codes.add_code(
            worker_id=worker_id,
            code_hash=generate_password_hash(code),
            expires_at=now + self._ttl,
            created_at=now,
        )
        logger.info("verification code issued for worker %s (expires %s)", worker_id, stored.expires_at.isoformat())
        # No mail/SMS transport is wired in; the plain code only reaches debug logs.
        logger.debug("verification code for worker %s: %s", worker_id, code)
        return IssuedCode(worker_id=worker_id, code=code, expires_at=stored.expires_at)

    def send_login_code(self, email: str, *, now: datetime | None = None) -> IssuedCode:
        address = optional_email(email)
        if not address:
            raise ValidationError("Email is required.")
        worker = self._workers.get_active_by_email(address)
        if not worker:
            raise AuthenticationError("No active worker is registered with this email.")
        return self.send_verification_code(worker.worker_id, now=now)

    def verify_code(self, worker_id: str, code: str, *, now: datetime | None = None) -> Worker:
        now = now or now_utc()
        submitted = (code or "").strip()

        latest = self._codes.get_latest_unused(worker_id)
        if not latest:
            raise CodeNotFoundError("No verification code found. Please request a new one.")

        if not check_password_hash(latest.code_hash, submitted):
            raise CodeMismatchError("Incorrect verification code.")

        if now >= latest.expires_at:
            raise CodeExpiredError("Verification code has expired. Please request a new one.")

        # A concurrent verify may have consumed it between the read and here.
        if not self._codes.mark_used(latest.code_id, used_at=now):
            raise CodeNotFoundError("No verification code found. Please request a new one.")

        worker = self._workers.get_by_id(worker_id)
        if not worker or not worker.is_active:
            raise AuthenticationError("Worker is no longer active.")

        logger.info("worker %s verified", worker_id)
        return worker
