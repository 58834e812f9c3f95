from __future__ import annotations

from datetime import timedelta

import pytest

from timeclock.core.exceptions import (
    AuthenticationError,
    CodeExpiredError,
    CodeMismatchError,
    CodeNotFoundError,
    ValidationError,
)
from timeclock.verification.memory_verification_repository import InMemoryVerificationCodeRepository
from timeclock.verification.service import VerificationService, generate_code
from timeclock.workers.memory_worker_repository import InMemoryWorkerRepository


@pytest.fixture
def svc(store) -> VerificationService:
    return VerificationService(InMemoryVerificationCodeRepository(store), InMemoryWorkerRepository(store))


def _wrong(code: str) -> str:
    return f"{(int(code) + 1) % 1_000_000:06d}"


def test_generated_code_is_six_digits():
    for _ in range(20):
        code = generate_code()
        assert len(code) == 6
        assert code.isdigit()


def test_code_is_stored_hashed(svc, store, fixed_now):
    issued = svc.send_verification_code("demo-1", now=fixed_now)

    stored = store.verification_codes[-1]
    assert stored.code_hash != issued.code
    assert issued.expires_at == fixed_now + timedelta(minutes=10)


def test_verify_succeeds_once(svc, fixed_now):
    issued = svc.send_verification_code("demo-1", now=fixed_now)

    worker = svc.verify_code("demo-1", issued.code, now=fixed_now + timedelta(minutes=1))
    assert worker.worker_id == "demo-1"

    with pytest.raises(CodeNotFoundError):
        svc.verify_code("demo-1", issued.code, now=fixed_now + timedelta(minutes=2))


def test_verify_without_any_code(svc, fixed_now):
    with pytest.raises(CodeNotFoundError):
        svc.verify_code("demo-2", "123456", now=fixed_now)


def test_wrong_code_does_not_consume(svc, fixed_now):
    issued = svc.send_verification_code("demo-1", now=fixed_now)

    with pytest.raises(CodeMismatchError):
        svc.verify_code("demo-1", _wrong(issued.code), now=fixed_now)

    assert svc.verify_code("demo-1", issued.code, now=fixed_now).worker_id == "demo-1"


def test_expired_code(svc, fixed_now):
    issued = svc.send_verification_code("demo-1", now=fixed_now)

    with pytest.raises(CodeExpiredError):
        svc.verify_code("demo-1", issued.code, now=fixed_now + timedelta(minutes=11))


def test_only_latest_code_is_trusted(svc, fixed_now):
    first = svc.send_verification_code("demo-1", now=fixed_now)
    second = svc.send_verification_code("demo-1", now=fixed_now + timedelta(seconds=30))

    if first.code != second.code:
        with pytest.raises(CodeMismatchError):
            svc.verify_code("demo-1", first.code, now=fixed_now + timedelta(minutes=1))
    assert svc.verify_code("demo-1", second.code, now=fixed_now + timedelta(minutes=1)).worker_id == "demo-1"


def test_login_code_by_email(svc, fixed_now):
    issued = svc.send_login_code("John.Smith@Example.com", now=fixed_now)

    assert issued.worker_id == "demo-1"


def test_login_code_unknown_email(svc, fixed_now):
    with pytest.raises(AuthenticationError):
        svc.send_login_code("nobody@example.com", now=fixed_now)


def test_login_code_requires_email(svc, fixed_now):
    with pytest.raises(ValidationError):
        svc.send_login_code("  ", now=fixed_now)
