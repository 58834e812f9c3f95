from __future__ import annotations

import mysql.connector
import pytest

from timeclock.core.enums import Role
from timeclock.core.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PinInUseError,
    StoreError,
    ValidationError,
)
from timeclock.database.connection import DBConfig, DatabaseConnection
from timeclock.workers.memory_worker_repository import InMemoryWorkerRepository
from timeclock.workers.mysql_worker_repository import MySQLWorkerRepository
from timeclock.workers.service import AuthService, WorkerService


class UntouchableWorkers:
    """Any store access fails the test."""

    def __getattr__(self, name):
        raise AssertionError(f"store should not be called: {name}")


class FakeCursor:
    def __init__(self, error: Exception):
        self._error = error
        self.rowcount = 0

    def execute(self, *args, **kwargs):
        raise self._error

    def close(self):
        pass


class FakeConn:
    def __init__(self, error: Exception):
        self._error = error
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return FakeCursor(self._error)

    def commit(self):
        raise AssertionError("commit after failed insert")

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory(DatabaseConnection):
    def __init__(self, error: Exception):
        super().__init__(DBConfig.from_dict({}))
        self.conn = FakeConn(error)

    def connect(self, *, with_database: bool = True):
        return self.conn


@pytest.fixture
def workers(store):
    return InMemoryWorkerRepository(store)


def test_admin_pin_bypasses_store():
    result = AuthService(UntouchableWorkers()).authenticate_worker("000000")

    assert result.is_admin is True
    assert result.worker.role == Role.ADMIN


def test_demo_pin_authenticates(workers):
    result = AuthService(workers).authenticate_worker("123456")

    assert result.is_admin is False
    assert result.worker.full_name == "John Smith"


@pytest.mark.parametrize("pin", ["", "12345", "1234567", "12a456", "999999"])
def test_bad_pin_is_rejected(workers, pin):
    with pytest.raises(AuthenticationError) as exc:
        AuthService(workers).authenticate_worker(pin)

    assert str(exc.value) == "Invalid PIN. Please try again."


def test_inactive_worker_cannot_sign_in(workers):
    WorkerService(workers).deactivate_worker("demo-2")

    with pytest.raises(AuthenticationError):
        AuthService(workers).authenticate_worker("234567")


def test_create_worker_then_authenticate(workers):
    svc = WorkerService(workers)

    created = svc.create_worker(pin="111222", full_name="  Ana Lopez ", email="Ana@Example.com")

    assert created.full_name == "Ana Lopez"
    assert created.role == Role.WORKER
    assert AuthService(workers).authenticate_worker("111222").worker.worker_id == created.worker_id


def test_duplicate_pin_is_a_conflict(workers):
    with pytest.raises(PinInUseError) as exc:
        WorkerService(workers).create_worker(pin="123456", full_name="Someone Else")

    assert isinstance(exc.value, ConflictError)


def test_pin_of_inactive_worker_stays_taken(workers):
    svc = WorkerService(workers)
    svc.deactivate_worker("demo-5")

    with pytest.raises(PinInUseError):
        svc.create_worker(pin="567890", full_name="New Hire")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"pin": "12345", "full_name": "Short Pin"},
        {"pin": "abcdef", "full_name": "Letters"},
        {"pin": "222333", "full_name": "   "},
        {"pin": "222333", "full_name": "Bad Role", "role": "owner"},
        {"pin": "222333", "full_name": "Admin", "role": "admin"},
        {"pin": "000000", "full_name": "Reserved"},
    ],
)
def test_create_worker_validates_before_store(kwargs):
    with pytest.raises(ValidationError):
        WorkerService(UntouchableWorkers()).create_worker(**kwargs)


def test_mysql_duplicate_key_becomes_pin_in_use():
    error = mysql.connector.errors.IntegrityError(msg="Duplicate entry '123456' for key 'pin'", errno=1062)
    factory = FakeConnFactory(error)

    with pytest.raises(PinInUseError):
        MySQLWorkerRepository(factory).create_worker(pin="123456", full_name="Dup", role=Role.WORKER)

    assert factory.conn.rolled_back
    assert factory.conn.closed


def test_mysql_other_errors_are_store_errors():
    error = mysql.connector.errors.OperationalError(msg="Lost connection", errno=2013)

    with pytest.raises(StoreError) as exc:
        MySQLWorkerRepository(FakeConnFactory(error)).create_worker(pin="123456", full_name="X", role=Role.WORKER)

    assert not isinstance(exc.value, PinInUseError)


def test_get_unknown_worker(workers):
    with pytest.raises(NotFoundError):
        WorkerService(workers).get_worker("nobody")


def test_list_workers_hides_inactive_by_default(workers):
    svc = WorkerService(workers)
    svc.deactivate_worker("demo-4")

    active = {w.worker_id for w in svc.list_workers()}
    everyone = {w.worker_id for w in svc.list_workers(include_inactive=True)}

    assert "demo-4" not in active
    assert "demo-4" in everyone
    assert len(everyone) == 5


def test_admin_cannot_be_deactivated(workers):
    with pytest.raises(ValidationError):
        WorkerService(workers).deactivate_worker("admin")


def test_update_contact(workers):
    updated = WorkerService(workers).update_contact("demo-1", email=" JS@example.com ", phone=" 555-0100 ")

    assert updated.email == "js@example.com"
    assert updated.phone == "555-0100"


def test_update_contact_rejects_long_phone(workers):
    with pytest.raises(ValidationError):
        WorkerService(workers).update_contact("demo-1", email=None, phone="1" * 21)
