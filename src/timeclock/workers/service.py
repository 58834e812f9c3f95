from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import is_valid_pin, optional_email, require_non_empty, require_pin
from ..core.constants import ADMIN_FULL_NAME, ADMIN_PIN, ADMIN_WORKER_ID
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .model import AuthResult, Worker
from .repository import WorkerRepository

logger = logging.getLogger(__name__)

ADMIN_WORKER = Worker(
    worker_id=ADMIN_WORKER_ID,
    pin=ADMIN_PIN,
    full_name=ADMIN_FULL_NAME,
    role=Role.ADMIN,
)

INVALID_PIN_MESSAGE = "Invalid PIN. Please try again."


class AuthService:
    """Use case: kiosk PIN login."""

    def __init__(self, workers: WorkerRepository):
        self._workers = workers

    def authenticate_worker(self, pin: str) -> AuthResult:
        # The admin PIN never touches the store.
        if pin == ADMIN_PIN:
            return AuthResult(worker=ADMIN_WORKER, is_admin=True)

        if not is_valid_pin(pin):
            raise AuthenticationError(INVALID_PIN_MESSAGE)

        # Plaintext comparison: the PIN is the unique lookup key of the roster.
        worker = self._workers.get_active_by_pin(pin)
        if not worker:
            raise AuthenticationError(INVALID_PIN_MESSAGE)

        logger.info("worker %s authenticated at kiosk", worker.worker_id)
        return AuthResult(worker=worker, is_admin=False)


class WorkerService:
    """Use case: manage the worker roster (admin kiosk, manager console, settings)."""

    def __init__(self, workers: WorkerRepository):
        self._workers = workers

    def get_worker(self, worker_id: str) -> Worker:
        if worker_id == ADMIN_WORKER_ID:
            return ADMIN_WORKER
        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise NotFoundError("Worker not found.")
        return worker

    def create_worker(
        self,
        *,
        pin: str,
        full_name: str,
        role: Role | str = Role.WORKER,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Worker:
        pin = require_pin(pin)
        full_name = require_non_empty(full_name, "Name")
        try:
            role = Role(role)
        except ValueError:
            raise ValidationError("Role is not valid.")
        if role == Role.ADMIN:
            raise ValidationError("Administrators cannot be created from here.")
        if pin == ADMIN_PIN:
            raise ValidationError("This PIN is reserved.")

        worker = self._workers.create_worker(
            pin=pin,
            full_name=full_name,
            role=role,
            email=optional_email(email),
            phone=(phone or "").strip() or None,
        )
        logger.info("worker created: %s (%s)", worker.worker_id, worker.role.value)
        return worker

    def list_workers(self, *, include_inactive: bool = False) -> Sequence[Worker]:
        return self._workers.list_workers(include_inactive=include_inactive)

    def deactivate_worker(self, worker_id: str) -> None:
        worker = self.get_worker(worker_id)
        if worker.role == Role.ADMIN:
            raise ValidationError("Administrator accounts cannot be deactivated.")
        self._workers.set_active(worker.worker_id, is_active=False)
        logger.info("worker deactivated: %s", worker.worker_id)

    def update_contact(self, worker_id: str, *, email: Optional[str], phone: Optional[str]) -> Worker:
        worker = self.get_worker(worker_id)
        if worker.worker_id == ADMIN_WORKER_ID:
            raise ValidationError("The administrator has no contact details.")

        email = optional_email(email)
        phone = (phone or "").strip() or None
        if phone and len(phone) > 20:
            raise ValidationError("Phone number is too long.")

        self._workers.update_contact(worker.worker_id, email=email, phone=phone)
        return self.get_worker(worker.worker_id)
