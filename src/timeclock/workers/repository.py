from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Worker


class WorkerRepository(Protocol):
    """Repository interface for Worker.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        raise NotImplementedError

    def get_active_by_pin(self, pin: str) -> Optional[Worker]:
        raise NotImplementedError

    def get_active_by_email(self, email: str) -> Optional[Worker]:
        raise NotImplementedError

    def create_worker(
        self,
        *,
        pin: str,
        full_name: str,
        role: Role,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Worker:
        """Insert a worker. Raises PinInUseError when the PIN is taken."""

        raise NotImplementedError

    def list_workers(self, *, include_inactive: bool = False) -> Sequence[Worker]:
        raise NotImplementedError

    def set_active(self, worker_id: str, *, is_active: bool) -> bool:
        raise NotImplementedError

    def update_contact(self, worker_id: str, *, email: Optional[str], phone: Optional[str]) -> bool:
        raise NotImplementedError
