from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import NewTimeOffRequest, TimeOffRequest


class TimeOffRepository(Protocol):
    def create_request(self, *, worker_id: str, data: NewTimeOffRequest, now: datetime) -> TimeOffRequest:
        raise NotImplementedError

    def get_request(self, request_id: str) -> Optional[TimeOffRequest]:
        raise NotImplementedError

    def list_requests(
        self,
        *,
        worker_id: Optional[str] = None,
        status: Optional[RequestStatus] = None,
        oldest_first: bool = False,
        limit: Optional[int] = None,
    ) -> Sequence[TimeOffRequest]:
        """Requests ordered by created_at, joined with worker/reviewer names."""

        raise NotImplementedError

    def decide(
        self,
        *,
        request_id: str,
        status: RequestStatus,
        reviewed_by: str,
        reviewed_at: datetime,
        denial_reason: Optional[str] = None,
    ) -> bool:
        """Move a PENDING request to a terminal status. False if it was not pending."""

        raise NotImplementedError
