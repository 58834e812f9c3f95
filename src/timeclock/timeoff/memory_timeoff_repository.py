from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import as_utc
from ..core.enums import RequestStatus
from ..database.memory import MemoryStore
from .model import NewTimeOffRequest, TimeOffRequest
from .repository import TimeOffRepository


class InMemoryTimeOffRepository(TimeOffRepository):
    """Demo-mode store, also the fallback when the MySQL store fails."""

    def __init__(self, store: MemoryStore):
        self._store = store

    def _with_names(self, r: TimeOffRequest) -> TimeOffRequest:
        worker = self._store.workers.get(r.worker_id)
        reviewer = self._store.workers.get(r.reviewed_by) if r.reviewed_by else None
        return replace(
            r,
            worker_name=worker.full_name if worker else "Unknown",
            reviewer_name=reviewer.full_name if reviewer else r.reviewer_name,
        )

    def create_request(self, *, worker_id: str, data: NewTimeOffRequest, now: datetime) -> TimeOffRequest:
        self._store.pause("timeoff_write")
        ts = as_utc(now)
        req = TimeOffRequest(
            request_id=self._store.next_id("req"),
            worker_id=worker_id,
            type=data.type,
            start_date=data.start_date,
            end_date=data.end_date,
            paid_hours=float(data.paid_hours),
            unpaid_hours=float(data.unpaid_hours),
            is_excused=True,
            is_planned=True,
            comments=data.comments,
            status=RequestStatus.PENDING,
            created_at=ts,
            updated_at=ts,
        )
        self._store.time_off_requests[req.request_id] = req
        return self._with_names(req)

    def get_request(self, request_id: str) -> Optional[TimeOffRequest]:
        self._store.pause("timeoff_read")
        r = self._store.time_off_requests.get(request_id)
        return self._with_names(r) if r else None

    def list_requests(
        self,
        *,
        worker_id: Optional[str] = None,
        status: Optional[RequestStatus] = None,
        oldest_first: bool = False,
        limit: Optional[int] = None,
    ) -> Sequence[TimeOffRequest]:
        self._store.pause("timeoff_read")
        items = [
            r
            for r in self._store.time_off_requests.values()
            if (worker_id is None or r.worker_id == worker_id) and (status is None or r.status == status)
        ]
        # dict order is insertion order, so the stable sort keeps ties in creation order.
        items.sort(key=lambda r: r.created_at, reverse=not oldest_first)
        if limit is not None:
            items = items[: int(limit)]
        return [self._with_names(r) for r in items]

    def decide(
        self,
        *,
        request_id: str,
        status: RequestStatus,
        reviewed_by: str,
        reviewed_at: datetime,
        denial_reason: Optional[str] = None,
    ) -> bool:
        self._store.pause("timeoff_review")
        r = self._store.time_off_requests.get(request_id)
        if not r or r.status != RequestStatus.PENDING:
            return False
        ts = as_utc(reviewed_at)
        self._store.time_off_requests[request_id] = replace(
            r,
            status=status,
            reviewed_by=reviewed_by,
            reviewed_at=ts,
            denial_reason=denial_reason,
            updated_at=ts,
        )
        return True
