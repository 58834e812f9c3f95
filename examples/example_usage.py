"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

from datetime import datetime, timedelta, timezone

from timeclock.common.duration import format_duration
from timeclock.container import build_container


def main():
    container = build_container(db_config=None, demo_latency_scale=0.0)

    auth = container.auth_service.authenticate_worker("123456")
    worker_id = auth.worker.worker_id

    start = datetime.now(timezone.utc) - timedelta(hours=8, minutes=12)
    container.punch_service.clock_in(worker_id, now=start)
    status = container.punch_service.get_worker_status(worker_id)
    result = container.punch_service.clock_out(worker_id, status.clock_in_time)
    print(f"{auth.worker.full_name} worked {result.time_worked}")

    weekly = container.punch_service.get_weekly_hours(worker_id)
    print(f"this week: {format_duration(weekly.total_ms)} {weekly.daily_hours}")


if __name__ == "__main__":
    main()
