from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .database.memory import MemoryStore
from .production.memory_production_repository import InMemoryProductionLogRepository
from .production.mysql_production_repository import MySQLProductionLogRepository
from .production.repository import ProductionLogRepository
from .production.service import ProductionService
from .punches.memory_punch_repository import InMemoryPunchRepository
from .punches.mysql_punch_repository import MySQLPunchRepository
from .punches.repository import PunchRepository
from .punches.service import PunchService
from .timeoff.memory_timeoff_repository import InMemoryTimeOffRepository
from .timeoff.mysql_timeoff_repository import MySQLTimeOffRepository
from .timeoff.repository import TimeOffRepository
from .timeoff.service import TimeOffService
from .verification.memory_verification_repository import InMemoryVerificationCodeRepository
from .verification.mysql_verification_repository import MySQLVerificationCodeRepository
from .verification.repository import VerificationCodeRepository
from .verification.service import VerificationService
from .workers.memory_worker_repository import InMemoryWorkerRepository
from .workers.mysql_worker_repository import MySQLWorkerRepository
from .workers.repository import WorkerRepository
from .workers.service import AuthService, WorkerService


@dataclass(frozen=True)
class Container:
    demo_mode: bool
    conn: Optional[DatabaseConnection]
    # Always present: the demo tables in demo mode, the time-off fallback otherwise.
    memory: MemoryStore

    workers_repo: WorkerRepository
    punches_repo: PunchRepository
    production_repo: ProductionLogRepository
    codes_repo: VerificationCodeRepository
    timeoff_repo: TimeOffRepository

    auth_service: AuthService
    worker_service: WorkerService
    punch_service: PunchService
    production_service: ProductionService
    verification_service: VerificationService
    timeoff_service: TimeOffService


def build_container(*, db_config: Optional[dict], demo_latency_scale: float = 1.0) -> Container:
    """Wire repositories and services once.

    No database configuration means demo mode: every repository runs against
    one MemoryStore. The choice is made here and never revisited.
    """
    demo_mode = not db_config

    if demo_mode:
        conn = None
        memory = MemoryStore(latency_scale=demo_latency_scale)
        workers_repo = InMemoryWorkerRepository(memory)
        punches_repo = InMemoryPunchRepository(memory)
        production_repo = InMemoryProductionLogRepository(memory)
        codes_repo = InMemoryVerificationCodeRepository(memory)
        timeoff_fallback = InMemoryTimeOffRepository(memory)
        timeoff_repo = timeoff_fallback
    else:
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        # The fallback keeps no roster so it never answers for real workers.
        memory = MemoryStore(latency_scale=0.0, seed=False)
        workers_repo = MySQLWorkerRepository(conn)
        punches_repo = MySQLPunchRepository(conn)
        production_repo = MySQLProductionLogRepository(conn)
        codes_repo = MySQLVerificationCodeRepository(conn)
        timeoff_fallback = InMemoryTimeOffRepository(memory)
        timeoff_repo = MySQLTimeOffRepository(conn)

    return Container(
        demo_mode=demo_mode,
        conn=conn,
        memory=memory,
        workers_repo=workers_repo,
        punches_repo=punches_repo,
        production_repo=production_repo,
        codes_repo=codes_repo,
        timeoff_repo=timeoff_repo,
        auth_service=AuthService(workers_repo),
        worker_service=WorkerService(workers_repo),
        punch_service=PunchService(punches_repo),
        production_service=ProductionService(production_repo),
        verification_service=VerificationService(codes_repo, workers_repo),
        timeoff_service=TimeOffService(timeoff_repo, timeoff_fallback),
    )
