"""Read-only access to mentoring schedules.

The `schedule` table belongs to the mentoring service; this service only
looks rows up to decide who may enter or remove a room.
"""

from functools import lru_cache
from typing import Optional

from sqlalchemy import BigInteger, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker

from constants import DATABASE_URL
from logging_config import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


class Schedule(Base):
    __tablename__ = "schedule"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    mentor_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    mentee_id: Mapped[int] = mapped_column(BigInteger, nullable=False)

    def __repr__(self) -> str:
        return f"Schedule(id={self.id}, mentor_id={self.mentor_id}, mentee_id={self.mentee_id})"


class ScheduleRepository:
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def find(self, schedule_id: int) -> Optional[Schedule]:
        with self.session_factory() as session:
            schedule = session.get(Schedule, schedule_id)
        if schedule is None:
            logger.debug(f"Schedule {schedule_id} not found")
        return schedule


def create_db_engine(url: str = DATABASE_URL) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_schedule_repository() -> ScheduleRepository:
    engine = create_db_engine()
    logger.info(f"Schedule lookup bound to {engine.url.render_as_string(hide_password=True)}")
    return ScheduleRepository(sessionmaker(bind=engine, expire_on_commit=False))
