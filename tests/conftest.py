"""
Shared pytest fixtures.

- InMemoryRedis: the subset of redis.Redis (decode_responses=True) that the
  room backend uses, with a switch to make chosen commands fail
- A SQLite schedule table seeded with schedule 1 (mentor 10, mentee 20)
- A SessionService wired to both
"""

from typing import Dict, Optional, Set

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy.orm import sessionmaker

from backend import RedisBackend
from schedules import Base, Schedule, ScheduleRepository, create_db_engine
from session_service import SessionService

MENTOR_ID = 10
MENTEE_ID = 20
STRANGER_ID = 99


class InMemoryRedis:
    """Dict-backed stand-in for the Redis commands used on rooms."""

    def __init__(self):
        self.sets: Dict[str, Set[str]] = {}
        self.hashes: Dict[str, Dict[str, str]] = {}
        self.ttls: Dict[str, int] = {}
        self.failing: Set[str] = set()
        self.commands = []

    def fail(self, *commands: str) -> None:
        self.failing.update(commands)

    def _run(self, command: str) -> None:
        self.commands.append(command)
        if command in self.failing:
            raise RedisConnectionError(f"{command} failed: connection refused")

    def expire_now(self, key: str) -> None:
        """Drop a key the way Redis does when its TTL runs out."""
        self.sets.pop(key, None)
        self.ttls.pop(key, None)

    def ping(self) -> bool:
        self._run("ping")
        return True

    def sadd(self, key: str, *values: str) -> int:
        self._run("sadd")
        members = self.sets.setdefault(key, set())
        added = len(set(values) - members)
        members.update(values)
        return added

    def smembers(self, key: str) -> Set[str]:
        self._run("smembers")
        return set(self.sets.get(key, set()))

    def expire(self, key: str, seconds: int) -> bool:
        self._run("expire")
        if key not in self.sets:
            return False
        self.ttls[key] = seconds
        return True

    def hset(self, name: str, key: str, value: str) -> int:
        self._run("hset")
        fields = self.hashes.setdefault(name, {})
        is_new = key not in fields
        fields[key] = value
        return int(is_new)

    def hdel(self, name: str, *keys: str) -> int:
        self._run("hdel")
        fields = self.hashes.get(name, {})
        removed = 0
        for key in keys:
            if fields.pop(key, None) is not None:
                removed += 1
        if not fields:
            self.hashes.pop(name, None)
        return removed

    def hexists(self, name: str, key: str) -> bool:
        self._run("hexists")
        return key in self.hashes.get(name, {})

    def hkeys(self, name: str):
        self._run("hkeys")
        return list(self.hashes.get(name, {}))

    def delete(self, *keys: str) -> int:
        self._run("delete")
        deleted = 0
        for key in keys:
            if self.sets.pop(key, None) is not None or self.hashes.pop(key, None) is not None:
                deleted += 1
            self.ttls.pop(key, None)
        return deleted


@pytest.fixture
def fake_redis() -> InMemoryRedis:
    return InMemoryRedis()


@pytest.fixture
def backend(fake_redis) -> RedisBackend:
    return RedisBackend(fake_redis)


@pytest.fixture
def schedule_repository(tmp_path) -> ScheduleRepository:
    engine = create_db_engine(f"sqlite:///{tmp_path / 'schedules.db'}")
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, expire_on_commit=False)
    with factory() as session:
        session.add(Schedule(id=1, mentor_id=MENTOR_ID, mentee_id=MENTEE_ID))
        session.commit()
    yield ScheduleRepository(factory)
    engine.dispose()


@pytest.fixture
def service(backend, schedule_repository) -> SessionService:
    return SessionService(backend, schedule_repository)


def room_field(fake_redis: InMemoryRedis, room_name: str) -> Optional[str]:
    return fake_redis.hashes.get("rooms", {}).get(room_name)
