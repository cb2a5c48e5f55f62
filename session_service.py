import json
from functools import lru_cache
from http import HTTPStatus
from typing import Dict, List

from redis.exceptions import RedisError

from backend import RedisBackend, get_redis_backend
from exceptions import ForbiddenError, NotFoundError, SerializationError, StoreError
from logging_config import get_logger
from schedules import Schedule, ScheduleRepository, get_schedule_repository
from schemas.session import SessionResponse

logger = get_logger(__name__)

SUCCESS_MESSAGE = "Processed successfully."


def status_token(status: HTTPStatus) -> str:
    """Render a status the way clients expect it in the envelope, e.g. '200 OK'."""
    return f"{status.value} {status.phrase}"


def render_members(members) -> str:
    return "[" + ", ".join(sorted(members)) + "]"


class SessionService:
    def __init__(self, backend: RedisBackend, schedules: ScheduleRepository):
        self.backend = backend
        self.schedules = schedules

    def _get_schedule(self, schedule_id: int) -> Schedule:
        schedule = self.schedules.find(schedule_id)
        if schedule is None:
            logger.warning(f"Schedule {schedule_id} does not exist")
            raise NotFoundError(f"Schedule {schedule_id} does not exist")
        return schedule

    def enter(self, schedule_id: int, user_id: int, user_name: str, room_name: str, expire_minutes: int) -> SessionResponse:
        schedule = self._get_schedule(schedule_id)
        if user_id not in (schedule.mentor_id, schedule.mentee_id):
            logger.warning(f"Enter rejected: user {user_name} ({user_id}) is not registered to schedule {schedule_id}")
            raise ForbiddenError(f"Only a user registered to schedule {schedule_id} may join; {user_name} cannot enter {room_name}")

        # Three separate commands: a failure after the first leaves the member
        # in the set without a TTL.
        try:
            self.backend.add_member(room_name, user_name)
            self.backend.expire_room(room_name, expire_minutes)
            self.backend.put_room(room_name, user_name)
            members = self.backend.get_members(room_name)
        except RedisError as e:
            logger.error(f"Failed to save session for room {room_name}, user {user_name}: {e}", exc_info=True)
            raise StoreError(f"Failed to save session for room {room_name}", room_name=room_name, user_name=user_name) from e

        logger.info(f"Session saved: {user_name} entered room {room_name} (expires in {expire_minutes} minutes)")
        return SessionResponse(code=status_token(HTTPStatus.OK), msg=SUCCESS_MESSAGE, data=render_members(members))

    def list(self) -> SessionResponse:
        try:
            room_names = self.backend.room_names()
            if not room_names:
                logger.warning("No active sessions in Redis")
                raise NotFoundError("No active sessions")
            rooms: Dict[str, List[str]] = {
                room_name: sorted(self.backend.get_members(room_name)) for room_name in room_names
            }
        except RedisError as e:
            logger.error(f"Failed to list sessions: {e}", exc_info=True)
            raise StoreError("Failed to list sessions") from e

        try:
            data = json.dumps(rooms, sort_keys=True, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to encode session list: {e}", exc_info=True)
            raise SerializationError("Failed to encode session list") from e

        logger.info(f"Listed {len(rooms)} active sessions")
        return SessionResponse(code=status_token(HTTPStatus.OK), msg=SUCCESS_MESSAGE, data=data)

    def remove(self, schedule_id: int, user_id: int, room_name: str) -> SessionResponse:
        schedule = self._get_schedule(schedule_id)
        if user_id != schedule.mentor_id:
            logger.warning(f"Remove rejected: user {user_id} is not the mentor of schedule {schedule_id}")
            raise ForbiddenError("Only the mentor may remove the room")

        try:
            if not self.backend.has_room(room_name):
                logger.warning(f"Remove rejected: session {room_name} does not exist")
                raise NotFoundError(f"Session {room_name} does not exist")
            self.backend.delete_room_field(room_name)
            deleted = self.backend.delete_room_key(room_name)
        except RedisError as e:
            logger.error(f"Failed to remove session {room_name}: {e}", exc_info=True)
            raise StoreError(f"Failed to remove session {room_name}", room_name=room_name) from e

        logger.info(f"Session removed: room {room_name}")
        return SessionResponse(code=status_token(HTTPStatus.OK), msg=SUCCESS_MESSAGE, data=str(deleted))


@lru_cache(maxsize=1)
def get_session_service() -> SessionService:
    return SessionService(get_redis_backend(), get_schedule_repository())
