import redis
from functools import lru_cache
from typing import Optional, Set
from constants import REDIS_HOST, REDIS_PORT, REDIS_PASSWORD
from redis_keys import ROOMS_HASH_KEY, ROOM_MEMBERS_KEY
from logging_config import get_logger

logger = get_logger(__name__)


def create_redis_client() -> redis.Redis:
    try:
        client = redis.Redis(host=REDIS_HOST, port=REDIS_PORT, password=REDIS_PASSWORD, decode_responses=True)
        # Test connection
        client.ping()
        logger.info(f"Redis client connected successfully to {REDIS_HOST}:{REDIS_PORT}")
    except Exception as e:
        logger.error(f"Failed to connect to Redis at {REDIS_HOST}:{REDIS_PORT}: {e}", exc_info=True)
        raise
    return client


class RedisBackend:
    """Room membership store.

    Each method is a single Redis command, so each one is atomic on its own.
    Nothing here groups commands; callers that issue several in a row can be
    interrupted between them.
    """

    def __init__(self, redis_client: Optional[redis.Redis] = None):
        self.redis_client = redis_client if redis_client is not None else create_redis_client()

    def ping(self) -> bool:
        return bool(self.redis_client.ping())

    def add_member(self, room_name: str, user_name: str) -> int:
        key = ROOM_MEMBERS_KEY.format(room_name=room_name)
        added = self.redis_client.sadd(key, user_name)
        if added:
            logger.debug(f"User {user_name} added to room {room_name} (new member)")
        else:
            logger.debug(f"User {user_name} already a member of room {room_name}")
        return added

    def expire_room(self, room_name: str, minutes: int) -> bool:
        key = ROOM_MEMBERS_KEY.format(room_name=room_name)
        logger.debug(f"Setting TTL on room {room_name} to {minutes} minutes")
        return bool(self.redis_client.expire(key, minutes * 60))

    def put_room(self, room_name: str, user_name: str) -> int:
        return self.redis_client.hset(ROOMS_HASH_KEY, room_name, user_name)

    def delete_room_field(self, room_name: str) -> int:
        removed = self.redis_client.hdel(ROOMS_HASH_KEY, room_name)
        logger.debug(f"Removed room {room_name} from {ROOMS_HASH_KEY}: {removed}")
        return removed

    def has_room(self, room_name: str) -> bool:
        return bool(self.redis_client.hexists(ROOMS_HASH_KEY, room_name))

    def room_names(self) -> Set[str]:
        return set(self.redis_client.hkeys(ROOMS_HASH_KEY))

    def get_members(self, room_name: str) -> Set[str]:
        """Get all user names in a room. Empty once the room's TTL has run out."""
        key = ROOM_MEMBERS_KEY.format(room_name=room_name)
        members = self.redis_client.smembers(key)
        logger.debug(f"Room {room_name} has {len(members)} members")
        return members

    def delete_room_key(self, room_name: str) -> int:
        key = ROOM_MEMBERS_KEY.format(room_name=room_name)
        deleted = self.redis_client.delete(key)
        logger.debug(f"Room {room_name} member set deleted: {deleted}")
        return deleted


@lru_cache(maxsize=1)
def get_redis_backend() -> RedisBackend:
    logger.info(f"Initializing RedisBackend with connection to {REDIS_HOST}:{REDIS_PORT}")
    return RedisBackend()
