import redis
from shopcart.utils.retry import redis_retry
from shopcart.utils.settings import REDIS_URL
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)

# compare-and-delete in one script, nothing can run between GET and DEL
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""


def cart_lock_key(email: str) -> str:
    return f"cart:{email}:lock"


class LockService:
    """
    Per-owner mutual exclusion around a cart read-modify-write.

    The value stored under the key is the caller's token, so a request
    can only release a lock it still owns (not one that expired and was
    taken by somebody else).
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @redis_retry()
    def acquire_cart_lock(self, email: str, token: str, ttl: int) -> bool:
        key = cart_lock_key(email)
        logger.info("Acquire lock", key=key)
        #SET cart:<email>:lock <token> NX EX ttl
        return bool(self.redis.set(name=key, value=token, nx=True, ex=ttl))

    @redis_retry()
    def release_cart_lock(self, email: str, token: str) -> bool:
        key = cart_lock_key(email)
        logger.info("Release lock", key=key)
        res = self.redis.eval(_RELEASE_LUA, 1, key, token)
        return bool(res)
