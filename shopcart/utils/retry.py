# shopcart/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import requests
import redis

ATTEMPTS = 3


def _retry_on(exc_type, base: float, cap: float):
    # 3 attempts with backoff, the last error is re-raised unchanged
    return retry(
        reraise=True,
        stop=stop_after_attempt(ATTEMPTS),
        wait=wait_exponential(multiplier=base, min=base, max=cap),
        retry=retry_if_exception_type(exc_type),
    )


def http_retry():
    """Catalog calls: connection errors, timeouts and 5xx answers."""
    return _retry_on(requests.RequestException, base=0.3, cap=3)


def redis_retry():
    return _retry_on(redis.RedisError, base=0.2, cap=2)
