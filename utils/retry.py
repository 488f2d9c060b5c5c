from aiohttp.client_exceptions import ClientResponseError
from constants import MAX_ATTEMPTS, RATE_LIMIT_WINDOW
from utils.rate_limiter import RateLimitedError
from functools import wraps
import logging
import asyncio

logger = logging.getLogger(__name__)

def retry_with_delay(func=None, *, max_attempts=MAX_ATTEMPTS, delay=RATE_LIMIT_WINDOW):
    if func and callable(func):
        return retry_with_delay(max_attempts=max_attempts, delay=delay)(func)

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            for attempt in range(max_attempts):
                try:
                    return await func(*args, **kwargs)
                except RateLimitedError as e:
                    logger.warning(str(e))
                except ClientResponseError as e:
                    if e.status == 429:
                        logger.warning(f"429 encountered, retrying in {delay}s...")
                    else:
                        logger.error(e.message)
                except Exception as e:
                    logger.error(str(e))
                await asyncio.sleep(delay)
            logger.error(f"{func.__name__} failed after {max_attempts} attempts")
            return None
        return wrapper

    return decorator
