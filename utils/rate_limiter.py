from collections.abc import Callable, Hashable
from collections import deque
import time

class RateLimitedError(Exception):
  def __init__(self, key: Hashable):
    super().__init__(f"Rate limited for {key}")
    self.key = key

class RateLimiter:
  # try_acquire never awaits, so check and record cannot interleave between tasks
  def __init__(self, max_requests: int, window: float, clock: Callable[[], float] = time.monotonic):
    self.max_requests = max_requests
    self.window = window
    self.clock = clock
    self._requests: dict[Hashable, deque[float]] = {}

  def try_acquire(self, key: Hashable) -> bool:
    now = self.clock()
    requests = self._requests.setdefault(key, deque())
    while requests and now - requests[0] >= self.window:
      requests.popleft()
    if len(requests) < self.max_requests:
      requests.append(now)
      return True
    return False
