import logging

import pytest
from aiohttp.client_exceptions import ClientResponseError

from utils.rate_limiter import RateLimitedError
from utils.retry import retry_with_delay


@pytest.mark.asyncio
async def test_returns_first_success_without_sleeping(sleeps):
    calls = []

    @retry_with_delay
    async def quote():
        calls.append(1)
        return "1.0"

    assert await quote() == "1.0"
    assert len(calls) == 1
    assert sleeps == []


@pytest.mark.asyncio
async def test_recovers_after_failures(sleeps, caplog):
    outcomes = [RuntimeError("execution reverted"), RateLimitedError("uniswap"), "2.5"]

    @retry_with_delay(max_attempts=5, delay=0.25)
    async def quote():
        outcome = outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    assert await quote() == "2.5"
    assert sleeps == [0.25, 0.25]
    assert ("utils.retry", logging.WARNING, "Rate limited for uniswap") in caplog.record_tuples
    assert ("utils.retry", logging.ERROR, "execution reverted") in caplog.record_tuples


@pytest.mark.asyncio
async def test_returns_none_when_exhausted(sleeps, caplog):
    calls = []

    @retry_with_delay(max_attempts=3, delay=1.0)
    async def quote():
        calls.append(1)
        raise ValueError("could not decode output")

    assert await quote() is None
    assert len(calls) == 3
    assert sleeps == [1.0, 1.0, 1.0]
    assert "could not decode output" in caplog.text


@pytest.mark.asyncio
async def test_provider_throttling_is_retried(sleeps, caplog):
    calls = []

    @retry_with_delay(max_attempts=2, delay=1.0)
    async def quote():
        calls.append(1)
        raise ClientResponseError(None, (), status=429, message="Too Many Requests")

    assert await quote() is None
    assert len(calls) == 2
    assert "429 encountered" in caplog.text
