import asyncio

import pytest

from azure_tts.auth import TOKEN_LIFETIME, TokenManager
from azure_tts.errors import HTTPStatusError, TokenRefreshError, TokenUnavailableError

from conftest import TOKEN_URL, FakeAzure, wait_until


def _manager(fake: FakeAzure, key: str = "ThisIsMySubscriptionKeyAndToBeToken") -> TokenManager:
    fake.subscription_key = key
    return TokenManager(token_url=TOKEN_URL, subscription_key=key, transport=fake.transport)


@pytest.mark.asyncio
async def test_acquire_stores_body_verbatim(fake: FakeAzure) -> None:
    tokens = _manager(fake)
    cred = await tokens.acquire()
    assert tokens.token == "ThisIsMySubscriptionKeyAndToBeToken"
    assert cred.expires_at - cred.acquired_at == TOKEN_LIFETIME
    [req] = fake.requests
    assert req.method == "POST"
    assert req.headers["Ocp-Apim-Subscription-Key"] == "ThisIsMySubscriptionKeyAndToBeToken"


@pytest.mark.asyncio
async def test_acquire_non_200_raises_with_status(fake: FakeAzure) -> None:
    tokens = _manager(fake)
    fake.token_status = 403
    with pytest.raises(TokenRefreshError) as exc:
        await tokens.acquire()
    assert exc.value.status_code == 403
    assert tokens.credential is None


def test_token_before_acquire_raises(fake: FakeAzure) -> None:
    with pytest.raises(TokenUnavailableError) as exc:
        _ = _manager(fake).token
    assert not isinstance(exc.value, HTTPStatusError)


@pytest.mark.asyncio
async def test_refresh_failure_keeps_previous_token(fake: FakeAzure) -> None:
    tokens = _manager(fake)
    await tokens.acquire()
    before = tokens.credential

    fake.token_status = 500
    await tokens.refresh()
    assert tokens.credential is before


@pytest.mark.asyncio
async def test_start_twice_or_after_stop_is_an_error(fake: FakeAzure) -> None:
    tokens = _manager(fake)
    await tokens.acquire()
    tokens.start(60)
    with pytest.raises(RuntimeError):
        tokens.start(60)
    tokens.stop()
    with pytest.raises(RuntimeError):
        tokens.start(60)


@pytest.mark.asyncio
async def test_refresh_failures_then_recovery(fake: FakeAzure) -> None:
    tokens = _manager(fake)
    await tokens.acquire()
    good = tokens.token

    fake.token_status = 500
    for _ in range(3):
        await tokens.refresh()
    assert fake.calls["token"] == 4
    assert tokens.token == good

    fake.token_status = 200
    fake.tokens = ["recovered"]
    await tokens.refresh()
    assert tokens.token == "recovered"


@pytest.mark.asyncio
async def test_background_refresh_replaces_token(fake: FakeAzure) -> None:
    tokens = _manager(fake)
    await tokens.acquire()
    fake.tokens = ["refreshed-%d" % i for i in range(1000)]

    tokens.start(0.02)
    try:
        await wait_until(lambda: fake.calls["token"] >= 3)
        assert tokens.running
        assert tokens.token.startswith("refreshed-")
    finally:
        tokens.stop()


@pytest.mark.asyncio
async def test_background_failures_do_not_stop_loop(fake: FakeAzure) -> None:
    tokens = _manager(fake)
    await tokens.acquire()
    good = tokens.token
    fake.token_status = 500

    tokens.start(0.02)
    try:
        await wait_until(lambda: fake.calls["token"] >= 4)
        assert tokens.running
        assert tokens.token == good
    finally:
        tokens.stop()


@pytest.mark.asyncio
async def test_stop_halts_token_requests(fake: FakeAzure) -> None:
    tokens = _manager(fake)
    await tokens.acquire()
    tokens.start(0.02)
    await wait_until(lambda: fake.calls["token"] >= 2)

    tokens.stop()
    # No loop turn between stop() and the check.
    assert not tokens.running

    seen = fake.calls["token"]
    await asyncio.sleep(0.2)
    assert fake.calls["token"] == seen
    assert not tokens.running

    tokens.stop()


@pytest.mark.asyncio
async def test_stop_cancels_in_flight_refresh(fake: FakeAzure) -> None:
    tokens = _manager(fake)
    await tokens.acquire()
    before = tokens.credential
    fake.token_gate = asyncio.Event()

    tokens.start(0.02)
    await wait_until(lambda: fake.calls["token"] >= 2)
    tokens.stop()

    fake.token_gate.set()
    await asyncio.sleep(0.1)
    assert tokens.credential is before
    assert fake.calls["token"] == 2


@pytest.mark.asyncio
async def test_stop_without_start_is_harmless(fake: FakeAzure) -> None:
    tokens = _manager(fake)
    tokens.stop()
    assert not tokens.running
