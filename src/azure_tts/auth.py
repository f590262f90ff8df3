from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import httpx

from azure_tts.core.logging import get_logger
from azure_tts.core.scheduler import Scheduler
from azure_tts.errors import TokenRefreshError, TokenUnavailableError

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"

# Tokens are valid for 10 minutes; refresh a minute early.
TOKEN_LIFETIME = timedelta(minutes=10)
DEFAULT_REFRESH_INTERVAL_SECONDS = 9 * 60
DEFAULT_TOKEN_TIMEOUT_SECONDS = 15.0


@dataclass(frozen=True)
class Credential:
    token: str
    acquired_at: datetime

    @property
    def expires_at(self) -> datetime:
        return self.acquired_at + TOKEN_LIFETIME


class TokenManager:
    """
    Owns the bearer token for one client.

    `acquire()` fetches a token from the issueToken endpoint. `start()` runs
    `acquire()` on a fixed interval in the background; failures there are
    logged and the previous token stays in use. `stop()` must be called to
    end the background job, otherwise it lives as long as the event loop.
    """

    def __init__(
        self,
        *,
        token_url: str,
        subscription_key: str,
        timeout_seconds: float = DEFAULT_TOKEN_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._token_url = token_url
        self._subscription_key = subscription_key
        self._timeout = float(timeout_seconds)
        self._transport = transport
        self._credential: Optional[Credential] = None
        self._scheduler: Optional[Scheduler] = None
        self._stopped = False
        self._log = get_logger(component="token_manager")

    @property
    def credential(self) -> Optional[Credential]:
        return self._credential

    @property
    def token(self) -> str:
        cred = self._credential
        if cred is None:
            raise TokenUnavailableError("no token has been acquired")
        return cred.token

    @property
    def running(self) -> bool:
        return not self._stopped and self._scheduler is not None and self._scheduler.running

    async def acquire(self) -> Credential:
        headers = {SUBSCRIPTION_KEY_HEADER: self._subscription_key}
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            resp = await client.post(self._token_url, headers=headers)
            if resp.status_code != 200:
                raise TokenRefreshError(
                    resp.status_code,
                    resp.reason_phrase,
                    "unexpected status code; received http status=%d %s" % (resp.status_code, resp.reason_phrase),
                )
            cred = Credential(token=resp.text, acquired_at=datetime.now(timezone.utc))

        # Single reference swap; readers see either the old or the new credential.
        self._credential = cred
        self._log.debug("token_acquired", expires_at=cred.expires_at.isoformat())
        return cred

    async def refresh(self) -> None:
        try:
            await self.acquire()
        except Exception as e:
            self._log.warning("token_refresh_failed", error=type(e).__name__, detail=str(e))

    def start(self, interval_seconds: float = DEFAULT_REFRESH_INTERVAL_SECONDS) -> "TokenManager":
        if self._stopped:
            raise RuntimeError("token refresher was stopped and cannot be restarted")
        if self._scheduler is not None:
            raise RuntimeError("token refresher already started")

        self._scheduler = Scheduler()
        self._scheduler.every_seconds(interval_seconds, self.refresh, name="token_refresh")
        self._scheduler.start()
        self._log.info("token_refresher_started", every_seconds=interval_seconds)
        return self

    def stop(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        if self._scheduler is not None:
            self._scheduler.shutdown()
            self._log.info("token_refresher_stopped")
