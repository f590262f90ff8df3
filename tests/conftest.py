from __future__ import annotations

import asyncio
import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

TTS_URL = "https://test.tts.local/cognitiveservices/v1"
TOKEN_URL = "https://test.token.local/sts/v1.0/issueToken"
VOICES_URL = "https://test.tts.local/cognitiveservices/voices/list"


class FakeAzure:
    """
    In-process stand-in for the three Azure endpoints, served through httpx.MockTransport.
    Counts calls per endpoint and records every request.
    """

    def __init__(self, subscription_key: str = "SYS64738") -> None:
        self.subscription_key = subscription_key
        self.tokens: List[str] = []
        self.token_status = 200
        self.token_gate: Optional[asyncio.Event] = None
        self.tts_status = 200
        self.tts_body = b"SYS4096"
        self.tts_delay = 0.0
        self.voices_status = 200
        self.voices_body: Any = []
        self.requests: List[httpx.Request] = []
        self.calls: Dict[str, int] = {"token": 0, "tts": 0, "voices": 0}

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def tts_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if str(r.url) == TTS_URL]

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url == TOKEN_URL:
            self.calls["token"] += 1
            if self.token_gate is not None:
                await self.token_gate.wait()
            if self.token_status != 200:
                return httpx.Response(self.token_status)
            if request.headers.get("Ocp-Apim-Subscription-Key") != self.subscription_key:
                return httpx.Response(401)
            # Echo the key as the token unless a sequence was queued.
            token = self.tokens.pop(0) if self.tokens else self.subscription_key
            return httpx.Response(200, text=token)
        if url == TTS_URL:
            self.calls["tts"] += 1
            if self.tts_delay:
                await asyncio.sleep(self.tts_delay)
            if self.tts_status != 200:
                return httpx.Response(self.tts_status)
            return httpx.Response(200, content=self.tts_body)
        if url == VOICES_URL:
            self.calls["voices"] += 1
            if self.voices_status != 200:
                return httpx.Response(self.voices_status)
            body = self.voices_body
            if isinstance(body, (bytes, str)):
                return httpx.Response(200, content=body)
            return httpx.Response(200, content=json.dumps(body).encode("utf-8"))
        return httpx.Response(404)


def voice_entry(
    short_name: str,
    locale: str,
    gender: str,
    voice_type: str = "Standard",
    name: Optional[str] = None,
) -> Dict[str, str]:
    return {
        "Name": name or "Microsoft Server Speech Text to Speech Voice (%s)" % short_name,
        "ShortName": short_name,
        "Gender": gender,
        "Locale": locale,
        "SampleRateHertz": "16000",
        "VoiceType": voice_type,
    }


@pytest.fixture
def fake() -> FakeAzure:
    return FakeAzure()


@pytest.fixture
def endpoints(fake: FakeAzure) -> Dict[str, Any]:
    return {
        "tts_url": TTS_URL,
        "token_url": TOKEN_URL,
        "voices_url": VOICES_URL,
        "transport": fake.transport,
    }


async def wait_until(predicate: Callable[[], bool], timeout: float = 5.0) -> None:
    async def poll() -> None:
        while not predicate():
            await asyncio.sleep(0.005)

    await asyncio.wait_for(poll(), timeout=timeout)
