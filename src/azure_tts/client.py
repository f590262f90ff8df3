from __future__ import annotations

import asyncio
from types import TracebackType
from typing import Any, Dict, List, Optional, Type

import httpx

from azure_tts.auth import DEFAULT_REFRESH_INTERVAL_SECONDS, DEFAULT_TOKEN_TIMEOUT_SECONDS, TokenManager
from azure_tts.config import VOICE_SOURCES, AzureTTSSettings
from azure_tts.core.logging import get_logger
from azure_tts.errors import VoiceListDecodeError, synthesis_error_for, voice_list_error_for
from azure_tts.properties import AudioOutput, Gender, Locale, Region
from azure_tts.ssml import render
from azure_tts.voices import STANDARD_VOICES, VoiceDescriptor, VoiceMap, build_voice_map, parse_voice_list, resolve_voice

SYNTHESIZE_TIMEOUT_SECONDS = 30.0
VOICE_LIST_TIMEOUT_SECONDS = 2.0
SSML_CONTENT_TYPE = "application/ssml+xml"
USER_AGENT = "azuretts"


class AzureTTSClient:
    """
    Azure Cognitive Services text-to-speech over REST.

    Build with `await AzureTTSClient.create(...)`: it fetches the first token
    before returning and then keeps it fresh in the background. Call
    `close()` (or use `async with`) when done so the refresh job stops.

        async with await AzureTTSClient.create(key, Region.EAST_US) as tts:
            audio = await tts.synthesize("Hello", Locale.EN_US, Gender.FEMALE,
                                         AudioOutput.AUDIO_16KHZ_32KBITRATE_MONO_MP3)
    """

    def __init__(
        self,
        *,
        tokens: TokenManager,
        tts_url: str,
        voices_url: str,
        voice_map: VoiceMap = STANDARD_VOICES,
        synthesize_timeout_seconds: float = SYNTHESIZE_TIMEOUT_SECONDS,
        voice_list_timeout_seconds: float = VOICE_LIST_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._tokens = tokens
        self._tts_url = tts_url
        self._voices_url = voices_url
        self._voice_map = voice_map
        self._synthesize_timeout = float(synthesize_timeout_seconds)
        self._voice_list_timeout = float(voice_list_timeout_seconds)
        self._transport = transport
        self._log = get_logger(component="azure_tts")

    @classmethod
    async def create(
        cls,
        subscription_key: str,
        region: Region = Region.WEST_US_2,
        *,
        voice_source: str = "static",
        refresh_interval_seconds: float = DEFAULT_REFRESH_INTERVAL_SECONDS,
        synthesize_timeout_seconds: float = SYNTHESIZE_TIMEOUT_SECONDS,
        token_timeout_seconds: float = DEFAULT_TOKEN_TIMEOUT_SECONDS,
        voice_list_timeout_seconds: float = VOICE_LIST_TIMEOUT_SECONDS,
        tts_url: Optional[str] = None,
        token_url: Optional[str] = None,
        voices_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AzureTTSClient":
        if not subscription_key:
            raise ValueError("subscription_key is required")
        if voice_source not in VOICE_SOURCES:
            raise ValueError("voice_source must be one of %s" % ", ".join(VOICE_SOURCES))

        region = Region(region)
        tokens = TokenManager(
            token_url=token_url or region.token_url,
            subscription_key=subscription_key,
            timeout_seconds=token_timeout_seconds,
            transport=transport,
        )
        client = cls(
            tokens=tokens,
            tts_url=tts_url or region.text_to_speech_url,
            voices_url=voices_url or region.voice_list_url,
            synthesize_timeout_seconds=synthesize_timeout_seconds,
            voice_list_timeout_seconds=voice_list_timeout_seconds,
            transport=transport,
        )

        # Both of these are fatal: nothing is started until they succeed.
        await tokens.acquire()
        if voice_source == "remote":
            await client.refresh_voices()

        tokens.start(refresh_interval_seconds)
        return client

    @classmethod
    async def from_settings(cls, settings: AzureTTSSettings, **overrides: Any) -> "AzureTTSClient":
        kwargs: Dict[str, Any] = {
            "voice_source": settings.voice_source,
            "refresh_interval_seconds": settings.refresh_interval_seconds,
            "synthesize_timeout_seconds": settings.synthesize_timeout_seconds,
            "token_timeout_seconds": settings.token_timeout_seconds,
            "voice_list_timeout_seconds": settings.voice_list_timeout_seconds,
        }
        kwargs.update(overrides)
        return await cls.create(settings.subscription_key or "", settings.region, **kwargs)

    @property
    def tokens(self) -> TokenManager:
        return self._tokens

    @property
    def token(self) -> str:
        return self._tokens.token

    @property
    def voice_map(self) -> VoiceMap:
        return self._voice_map

    async def synthesize(
        self,
        text: str,
        locale: Locale,
        gender: Gender,
        audio_output: AudioOutput,
        *,
        timeout: Optional[float] = None,
    ) -> bytes:
        """
        Render `text` to audio. The whole call is bounded by `timeout`
        (default 30s); asyncio.TimeoutError is raised when it expires.
        """
        bound = self._synthesize_timeout if timeout is None else float(timeout)
        return await asyncio.wait_for(
            self.synthesize_with_context(text, locale, gender, audio_output),
            timeout=bound,
        )

    async def synthesize_with_context(
        self,
        text: str,
        locale: Locale,
        gender: Gender,
        audio_output: AudioOutput,
    ) -> bytes:
        """
        Same as `synthesize` without an internal deadline. The caller governs
        cancellation, e.g. by cancelling the task or wrapping it in its own
        asyncio.wait_for.
        """
        voice_id = resolve_voice(self._voice_map, locale, gender)
        payload = render(text, voice_id, locale, gender)

        headers: Dict[str, str] = {
            "X-Microsoft-OutputFormat": str(audio_output),
            "Content-Type": SSML_CONTENT_TYPE,
            "Authorization": "Bearer %s" % (self._tokens.token,),
            "User-Agent": USER_AGENT,
        }

        async with httpx.AsyncClient(timeout=None, transport=self._transport) as client:
            resp = await client.post(self._tts_url, content=payload.encode("utf-8"), headers=headers)
            if resp.status_code != 200:
                raise synthesis_error_for(resp.status_code, resp.reason_phrase)
            data = resp.content

        self._log.debug("synthesized", locale=str(locale), gender=str(gender), bytes=len(data))
        return data

    async def fetch_voices(self) -> List[VoiceDescriptor]:
        headers = {"Authorization": "Bearer %s" % (self._tokens.token,)}
        async with httpx.AsyncClient(timeout=self._voice_list_timeout, transport=self._transport) as client:
            resp = await client.get(self._voices_url, headers=headers)
            if resp.status_code != 200:
                raise voice_list_error_for(resp.status_code, resp.reason_phrase)
            try:
                data = resp.json()
            except ValueError as e:
                raise VoiceListDecodeError("unable to decode voice list response body, %s" % e) from e
        return parse_voice_list(data)

    async def refresh_voices(self) -> VoiceMap:
        voices = await self.fetch_voices()
        voice_map = build_voice_map(voices)
        self._voice_map = voice_map
        self._log.info("voices_loaded", fetched=len(voices), standard=len(voice_map))
        return voice_map

    async def force_refresh(self) -> None:
        """
        Fetch a new token now. Errors propagate, unlike the background refresh.
        """
        await self._tokens.acquire()

    def close(self) -> None:
        self._tokens.stop()

    async def __aenter__(self) -> "AzureTTSClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()
