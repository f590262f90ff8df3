from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from azure_tts.auth import DEFAULT_REFRESH_INTERVAL_SECONDS, DEFAULT_TOKEN_TIMEOUT_SECONDS
from azure_tts.properties import Region, parse_enum

VOICE_SOURCES = ("static", "remote")


def _strip_quotes(s: str) -> str:
    s = (s or "").strip()
    if len(s) >= 2 and ((s[0] == s[-1]) and s[0] in ("'", '"')):
        s = s[1:-1].strip()
    return s


def _env_files() -> tuple[str, str]:
    """
    Check for a local .env first, then fall back to the repo-root .env.
    """
    repo_root_env = str(Path(__file__).resolve().parents[2] / ".env")
    return (".env", repo_root_env)


class AzureTTSSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # AZUREKEY is accepted as a shorter alternative.
    subscription_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("AZURE_TTS_SUBSCRIPTION_KEY", "AZUREKEY"),
    )
    region: Region = Field(default=Region.WEST_US_2, alias="AZURE_TTS_REGION")
    voice_source: str = Field(default="static", alias="AZURE_TTS_VOICE_SOURCE")
    refresh_interval_seconds: float = Field(
        default=DEFAULT_REFRESH_INTERVAL_SECONDS, alias="AZURE_TTS_REFRESH_INTERVAL_SECONDS"
    )
    synthesize_timeout_seconds: float = Field(default=30, alias="AZURE_TTS_SYNTHESIZE_TIMEOUT_SECONDS")
    token_timeout_seconds: float = Field(
        default=DEFAULT_TOKEN_TIMEOUT_SECONDS, alias="AZURE_TTS_TOKEN_TIMEOUT_SECONDS"
    )
    voice_list_timeout_seconds: float = Field(default=2, alias="AZURE_TTS_VOICE_LIST_TIMEOUT_SECONDS")
    log_level: str = Field(default="INFO", alias="AZURE_TTS_LOG_LEVEL")

    @field_validator("subscription_key", mode="before")
    @classmethod
    def _normalize_key(cls, v: object) -> Optional[str]:
        if v is None:
            return None
        s = _strip_quotes(str(v))
        return s or None

    @field_validator("region", mode="before")
    @classmethod
    def _normalize_region(cls, v: object) -> Region:
        return parse_enum(Region, _strip_quotes(str(v)))

    @field_validator("voice_source", mode="before")
    @classmethod
    def _normalize_voice_source(cls, v: object) -> str:
        s = _strip_quotes(str(v)).lower()
        if s not in VOICE_SOURCES:
            raise ValueError("voice_source must be one of %s" % ", ".join(VOICE_SOURCES))
        return s

    @field_validator("refresh_interval_seconds")
    @classmethod
    def _positive_interval(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("refresh interval must be positive")
        return v
