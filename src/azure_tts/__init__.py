from azure_tts.auth import Credential, TokenManager
from azure_tts.client import AzureTTSClient
from azure_tts.config import AzureTTSSettings
from azure_tts.errors import (
    AzureTTSError,
    BadRequestError,
    HTTPStatusError,
    PayloadTooLargeError,
    RateLimitedError,
    SynthesisError,
    TokenRefreshError,
    TokenUnavailableError,
    UnauthorizedError,
    UnexpectedStatusError,
    UnsupportedMediaTypeError,
    UnsupportedVoiceError,
    UpstreamError,
    VoiceListDecodeError,
    VoiceListError,
)
from azure_tts.properties import AudioOutput, Gender, Locale, Region
from azure_tts.voices import STANDARD_VOICES, VoiceDescriptor, VoiceKey

__all__ = [
    "AudioOutput",
    "AzureTTSClient",
    "AzureTTSError",
    "AzureTTSSettings",
    "BadRequestError",
    "Credential",
    "Gender",
    "HTTPStatusError",
    "Locale",
    "PayloadTooLargeError",
    "RateLimitedError",
    "Region",
    "STANDARD_VOICES",
    "SynthesisError",
    "TokenManager",
    "TokenRefreshError",
    "TokenUnavailableError",
    "UnauthorizedError",
    "UnexpectedStatusError",
    "UnsupportedMediaTypeError",
    "UnsupportedVoiceError",
    "UpstreamError",
    "VoiceDescriptor",
    "VoiceKey",
    "VoiceListDecodeError",
    "VoiceListError",
]
