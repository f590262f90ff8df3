from __future__ import annotations

from typing import Dict, Optional, Type


class AzureTTSError(Exception):
    """Base class for everything the client raises on its own."""


class UnsupportedVoiceError(AzureTTSError):
    """No voice is known for the requested (locale, gender) pair."""

    def __init__(self, locale: object, gender: object) -> None:
        super().__init__("unable to locate voice for locale=%s, gender=%s" % (locale, gender))
        self.locale = locale
        self.gender = gender


class TokenUnavailableError(AzureTTSError):
    """A token was requested before the first successful acquire."""


class VoiceListDecodeError(AzureTTSError):
    """The voice list endpoint returned a body that is not a JSON array of voices."""


class HTTPStatusError(AzureTTSError):
    """
    Non-200 reply from one of the service endpoints.
    """

    description = "received unexpected HTTP status code"

    def __init__(self, status_code: int, reason: str = "", description: Optional[str] = None) -> None:
        self.status_code = int(status_code)
        self.reason = reason
        if description is not None:
            self.description = description
        super().__init__("%d - %s" % (self.status_code, self.description))


class TokenRefreshError(HTTPStatusError):
    description = "unexpected status code from the token endpoint"


class SynthesisError(HTTPStatusError):
    pass


class BadRequestError(SynthesisError):
    description = (
        "A required parameter is missing, empty, or null. Or, the value passed to either a "
        "required or optional parameter is invalid. A common issue is a header that is too long"
    )


class UnauthorizedError(SynthesisError):
    description = (
        "The request is not authorized. Check to make sure your subscription key or token "
        "is valid and in the correct region"
    )


class PayloadTooLargeError(SynthesisError):
    description = "The SSML input is longer than 1024 characters"


class UnsupportedMediaTypeError(SynthesisError):
    description = (
        "It's possible that the wrong Content-Type was provided. "
        "Content-Type should be set to application/ssml+xml"
    )


class RateLimitedError(SynthesisError):
    description = "You have exceeded the quota or rate of requests allowed for your subscription"


class UpstreamError(SynthesisError):
    description = "Network or server-side issue. May also indicate invalid headers"


class UnexpectedStatusError(SynthesisError):
    pass


class VoiceListError(HTTPStatusError):
    description = "unexpected response code from voice list API"


_SYNTHESIS_ERRORS: Dict[int, Type[SynthesisError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    413: PayloadTooLargeError,
    415: UnsupportedMediaTypeError,
    429: RateLimitedError,
    502: UpstreamError,
}

# The voice list endpoint shares the synthesis descriptions for the codes it documents.
_VOICE_LIST_DESCRIPTIONS: Dict[int, str] = {
    400: BadRequestError.description,
    401: UnauthorizedError.description,
    429: RateLimitedError.description,
    502: UpstreamError.description,
}


def synthesis_error_for(status_code: int, reason: str = "") -> SynthesisError:
    cls = _SYNTHESIS_ERRORS.get(int(status_code), UnexpectedStatusError)
    return cls(status_code, reason)


def voice_list_error_for(status_code: int, reason: str = "") -> VoiceListError:
    return VoiceListError(status_code, reason, _VOICE_LIST_DESCRIPTIONS.get(int(status_code)))
