import pytest

from azure_tts.errors import (
    BadRequestError,
    PayloadTooLargeError,
    RateLimitedError,
    SynthesisError,
    UnauthorizedError,
    UnexpectedStatusError,
    UnsupportedMediaTypeError,
    UpstreamError,
    VoiceListError,
    synthesis_error_for,
    voice_list_error_for,
)


@pytest.mark.parametrize(
    "status,cls",
    [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (413, PayloadTooLargeError),
        (415, UnsupportedMediaTypeError),
        (429, RateLimitedError),
        (502, UpstreamError),
        (418, UnexpectedStatusError),
        (500, UnexpectedStatusError),
    ],
)
def test_synthesis_error_mapping(status: int, cls: type) -> None:
    err = synthesis_error_for(status, "Reason")
    assert type(err) is cls
    assert isinstance(err, SynthesisError)
    assert err.status_code == status
    assert err.reason == "Reason"
    assert str(err).startswith("%d - " % status)


def test_voice_list_error_mapping() -> None:
    err = voice_list_error_for(401)
    assert isinstance(err, VoiceListError)
    assert err.status_code == 401
    assert "not authorized" in str(err)
    assert "unexpected response code" in str(voice_list_error_for(503))
