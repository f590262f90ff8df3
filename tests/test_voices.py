import pytest

from azure_tts.errors import UnsupportedVoiceError, VoiceListDecodeError
from azure_tts.properties import Gender, Locale
from azure_tts.voices import STANDARD_VOICES, VoiceKey, build_voice_map, parse_voice_list, resolve_voice

from conftest import voice_entry


def test_resolve_known_voice() -> None:
    assert resolve_voice(STANDARD_VOICES, Locale.EN_US, Gender.FEMALE) == "en-US-ZiraRUS"


@pytest.mark.parametrize(
    "locale,gender",
    [(Locale.DE_CH, Gender.FEMALE), (Locale.GA_IE, Gender.MALE), (Locale.MT_MT, Gender.FEMALE)],
)
def test_resolve_missing_voice_raises(locale: Locale, gender: Gender) -> None:
    with pytest.raises(UnsupportedVoiceError) as exc:
        resolve_voice(STANDARD_VOICES, locale, gender)
    assert exc.value.locale == locale
    assert exc.value.gender == gender


def test_static_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        STANDARD_VOICES[VoiceKey(Locale.GA_IE, Gender.MALE)] = "nope"  # type: ignore[index]


def test_build_voice_map_keeps_standard_only_last_wins() -> None:
    voices = parse_voice_list(
        [
            voice_entry("en-US-ZiraRUS", "en-US", "Female"),
            voice_entry("en-US-AriaNeural", "en-US", "Female", voice_type="Neural"),
            voice_entry("en-US-JessaRUS", "en-US", "Female"),
            voice_entry("de-CH-Karsten", "de-CH", "Male"),
            voice_entry("xx-XX-Nobody", "xx-XX", "Male"),
        ]
    )
    m = build_voice_map(voices)
    assert m == {
        VoiceKey(Locale.EN_US, Gender.FEMALE): "en-US-JessaRUS",
        VoiceKey(Locale.DE_CH, Gender.MALE): "de-CH-Karsten",
    }


def test_parse_voice_list_fields() -> None:
    [v] = parse_voice_list([voice_entry("ar-EG-Hoda", "ar-EG", "Female")])
    assert v.short_name == "ar-EG-Hoda"
    assert v.locale == "ar-EG"
    assert v.gender == "Female"
    assert v.sample_rate_hertz == "16000"
    assert v.is_standard


@pytest.mark.parametrize("payload", [{"voices": []}, "nope", [1, 2]])
def test_parse_voice_list_rejects_malformed(payload: object) -> None:
    with pytest.raises(VoiceListDecodeError):
        parse_voice_list(payload)
