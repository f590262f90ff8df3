from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

_E = TypeVar("_E", bound=Enum)

TEXT_TO_SPEECH_API = "https://%s.tts.speech.microsoft.com/cognitiveservices/v1"
TOKEN_REFRESH_API = "https://%s.api.cognitive.microsoft.com/sts/v1.0/issueToken"
VOICE_LIST_API = "https://%s.tts.speech.microsoft.com/cognitiveservices/voices/list"


class Region(str, Enum):
    """
    Azure regions serving the text-to-speech REST endpoints.
    """

    AUSTRALIA_EAST = "australiaeast"
    BRAZIL_SOUTH = "brazilsouth"
    CANADA_CENTRAL = "canadacentral"
    CENTRAL_US = "centralus"
    EAST_ASIA = "eastasia"
    EAST_US = "eastus"
    EAST_US_2 = "eastus2"
    FRANCE_CENTRAL = "francecentral"
    INDIA_CENTRAL = "indiacentral"
    JAPAN_EAST = "japaneast"
    JAPAN_WEST = "japanwest"
    KOREA_CENTRAL = "koreacentral"
    NORTH_CENTRAL_US = "northcentralus"
    NORTH_EUROPE = "northeurope"
    SOUTH_CENTRAL_US = "southcentralus"
    SOUTHEAST_ASIA = "southeastasia"
    UK_SOUTH = "uksouth"
    WEST_EUROPE = "westeurope"
    WEST_US = "westus"
    WEST_US_2 = "westus2"

    def __str__(self) -> str:
        return self.value

    @property
    def text_to_speech_url(self) -> str:
        return TEXT_TO_SPEECH_API % self.value

    @property
    def token_url(self) -> str:
        return TOKEN_REFRESH_API % self.value

    @property
    def voice_list_url(self) -> str:
        return VOICE_LIST_API % self.value


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"

    def __str__(self) -> str:
        return self.value


class Locale(str, Enum):
    """
    Language/locale tags accepted in the SSML payload.
    """

    AR_EG = "ar-EG"
    AR_SA = "ar-SA"
    BG_BG = "bg-BG"
    CA_ES = "ca-ES"
    CS_CZ = "cs-CZ"
    DA_DK = "da-DK"
    DE_AT = "de-AT"
    DE_CH = "de-CH"
    DE_DE = "de-DE"
    EL_GR = "el-GR"
    EN_AU = "en-AU"
    EN_CA = "en-CA"
    EN_GB = "en-GB"
    EN_IE = "en-IE"
    EN_IN = "en-IN"
    EN_US = "en-US"
    ES_ES = "es-ES"
    ES_MX = "es-MX"
    ET_EE = "et-EE"
    FI_FI = "fi-FI"
    FR_CA = "fr-CA"
    FR_CH = "fr-CH"
    FR_FR = "fr-FR"
    GA_IE = "ga-IE"
    HE_IL = "he-IL"
    HI_IN = "hi-IN"
    HR_HR = "hr-HR"
    HU_HU = "hu-HU"
    ID_ID = "id-ID"
    IT_IT = "it-IT"
    JA_JP = "ja-JP"
    KO_KR = "ko-KR"
    LT_LT = "lt-LT"
    LV_LV = "lv-LV"
    MT_MT = "mt-MT"
    MR_IN = "mr-IN"
    MS_MY = "ms-MY"
    NB_NO = "nb-NO"
    NL_NL = "nl-NL"
    PL_PL = "pl-PL"
    PT_BR = "pt-BR"
    PT_PT = "pt-PT"
    RO_RO = "ro-RO"
    RU_RU = "ru-RU"
    SK_SK = "sk-SK"
    SL_SI = "sl-SI"
    SV_SE = "sv-SE"
    TA_IN = "ta-IN"
    TE_IN = "te-IN"
    TH_TH = "th-TH"
    TR_TR = "tr-TR"
    VI_VN = "vi-VN"
    ZH_CN = "zh-CN"
    ZH_HK = "zh-HK"
    ZH_TW = "zh-TW"

    def __str__(self) -> str:
        return self.value


class AudioOutput(str, Enum):
    """
    Output formats; the value is sent verbatim in X-Microsoft-OutputFormat.
    """

    RIFF_8KHZ_8BIT_MONO_MULAW = "riff-8khz-8bit-mono-mulaw"
    RIFF_16KHZ_16BIT_MONO_PCM = "riff-16khz-16bit-mono-pcm"
    RIFF_16KHZ_16KBPS_MONO_SIREN = "riff-16khz-16kbps-mono-siren"
    RIFF_24KHZ_16BIT_MONO_PCM = "riff-24khz-16bit-mono-pcm"
    RAW_8KHZ_8BIT_MONO_MULAW = "raw-8khz-8bit-mono-mulaw"
    RAW_16KHZ_16BIT_MONO_PCM = "raw-16khz-16bit-mono-pcm"
    RAW_24KHZ_16BIT_MONO_PCM = "raw-24khz-16bit-mono-pcm"
    SSML_16KHZ_16BIT_MONO_TTS = "ssml-16khz-16bit-mono-tts"
    AUDIO_16KHZ_16KBPS_MONO_SIREN = "audio-16khz-16kbps-mono-siren"
    AUDIO_16KHZ_32KBITRATE_MONO_MP3 = "audio-16khz-32kbitrate-mono-mp3"
    AUDIO_16KHZ_64KBITRATE_MONO_MP3 = "audio-16khz-64kbitrate-mono-mp3"
    AUDIO_16KHZ_128KBITRATE_MONO_MP3 = "audio-16khz-128kbitrate-mono-mp3"
    AUDIO_24KHZ_48KBITRATE_MONO_MP3 = "audio-24khz-48kbitrate-mono-mp3"
    AUDIO_24KHZ_96KBITRATE_MONO_MP3 = "audio-24khz-96kbitrate-mono-mp3"

    def __str__(self) -> str:
        return self.value

    @property
    def suggested_ext(self) -> str:
        if self.value.endswith("mp3"):
            return "mp3"
        if self.value.startswith("riff"):
            return "wav"
        return "raw"


def parse_enum(enum_cls: Type[_E], raw: object) -> _E:
    """
    Case-insensitive lookup by wire value or member name.
    """
    if isinstance(raw, enum_cls):
        return raw
    s = str(raw or "").strip()
    for member in enum_cls:
        if s.lower() in (str(member.value).lower(), member.name.lower()):
            return member
    raise ValueError("unknown %s: %r" % (enum_cls.__name__, raw))
