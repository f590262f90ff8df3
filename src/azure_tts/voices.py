from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from azure_tts.errors import UnsupportedVoiceError, VoiceListDecodeError
from azure_tts.properties import Gender, Locale

STANDARD_VOICE_TYPE = "Standard"


@dataclass(frozen=True)
class VoiceKey:
    locale: Locale
    gender: Gender


@dataclass(frozen=True)
class VoiceDescriptor:
    name: str
    short_name: str
    gender: str
    locale: str
    sample_rate_hertz: str
    voice_type: str

    @property
    def is_standard(self) -> bool:
        return self.voice_type == STANDARD_VOICE_TYPE


VoiceMap = Mapping[VoiceKey, str]


def _v(locale: Locale, gender: Gender) -> VoiceKey:
    return VoiceKey(locale=locale, gender=gender)


# Standard (non-neural) voices by short name. Locales without an entry here
# (et-EE, ga-IE, lt-LT, lv-LV, mt-MT, mr-IN) only ship neural voices.
STANDARD_VOICES: VoiceMap = MappingProxyType(
    {
        _v(Locale.AR_EG, Gender.FEMALE): "ar-EG-Hoda",
        _v(Locale.AR_SA, Gender.MALE): "ar-SA-Naayf",
        _v(Locale.BG_BG, Gender.MALE): "bg-BG-Ivan",
        _v(Locale.CA_ES, Gender.FEMALE): "ca-ES-HerenaRUS",
        _v(Locale.CS_CZ, Gender.MALE): "cs-CZ-Jakub",
        _v(Locale.DA_DK, Gender.FEMALE): "da-DK-HelleRUS",
        _v(Locale.DE_AT, Gender.MALE): "de-AT-Michael",
        _v(Locale.DE_CH, Gender.MALE): "de-CH-Karsten",
        _v(Locale.DE_DE, Gender.FEMALE): "de-DE-HeddaRUS",
        _v(Locale.DE_DE, Gender.MALE): "de-DE-Stefan-Apollo",
        _v(Locale.EL_GR, Gender.MALE): "el-GR-Stefanos",
        _v(Locale.EN_AU, Gender.FEMALE): "en-AU-HayleyRUS",
        _v(Locale.EN_CA, Gender.FEMALE): "en-CA-HeatherRUS",
        _v(Locale.EN_GB, Gender.FEMALE): "en-GB-HazelRUS",
        _v(Locale.EN_GB, Gender.MALE): "en-GB-George-Apollo",
        _v(Locale.EN_IE, Gender.MALE): "en-IE-Sean",
        _v(Locale.EN_IN, Gender.FEMALE): "en-IN-PriyaRUS",
        _v(Locale.EN_IN, Gender.MALE): "en-IN-Ravi-Apollo",
        _v(Locale.EN_US, Gender.FEMALE): "en-US-ZiraRUS",
        _v(Locale.EN_US, Gender.MALE): "en-US-BenjaminRUS",
        _v(Locale.ES_ES, Gender.FEMALE): "es-ES-HelenaRUS",
        _v(Locale.ES_ES, Gender.MALE): "es-ES-Pablo-Apollo",
        _v(Locale.ES_MX, Gender.FEMALE): "es-MX-HildaRUS",
        _v(Locale.ES_MX, Gender.MALE): "es-MX-Raul-Apollo",
        _v(Locale.FI_FI, Gender.FEMALE): "fi-FI-HeidiRUS",
        _v(Locale.FR_CA, Gender.FEMALE): "fr-CA-HarmonieRUS",
        _v(Locale.FR_CH, Gender.MALE): "fr-CH-Guillaume",
        _v(Locale.FR_FR, Gender.FEMALE): "fr-FR-HortenseRUS",
        _v(Locale.FR_FR, Gender.MALE): "fr-FR-Paul-Apollo",
        _v(Locale.HE_IL, Gender.MALE): "he-IL-Asaf",
        _v(Locale.HI_IN, Gender.FEMALE): "hi-IN-Kalpana",
        _v(Locale.HI_IN, Gender.MALE): "hi-IN-Hemant",
        _v(Locale.HR_HR, Gender.MALE): "hr-HR-Matej",
        _v(Locale.HU_HU, Gender.MALE): "hu-HU-Szabolcs",
        _v(Locale.ID_ID, Gender.MALE): "id-ID-Andika",
        _v(Locale.IT_IT, Gender.FEMALE): "it-IT-LuciaRUS",
        _v(Locale.IT_IT, Gender.MALE): "it-IT-Cosimo-Apollo",
        _v(Locale.JA_JP, Gender.FEMALE): "ja-JP-HarukaRUS",
        _v(Locale.JA_JP, Gender.MALE): "ja-JP-Ichiro-Apollo",
        _v(Locale.KO_KR, Gender.FEMALE): "ko-KR-HeamiRUS",
        _v(Locale.MS_MY, Gender.MALE): "ms-MY-Rizwan",
        _v(Locale.NB_NO, Gender.FEMALE): "nb-NO-HuldaRUS",
        _v(Locale.NL_NL, Gender.FEMALE): "nl-NL-HannaRUS",
        _v(Locale.PL_PL, Gender.FEMALE): "pl-PL-PaulinaRUS",
        _v(Locale.PT_BR, Gender.FEMALE): "pt-BR-HeloisaRUS",
        _v(Locale.PT_BR, Gender.MALE): "pt-BR-Daniel-Apollo",
        _v(Locale.PT_PT, Gender.FEMALE): "pt-PT-HeliaRUS",
        _v(Locale.RO_RO, Gender.MALE): "ro-RO-Andrei",
        _v(Locale.RU_RU, Gender.FEMALE): "ru-RU-EkaterinaRUS",
        _v(Locale.RU_RU, Gender.MALE): "ru-RU-Pavel-Apollo",
        _v(Locale.SK_SK, Gender.MALE): "sk-SK-Filip",
        _v(Locale.SL_SI, Gender.MALE): "sl-SI-Lado",
        _v(Locale.SV_SE, Gender.FEMALE): "sv-SE-HedvigRUS",
        _v(Locale.TA_IN, Gender.MALE): "ta-IN-Valluvar",
        _v(Locale.TE_IN, Gender.FEMALE): "te-IN-Chitra",
        _v(Locale.TH_TH, Gender.MALE): "th-TH-Pattara",
        _v(Locale.TR_TR, Gender.FEMALE): "tr-TR-SedaRUS",
        _v(Locale.VI_VN, Gender.MALE): "vi-VN-An",
        _v(Locale.ZH_CN, Gender.FEMALE): "zh-CN-HuihuiRUS",
        _v(Locale.ZH_CN, Gender.MALE): "zh-CN-Kangkang-Apollo",
        _v(Locale.ZH_HK, Gender.FEMALE): "zh-HK-TracyRUS",
        _v(Locale.ZH_HK, Gender.MALE): "zh-HK-Danny-Apollo",
        _v(Locale.ZH_TW, Gender.FEMALE): "zh-TW-HanHanRUS",
        _v(Locale.ZH_TW, Gender.MALE): "zh-TW-Zhiwei-Apollo",
    }
)


def resolve_voice(voice_map: VoiceMap, locale: Locale, gender: Gender) -> str:
    voice_id = voice_map.get(VoiceKey(locale=locale, gender=gender))
    if not voice_id:
        raise UnsupportedVoiceError(locale, gender)
    return voice_id


def parse_voice_list(payload: Any) -> List[VoiceDescriptor]:
    """
    Decode the voices/list response body (a JSON array of objects).
    """
    if not isinstance(payload, list):
        raise VoiceListDecodeError(
            "unable to decode voice list response body, expected array got %s" % type(payload).__name__
        )

    voices: List[VoiceDescriptor] = []
    for item in payload:
        if not isinstance(item, dict):
            raise VoiceListDecodeError("unable to decode voice list entry %r" % (item,))
        voices.append(_parse_voice(item))
    return voices


def build_voice_map(voices: Iterable[VoiceDescriptor]) -> VoiceMap:
    """
    Keep standard voices keyed by (locale, gender). Later entries overwrite earlier ones.
    """
    out: Dict[VoiceKey, str] = {}
    for v in voices:
        if not v.is_standard or not v.short_name:
            continue
        locale = _lookup(Locale, v.locale)
        gender = _lookup(Gender, v.gender)
        if locale is None or gender is None:
            continue
        out[VoiceKey(locale=locale, gender=gender)] = v.short_name
    return MappingProxyType(out)


def _parse_voice(item: Dict[str, Any]) -> VoiceDescriptor:
    def s(key: str) -> str:
        v = item.get(key)
        return str(v).strip() if v is not None else ""

    return VoiceDescriptor(
        name=s("Name"),
        short_name=s("ShortName"),
        gender=s("Gender"),
        locale=s("Locale"),
        sample_rate_hertz=s("SampleRateHertz"),
        voice_type=s("VoiceType"),
    )


def _lookup(enum_cls: Any, value: str) -> Optional[Any]:
    try:
        return enum_cls(value)
    except ValueError:
        return None
