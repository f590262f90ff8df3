from __future__ import annotations

from azure_tts.properties import Gender, Locale

# See https://docs.microsoft.com/en-us/azure/cognitive-services/speech-service/rest-text-to-speech#sample-request
SSML_TEMPLATE = (
    "<speak version='1.0' xml:lang='%s'>"
    "<voice xml:lang='%s' xml:gender='%s' name='%s'>%s</voice>"
    "</speak>"
)


def render(text: str, voice_id: str, locale: Locale, gender: Gender) -> str:
    """
    Build the SSML request body. Inputs are inserted as-is: XML special
    characters in `text` are not escaped.
    """
    return SSML_TEMPLATE % (locale, locale, gender, voice_id, text)
