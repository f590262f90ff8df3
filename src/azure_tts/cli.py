from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional, Tuple

import httpx
import typer
from rich.console import Console
from rich.table import Table

from azure_tts.client import AzureTTSClient
from azure_tts.config import AzureTTSSettings
from azure_tts.core.logging import configure_logging, get_logger
from azure_tts.errors import AzureTTSError
from azure_tts.properties import AudioOutput, Gender, Locale, Region, parse_enum
from azure_tts.voices import STANDARD_VOICES

app = typer.Typer(no_args_is_help=True)


def _load_settings(region: Optional[str]) -> AzureTTSSettings:
    settings = AzureTTSSettings()
    if region:
        settings = settings.model_copy(update={"region": parse_enum(Region, region)})
    return settings


@app.command()
def synthesize(
    text: str = typer.Argument(..., help="Text to speak"),
    locale: str = typer.Option("en-US", "--locale", help="Voice locale, e.g. en-US"),
    gender: str = typer.Option("Female", "--gender", help="Male or Female"),
    audio_format: str = typer.Option(
        AudioOutput.AUDIO_16KHZ_32KBITRATE_MONO_MP3.value, "--format", help="X-Microsoft-OutputFormat value"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file (default: audio.<ext>)"),
    region: Optional[str] = typer.Option(None, "--region", help="Override AZURE_TTS_REGION"),
) -> None:
    """
    Synthesize TEXT and write the audio bytes to a file.
    """
    settings = _load_settings(region)
    configure_logging(settings.log_level)
    log = get_logger(component="cli")

    if not settings.subscription_key:
        log.error("missing_subscription_key", hint="Set AZURE_TTS_SUBSCRIPTION_KEY (or AZUREKEY)")
        raise typer.Exit(code=2)

    try:
        loc = parse_enum(Locale, locale)
        gen = parse_enum(Gender, gender)
        fmt = parse_enum(AudioOutput, audio_format)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    path = output or Path("audio.%s" % fmt.suggested_ext)

    async def run_once() -> bytes:
        async with await AzureTTSClient.from_settings(settings) as tts:
            return await tts.synthesize(text, loc, gen, fmt)

    try:
        data = asyncio.run(run_once())
    except (AzureTTSError, httpx.HTTPError, asyncio.TimeoutError) as e:
        log.error("synthesis_failed", error=type(e).__name__, detail=str(e))
        raise typer.Exit(code=1)

    path.write_bytes(data)
    log.info("audio_written", path=str(path), bytes=len(data))


@app.command()
def voices(
    remote: bool = typer.Option(False, "--remote", help="Fetch the voice list from the service"),
    region: Optional[str] = typer.Option(None, "--region", help="Override AZURE_TTS_REGION"),
) -> None:
    """
    Show the (locale, gender) -> voice table.
    """
    settings = _load_settings(region)
    configure_logging(settings.log_level)
    log = get_logger(component="cli")

    rows: List[Tuple[str, str, str]]
    if not remote:
        rows = [(k.locale.value, k.gender.value, v) for k, v in STANDARD_VOICES.items()]
    else:
        if not settings.subscription_key:
            log.error("missing_subscription_key", hint="Set AZURE_TTS_SUBSCRIPTION_KEY (or AZUREKEY)")
            raise typer.Exit(code=2)

        async def fetch() -> List[Tuple[str, str, str]]:
            async with await AzureTTSClient.from_settings(settings, voice_source="remote") as tts:
                return [(k.locale.value, k.gender.value, v) for k, v in tts.voice_map.items()]

        try:
            rows = asyncio.run(fetch())
        except (AzureTTSError, httpx.HTTPError) as e:
            log.error("voice_list_failed", error=type(e).__name__, detail=str(e))
            raise typer.Exit(code=1)

    table = Table(title="Standard voices (%s)" % ("remote" if remote else "built-in"))
    table.add_column("Locale")
    table.add_column("Gender")
    table.add_column("Voice")
    for loc, gen, name in sorted(rows):
        table.add_row(loc, gen, name)
    Console().print(table)
