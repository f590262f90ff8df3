#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from azure_tts.client import AzureTTSClient
from azure_tts.config import AzureTTSSettings
from azure_tts.core.logging import configure_logging, get_logger
from azure_tts.properties import AudioOutput, Gender, Locale


async def _synthesize(*, settings: AzureTTSSettings, text: str, output: Path) -> int:
    # close() on exit stops the background token refresh.
    async with await AzureTTSClient.from_settings(settings) as tts:
        data = await tts.synthesize_with_context(
            text,
            Locale.EN_US,
            Gender.FEMALE,
            AudioOutput.AUDIO_16KHZ_32KBITRATE_MONO_MP3,
        )
    output.write_bytes(data)
    return len(data)


def main() -> int:
    parser = argparse.ArgumentParser(description="Synthesize a line of text to an mp3 file.")
    parser.add_argument("--text", default="64 BASIC BYTES FREE. READY.", help="Text to speak")
    parser.add_argument("--output", default="audio.mp3", help="Output file (overwritten)")
    args = parser.parse_args()

    settings = AzureTTSSettings()
    configure_logging(settings.log_level)
    log = get_logger(component="example")

    if not settings.subscription_key:
        log.error("missing_subscription_key", hint="Set AZUREKEY or AZURE_TTS_SUBSCRIPTION_KEY")
        return 2

    output = Path(args.output)
    try:
        size = asyncio.run(_synthesize(settings=settings, text=args.text, output=output))
    except Exception as e:
        log.error("synthesis_failed", error=type(e).__name__, detail=str(e))
        return 1

    log.info("audio_written", path=str(output), bytes=size)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
