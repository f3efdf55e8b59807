"""CLI entry point for xilabs-client."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .client import XiLabsClient
from .endpoints.text_to_speech import DEFAULT_MODEL_ID, DEFAULT_OUTPUT_FORMAT
from .errors import XiLabsError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xilabs",
        description="xilabs - Command-line access to the ElevenLabs API",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key (default: ELEVENLABS_API_KEY)",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="API base URL (default: ELEVENLABS_BASE_URL or https://api.elevenlabs.io)",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("voices", help="List available voices")
    sub.add_parser("models", help="List available models")
    sub.add_parser("user", help="Show account details")

    history = sub.add_parser("history", help="List generation history")
    history.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Number of items to return",
    )

    tts = sub.add_parser("tts", help="Synthesize speech to a file")
    tts.add_argument("voice_id", help="Voice to speak with")
    tts.add_argument("text", help="Text to synthesize")
    tts.add_argument(
        "--output",
        "-o",
        type=Path,
        required=True,
        help="File to write the audio to",
    )
    tts.add_argument(
        "--model-id",
        default=DEFAULT_MODEL_ID,
        help=f"Model ID (default: {DEFAULT_MODEL_ID})",
    )
    tts.add_argument(
        "--output-format",
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Audio format (default: {DEFAULT_OUTPUT_FORMAT})",
    )
    tts.add_argument(
        "--stream",
        action="store_true",
        help="Use the streaming endpoint and write chunks as they arrive",
    )
    return parser


async def _run(args: argparse.Namespace) -> None:
    async with XiLabsClient(api_key=args.api_key, base_url=args.base_url) as client:
        if args.command == "voices":
            result = await client.voices.list()
        elif args.command == "models":
            result = await client.models.list()
        elif args.command == "user":
            result = await client.user.get()
        elif args.command == "history":
            result = await client.history.list(page_size=args.page_size)
        else:
            await _tts(client, args)
            return

    print(json.dumps(result, indent=2))


async def _tts(client: XiLabsClient, args: argparse.Namespace) -> None:
    if args.stream:
        try:
            with args.output.open("wb") as f:
                stream = await client.text_to_speech.stream(
                    args.voice_id,
                    args.text,
                    f.write,
                    model_id=args.model_id,
                    output_format=args.output_format,
                )
        except XiLabsError:
            # Don't leave an empty or truncated file behind
            args.output.unlink(missing_ok=True)
            raise
        size = stream.bytes_received
    else:
        audio = await client.text_to_speech.convert(
            args.voice_id,
            args.text,
            model_id=args.model_id,
            output_format=args.output_format,
        )
        args.output.write_bytes(audio)
        size = len(audio)

    print(f"Wrote {size} bytes to {args.output}")


def main(argv: list[str] | None = None) -> int:
    """Run the xilabs CLI."""
    args = build_parser().parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True))
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        asyncio.run(_run(args))
    except (XiLabsError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
