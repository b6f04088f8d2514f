#!/usr/bin/env python3
"""Command-line entry point: run one command through the dispatch core."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import logging.config
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from spotify_tui.domain.shared.messages import ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from spotify_tui.application.commands import Command
    from spotify_tui.config.settings import Settings
    from spotify_tui.domain.state.app_state import AppState

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"


def setup_logging(log_level: str = "INFO") -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.warning(
            "Could not load %s, falling back to basic config", _LOGGING_CONFIG_PATH
        )
        logging.basicConfig(
            level=resolved_level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logging.getLogger().setLevel(resolved_level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spotify-tui", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("devices", help="list available output devices")
    sub.add_parser("status", help="show the current playback")

    play = sub.add_parser("play", help="start or resume playback")
    play.add_argument("--context-uri", help="album, artist or playlist URI")
    play.add_argument("--uri", action="append", dest="uris", help="track URI (repeatable)")
    play.add_argument("--offset", type=int, help="position in the context or URI list")

    sub.add_parser("pause", help="pause playback")
    sub.add_parser("next", help="skip to the next track")
    sub.add_parser("previous", help="go back to the previous track")

    search = sub.add_parser("search", help="search the catalogue")
    search.add_argument("term")
    search.add_argument("--market", help="ISO 3166-1 alpha-2 country code")

    use_device = sub.add_parser("use-device", help="select the output device")
    use_device.add_argument("device_id")

    like = sub.add_parser("like", help="toggle a track in Liked Songs")
    like.add_argument("track_id")

    return parser


def build_command(args: argparse.Namespace, settings: Settings) -> Command:
    """Translate parsed arguments into the command the dispatcher runs."""
    from spotify_tui.application import commands

    match args.command:
        case "devices":
            return commands.GetDevicesCommand()
        case "status":
            return commands.GetCurrentPlaybackCommand()
        case "play":
            return commands.StartPlaybackCommand(
                context_uri=args.context_uri, uris=args.uris, offset=args.offset
            )
        case "pause":
            return commands.PausePlaybackCommand()
        case "next":
            return commands.NextTrackCommand()
        case "previous":
            return commands.PreviousTrackCommand()
        case "search":
            market = args.market.upper() if args.market else settings.spotify.market
            return commands.GetSearchResultsCommand(search_term=args.term, country=market)
        case "use-device":
            return commands.SetDeviceIdInConfigCommand(device_id=args.device_id)
        case "like":
            return commands.ToggleSaveTrackCommand(track_id=args.track_id)
    raise ValueError(f"Unknown command: {args.command}")


def summarize(command: str, app: AppState) -> str:
    """Render the part of the state the command changed."""
    if command == "devices":
        if app.devices is None or not app.devices.devices:
            return "No devices available"
        return "\n".join(
            f"{'*' if device.is_active else ' '} {device.name} ({device.device_type}) {device.id}"
            for device in app.devices.devices
        )

    if command == "search":
        if not app.track_table.tracks:
            return "No tracks found"
        return "\n".join(
            f"{'♥' if app.is_liked(track.id) else ' '} {track.name} - "
            f"{', '.join(artist.name for artist in track.artists)}  {track.uri}"
            for track in app.track_table.tracks
        )

    if command == "like":
        return f"Liked songs: {len(app.liked_song_ids_set)}"

    if command == "use-device":
        return "Device saved"

    context = app.current_playback_context
    if context is None or context.item is None:
        return "Nothing is playing"
    artists = ", ".join(artist.name for artist in context.item.artists)
    status = "Playing" if context.is_playing else "Paused"
    return f"{status}: {context.item.name} - {artists} on {context.device.name}"


async def run(settings: Settings, command: Command, command_name: str) -> int:
    from spotify_tui.application.commands import RefreshAuthenticationCommand
    from spotify_tui.config.container import create_container

    container = create_container(settings)
    await container.initialize()
    try:
        loop = container.dispatch_loop
        for step in (RefreshAuthenticationCommand(), command):
            await loop.submit(step)
            await loop.join()
            async with container.shared_state.access() as app:
                if app.api_error:
                    print(f"Error: {app.api_error}", file=sys.stderr)
                    return 1

        async with container.shared_state.access() as app:
            print(summarize(command_name, app))
        return 0
    finally:
        await container.shutdown()


def main(argv: list[str] | None = None) -> int:
    from spotify_tui.config.settings import get_settings

    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)

    if not settings.spotify.client_id:
        logger.error(ErrorMessages.CLIENT_ID_REQUIRED)
        return 1

    try:
        command = build_command(args, settings)
    except PydanticValidationError as e:
        print(f"Invalid arguments: {e}", file=sys.stderr)
        return 1

    logger.info(LogTemplates.APP_STARTING, settings.environment)
    try:
        return asyncio.run(run(settings, command, args.command))
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        logger.exception(LogTemplates.APP_FATAL_ERROR, e)
        return 1
    finally:
        logger.info(LogTemplates.APP_STOPPED)


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
