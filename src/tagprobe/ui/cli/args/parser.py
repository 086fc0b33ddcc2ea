"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from tagprobe import __version__
from tagprobe.config import Config
from tagprobe.platform.logging import logger, setup_logger
from tagprobe.shared import ExtractionRequest
from tagprobe.ui.cli.args.options import CLIArgs, InitConfigArgs, InspectArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="tagprobe",
            description="tagprobe - read tags, cover art and stream properties from audio files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

        subparsers = parser.add_subparsers(dest="command", required=True)

        inspect_parser = subparsers.add_parser(
            "inspect",
            help="Print metadata extracted from one or more audio files",
        )
        _ = inspect_parser.add_argument(
            "paths",
            nargs="+",
            type=str,
            help="Audio files to inspect",
            metavar="PATH",
        )
        fields_group = inspect_parser.add_argument_group(
            "fields",
            "Optional fields to extract. Without any of these flags the configured defaults apply.",
        )
        _ = fields_group.add_argument("--cover", action="store_true", help="Extract embedded cover art")
        _ = fields_group.add_argument("--lyrics", action="store_true", help="Extract unsynced lyrics")
        _ = fields_group.add_argument(
            "--properties",
            action="store_true",
            help="Extract duration, sample rate and bitrate",
        )
        _ = fields_group.add_argument(
            "--extra",
            action="store_true",
            help="Extract year, genre and album artist",
        )
        _ = fields_group.add_argument("--all", action="store_true", help="Extract every optional field")
        _ = inspect_parser.add_argument(
            "--json",
            action="store_true",
            dest="as_json",
            help="Print one JSON object per file (cover base64-encoded)",
        )
        _ = inspect_parser.add_argument(
            "--save-cover",
            type=str,
            metavar="DIR",
            help="Write extracted cover images into DIR (implies --cover)",
        )
        verbosity = inspect_parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument("--verbose", action="store_true", help="Show probe details")
        _ = verbosity.add_argument("--quiet", action="store_true", help="Suppress all output except errors")

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write a default configuration file",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if bool(getattr(parsed_args, "quiet", False)):
            log_level = logging.ERROR
        elif bool(getattr(parsed_args, "verbose", False)):
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command
        if command == "inspect":
            return ArgumentParser._process_inspect(parsed_args, configuration)
        if command == "init-config":
            return InitConfigArgs(command="init-config", force=bool(parsed_args.force))

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _build_request(parsed_args: argparse.Namespace, configuration: Config) -> ExtractionRequest:
        if parsed_args.all:
            return ExtractionRequest.everything()

        flags = (parsed_args.cover, parsed_args.lyrics, parsed_args.properties, parsed_args.extra)
        if not any(flags) and parsed_args.save_cover is None:
            return configuration.default_request()

        return ExtractionRequest(
            need_cover=bool(parsed_args.cover or parsed_args.save_cover is not None),
            need_lyrics=bool(parsed_args.lyrics),
            need_audio_properties=bool(parsed_args.properties),
            need_extra_tags=bool(parsed_args.extra),
        )

    @staticmethod
    def _process_inspect(parsed_args: argparse.Namespace, configuration: Config) -> InspectArgs:
        request = ArgumentParser._build_request(parsed_args, configuration)
        save_cover = Path(parsed_args.save_cover).expanduser() if parsed_args.save_cover else None
        return InspectArgs(
            command="inspect",
            paths=[Path(p).expanduser() for p in parsed_args.paths],
            request=request,
            as_json=bool(parsed_args.as_json),
            save_cover=save_cover,
            verbose=bool(parsed_args.verbose),
            quiet=bool(parsed_args.quiet),
        )
