"""Command line interface for tagprobe."""

import sys
from typing import final

from tagprobe.platform.logging import logger
from tagprobe.ui.cli.args import ArgumentParser
from tagprobe.ui.cli.args.options import CLIArgs, InspectArgs
from tagprobe.ui.cli.commands import InitConfigCommand, InspectCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, InspectArgs):
                results = InspectCommand(args).execute()
                if any(not r.success for r in results):
                    sys.exit(1)
                return

            created = InitConfigCommand(args).execute()
            if not created:
                logger.info("Configuration file already exists; use --force to overwrite")
            return

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through ``sys.exit``.
    """
    CommandProcessor.process_command()
    return 0
