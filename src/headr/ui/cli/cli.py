"""Command line interface for headr."""

import sys
from typing import final

from headr.features.counting import CountParseError
from headr.features.extraction import SinkWriteError
from headr.platform.logging import logger
from headr.ui.cli.args import ArgumentParser
from headr.ui.cli.commands import HeadCommand
from headr.ui.cli.display import FailureDisplay


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
            args = ArgumentParser.process_args(args_list)
            report = HeadCommand(args).execute()
            if not report.success:
                sys.exit(1)
            return

        except CountParseError as e:
            FailureDisplay().show_message(e.message)
            sys.exit(1)
        except SinkWriteError as e:
            FailureDisplay().show_message(f"Cannot write output: {e}")
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
