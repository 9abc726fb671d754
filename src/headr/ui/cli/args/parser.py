"""Command line argument parser."""

import argparse
import logging
import re
import sys
from collections.abc import Sequence
from typing import ClassVar, final

from headr import __version__
from headr.config.settings import COUNT_POLICY, DEFAULT_LINE_SPEC_VALUE, LOG_FILE
from headr.features.counting import CountSpecParser
from headr.features.extraction import STDIN_NAME, HeaderPolicy
from headr.platform.logging import setup_logger
from headr.ui.cli.args.options import HeadArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    # Historical ``-NUMBER`` form, e.g. ``-20`` for ``-n 20``.
    LEGACY_COUNT: ClassVar[re.Pattern[str]] = re.compile(r"-(?P<count>[0-9]+)")

    VALUE_OPTIONS: ClassVar[dict[str, str]] = {
        "-n": "--lines",
        "--lines": "--lines",
        "-c": "--bytes",
        "--bytes": "--bytes",
    }

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="headr",
            description="Print the first part of each FILE (standard input when FILE is - or absent).",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=(
                "COUNT may be negative to print all but the last COUNT units, and may carry\n"
                "a suffix: b=512, kB=1000, K=1024, M=1024*1024, ... (G, T, P, E, Z, Y)."
            ),
        )

        _ = parser.add_argument(
            "files",
            nargs="*",
            metavar="FILE",
            help="Input file(s)",
        )

        count_group = parser.add_mutually_exclusive_group()
        _ = count_group.add_argument(
            "-n",
            "--lines",
            type=str,
            metavar="LINES",
            help=f"Number of lines (default: {DEFAULT_LINE_SPEC_VALUE})",
        )
        _ = count_group.add_argument(
            "-c",
            "--bytes",
            type=str,
            metavar="BYTES",
            help="Number of bytes",
        )

        header_group = parser.add_mutually_exclusive_group()
        _ = header_group.add_argument(
            "-q",
            "--quiet",
            "--silent",
            dest="header_policy",
            action="store_const",
            const=HeaderPolicy.NEVER,
            help="Never print headers giving file names",
        )
        _ = header_group.add_argument(
            "-v",
            "--verbose",
            dest="header_policy",
            action="store_const",
            const=HeaderPolicy.ALWAYS,
            help="Always print headers giving file names",
        )
        parser.set_defaults(header_policy=HeaderPolicy.MULTIPLE_ONLY)

        _ = parser.add_argument(
            "--debug",
            action="store_true",
            help="Show diagnostic logging on stderr",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )

        return parser

    @staticmethod
    def normalize_args(args_list: Sequence[str]) -> list[str]:
        """Rewrite ``-NUMBER`` and detached count values into ``--opt=value`` form.

        Joining the value to its option lets argparse accept literals such as
        ``-3k`` that would otherwise look like options.
        """
        normalized: list[str] = []
        tokens = iter(args_list)
        for token in tokens:
            if token == "--":
                normalized.append(token)
                normalized.extend(tokens)
                break

            option = ArgumentParser.VALUE_OPTIONS.get(token)
            if option is not None:
                value = next(tokens, None)
                if value is None:
                    normalized.append(token)
                    break
                normalized.append(f"{option}={value}")
                continue

            match = ArgumentParser.LEGACY_COUNT.fullmatch(token)
            if match is not None:
                normalized.append(f"--lines={match.group('count')}")
                continue

            normalized.append(token)
        return normalized

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> HeadArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            HeadArgs: Processed command line arguments.

        Raises:
            CountParseError: If the line or byte count is not a legal count.
            SystemExit: On usage errors, ``--help`` or ``--version``.
        """
        raw_args = list(sys.argv[1:] if args_list is None else args_list)
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_intermixed_args(ArgumentParser.normalize_args(raw_args))

        debug = bool(parsed_args.debug)
        _ = setup_logger(
            log_file=LOG_FILE,
            console_level=logging.DEBUG if debug else logging.WARNING,
        )

        spec = CountSpecParser(COUNT_POLICY).resolve(
            parsed_args.lines if parsed_args.lines is not None else DEFAULT_LINE_SPEC_VALUE,
            parsed_args.bytes,
        )

        files: list[str] = list(parsed_args.files) or [STDIN_NAME]

        return HeadArgs(
            sources=files,
            spec=spec,
            header_policy=parsed_args.header_policy,
            debug=debug,
        )
