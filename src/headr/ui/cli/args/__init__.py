"""Command line argument handling package."""

from headr.ui.cli.args.parser import ArgumentParser
from headr.ui.cli.args.options import HeadArgs

__all__ = ["ArgumentParser", "HeadArgs"]
