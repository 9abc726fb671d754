"""Command execution package for CLI."""

from headr.ui.cli.commands.head import HeadCommand

__all__ = ["HeadCommand"]
