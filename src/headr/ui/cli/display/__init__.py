"""Display management for CLI interface."""

from headr.ui.cli.display.failures import FailureDisplay

__all__ = ["FailureDisplay"]
