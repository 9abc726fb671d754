"""src/headr/ui/cli/display/failures.py
What: Render per-source failures and fatal errors on stderr.
Why: Keep error lines plain and unwrapped so scripts can parse them.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from headr.features.extraction import RunOutcome


@final
class FailureDisplay:
    """Handles error output in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True, soft_wrap=True, highlight=False)

    def show_message(self, message: str) -> None:
        """Print a single error line verbatim."""

        self.console.print(message, markup=False, highlight=False, emoji=False)

    def show_outcome(self, outcome: RunOutcome) -> None:
        """Print ``<source>: <reason>`` for a failed outcome; successes are silent."""

        if outcome.success:
            return
        self.show_message(f"{outcome.source}: {outcome.error}")
