"""Head command implementation for the CLI."""

from __future__ import annotations

from typing import final

from headr.application.services import HeadRequest, HeadService
from headr.config.settings import READ_CHUNK_SIZE
from headr.features.extraction import RunReport
from headr.ui.cli.args.options import HeadArgs
from headr.ui.cli.display.failures import FailureDisplay


@final
class HeadCommand:
    """Command that extracts prefixes and reports failing sources as they occur."""

    def __init__(self, args: HeadArgs, service: HeadService | None = None) -> None:
        self.args = args
        self.service = service or HeadService()
        self.display = FailureDisplay()

    def execute(self) -> RunReport:
        """Execute the head command."""

        request = HeadRequest(
            sources=self.args.sources,
            spec=self.args.spec,
            header_policy=self.args.header_policy,
            chunk_size=READ_CHUNK_SIZE,
        )
        return self.service.run(request, reporter=self.display.show_outcome)
