"""Rich console handler that renders extraction events compactly."""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

from headr.features.extraction.domain.models import STDIN_NAME


class ExtractionRichHandler(RichHandler):
    """Custom Rich handler for ``extraction_event`` records."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "extraction.source.start": ("📄", "blue"),
        "extraction.source.complete": ("✅", "green"),
        "extraction.source.error": ("⛔", "red"),
        "extraction.run.complete": ("🏁", "cyan"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "extraction.source.start": "Reading ",
        "extraction.source.complete": "Extracted ",
        "extraction.source.error": "Failed ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        # Source names are arbitrary user input and must not be read as markup.
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_source(self, name: str) -> Text:
        """Render a source name, abbreviating deep paths with a leading ellipsis."""

        if name == STDIN_NAME:
            return Text("<stdin>", style=Style(color="white", italic=True))

        path = PurePath(name)
        anchor = path.anchor
        parts = [part for part in path.parts if part != anchor]
        if len(parts) > self._PATH_SEGMENT_LIMIT:
            display = "…/" + "/".join(parts[-self._PATH_SEGMENT_LIMIT:])
        else:
            display = name

        text = Text()
        for char in display:
            color = "magenta" if char in {"/", "…"} else "white"
            _ = text.append(char, style=Style(color=color))
        return text

    def _render_extraction_message(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "extraction_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event == "extraction.run.complete":
            _ = body.append("Run complete")
            metrics: list[str] = []
            for key in ("processed", "failed", "bytes_emitted"):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    metrics.append(f"{key.replace('_', ' ')}={value}")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
            _ = text.append_text(body)
            return text

        sequence = getattr(record, "sequence", None)
        total = getattr(record, "total_sources", None)
        if isinstance(sequence, int) and sequence > 0:
            if isinstance(total, int) and total > 0:
                _ = body.append(f"[{sequence}/{total}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        source_name = getattr(record, "source_name", None)
        if isinstance(source_name, str):
            _ = body.append_text(self._format_source(source_name))

        details: list[str] = []
        if event == "extraction.source.complete":
            emitted = getattr(record, "bytes_emitted", None)
            if isinstance(emitted, int):
                details.append(f"{emitted} bytes")
        elif event == "extraction.source.error":
            error_message = getattr(record, "error_message", None)
            if error_message:
                details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render extraction events with dedicated styling, everything else as usual."""

        extraction_text = self._render_extraction_message(record)
        if extraction_text is not None:
            return extraction_text
        return super().render_message(record, message)
