# Path: `src/headr/features/counting/__init__.py`
# Summary: Export the count literal parser and its value objects.
# Why: Provide a stable import surface for the CLI layer and tests.

from .domain.errors import CountParseError
from .domain.models import CountPolicy, CountSpec, CountUnit
from .domain.parser import CountSpecParser, parse_count

__all__ = [
    "CountParseError",
    "CountPolicy",
    "CountSpec",
    "CountSpecParser",
    "CountUnit",
    "parse_count",
]
