"""Application services coordinating features for the CLI."""
