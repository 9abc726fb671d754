"""User interfaces for headr."""
