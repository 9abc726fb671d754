"""Domain model for prefix extraction."""
