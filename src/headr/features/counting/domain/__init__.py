"""Domain model for count literals."""
