"""Domain errors shared across tailconf."""
