"""Text utilities for the quiz parser."""
