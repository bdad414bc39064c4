"""Command-line interface for voiceslots."""
