"""Constant tables shared across voiceslots modules."""
