"""Core status derivation, errors and logging utilities."""
