"""Errors raised by the Minesweeper core."""


class ConfigurationError(ValueError):
    """Board settings are missing, unknown or cannot produce a playable board."""
