"""pokerlog - poker session tracker with year-to-date analytics."""

__version__ = "0.1.0"
