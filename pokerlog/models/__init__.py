"""Data models for pokerlog."""

from pokerlog.models.session import Session, SessionDraft
from pokerlog.models.stats import Bucket, Summary, YearReport

__all__ = [
    "Bucket",
    "Session",
    "SessionDraft",
    "Summary",
    "YearReport",
]
