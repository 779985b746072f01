"""Application layer: one greeting pass across the roster."""

from .dispatch import BatchResult, BirthdayService, Outcome, dispatch_all, select_handler

__all__ = [
    "BatchResult",
    "BirthdayService",
    "Outcome",
    "dispatch_all",
    "select_handler",
]
