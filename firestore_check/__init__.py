"""
Firestore User Data Check

A read-only diagnostic that lists the documents of the ``users`` collection,
summarizes the shape of their top-level fields and probes a fixed set of
per-user subcollections for document counts.
"""

__version__ = "1.0.0"

from .report import UserDataReport

__all__ = ["UserDataReport"]
