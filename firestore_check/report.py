"""
User Data Report

Prints every document of the users collection with a shallow summary of
its fields, followed by the document counts of the probed subcollections.

The report is a single sequential pass: one read at a time, documents in
the order the backend returns them, probes in configured order.
"""

import logging
import sys
from typing import Any, Dict, List, Optional, Sequence, TextIO

from firebase_admin import firestore

from .config.settings import REPORT_TITLE, SEPARATOR, SUBCOLLECTION_PROBES, USERS_COLLECTION
from .core.field_kinds import describe_field
from .core.probe import ProbeResult, probe_subcollection

logger = logging.getLogger(__name__)


def error_message(error: Exception) -> str:
    """Prefer the API error's own message over the full repr-style text."""
    message = getattr(error, 'message', None)
    return str(message) if message else str(error)


class UserDataReport:
    """
    Read-only report over the users collection.

    Output goes to ``out`` (the report) and ``err`` (at most one error line);
    both default to the process streams.
    """

    def __init__(self, db: firestore.Client,
                 collection: str = USERS_COLLECTION,
                 probes: Sequence[str] = SUBCOLLECTION_PROBES,
                 out: Optional[TextIO] = None,
                 err: Optional[TextIO] = None):
        self.db = db
        self.collection = collection
        self.probes = tuple(probes)
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def _print(self, text: str = ""):
        print(text, file=self.out)

    def fetch_users(self) -> List[Any]:
        """Fetch every document of the root collection (single page, backend order)."""
        docs = list(self.db.collection(self.collection).get())
        logger.info(f"Fetched {len(docs)} documents from '{self.collection}'")
        return docs

    def report_fields(self, data: Dict[str, Any]):
        self._print("  Fields in user doc: " + ", ".join(str(field) for field in data))
        for field, value in data.items():
            self._print("    - " + describe_field(field, value))

    def probe_subcollections(self, user_id: str) -> List[ProbeResult]:
        """Probe each configured subcollection of one user, in order."""
        return [
            probe_subcollection(self.db, user_id, name, parent_collection=self.collection)
            for name in self.probes
        ]

    def report_user(self, user_doc):
        self._print(f"\n User: {user_doc.id}")
        self._print(SEPARATOR)

        data = user_doc.to_dict()
        if data is not None:
            self.report_fields(data)

        self._print("\n  Subcollections:")
        for result in self.probe_subcollections(user_doc.id):
            if result.reportable:
                self._print(f"    - {result.name}: {result.count} documents")

    def run(self) -> bool:
        """
        Print the full report.

        Returns:
            True if the report completed, False if a failure cut it short.
            A failure is written once to the error stream as ``Error: <message>``.
        """
        try:
            users = self.fetch_users()

            self._print(REPORT_TITLE + "\n")
            self._print(f"Total users: {len(users)}\n")

            for user_doc in users:
                self.report_user(user_doc)

        except Exception as e:
            logger.debug("User data report aborted", exc_info=True)
            print(f"Error: {error_message(e)}", file=self.err)
            return False

        return True
