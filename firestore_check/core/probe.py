"""
Subcollection Probes

A probe is a best-effort count of the documents in one named subcollection
under one user. A probe never raises: a failed read comes back as a failed
ProbeResult and is treated the same as an empty subcollection.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from firebase_admin import firestore

from ..config.settings import USERS_COLLECTION

logger = logging.getLogger(__name__)


class ProbeStatus(Enum):
    """Probe outcome"""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class ProbeResult:
    """Outcome of probing one subcollection"""
    name: str
    status: ProbeStatus
    count: int = 0
    error: Optional[Exception] = None

    @classmethod
    def success(cls, name: str, count: int) -> "ProbeResult":
        return cls(name=name, status=ProbeStatus.SUCCESS, count=count)

    @classmethod
    def failure(cls, name: str, error: Exception) -> "ProbeResult":
        return cls(name=name, status=ProbeStatus.FAILED, error=error)

    @property
    def reportable(self) -> bool:
        """Only successful probes that found documents get a report line."""
        return self.status == ProbeStatus.SUCCESS and self.count > 0


def probe_subcollection(db: firestore.Client, user_id: str, name: str,
                        parent_collection: str = USERS_COLLECTION) -> ProbeResult:
    """
    Count the documents in ``<parent_collection>/<user_id>/<name>``.

    Args:
        db: Firestore client
        user_id: Parent document id
        name: Subcollection name to probe
        parent_collection: Collection holding the parent document

    Returns:
        ProbeResult.success with the count, or ProbeResult.failure with the error
    """
    try:
        docs = db.collection(parent_collection).document(user_id).collection(name).get()
    except Exception as e:
        logger.debug(f"Probe {parent_collection}/{user_id}/{name} failed: {e}")
        return ProbeResult.failure(name, e)
    return ProbeResult.success(name, len(docs))
