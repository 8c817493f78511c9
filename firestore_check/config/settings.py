"""
Configuration for the Firestore user data check.
Defines the target project, the collection to inspect and the
subcollection names probed under every user document.
"""

from typing import Tuple

# =============================================================================
# FIRESTORE TARGET
# =============================================================================

PROJECT_ID = "luxor-browser-sync"

USERS_COLLECTION = "users"

# Probed in this order for every user; a missing subcollection just reads empty
SUBCOLLECTION_PROBES: Tuple[str, ...] = (
    "bookmarks",
    "history",
    "reading_list",
    "settings",
    "passwords",
    "open_tabs",
)

# =============================================================================
# REPORT LAYOUT
# =============================================================================

REPORT_TITLE = "=== FIRESTORE DATABASE CHECK ==="
SEPARATOR = "─" * 50

# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
# Kept above INFO so stderr only carries the report's error line
DEFAULT_LOG_LEVEL = "WARNING"
