"""
Firebase Initialization

Connects the Firebase Admin SDK to a single project using whatever
credentials the environment provides.

Application Default Credentials are tried first (gcloud login, Cloud Run,
GOOGLE_APPLICATION_CREDENTIALS). If they are unusable and
FIREBASE_SERVICE_ACCOUNT_KEY_PATH points at a key file, that key is used
instead. There is no other way to choose the credential source.
"""

import logging
import os

import firebase_admin
from firebase_admin import credentials, firestore

from ..config.settings import PROJECT_ID

logger = logging.getLogger(__name__)

CREDENTIAL_ENV_VARS = (
    'GOOGLE_APPLICATION_CREDENTIALS',
    'FIREBASE_SERVICE_ACCOUNT_KEY_PATH',
    'FIRESTORE_EMULATOR_HOST',
)


def _discard_default_app():
    """Drop a half-initialized default app so a retry can claim the name."""
    if firebase_admin._apps:
        firebase_admin.delete_app(firebase_admin.get_app())


def initialize_firebase_admin(project_id: str = PROJECT_ID) -> firestore.Client:
    """
    Initialize Firebase Admin SDK scoped to ``project_id``.

    Args:
        project_id: Google Cloud project that owns the Firestore database

    Returns:
        Initialized Firestore client

    Raises:
        SystemExit: If no credential source produced a client
    """
    if firebase_admin._apps:
        logger.info("Firebase app already initialized. Reusing it for Firestore.")
        return firestore.client()

    # PHASE 1: Application Default Credentials
    try:
        firebase_admin.initialize_app(options={'projectId': project_id})
        db = firestore.client()
        logger.info(f"Connected to CLOUD Firestore (Project: {project_id}) using default credentials.")
        return db
    except Exception as e_default:
        logger.info(f"Cloud Firestore init with default creds failed: {e_default}. Attempting service account.")
        _discard_default_app()

    # PHASE 2: service account key file from the environment
    cred_path = os.getenv('FIREBASE_SERVICE_ACCOUNT_KEY_PATH')
    if cred_path:
        try:
            logger.info(f"Attempting Firebase init with service account key from env var: {cred_path}")
            if not os.path.exists(cred_path):
                raise FileNotFoundError(f"Service account key file not found at: {cred_path}")

            cred = credentials.Certificate(cred_path)
            firebase_admin.initialize_app(cred, options={'projectId': project_id})
            db = firestore.client()
            logger.info(f"Connected to CLOUD Firestore (Project: {project_id}) via service account.")
            return db
        except Exception as e_sa:
            logger.critical(f"Firebase init with service account key from {cred_path} failed: {e_sa}", exc_info=True)
            _discard_default_app()
    else:
        logger.warning("FIREBASE_SERVICE_ACCOUNT_KEY_PATH environment variable not set, and default creds failed.")

    logger.critical("CRITICAL: Failed to obtain Firestore client. All credential methods failed.")
    logger.critical("Please ensure one of the following:")
    logger.critical("1. You are logged in with `gcloud auth application-default login`")
    logger.critical("2. GOOGLE_APPLICATION_CREDENTIALS environment variable is set")
    logger.critical("3. FIREBASE_SERVICE_ACCOUNT_KEY_PATH environment variable is set")

    raise SystemExit("Exiting: Firestore client not available.")


def log_firebase_info():
    """Log which credential-related environment variables are present."""
    for var in CREDENTIAL_ENV_VARS:
        if os.getenv(var):
            logger.info(f"Environment: {var} is set")
        else:
            logger.debug(f"Environment: {var} is not set")


def get_firestore_client(project_id: str = PROJECT_ID) -> firestore.Client:
    """Convenience wrapper: log the credential environment, then connect."""
    log_firebase_info()
    return initialize_firebase_admin(project_id)
