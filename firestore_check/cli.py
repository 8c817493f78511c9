"""
Command line entry point for the Firestore user data check.

Connects with ambient credentials, prints the report and always exits 0
once the report has run. Only a failure to connect exits non-zero.
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from .config.settings import DEFAULT_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FORMAT, PROJECT_ID
from .core.firebase_init import get_firestore_client
from .report import UserDataReport


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Print the users in Firestore with their field shapes and subcollection counts"
    )
    parser.add_argument("--log_level", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        default=DEFAULT_LOG_LEVEL, help="Set logging level (default: WARNING)")
    return parser.parse_args(argv)


def main(argv=None):
    """Run the check; exits 0 whether or not the report hit an error."""
    # Credential variables may come from a local .env
    load_dotenv()

    args = parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    logger = logging.getLogger("check_firestore")

    # Not guarded: a connection failure ends the process with a non-zero status
    db = get_firestore_client(PROJECT_ID)

    completed = UserDataReport(db).run()
    logger.info(f"Report {'completed' if completed else 'ended with an error'}")

    sys.exit(0)


if __name__ == "__main__":
    main()
