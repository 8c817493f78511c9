#!/usr/bin/env python3
"""
Firestore User Data Check

Lists the users in Firestore, the shape of their fields and which of the
known per-user subcollections hold documents.

Usage:
    python check_firestore.py [--log_level DEBUG]
"""

from firestore_check.cli import main

if __name__ == "__main__":
    main()
