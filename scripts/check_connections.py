#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify the MongoDB connection and upload directories.
Usage: python scripts/check_connections.py
"""
import os
import sys
sys.path.insert(0, '.')

from app.core.config import get_settings
from app.db.mongodb import get_mongo_db, test_mongo_connection


def main():
    settings = get_settings()
    print("=" * 50)
    print("PORTFOLIO API - CONNECTION TEST")
    print("=" * 50)

    # Test MongoDB
    print("\n[1] Testing MongoDB...")
    print(f"    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")
    connected = test_mongo_connection()
    if connected:
        print("    ✅ MongoDB: CONNECTED")
        for name in sorted(get_mongo_db().list_collection_names()):
            print(f"       - {name}: {get_mongo_db()[name].estimated_document_count()} document(s)")
    else:
        print("    ❌ MongoDB: FAILED")

    # Upload directories
    print("\n[2] Checking upload directories...")
    for label, path in (("Images", settings.images_dir), ("CV", settings.cv_dir)):
        if os.path.isdir(path):
            print(f"    ✅ {label}: {path}")
        else:
            print(f"    ⚠️  {label}: {path} (will be created on startup)")

    # Email (optional)
    print("\n[3] Checking email notifications...")
    if settings.email_configured:
        print(f"    ✅ SMTP: {settings.email_host}:{settings.email_port} as {settings.email_user}")
    else:
        print("    ⚠️  SMTP: EMAIL_USER/EMAIL_PASS not configured (notifications disabled)")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)
    sys.exit(0 if connected else 1)


if __name__ == "__main__":
    main()
