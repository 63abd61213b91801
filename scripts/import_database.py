#!/usr/bin/env python3
"""
Database Import Script

Restores collections from a file written by scripts/export_database.py.

Usage:
    python scripts/import_database.py exports/latest.json
    python scripts/import_database.py exports/latest.json --drop

Without --drop documents are merged: existing _ids and duplicate unique keys
are skipped. With --drop each imported collection is emptied first.
"""
import argparse
import os
import sys
sys.path.insert(0, '.')

from bson import json_util
from pymongo.errors import BulkWriteError, PyMongoError

from app.db.mongodb import COLLECTIONS, get_mongo_db, init_mongo_indexes, test_mongo_connection


def main():
    parser = argparse.ArgumentParser(description="Import a portfolio database export")
    parser.add_argument("file", help="export file (Extended JSON)")
    parser.add_argument("--drop", action="store_true", help="empty each collection before importing")
    args = parser.parse_args()

    if not os.path.exists(args.file):
        print(f"✗ Export file not found: {args.file}")
        sys.exit(1)

    with open(args.file, encoding="utf-8") as fh:
        payload = json_util.loads(fh.read())

    collections = payload.get("collections") if isinstance(payload, dict) else None
    if not isinstance(collections, dict):
        print("✗ Invalid export file format - missing collections")
        sys.exit(1)

    if not test_mongo_connection():
        print("❌ MongoDB: FAILED - check MONGODB_URI")
        sys.exit(1)
    print("✓ Connected to MongoDB")
    print(f"  Export date: {payload.get('exportDate', 'N/A')}")
    print(f"  Database: {payload.get('database', 'N/A')}\n")

    db = get_mongo_db()
    known = set(COLLECTIONS.values())

    try:
        init_mongo_indexes()
        for name, docs in collections.items():
            if name not in known:
                print(f"  ⚠ Skipping unknown collection: {name}")
                continue

            if args.drop:
                cleared = db[name].delete_many({}).deleted_count
                print(f"  Cleared {cleared} existing {name}")

            if not docs:
                print(f"  No data to import for {name}")
                continue

            try:
                inserted = len(db[name].insert_many(docs, ordered=False).inserted_ids)
                print(f"  ✓ Imported {inserted} documents to {name}")
            except BulkWriteError as e:
                inserted = e.details.get("nInserted", 0)
                skipped = len(e.details.get("writeErrors", []))
                print(f"  ✓ Imported {inserted} documents to {name} (skipped {skipped} duplicates)")
    except PyMongoError as e:
        print(f"✗ Import failed: {e}")
        sys.exit(1)

    print("\n✓ Import completed successfully!")


if __name__ == "__main__":
    main()
