#!/usr/bin/env python3
"""
Database Export Script

Usage:
    python scripts/export_database.py            # structure + data (default)
    python scripts/export_database.py --schema   # structure only
    python scripts/export_database.py --data     # data only
    python scripts/export_database.py --full     # structure + data

Data is written as MongoDB Extended JSON so ObjectIds and dates survive a
round trip through scripts/import_database.py. Files land in exports/:
export-<timestamp>.json, latest.json and database-structure.json.
"""
import argparse
import os
import sys
from datetime import datetime, timezone
sys.path.insert(0, '.')

from bson import json_util
from pymongo.errors import PyMongoError

from app.db.mongodb import COLLECTIONS, get_mongo_db, test_mongo_connection

EXPORT_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "exports")


def describe_collection(collection) -> dict:
    """Index definitions plus the field names (and value types) seen in the documents."""
    fields = {}
    for doc in collection.find({}):
        for key, value in doc.items():
            fields.setdefault(key, set()).add(type(value).__name__)
    return {
        "indexes": [
            {"name": index["name"], "key": list(index["key"].items()), "unique": index.get("unique", False)}
            for index in collection.list_indexes()
        ],
        "fields": {key: sorted(types) for key, types in sorted(fields.items())},
    }


def write_json(path: str, payload: dict):
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(json_util.dumps(payload, indent=2, json_options=json_util.RELAXED_JSON_OPTIONS))


def main():
    parser = argparse.ArgumentParser(description="Export the portfolio database")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--schema", action="store_true", help="export structure only")
    mode.add_argument("--data", action="store_true", help="export data only")
    mode.add_argument("--full", action="store_true", help="export structure and data (default)")
    args = parser.parse_args()

    export_schema = not args.data
    export_data = not args.schema

    if not test_mongo_connection():
        print("❌ MongoDB: FAILED - check MONGODB_URI")
        sys.exit(1)
    print("✓ Connected to MongoDB\n")

    db = get_mongo_db()
    os.makedirs(EXPORT_DIR, exist_ok=True)
    now = datetime.now(timezone.utc)
    timestamp = now.strftime("%Y-%m-%dT%H-%M-%S")

    try:
        if export_schema:
            print("📋 Exporting database structure...")
            structure = {"exportDate": now.isoformat(), "database": db.name, "collections": {}}
            for name in COLLECTIONS.values():
                structure["collections"][name] = describe_collection(db[name])
                print(f"  ✓ Exported structure for {name}")
            structure_file = os.path.join(EXPORT_DIR, "database-structure.json")
            write_json(structure_file, structure)
            print(f"\n✓ Database structure saved to: {structure_file}\n")

        if export_data:
            print("💾 Exporting database data...")
            payload = {"exportDate": now.isoformat(), "database": db.name, "collections": {}}
            for name in COLLECTIONS.values():
                docs = list(db[name].find({}))
                payload["collections"][name] = docs
                print(f"  ✓ Exported {name}: {len(docs)} documents")
            export_file = os.path.join(EXPORT_DIR, f"export-{timestamp}.json")
            write_json(export_file, payload)
            write_json(os.path.join(EXPORT_DIR, "latest.json"), payload)
            print(f"\n✓ Database data exported to: {export_file}")
    except (PyMongoError, OSError) as e:
        print(f"✗ Export failed: {e}")
        sys.exit(1)

    print("\n✓ Export completed successfully!")


if __name__ == "__main__":
    main()
