#!/usr/bin/env python3
"""
Admin Password Reset Script

Resets the password of an admin, creating the admin (<username>@example.com)
when it does not exist. The stored hash is read back and verified.

Usage: python scripts/reset_admin_password.py <username> <new_password>
"""
import argparse
import sys
sys.path.insert(0, '.')

from app.core.auth import verify_password
from app.core.config import get_settings
from app.db.mongodb import test_mongo_connection
from app.services.mongo_service import AdminUserService


def main():
    parser = argparse.ArgumentParser(description="Reset (or create) an admin's password")
    parser.add_argument("username")
    parser.add_argument("new_password")
    args = parser.parse_args()

    if len(args.new_password) < 6:
        print("✗ Password must be at least 6 characters long")
        sys.exit(1)

    print("Connecting to MongoDB...")
    if not test_mongo_connection():
        print("❌ MongoDB: FAILED - check MONGODB_URI")
        sys.exit(1)
    print(f"✓ Connected to MongoDB (database: {get_settings().mongodb_db})\n")

    username = args.username.strip().lower()
    service = AdminUserService()
    admin = service.get_by_username(username)

    if admin is None:
        print(f"Admin user '{username}' not found, creating it...")
        admin = service.create(username, f"{username}@example.com", args.new_password)
        print("✓ Admin user created")
    else:
        print(f"Admin user found (ID: {admin['_id']}), updating password...")
        service.set_password(admin["_id"], args.new_password)
        print("✓ Password updated")

    print("\n=== Verifying Database Storage ===")
    saved = service.get_by_id(str(admin["_id"]))
    if saved is None:
        print("✗ ERROR: Admin user not found in database after save!")
        sys.exit(1)
    if not verify_password(args.new_password, saved["password"]):
        print("✗ ERROR: Stored password does not match!")
        sys.exit(1)

    print("✓ Password verified")
    print(f"  - Username: {saved['username']}")
    print(f"  - Email: {saved['email']}")


if __name__ == "__main__":
    main()
