#!/usr/bin/env python3
"""
Create Admin Script

Usage: python scripts/create_admin.py <username> <email> <password>
"""
import argparse
import sys
sys.path.insert(0, '.')

from pymongo.errors import PyMongoError

from app.db.mongodb import init_mongo_indexes, test_mongo_connection
from app.services.mongo_service import AdminUserService


def main():
    parser = argparse.ArgumentParser(description="Create an admin account")
    parser.add_argument("username")
    parser.add_argument("email")
    parser.add_argument("password")
    args = parser.parse_args()

    if not test_mongo_connection():
        print("❌ MongoDB: FAILED - check MONGODB_URI")
        sys.exit(1)

    service = AdminUserService()
    if service.find_existing(args.username, args.email):
        print(f"✗ Admin user with username '{args.username.lower()}' or email '{args.email.lower()}' already exists")
        sys.exit(1)

    try:
        init_mongo_indexes()
        admin = service.create(args.username, args.email, args.password)
    except (PyMongoError, ValueError) as e:
        print(f"✗ Error creating admin: {e}")
        sys.exit(1)

    print("✓ Admin user created successfully")
    print(f"  - Username: {admin['username']}")
    print(f"  - Email: {admin['email']}")
    print(f"  - User ID: {admin['_id']}")


if __name__ == "__main__":
    main()
