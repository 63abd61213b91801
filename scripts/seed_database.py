#!/usr/bin/env python3
"""
Database Seed Script

Fills hero, about, services, education and projects with the default content
and optionally creates the admin account.

Usage:
    python scripts/seed_database.py [username email password]
    python scripts/seed_database.py --reset [username email password]

Existing content is left alone unless --reset is given.
"""
import argparse
import copy
import sys
sys.path.insert(0, '.')

from pymongo.errors import PyMongoError

from app.db.mongodb import COLLECTIONS, get_mongo_db, init_mongo_indexes, test_mongo_connection
from app.services.content_service import AboutService, EducationService, HeroService, ServiceSectionService
from app.services.mongo_service import AdminUserService, stamp_new
from app.utils.defaults import DEFAULT_ABOUT, DEFAULT_EDUCATION, DEFAULT_HERO, DEFAULT_PROJECTS, DEFAULT_SERVICES


def seed_singleton(label: str, service, defaults: dict, reset: bool):
    print(f"Seeding {label} data...")
    if service.collection.find_one({}) is not None and not reset:
        print(f"  → {label} data already exists, skipping...")
        return
    service.replace(copy.deepcopy(defaults))
    print(f"  ✓ {label} data created successfully")


def seed_projects(reset: bool):
    print("Seeding Projects data...")
    collection = get_mongo_db()[COLLECTIONS["projects"]]
    if reset:
        cleared = collection.delete_many({}).deleted_count
        print(f"  → {cleared} existing project(s) cleared")
    existing = collection.count_documents({})
    if existing > 0:
        print(f"  → {existing} project(s) already exist, skipping...")
        return
    docs = [stamp_new(copy.deepcopy(project)) for project in DEFAULT_PROJECTS]
    collection.insert_many(docs)
    print(f"  ✓ {len(docs)} project(s) created successfully")


def seed_admin(username: str, email: str, password: str):
    print("Seeding admin user...")
    service = AdminUserService()
    if service.find_existing(username, email):
        print(f"  → Admin '{username.lower()}' already exists, skipping...")
        return
    admin = service.create(username, email, password)
    print(f"  ✓ Admin user created: {admin['username']} ({admin['email']})")


def main():
    parser = argparse.ArgumentParser(description="Seed the portfolio database with default content")
    parser.add_argument("--reset", action="store_true", help="replace existing content with the defaults")
    parser.add_argument("admin", nargs="*", metavar="username email password",
                        help="optionally create an admin account")
    args = parser.parse_args()

    if args.admin and len(args.admin) != 3:
        parser.error("admin account needs exactly: username email password")

    print("=" * 50)
    print("PORTFOLIO - DATABASE SEED")
    print("=" * 50)

    if not test_mongo_connection():
        print("❌ MongoDB: FAILED - check MONGODB_URI")
        sys.exit(1)
    print("✓ Connected to MongoDB\n")

    try:
        init_mongo_indexes()
        seed_singleton("Hero", HeroService(), DEFAULT_HERO, args.reset)
        seed_singleton("About", AboutService(), DEFAULT_ABOUT, args.reset)
        seed_singleton("Services", ServiceSectionService(), DEFAULT_SERVICES, args.reset)
        seed_singleton("Education", EducationService(), DEFAULT_EDUCATION, args.reset)
        seed_projects(args.reset)
        if args.admin:
            seed_admin(*args.admin)
        else:
            print("No admin credentials given, skipping admin user")
    except (PyMongoError, ValueError) as e:
        print(f"\n✗ Seed failed: {e}")
        sys.exit(1)

    print("\n" + "=" * 50)
    print("Seed complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
