#!/usr/bin/env python3
"""
Database setup script for the HR entity services.

This script initializes the database, creates all tables,
and provides options for resetting the database if needed.
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from sqlalchemy import inspect, text
from hrapp.core.database import engine, create_tables, drop_tables, SessionLocal
from hrapp.config.settings import settings

# Expected tables based on our models
EXPECTED_TABLES = [
    'regions', 'countries', 'locations', 'departments', 'employees',
    'tasks', 'jobs', 'rel_job__task', 'job_histories',
]


def check_database_connection():
    """Check if database connection is working."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            print("✅ Database connection successful")
            return True
    except Exception as e:
        print(f"❌ Database connection failed: {e}")
        return False


def create_database_tables():
    """Create all database tables."""
    try:
        print("📝 Creating database tables...")
        create_tables()
        print("✅ Database tables created successfully")
        print(f"📋 Tables: {', '.join(inspect(engine).get_table_names())}")
        return True
    except Exception as e:
        print(f"❌ Failed to create tables: {e}")
        return False


def reset_database():
    """Drop and recreate all database tables."""
    try:
        print("⚠️  Dropping all existing tables...")
        drop_tables()
        print("✅ Tables dropped successfully")

        print("📝 Recreating database tables...")
        create_tables()
        print("✅ Database reset completed")
        return True
    except Exception as e:
        print(f"❌ Failed to reset database: {e}")
        return False


def verify_tables():
    """Verify that all expected tables exist."""
    with SessionLocal() as db:
        for table_name in EXPECTED_TABLES:
            try:
                count = db.execute(text(f"SELECT COUNT(*) FROM {table_name}")).scalar()
                print(f"✅ Table '{table_name}': {count} records")
            except Exception as e:
                print(f"❌ Table '{table_name}': Error - {e}")
                return False
    return True


def main():
    """Main setup function."""
    print("🚀 HR Entity Services Database Setup")
    print("=" * 40)
    print(f"Database URL: {settings.database_url}")
    print()

    if not check_database_connection():
        print("❌ Cannot proceed without database connection")
        sys.exit(1)

    if len(sys.argv) > 1:
        command = sys.argv[1].lower()

        if command == "reset":
            print("⚠️  WARNING: This will delete all existing data!")
            response = input("Are you sure you want to reset the database? (yes/no): ")

            if response.lower() != "yes":
                print("❌ Database reset cancelled")
                sys.exit(0)
            if not reset_database():
                print("❌ Database reset failed")
                sys.exit(1)
            print("✅ Database reset completed successfully")
            print("ℹ️  The search index is not touched; clear it separately if needed")

        elif command == "verify":
            print("🔍 Verifying database tables...")
            if not verify_tables():
                print("❌ Table verification failed")
                sys.exit(1)
            print("✅ All tables verified successfully")

        else:
            print(f"❌ Unknown command: {command}")
            print("Available commands: reset, verify")
            sys.exit(1)

    else:
        print("📝 Setting up database tables...")
        if not create_database_tables() or not verify_tables():
            print("❌ Database setup failed")
            sys.exit(1)
        print()
        print("✅ Database setup completed successfully!")
        print()
        print("Next steps:")
        print("1. Start Redis server: redis-server")
        print("2. Seed sample data: python scripts/seed_data.py")
        print("3. Start FastAPI server: uvicorn hrapp.main:app --reload")


if __name__ == "__main__":
    main()
