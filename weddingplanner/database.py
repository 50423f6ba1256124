"""
Database configuration and initialization
"""

import os
import sys
from peewee import SqliteDatabase
from dotenv import load_dotenv

# Only read the .env next to where the app is started
dotenv_path = os.path.join(os.getcwd(), '.env')
load_dotenv(dotenv_path=dotenv_path)

# Database configuration - require explicit DATABASE_PATH
DATABASE_PATH = os.getenv('DATABASE_PATH')
if not DATABASE_PATH:
    print("❌ DATABASE_PATH environment variable is not set!")
    print("💡 Please set DATABASE_PATH in your .env file or environment variables")
    print("   Example: DATABASE_PATH=weddingplanner.db")
    print(f"   Current working directory: {os.getcwd()}")
    sys.exit(1)

# Commitments rely on ON DELETE CASCADE, which SQLite only honours with this pragma
database = SqliteDatabase(DATABASE_PATH, pragmas={'foreign_keys': 1})


def get_models():
    """All models in dependency order"""
    from weddingplanner.models.user import User
    from weddingplanner.models.wedding import Wedding
    from weddingplanner.models.commitment import Commitment
    return [User, Wedding, Commitment]


def init_database():
    """Initialize database and create all tables"""
    abs_db_path = os.path.abspath(DATABASE_PATH)
    print(f"🗄️  Opening database: {abs_db_path}")

    db_dir = os.path.dirname(abs_db_path) or os.getcwd()
    if not os.path.exists(db_dir):
        print(f"❌ Database directory does not exist: {db_dir}")
        print("💡 Create the directory or specify a valid DATABASE_PATH")
        sys.exit(1)

    if not os.access(db_dir, os.W_OK):
        print(f"❌ Database directory is not writable: {db_dir}")
        sys.exit(1)

    if os.path.exists(abs_db_path):
        print(f"📊 Database file exists ({os.path.getsize(abs_db_path)} bytes)")
    else:
        print(f"🔧 Database file will be created: {abs_db_path}")

    with database.connection_context():
        database.create_tables(get_models(), safe=True)
    print(f"✅ Database initialized successfully: {abs_db_path}")


def get_database():
    """Get database instance"""
    return database
