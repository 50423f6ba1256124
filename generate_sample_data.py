#!/usr/bin/env python3
"""
Sample Data Generator for the Wedding Planner
=============================================

This script generates realistic test data for development and testing purposes.
It creates users, weddings, and RSVPs (commitments).

⚠️  WARNING: This will modify your database! ⚠️
"""

import os
import sys
from datetime import datetime, timedelta
import random
from faker import Faker

from weddingplanner.database import init_database, database, DATABASE_PATH
from weddingplanner.models.user import User
from weddingplanner.models.wedding import Wedding
from weddingplanner.models.commitment import Commitment

SAMPLE_EMAIL_DOMAIN = 'sample.weddingplanner.org'
SAMPLE_PASSWORD = 'password123'

def get_user_confirmation():
    """Require explicit YES confirmation before proceeding"""
    print("🔥 DATABASE WARNING 🔥")
    print("=" * 60)
    print("This script will generate sample data in your database.")
    print()
    print("Current database:", os.path.abspath(DATABASE_PATH))

    user_count = User.select().count()
    wedding_count = Wedding.select().count()
    commitment_count = Commitment.select().count()
    print(f"Current contents: {user_count} users, {wedding_count} weddings, {commitment_count} RSVPs")
    if user_count > 0:
        print("🚨 EXISTING DATA DETECTED - This will add to existing data!")

    print()
    print("⚠️  To proceed, you must type 'YES' exactly (case sensitive)")
    print()

    user_input = input("Type 'YES' to continue: ").strip()

    if user_input != "YES":
        print("❌ Operation cancelled. Database unchanged.")
        sys.exit(0)

    print("✅ Confirmation received. Proceeding with data generation...")
    print()

def clear_existing_test_data():
    """Clear data created by a previous run of this script"""
    print("🧹 Clearing existing sample data...")

    sample_users = User.select().where(User.email.endswith(f"@{SAMPLE_EMAIL_DOMAIN}"))
    deleted_users = 0
    with database.atomic():
        for user in sample_users:
            Commitment.delete().where(Commitment.user == user).execute()
            planned = Wedding.select(Wedding.id).where(Wedding.creator == user)
            Commitment.delete().where(Commitment.wedding.in_(planned)).execute()
            Wedding.delete().where(Wedding.creator == user).execute()
            user.delete_instance()
            deleted_users += 1

    print(f"   ✅ Removed {deleted_users} sample users and their weddings")

def create_sample_users(count=12):
    """Create sample users sharing one known password"""
    fake = Faker()

    print("👥 Creating sample users...")

    users = []
    for _ in range(count):
        first_name = fake.first_name()
        last_name = fake.last_name()
        user = User(first_name=first_name,
                    last_name=last_name,
                    email=f"{fake.unique.user_name()}@{SAMPLE_EMAIL_DOMAIN}",
                    created_at=datetime.now() - timedelta(days=random.randint(1, 90)))
        user.set_password(SAMPLE_PASSWORD)
        user.save()
        users.append(user)

    print(f"   ✅ Created {len(users)} users (password: {SAMPLE_PASSWORD})")
    return users

def create_sample_weddings(users, count=8):
    """Create upcoming weddings planned by random users"""
    fake = Faker()

    print("💍 Creating sample weddings...")

    weddings = []
    for _ in range(count):
        wedding = Wedding.create(
            nearlywed_one=fake.first_name(),
            nearlywed_two=fake.first_name(),
            date=datetime.now().replace(hour=15, minute=0, second=0, microsecond=0)
                 + timedelta(days=random.randint(7, 365)),
            address=fake.address().replace("\n", ", "),
            creator=random.choice(users),
        )
        weddings.append(wedding)

    print(f"   ✅ Created {len(weddings)} weddings")
    return weddings

def create_sample_commitments(users, weddings):
    """RSVP a random share of users to each wedding"""
    print("🎟️  Creating sample RSVPs...")

    total = 0
    for wedding in weddings:
        # Creators do not RSVP to their own wedding
        candidates = [u for u in users if u.id != wedding.creator_id]
        guests = random.sample(candidates, int(len(candidates) * random.uniform(0.2, 0.7)))
        for guest in guests:
            Commitment.create(user=guest, wedding=wedding)
            total += 1

    print(f"   ✅ Created {total} RSVPs")

def display_summary():
    """Display a summary of generated data"""
    print("\n📊 DATA GENERATION SUMMARY")
    print("=" * 50)
    print(f"👥 Users: {User.select().count()} total")
    print(f"💍 Weddings: {Wedding.select().count()} total")
    print(f"🎟️  RSVPs: {Commitment.select().count()} total")

def main():
    try:
        print("🗄️  Initializing database...")
        init_database()
        print("   ✅ Database ready")
        print()

        get_user_confirmation()

        clear_existing_test_data()
        print()

        users = create_sample_users()
        print()

        weddings = create_sample_weddings(users)
        print()

        create_sample_commitments(users, weddings)
        print()

        display_summary()

        print("\n🎉 SAMPLE DATA GENERATION COMPLETE!")
        print(f"Log in as any {SAMPLE_EMAIL_DOMAIN} user with password '{SAMPLE_PASSWORD}'.")

    except Exception as e:
        print(f"\n❌ Error during data generation: {e}")
        print("Database may be in an incomplete state.")
        sys.exit(1)

if __name__ == "__main__":
    main()
