#!/usr/bin/env python3
"""
Database management script for the Wedding Planner
"""

import argparse

from weddingplanner.database import init_database, get_database
from weddingplanner.models.user import User
from weddingplanner.models.wedding import Wedding
from weddingplanner.models.commitment import Commitment

def init_database_cmd():
    """Initialize database and create tables"""
    init_database()

def list_users():
    """List all users"""
    database = get_database()
    with database.connection_context():
        users = list(User.select().order_by(User.id))
        if not users:
            print("No users found in database")
            return
        print("\n📋 Current Users:")
        print("-" * 80)
        print(f"{'ID':<6} {'Name':<30} {'Email':<35} {'Weddings'}")
        print("-" * 80)
        for user in users:
            planned = user.created_weddings.count()
            print(f"{user.id:<6} {user.full_name:<30} {user.email:<35} {planned}")

def list_weddings():
    """List all weddings with their guest counts"""
    database = get_database()
    with database.connection_context():
        weddings = list(Wedding.select().order_by(Wedding.date))
        if not weddings:
            print("No weddings found in database")
            return
        print("\n💍 Current Weddings:")
        print("-" * 80)
        print(f"{'ID':<6} {'Wedding of':<40} {'Date':<12} {'Guests'}")
        print("-" * 80)
        for wedding in weddings:
            guests = Commitment.select().where(Commitment.wedding == wedding).count()
            print(f"{wedding.id:<6} {wedding.title:<40} {wedding.date.strftime('%Y-%m-%d'):<12} {guests}")

def main():
    parser = argparse.ArgumentParser(description='Manage the Wedding Planner database')
    parser.add_argument('command', choices=['init', 'list-users', 'list-weddings'],
                        help='Command to execute')

    args = parser.parse_args()

    if args.command == 'init':
        init_database_cmd()
    elif args.command == 'list-users':
        list_users()
    elif args.command == 'list-weddings':
        list_weddings()

if __name__ == '__main__':
    main()
