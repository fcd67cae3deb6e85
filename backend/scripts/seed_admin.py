#!/usr/bin/env python
"""Seed script to create an admin user and print a Bearer token.

Run once during setup so the validation API can be called from scripts or
the API docs page before the identity provider is wired in.

Usage:
    python backend/scripts/seed_admin.py

Environment Variables:
    DATABASE_URL: PostgreSQL connection string
    JWT_SECRET: Token signing key (must match the API)
    ADMIN_EMAIL: Email for admin user (default: admin@example.com)
    ADMIN_NAME: Display name for admin user (default: System Administrator)
"""

import os
import sys
from pathlib import Path

# Add backend/src to Python path
backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))

from sqlalchemy import select

from database import get_db_session
from models.user import User
from auth.jwt import create_access_token


def main():
    admin_email = os.getenv("ADMIN_EMAIL", "admin@example.com").lower()
    admin_name = os.getenv("ADMIN_NAME", "System Administrator")

    try:
        with get_db_session() as session:
            user = session.execute(
                select(User).where(User.email == admin_email)
            ).scalars().first()

            if user:
                print(f"User {admin_email} already exists; issuing a new token")
            else:
                user = User(email=admin_email, name=admin_name, role="admin", status="ACTIVE")
                session.add(user)
                session.flush()
                print("SUCCESS: Admin user created")

            token = create_access_token(user_id=user.id, role=user.role, email=user.email)
            print(f"  ID:    {user.id}")
            print(f"  Email: {user.email}")
            print(f"  Role:  {user.role}")
            print(f"  Token: {token}")

    except Exception as e:
        print(f"ERROR: Failed to seed admin user: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
