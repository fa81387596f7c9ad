#!/usr/bin/env python3
"""
Script to create an administrator for the Parnaioca inn dashboard.
Run this script once against the configured DATABASE_URL to create the first
administrator; further users are registered through the API.
"""

import asyncio
import sys

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from parnaioca.core.database import data_source
from parnaioca.core.security import get_password_hash
from parnaioca.models.user import User, UserRole


async def create_admin_user():
    print("🔧 Creating administrator for the Parnaioca inn")
    print("-" * 40)

    if data_source.is_fixture:
        print("❌ DATABASE_URL is not configured, nothing would be persisted")
        return False

    full_name = input("Enter full name: ").strip()
    if len(full_name) < 2:
        print("❌ Full name must be at least 2 characters long")
        return False

    email = input("Enter admin email: ").strip().lower()
    if not email:
        print("❌ Email cannot be empty")
        return False

    password = input("Enter admin password: ").strip()
    if not password:
        print("❌ Password cannot be empty")
        return False

    password_confirm = input("Confirm password: ").strip()
    if password != password_confirm:
        print("❌ Passwords do not match")
        return False

    if len(password) < 6:
        print("❌ Password must be at least 6 characters long")
        return False

    await data_source.initialize()

    async with data_source.sessionmaker() as db:
        try:
            existing_user_result = await db.execute(
                select(User).where(User.email == email)
            )
            if existing_user_result.scalar_one_or_none():
                print(f"❌ User with email '{email}' already exists")
                return False

            admin_user = User(
                email=email,
                full_name=full_name,
                hashed_password=get_password_hash(password),
                role=UserRole.ADMIN,
                is_active=True,
            )

            db.add(admin_user)
            await db.commit()
            await db.refresh(admin_user)

            print("✅ Administrator created successfully!")
            print(f"   Name: {admin_user.full_name}")
            print(f"   Email: {admin_user.email}")
            print(f"   Role: {admin_user.role.value}")
            print(f"   User ID: {admin_user.id}")
            print()
            print("🚀 You can now sign in with these credentials.")

            return True

        except SQLAlchemyError as e:
            print(f"❌ Error creating administrator: {str(e)}")
            await db.rollback()
            return False
        finally:
            await data_source.dispose()


async def main():
    print("=" * 50)
    print("🏨 PARNAIOCA INN - ADMIN USER CREATOR")
    print("=" * 50)
    print()

    try:
        success = await create_admin_user()
    except KeyboardInterrupt:
        print("\n\n❌ Setup cancelled by user")
        sys.exit(1)

    print("\n" + "=" * 50)
    if success:
        print("✅ SETUP COMPLETE!")
        print("=" * 50)
        sys.exit(0)
    print("❌ SETUP FAILED!")
    print("=" * 50)
    sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
