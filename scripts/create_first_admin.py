#!/usr/bin/env python3
"""
Create the platform admin profile that receives commission revenue.

Users live in the authentication service; pass the admin's user id.

Usage:
    python scripts/create_first_admin.py <user-id> [--department "System Administration"]
"""

import argparse
import asyncio
import sys
from uuid import UUID

from marketplace.database import dispose_async_engine, get_async_db_context
from marketplace.domains.payments.infrastructure.repositories import SQLAlchemyPlatformAccountRepository


async def create_first_admin(user_id: UUID, department: str) -> int:
    try:
        async with get_async_db_context() as session:
            repository = SQLAlchemyPlatformAccountRepository(session)
            if await repository.get_platform_account(user_id) is not None:
                print(f"Admin profile for {user_id} already exists")
                return 1
            account = await repository.create(user_id, department=department)
    finally:
        await dispose_async_engine()

    print("Admin profile created")
    print(f"   Profile ID: {account.id}")
    print(f"   User ID: {account.user_id}")
    print(f"   Department: {account.department}")
    print("\nSet PLATFORM_ADMIN_USER_ID to this user id to pin revenue to this profile.")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("user_id", type=UUID, help="User id of the admin in the authentication service")
    parser.add_argument("--department", default="System Administration")
    args = parser.parse_args()
    return asyncio.run(create_first_admin(args.user_id, args.department))


if __name__ == "__main__":
    sys.exit(main())
