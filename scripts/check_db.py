#!/usr/bin/env python
"""Check database connectivity and schema.

Usage:
    python scripts/check_db.py
"""

import asyncio
import sys

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine

from sellerdesk.core.config import get_settings

EXPECTED_TABLES = ("seller", "product", "customer_order", "post")


async def check_database() -> int:
    """Verify the connection and that migrations have been applied."""
    settings = get_settings()

    print("SellerDesk - Database Check")
    print("=" * 27)
    print(f"Database URL: {settings.database_url.split('@')[-1]}")  # Hide credentials
    print()

    engine = create_async_engine(settings.database_url)

    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            if result.scalar() != 1:
                print("[FAIL] Unexpected response to SELECT 1")
                return 1
            print("[OK] Basic connectivity")

            result = await conn.execute(text("SELECT version()"))
            version = result.scalar() or ""
            print(f"[OK] PostgreSQL version: {version[:50]}...")

            result = await conn.execute(
                text(
                    "SELECT table_name FROM information_schema.tables "
                    "WHERE table_schema = 'public'"
                )
            )
            present = set(result.scalars())
            missing = [name for name in EXPECTED_TABLES if name not in present]
            if missing:
                print(f"[WARN] Missing tables: {', '.join(missing)}")
                print("       Run: alembic upgrade head")
            else:
                print("[OK] Schema tables present")

        print()
        print("Database check completed successfully!")
        return 0

    except (SQLAlchemyError, OSError) as e:
        print(f"[FAIL] Connection failed: {e}")
        print()
        print("Troubleshooting:")
        print("  1. Ensure PostgreSQL is running")
        print("  2. Check DATABASE_URL in .env file")
        return 1

    finally:
        await engine.dispose()


def main() -> None:
    sys.exit(asyncio.run(check_database()))


if __name__ == "__main__":
    main()
