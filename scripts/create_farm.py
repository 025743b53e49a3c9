#!/usr/bin/env python3
"""
Create a new farm and its admin user.

Usage:
  python scripts/create_farm.py --email admin@example.com --farm-name "Green Acres"
      [--full-name "Ali Khan"] [--tenant-id UUID] [--password SECRET]

When no password is given a random one is generated and printed once.
"""

import argparse
import asyncio
import secrets
import sys
from pathlib import Path
from uuid import UUID

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.errors import AppError
from src.application.use_cases.auth import bootstrap_farm
from src.config.settings import get_settings
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def create_farm(payload: bootstrap_farm.BootstrapFarmInput) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            result = await bootstrap_farm.execute(
                uow=uow, payload=payload, password_hasher=PasswordHasher()
            )
    except AppError as exc:
        print(f"Error creating farm: {exc.message}")
        sys.exit(1)
    finally:
        await engine.dispose()

    print("Farm created")
    print(f"   Farm (tenant) ID: {result.tenant_id}")
    print(f"   User ID: {result.user_id}")
    print(f"   Email: {result.email}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a new farm with an admin user")
    parser.add_argument("--email", required=True, help="Email of the farm admin")
    parser.add_argument("--farm-name", default="", help="Name printed on reports")
    parser.add_argument("--full-name", help="Admin's display name")
    parser.add_argument("--tenant-id", type=UUID, help="Farm ID (optional, auto-generated)")
    parser.add_argument("--password", help="Admin password (optional, generated when omitted)")
    args = parser.parse_args()

    password = args.password or secrets.token_urlsafe(12)
    asyncio.run(
        create_farm(
            bootstrap_farm.BootstrapFarmInput(
                email=args.email,
                password=password,
                farm_name=args.farm_name,
                full_name=args.full_name,
                tenant_id=args.tenant_id,
            )
        )
    )
    if not args.password:
        print(f"   Generated password: {password}")
    print(f"   Default passkey until changed: {get_settings().default_passkey.get_secret_value()}")


if __name__ == "__main__":
    main()
