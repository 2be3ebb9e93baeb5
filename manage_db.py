#!/usr/bin/env python3
"""
Database management script for the client dashboard.
Checks the Supabase configuration and seeds demo data.
"""

import sys
import asyncio
import logging
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from clientdesk.config import get_settings
from clientdesk.domain.models.base import ConfigurationError, DomainException
from clientdesk.infrastructure.db.seed import seed_database
from clientdesk.infrastructure.db.supabase import SupabaseDatabase
from clientdesk.infrastructure.repositories import (
    SupabaseClientRepository, SupabaseProjectRepository, SupabaseTaskRepository
)


logger = logging.getLogger("manage_db")


def check_configuration() -> int:
    """Report whether the Supabase variables are set."""
    settings = get_settings()
    try:
        SupabaseDatabase(settings).check_configuration()
    except ConfigurationError as exc:
        print(f"Configuration incomplete: {exc.message}")
        print("Set them in the environment or in a .env file.")
        return 1

    print(f"Supabase configured: {settings.supabase_url}")
    return 0


async def seed() -> int:
    """Insert demo clients, projects and tasks."""
    database = SupabaseDatabase(get_settings())
    try:
        summary = await seed_database(
            SupabaseClientRepository(database),
            SupabaseProjectRepository(database),
            SupabaseTaskRepository(database),
        )
    except ConfigurationError as exc:
        print(f"Cannot seed: {exc.message}")
        return 1
    except DomainException as exc:
        print(f"Seeding failed: {exc.message}")
        return 1

    print("Seeding completed.")
    print(f"  Clients:  {summary.clients} (skipped {summary.skipped_clients} existing)")
    print(f"  Projects: {summary.projects}")
    print(f"  Tasks:    {summary.tasks}")
    return 0


def main() -> int:
    """Main CLI function."""
    logging.basicConfig(
        level=get_settings().effective_log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  check          - Verify Supabase configuration")
        print("  seed           - Insert demo clients, projects and tasks")
        return 1

    command_name = sys.argv[1]

    if command_name == "check":
        return check_configuration()
    elif command_name == "seed":
        return asyncio.run(seed())
    else:
        print(f"Unknown command: {command_name}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
