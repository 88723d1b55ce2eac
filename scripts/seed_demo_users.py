"""Seed demo login accounts (admin, team leader, HR) into the users collection.

Previous users with the demo emails are deleted first, so it is safe to re-run.
Name, email and password of each account can be overridden from the
environment or .env.local:

    MONGODB_URI (required)
    ADMIN_NAME, ADMIN_EMAIL, ADMIN_PASSWORD
    TEAM_LEADER_NAME, TEAM_LEADER_EMAIL, TEAM_LEADER_PASSWORD
    HR_NAME, HR_EMAIL, HR_PASSWORD

Roles are fixed per account and cannot be overridden.

Usage:
    python -m scripts.seed_demo_users          # reset and seed demo users
    python -m scripts.seed_demo_users --clean  # delete demo users only
"""

import argparse
import asyncio
import contextlib
import logging
import sys
from typing import Optional

from pydantic import BaseModel

from app.config import Settings, settings
from app.database import connect_db, disconnect_db
from app.logging_config import setup_logging
from app.users.models import User, UserRole
from app.users.service import create_user, delete_users_by_email

logger = logging.getLogger(__name__)

LOGIN_HINT = "Next: start backend, then login via POST /api/auth/login"


class DemoAccount(BaseModel):
    name: str
    email: str
    password: str  # Plaintext; hashed by create_user
    role: UserRole


DEFAULTS = {
    "ADMIN": DemoAccount(
        name="Admin",
        email="admin@leadmanagement.com",
        password="admin123",
        role=UserRole.ADMIN,
    ),
    "TEAM_LEADER": DemoAccount(
        name="Rajesh Kumar",
        email="rajesh.kumar@leadmanagement.com",
        password="12345678",
        role=UserRole.TEAM_LEADER,
    ),
    "HR": DemoAccount(
        name="Neha Singh",
        email="neha.singh@leadmanagement.com",
        password="12345678",
        role=UserRole.HR,
    ),
}


def from_env(prefix: str, fallback: DemoAccount, config: Settings) -> DemoAccount:
    """Apply <PREFIX>_NAME/_EMAIL/_PASSWORD overrides to a default account.

    Unset and empty values both fall back to the default.
    """
    return DemoAccount(
        name=getattr(config, f"{prefix}_NAME") or fallback.name,
        email=getattr(config, f"{prefix}_EMAIL") or fallback.email,
        password=getattr(config, f"{prefix}_PASSWORD") or fallback.password,
        role=fallback.role,
    )


def resolve_demo_accounts(config: Settings) -> tuple[DemoAccount, DemoAccount, DemoAccount]:
    """Return the (admin, team leader, hr) accounts with overrides applied."""
    return (
        from_env("ADMIN", DEFAULTS["ADMIN"], config),
        from_env("TEAM_LEADER", DEFAULTS["TEAM_LEADER"], config),
        from_env("HR", DEFAULTS["HR"], config),
    )


async def seed(config: Settings) -> list[tuple[DemoAccount, User]]:
    """Delete previous demo users, then create admin → team leader → hr.

    Inserts are sequential because each one needs the id of the one before.
    There is no rollback: if a later insert fails, earlier ones stay.
    """
    admin, team_leader, hr = resolve_demo_accounts(config)

    deleted = await delete_users_by_email([admin.email, team_leader.email, hr.email])
    if deleted:
        print(f"Removed {deleted} previous demo users")

    created_admin = await create_user(
        name=admin.name,
        email=admin.email,
        password=admin.password,
        role=admin.role,
    )
    created_team_leader = await create_user(
        name=team_leader.name,
        email=team_leader.email,
        password=team_leader.password,
        role=team_leader.role,
        created_by=created_admin.id,
    )
    created_hr = await create_user(
        name=hr.name,
        email=hr.email,
        password=hr.password,
        role=hr.role,
        team_leader=created_team_leader.id,
        created_by=created_admin.id,
    )

    return [
        (admin, created_admin),
        (team_leader, created_team_leader),
        (hr, created_hr),
    ]


async def clean(config: Settings) -> int:
    """Delete only the demo users. Returns how many were removed."""
    accounts = resolve_demo_accounts(config)
    deleted = await delete_users_by_email([a.email for a in accounts])
    print(f"Deleted {deleted} demo users")
    return deleted


def format_summary(seeded: list[tuple[DemoAccount, User]]) -> str:
    """Render role / email / password as a plain-text table.

    Shows the configured plaintext password, since the stored one is a hash.
    """
    rows = [("role", "email", "password")]
    rows += [(user.role.value, account.email, account.password) for account, user in seeded]
    widths = [max(len(row[i]) for row in rows) for i in range(3)]

    def line(row):
        return "  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()

    out = [line(rows[0]), line(tuple("-" * w for w in widths))]
    out += [line(row) for row in rows[1:]]
    return "\n".join(out)


async def _close_quietly() -> None:
    # Already failing; a close error would only hide the original one
    with contextlib.suppress(Exception):
        await disconnect_db()


async def run(config: Settings, clean_only: bool = False) -> int:
    """Run the seed (or --clean) against the configured database.

    Returns the process exit status: 0 on success, 1 on missing MONGODB_URI
    or any failure along the way.
    """
    if not config.MONGODB_URI:
        logger.error("Missing MONGODB_URI. Set it in .env.local (or your environment).")
        return 1

    try:
        await connect_db(config.MONGODB_URI, config.DATABASE_NAME)
        if clean_only:
            await clean(config)
        else:
            seeded = await seed(config)
            print("\nSeeded demo users successfully:\n")
            print(format_summary(seeded))
            print(f"\n{LOGIN_HINT}\n")
        await disconnect_db()
    except Exception:
        logger.exception("Seed failed")
        await _close_quietly()
        return 1

    return 0


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Seed or clean demo user accounts")
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Delete the demo users (matched by email) instead of seeding",
    )
    args = parser.parse_args(argv)

    setup_logging()
    sys.exit(asyncio.run(run(settings, clean_only=args.clean)))


if __name__ == "__main__":
    main()
