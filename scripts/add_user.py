#!/usr/bin/env python3
"""
Create a user directly in the configured database.

Usage:
  python scripts/add_user.py --name "Ada Lovelace" --email ada@example.com
"""
from __future__ import annotations

import argparse
import sys

from loguru import logger

from user_api.core.logging import configure_logging
from user_api.db.create_tables import create_all
from user_api.services.user_service import UserService


def main(argv: list[str] | None = None) -> dict:
    ap = argparse.ArgumentParser(description="Create a user")
    ap.add_argument("--name", required=True, help="Display name")
    ap.add_argument("--email", required=True, help="Email address (not checked for uniqueness)")
    args = ap.parse_args(argv)

    name = (args.name or "").strip()
    email = (args.email or "").strip()
    if not name or not email:
        raise SystemExit("name and email are required")

    create_all()
    user = UserService().create_user(name, email)
    logger.info("OK: user created (id={}, email={})", user["id"], user["email"])
    return user


if __name__ == "__main__":
    configure_logging()
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
