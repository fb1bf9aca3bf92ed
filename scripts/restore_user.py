#!/usr/bin/env python3
"""
Restore a soft-deleted user.

Usage:
  python scripts/restore_user.py --id 42
"""
from __future__ import annotations

import argparse
import sys

from loguru import logger

from user_api.core.logging import configure_logging
from user_api.domain.errors import UserError
from user_api.services.user_service import UserService


def main(argv: list[str] | None = None) -> dict:
    ap = argparse.ArgumentParser(description="Restore a soft-deleted user")
    ap.add_argument("--id", type=int, required=True, dest="user_id", help="User ID")
    args = ap.parse_args(argv)

    try:
        user = UserService().restore_user(args.user_id)
    except UserError as exc:
        raise SystemExit(exc.message) from exc
    logger.info("OK: user {} restored", user["id"])
    return user


if __name__ == "__main__":
    configure_logging()
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
