import argparse
import getpass
import logging
import sys
from collections.abc import Sequence

from anchorly.adapters.sqlite.migrator import SQLiteMigrator
from anchorly.components.credentials import (
    AuthenticateInput,
    CreateUserInput,
    LoginInput,
    run_authenticate,
    run_create_user,
    run_login,
)
from anchorly.config import Settings, configure_logging
from anchorly.context import ServiceContext
from anchorly.domain.errors import ConfigurationError

logger = logging.getLogger("cli")


def _password(args: argparse.Namespace) -> str:
    if args.password is not None:
        return str(args.password)
    return getpass.getpass("Password: ")


def handle_migrate(settings: Settings, args: argparse.Namespace) -> int:
    if settings.db_path is None:
        logger.error("ANCHORLY_DATA_DIR is not set; nothing to migrate.")
        return 1
    applied = SQLiteMigrator(settings.db_path).run_migrations()
    print(f"Applied {len(applied)} migration(s).")
    return 0


def handle_create_user(ctx: ServiceContext, args: argparse.Namespace) -> int:
    inp = CreateUserInput(username=args.username, email=args.email, password=_password(args))
    result = run_create_user(inp, ctx.credentials)
    if not result.success or result.user is None:
        logger.error("Create user failed: %s", result.error)
        return 1
    print(f"Created user {result.user.id}")
    return 0


def handle_login(ctx: ServiceContext, args: argparse.Namespace) -> int:
    result = run_login(LoginInput(email=args.email, password=_password(args)), ctx.credentials)
    if not result.success or result.token is None:
        logger.error("Login failed: %s", result.error)
        return 1
    print(result.token.value)
    return 0


def handle_verify(ctx: ServiceContext, args: argparse.Namespace) -> int:
    result = run_authenticate(AuthenticateInput(token=args.token), ctx.credentials)
    if not result.success or result.claims is None:
        logger.error("Token rejected: %s", result.error)
        return 1
    print(f"Valid token for subject {result.claims.sub}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Anchorly credentials CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("migrate", help="Apply SQLite migrations")

    create_parser = subparsers.add_parser("create-user", help="Create an account")
    create_parser.add_argument("username")
    create_parser.add_argument("email")
    create_parser.add_argument("--password", help="Plaintext password (prompted if omitted)")

    login_parser = subparsers.add_parser("login", help="Log in and print a session token")
    login_parser.add_argument("email")
    login_parser.add_argument("--password", help="Plaintext password (prompted if omitted)")

    verify_parser = subparsers.add_parser("verify", help="Verify a session token")
    verify_parser.add_argument("token")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        print(f"CRITICAL: {e}", file=sys.stderr)
        return 2
    configure_logging(settings)

    if args.command == "migrate":
        return handle_migrate(settings, args)

    if settings.db_path is None:
        logger.warning("ANCHORLY_DATA_DIR is not set; using in-memory storage for this run.")
    ctx = ServiceContext.create(settings)

    if args.command == "create-user":
        return handle_create_user(ctx, args)
    elif args.command == "login":
        return handle_login(ctx, args)
    elif args.command == "verify":
        return handle_verify(ctx, args)
    else:
        raise ValueError(f"Unknown command: {args.command}")


if __name__ == "__main__":
    sys.exit(main())
