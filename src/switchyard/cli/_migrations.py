"""``switchyard migrations`` — show the migration config or list migrations."""

import argparse
import json
import sys

from switchyard.errors import SwitchyardError
from switchyard.migrations import DatabaseSettings, build_migration_config, discover_migrations


def run_migrations(args: argparse.Namespace) -> None:
    """Print the migration config as JSON, or one discovered migration per line."""
    database = DatabaseSettings(
        host=args.db_host,
        user=args.db_user,
        password=args.db_password,
        port=args.db_port,
        charset=args.db_charset,
    )
    try:
        config = build_migration_config(
            args.config_dir,
            database,
            development=not args.production,
        )
        if args.action == "config":
            print(json.dumps(config.to_dict(), indent=2))
            return
        for migration in discover_migrations(config):
            print(f"{migration.version}  {migration.name}")
    except SwitchyardError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
