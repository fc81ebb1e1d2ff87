"""Switchyard CLI — development server and migration configuration.

Entry point registered as ``switchyard`` in ``pyproject.toml``::

    [project.scripts]
    switchyard = "switchyard.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``switchyard`` command."""
    parser = argparse.ArgumentParser(
        prog="switchyard",
        description="Switchyard — development request router and migration config.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- switchyard run ---------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start the development server")
    run_parser.add_argument(
        "app",
        help="Import string of the ASGI entry point (e.g. myapp:app)",
    )
    run_parser.add_argument("--root", default=".", help="Server root directory")
    run_parser.add_argument(
        "--public-dir",
        default="public",
        help="Static fallback directory, relative to the root",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--log-level",
        default="info",
        choices=("debug", "info", "warning", "error", "critical"),
        help="Logging verbosity",
    )
    run_parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on file changes",
    )

    # -- switchyard migrations --------------------------------------------
    mig_parser = subparsers.add_parser("migrations", help="Inspect migration configuration")
    mig_parser.add_argument("action", choices=("config", "list"), help="What to show")
    mig_parser.add_argument("--config-dir", default=".", help="Directory holding db/migrations")
    mig_parser.add_argument("--db-host", default="localhost", help="Database host")
    mig_parser.add_argument("--db-port", type=int, default=3306, help="Database port")
    mig_parser.add_argument("--db-user", default="root", help="Database user")
    mig_parser.add_argument("--db-password", default="", help="Database password")
    mig_parser.add_argument("--db-charset", default="utf8mb4", help="Connection charset")
    mig_parser.add_argument(
        "--production",
        action="store_true",
        help="Default to the production environment",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from switchyard.cli._run import run_server

        run_server(args)
    elif args.command == "migrations":
        from switchyard.cli._migrations import run_migrations

        run_migrations(args)
