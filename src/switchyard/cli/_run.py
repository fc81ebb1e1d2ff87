"""``switchyard run`` — development server command.

Resolves an import string to the application entry point, wraps it in a
DevRouter, and starts the development server.
"""

import argparse
import sys

from switchyard.cli._resolve import resolve_entry_point
from switchyard.config import ServerConfig
from switchyard.errors import ConfigurationError


def run_server(args: argparse.Namespace) -> None:
    """Start the development server for ``args.app``.

    CLI flags are frozen into a ``ServerConfig`` once; nothing changes it
    after the server starts.
    """
    try:
        entry_point = resolve_entry_point(args.app)
        config = ServerConfig(
            root_dir=args.root,
            public_dir=args.public_dir,
            log_level=args.log_level,
            reload=args.reload,
            **({"host": args.host} if args.host else {}),
            **({"port": args.port} if args.port else {}),
        )
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from switchyard.app import DevRouter
    from switchyard.server.dev import configure_logging, run_dev_server

    configure_logging(config.log_level)
    run_dev_server(
        DevRouter(entry_point, config),
        config.host,
        config.port,
        reload=config.reload,
    )
