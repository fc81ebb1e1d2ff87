"""Migration tool configuration.

Describes where migrations live and which database each environment
points at, in the layout the external migration tool reads. Applying
migrations and tracking applied versions belong to that tool.

Migrations are timestamp-prefixed files::

    db/migrations/
        20251129144016_create_users_table.php
        20251216032639_create_items_table.php

Usage::

    from switchyard.migrations import DatabaseSettings, build_migration_config, discover_migrations

    db = DatabaseSettings(host="localhost", user="claimit", password="secret")
    config = build_migration_config(".", db, development=True)
    config.environment().name        # "claimit_dev"
    discover_migrations(config)      # sorted by version
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from switchyard.errors import ConfigurationError, MigrationError

logger = logging.getLogger("switchyard.migrations")

VERSION_ORDERS = ("creation", "execution")

DEFAULT_DATABASE_NAMES: Mapping[str, str] = MappingProxyType(
    {"development": "claimit_dev", "production": "claimit_prod"}
)

_MIGRATION_NAME_RE = re.compile(r"^(?P<version>\d{14})_(?P<name>[a-z0-9]+(?:_[a-z0-9]+)*)$")


@dataclass(frozen=True, slots=True)
class DatabaseSettings:
    """Connection settings shared by every environment."""

    host: str
    user: str
    password: str = field(default="", repr=False)
    port: int = 3306
    charset: str = "utf8mb4"
    adapter: str = "mysql"


@dataclass(frozen=True, slots=True)
class MigrationEnvironment:
    """One named target database."""

    adapter: str
    host: str
    name: str
    user: str
    password: str = field(repr=False)
    port: int
    charset: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "adapter": self.adapter,
            "host": self.host,
            "name": self.name,
            "user": self.user,
            "pass": self.password,
            "port": self.port,
            "charset": self.charset,
        }


@dataclass(frozen=True, slots=True)
class MigrationConfig:
    """Migration tool configuration. Immutable after creation."""

    migrations_path: Path
    seeds_path: Path
    environments: Mapping[str, MigrationEnvironment]
    default_environment: str
    migration_table: str = "phinxlog"
    version_order: str = "creation"

    def __post_init__(self) -> None:
        if self.default_environment not in self.environments:
            msg = (
                f"default environment {self.default_environment!r} is not one of "
                f"{', '.join(sorted(self.environments))}"
            )
            raise ConfigurationError(msg)
        if self.version_order not in VERSION_ORDERS:
            msg = f"version_order must be one of {', '.join(VERSION_ORDERS)}, got {self.version_order!r}"
            raise ConfigurationError(msg)

    def environment(self, name: str | None = None) -> MigrationEnvironment:
        """Return environment *name*, or the default environment."""
        key = name or self.default_environment
        try:
            return self.environments[key]
        except KeyError:
            msg = f"Unknown migration environment: {key!r}"
            raise ConfigurationError(msg) from None

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping in the layout the migration tool consumes."""
        environments: dict[str, Any] = {
            "default_migration_table": self.migration_table,
            "default_environment": self.default_environment,
        }
        for name, env in self.environments.items():
            environments[name] = env.to_dict()
        return {
            "paths": {
                "migrations": str(self.migrations_path),
                "seeds": str(self.seeds_path),
            },
            "environments": environments,
            "version_order": self.version_order,
        }


def build_migration_config(
    config_dir: str | Path,
    database: DatabaseSettings,
    *,
    development: bool = True,
    database_names: Mapping[str, str] | None = None,
) -> MigrationConfig:
    """Build the development/production migration config.

    Both environments share the connection settings in *database* and
    differ only in database name. *development* picks the default.
    """
    base = Path(config_dir).resolve()
    names = {**DEFAULT_DATABASE_NAMES, **(database_names or {})}
    environments = {
        env_name: MigrationEnvironment(
            adapter=database.adapter,
            host=database.host,
            name=db_name,
            user=database.user,
            password=database.password,
            port=database.port,
            charset=database.charset,
        )
        for env_name, db_name in names.items()
    }
    return MigrationConfig(
        migrations_path=base / "db" / "migrations",
        seeds_path=base / "db" / "seeds",
        environments=MappingProxyType(environments),
        default_environment="development" if development else "production",
    )


@dataclass(frozen=True, slots=True)
class Migration:
    """A single migration file."""

    version: int
    name: str
    path: Path


def discover_migrations(config: MigrationConfig) -> list[Migration]:
    """List migration files sorted by version.

    Files must be named ``YYYYMMDDHHMMSS_snake_case_name.<ext>``.

    Raises:
        MigrationError: Missing directory, invalid file name, or two
            files sharing a version.
    """
    directory = config.migrations_path
    if not directory.is_dir():
        msg = f"Migration directory does not exist: {directory}"
        raise MigrationError(msg)

    migrations: list[Migration] = []
    seen: dict[int, str] = {}
    for path in sorted(p for p in directory.iterdir() if p.is_file() and not p.name.startswith(".")):
        match = _MIGRATION_NAME_RE.match(path.stem)
        if match is None:
            msg = f"Invalid migration filename: {path.name} (expected YYYYMMDDHHMMSS_name.ext)"
            raise MigrationError(msg)
        version = int(match["version"])
        if version in seen:
            msg = f"Duplicate migration version {version}: {seen[version]} and {path.name}"
            raise MigrationError(msg)
        seen[version] = path.name
        migrations.append(Migration(version=version, name=match["name"], path=path))

    migrations.sort(key=lambda m: m.version)
    logger.debug("discovered %d migration(s) in %s", len(migrations), directory)
    return migrations
