"""
Site configuration models — the validated answers behind config.php.

These are value objects: the scaffolder builds them once every answer
has passed validation, then hands them whole to the ConfigFile
generator.  They are frozen so nothing can patch a half-collected
configuration after the fact.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DatabaseDriver(str, Enum):
    """Database drivers Moodle can be configured with."""

    MARIADB = "mariadb"
    MYSQLI = "mysqli"
    PGSQL = "pgsql"
    SQLSRV = "sqlsrv"
    AURORAMYSQL = "auroramysql"

    @property
    def label(self) -> str:
        """Human-readable choice label, e.g. 'PostgreSQL (pgsql)'."""
        return f"{_DRIVER_NAMES[self]} ({self.value})"

    @classmethod
    def choices(cls) -> dict[str, str]:
        """Ordered ``{value: label}`` mapping for selection prompts."""
        return {driver.value: driver.label for driver in cls}


_DRIVER_NAMES: dict[DatabaseDriver, str] = {
    DatabaseDriver.MARIADB: "MariaDB",
    DatabaseDriver.MYSQLI: "MySQL Improved",
    DatabaseDriver.PGSQL: "PostgreSQL",
    DatabaseDriver.SQLSRV: "Microsoft SQL Server",
    DatabaseDriver.AURORAMYSQL: "Amazon Aurora MySQL",
}

DEFAULT_DRIVER = DatabaseDriver.PGSQL
DEFAULT_DBHOST = "localhost"
DEFAULT_PREFIX = "mdl_"
DEFAULT_DATAROOT = "moodledata"


class DatabaseConfig(BaseModel):
    """Database connection settings ($CFG->db* and $CFG->prefix).

    Only ``name`` is required to be non-empty; the remaining fields may
    be empty strings (e.g. socket auth without a password).
    """

    model_config = ConfigDict(frozen=True)

    driver: DatabaseDriver = DEFAULT_DRIVER
    host: str = DEFAULT_DBHOST
    name: str = Field(min_length=1)
    user: str = ""
    password: str = ""
    table_prefix: str = DEFAULT_PREFIX


class SiteConfig(BaseModel):
    """Site location settings ($CFG->wwwroot and $CFG->dataroot)."""

    model_config = ConfigDict(frozen=True)

    wwwroot: str
    dataroot: str = DEFAULT_DATAROOT


class GenerationRequest(BaseModel):
    """Everything the ConfigFile generator needs to render config.php."""

    model_config = ConfigDict(frozen=True)

    database: DatabaseConfig
    site: SiteConfig
