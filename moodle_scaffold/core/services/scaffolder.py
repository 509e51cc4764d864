"""
Scaffolder — drive the interactive generation of a Moodle installation's config.

Flow of ``scaffold()``::

    pre-scaffold hooks
      → banner
      → moodle/config.php shim (every run)
      → config.php exists?  yes → skip
                            no  → generate_configuration_file()
    post-scaffold hooks

``generate_configuration_file()`` is also an entry point on its own
(e.g. ``config generate`` on the CLI), which is why it repeats the
existence check and asks before overwriting.

Every prompt is answered before anything is written: the dataroot is
created next, and config.php is the last file written.  Abort paths
(non-interactive session, declined overwrite) report a message and
return an ``aborted`` result; they never raise.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from moodle_scaffold.adapters.io.base import ScaffoldIO
from moodle_scaffold.core.context import resolve_install_root
from moodle_scaffold.core.models.config import (
    DEFAULT_DATAROOT,
    DEFAULT_DBHOST,
    DEFAULT_DRIVER,
    DEFAULT_PREFIX,
    DatabaseConfig,
    DatabaseDriver,
    SiteConfig,
)
from moodle_scaffold.core.services.generators.config_file import ConfigFile
from moodle_scaffold.core.services.generators.shim_config_file import ShimConfigFile
from moodle_scaffold.core.services.hooks import (
    POST_MOODLE_SCAFFOLD,
    PRE_MOODLE_SCAFFOLD,
    HookRegistry,
)
from moodle_scaffold.core.services.validation import validate_database_name, validate_wwwroot

logger = logging.getLogger(__name__)

# owner rwx, group r-x
DATAROOT_MODE = 0o750

GENERATED = "generated"
SKIPPED = "skipped"
ABORTED = "aborted"

_BANNER = r"""
 __  __                 _ _
|  \/  | ___   ___   __| | | ___
| |\/| |/ _ \ / _ \ / _` | |/ _ \
| |  | | (_) | (_) | (_| | |  __/
|_|  |_|\___/ \___/ \__,_|_|\___|
"""


def _missing_directories(path: Path) -> list[Path]:
    """Return ``path`` and each missing ancestor, outermost first."""
    missing = []
    for directory in (path, *path.parents):
        if directory.exists():
            break
        missing.append(directory)
    return list(reversed(missing))


@dataclass
class ScaffoldResult:
    """Outcome of a scaffold run or of the generation sub-flow."""

    outcome: str
    message: str = ""
    files_written: list[str] = field(default_factory=list)
    directories_created: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.outcome != ABORTED

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "outcome": self.outcome,
            "message": self.message,
            "files_written": self.files_written,
            "directories_created": self.directories_created,
        }


class Scaffolder:
    """Scaffold the Moodle configuration files of one installation."""

    def __init__(
        self,
        io: ScaffoldIO,
        root: Path | None = None,
        hooks: HookRegistry | None = None,
    ):
        self.io = io
        self.root = root if root is not None else resolve_install_root()
        self.hooks = hooks if hooks is not None else HookRegistry()

    def scaffold(self) -> ScaffoldResult:
        """Run the whole scaffold: hooks, shim, then config.php if missing."""
        self.hooks.dispatch(PRE_MOODLE_SCAFFOLD, root=self.root)

        self.io.write(_BANNER)
        self.io.write("Scaffolding Moodle core files...", style="info")

        shim_path = ShimConfigFile(self.io, self.root).generate()

        config_file = ConfigFile(self.io, self.root)
        if config_file.exists():
            self.io.write(
                "- Configuration file already exists. Skipping generation.",
                style="comment",
            )
            result = ScaffoldResult(
                outcome=SKIPPED,
                message="Configuration file already exists.",
            )
        else:
            result = self.generate_configuration_file()

        result.files_written.insert(0, str(shim_path))

        self.io.write("")
        self.io.write("Moodle core files scaffolded successfully.", style="info")
        self.hooks.dispatch(POST_MOODLE_SCAFFOLD, root=self.root, result=result)
        return result

    def generate_configuration_file(self) -> ScaffoldResult:
        """Prompt for the site configuration and write config.php."""
        self.io.write("Generating Moodle configuration file...")

        config_file = ConfigFile(self.io, self.root)

        if not self.io.is_interactive():
            return self._abort(
                "Non-interactive mode detected. Skipping configuration file "
                "generation to avoid incomplete setup."
            )

        if config_file.exists():
            self.io.write(
                "Configuration file already exists. Aborting to prevent "
                "overwriting existing configuration.",
                style="warning",
            )
            overwrite = self.io.ask_confirmation(
                "Do you want to overwrite the existing configuration file? (y/N) ",
                False,
            )
            if not overwrite:
                return self._abort("Aborting configuration file generation.")
            self.io.write(
                "Overwriting existing configuration file as per user request.",
                style="warning",
            )
            logger.warning("Overwriting existing %s at operator request", config_file.path)

        database, site = self._ask_configuration()

        config_file.set_database_config(database).set_site_config(site)

        result = ScaffoldResult(outcome=GENERATED)

        dataroot = Path(site.dataroot)
        if not dataroot.is_absolute():
            dataroot = self.root / dataroot
        if not dataroot.exists():
            created = _missing_directories(dataroot)
            dataroot.mkdir(mode=DATAROOT_MODE, parents=True)
            for directory in created:
                # mkdir's mode is filtered by the umask, and parents ignore it
                directory.chmod(DATAROOT_MODE)
            logger.info("Created dataroot %s (mode %o)", dataroot, DATAROOT_MODE)
            self.io.write(f"Created dataroot directory at: {site.dataroot}")
            result.directories_created.extend(str(d) for d in created)

        result.files_written.append(str(config_file.generate()))
        result.message = "Moodle configuration file generated successfully."
        self.io.write(result.message)
        return result

    def _ask_configuration(self) -> tuple[DatabaseConfig, SiteConfig]:
        """Collect and validate every answer; no side effects."""
        driver = self.io.select(
            "What database driver are you using?",
            DatabaseDriver.choices(),
            DEFAULT_DRIVER.value,
        )

        dbuser = self.io.ask_and_hide_answer("Enter the database username: ") or ""
        dbpass = self.io.ask_and_hide_answer("Enter the database password: ") or ""
        dbname = self.io.ask_and_validate(
            "Enter the database name: ",
            validate_database_name,
        )

        dbhost = self.io.ask(
            f"Enter the database host (default: {DEFAULT_DBHOST}): ", DEFAULT_DBHOST
        ) or ""
        prefix = self.io.ask(
            f"Enter the database table prefix (default: {DEFAULT_PREFIX}): ", DEFAULT_PREFIX
        ) or ""

        wwwroot = self.io.ask_and_validate(
            "Enter the web root URL (for example, https://moodle.example.com): ",
            validate_wwwroot,
        )
        dataroot = self.io.ask(
            f"Enter the Moodle data directory path (default: {DEFAULT_DATAROOT}): ",
            DEFAULT_DATAROOT,
        ) or ""

        database = DatabaseConfig(
            driver=DatabaseDriver(driver),
            host=dbhost,
            name=dbname,
            user=dbuser,
            password=dbpass,
            table_prefix=prefix,
        )
        site = SiteConfig(wwwroot=wwwroot, dataroot=dataroot)
        return database, site

    def _abort(self, message: str) -> ScaffoldResult:
        self.io.write(message, style="error")
        logger.info("Configuration generation aborted: %s", message)
        return ScaffoldResult(outcome=ABORTED, message=message)
