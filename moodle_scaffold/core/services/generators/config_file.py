"""
config.php generator — render the site configuration from validated answers.

The output is a fixed PHP template with the configuration values
substituted verbatim into single-quoted literals.  Values are NOT
escaped: a value containing ``'`` or ``\\`` produces a config.php that
PHP reads differently (or not at all).  This matches the format every
existing installation was generated with; such values are logged as
a warning rather than rewritten.
"""

from __future__ import annotations

import logging
from pathlib import Path

from moodle_scaffold.adapters.io.base import ScaffoldIO
from moodle_scaffold.core.models.config import DatabaseConfig, GenerationRequest, SiteConfig
from moodle_scaffold.core.models.template import GeneratedFile
from moodle_scaffold.core.services.generators.base import BaseGenerator, ScaffoldError

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.php"

_TEMPLATE = """\
<?php

/**
 * This is the Moodle configuration file.
 *
 * For documentation see https://docs.moodle.org/en/Configuration_file
 */

unset($CFG);
global $CFG;
$CFG = new stdClass();

$CFG->dbtype    = '{dbtype}';
$CFG->dblibrary = 'native';
$CFG->dbhost    = '{dbhost}';
$CFG->dbname    = '{dbname}';
$CFG->dbuser    = '{dbuser}';
$CFG->dbpass    = '{dbpass}';
$CFG->prefix    = '{prefix}';

$CFG->dboptions = array (
  'dbpersist' => 0,
  'dbport' => '',
  'dbsocket' => '',
);

$CFG->wwwroot   = '{wwwroot}';
$CFG->dataroot  = '{dataroot}';

// Note: Do *not* include setup.php here.
// For Composer-based installations, it is included by the shim config.php file.
"""

# Characters that end or alter a PHP single-quoted literal.
_UNSAFE_CHARS = ("'", "\\")


def render_config(request: GenerationRequest) -> str:
    """Render config.php text for ``request``. Pure and deterministic."""
    db, site = request.database, request.site
    values = {
        "dbtype": db.driver.value,
        "dbhost": db.host,
        "dbname": db.name,
        "dbuser": db.user,
        "dbpass": db.password,
        "prefix": db.table_prefix,
        "wwwroot": site.wwwroot,
        "dataroot": site.dataroot,
    }
    for field, value in values.items():
        if any(ch in value for ch in _UNSAFE_CHARS):
            # never log the value itself, it may be the password
            logger.warning(
                "$CFG->%s contains a quote or backslash and is written unescaped",
                field,
            )
    return _TEMPLATE.format(**values)


class ConfigFile(BaseGenerator):
    """Generator for the installation's config.php."""

    relative_path = CONFIG_FILE

    def __init__(self, io: ScaffoldIO, root: Path | None = None):
        super().__init__(io, root)
        self._database: DatabaseConfig | None = None
        self._site: SiteConfig | None = None

    def set_database_config(self, database: DatabaseConfig) -> "ConfigFile":
        self._database = database
        return self

    def set_site_config(self, site: SiteConfig) -> "ConfigFile":
        self._site = site
        return self

    @property
    def request(self) -> GenerationRequest:
        """The accumulated configuration, complete or not at all."""
        if self._database is None or self._site is None:
            missing = [
                name for name, value in (("database", self._database), ("site", self._site))
                if value is None
            ]
            raise ScaffoldError(
                f"Cannot render {CONFIG_FILE}: {' and '.join(missing)} configuration not set"
            )
        return GenerationRequest(database=self._database, site=self._site)

    def render(self) -> GeneratedFile:
        return GeneratedFile(
            path=CONFIG_FILE,
            content=render_config(self.request),
            overwrite=True,
            reason="Moodle site configuration",
        )

    def generate(self) -> Path:
        """Render then write config.php, replacing any existing file."""
        self.io.write("- Generating Moodle configuration file...", newline=False, style="info")
        generated = self.render()
        path = self._write(generated)
        self.io.write(" done.", style="info")
        return path
