"""
Shim config.php generator — the file Moodle core actually loads.

Moodle looks for config.php inside its own directory.  The shim there
pulls in the site configuration from the installation root and then
bootstraps Moodle with lib/setup.php.  It carries no site data, so it
is regenerated on every scaffold run.
"""

from __future__ import annotations

from pathlib import Path

from moodle_scaffold.core.models.template import GeneratedFile
from moodle_scaffold.core.services.generators.base import BaseGenerator

# Moodle core is installed under this directory of the installation root.
MOODLE_DIR = "moodle"

_SHIM = """\
<?php

// This file is generated by moodle-scaffold. Do not edit.
// The site configuration lives in the config.php at the installation root.

require_once(__DIR__ . '/../config.php');
require_once(__DIR__ . '/lib/setup.php');
"""


class ShimConfigFile(BaseGenerator):
    """Generator for ``moodle/config.php``."""

    relative_path = f"{MOODLE_DIR}/config.php"

    def render(self) -> GeneratedFile:
        return GeneratedFile(
            path=self.relative_path,
            content=_SHIM,
            overwrite=True,
            reason="Moodle configuration shim",
        )

    def generate(self) -> Path:
        self.io.write("- Generating Moodle configuration shim...", newline=False, style="info")
        path = self._write(self.render())
        self.io.write(" done.", style="info")
        return path
