"""
Tests for the Scaffolder — the interactive generation workflow.

Scripted answers + tmp_path install root → files on disk + result.
"""

import os
import stat
from pathlib import Path

import pytest

from moodle_scaffold.adapters.io.scripted import ScriptedIO
from moodle_scaffold.core.services.generators.config_file import ConfigFile
from moodle_scaffold.core.services.hooks import (
    POST_MOODLE_SCAFFOLD,
    PRE_MOODLE_SCAFFOLD,
    HookRegistry,
)
from moodle_scaffold.core.services.scaffolder import (
    ABORTED,
    DATAROOT_MODE,
    GENERATED,
    SKIPPED,
    Scaffolder,
)

PROMPTS = [
    "What database driver are you using?",
    "Enter the database username: ",
    "Enter the database password: ",
    "Enter the database name: ",
    "Enter the database host (default: localhost): ",
    "Enter the database table prefix (default: mdl_): ",
    "Enter the web root URL (for example, https://moodle.example.com): ",
    "Enter the Moodle data directory path (default: moodledata): ",
]


# ═══════════════════════════════════════════════════════════════════
#  generate_configuration_file
# ═══════════════════════════════════════════════════════════════════


class TestGenerateConfigurationFile:
    def test_reference_run(self, install_root: Path, reference_answers: list):
        """Full answer set → dataroot + config.php, prompts in order."""
        io = ScriptedIO(reference_answers)
        result = Scaffolder(io, install_root).generate_configuration_file()

        assert result.outcome == GENERATED
        assert result.ok is True
        assert io.questions == PROMPTS
        assert io.remaining == 0

        content = (install_root / "config.php").read_text()
        assert "$CFG->dbtype    = 'pgsql';" in content
        assert "$CFG->dblibrary = 'native';" in content
        assert "$CFG->wwwroot   = 'https://example.org';" in content
        assert "$CFG->dataroot  = 'moodledata';" in content
        assert "'dbpersist' => 0," in content
        assert "'dbport' => ''," in content
        assert "'dbsocket' => ''," in content

        assert result.files_written == [str(install_root / "config.php")]
        assert io.output.endswith("Moodle configuration file generated successfully.\n")

    def test_defaults_on_empty_answers(self, install_root: Path):
        """Enter on every defaulted prompt → pgsql/localhost/mdl_/moodledata."""
        io = ScriptedIO(["", None, None, "moodle", "", "", "https://example.org", ""])
        Scaffolder(io, install_root).generate_configuration_file()

        content = (install_root / "config.php").read_text()
        assert "$CFG->dbtype    = 'pgsql';" in content
        assert "$CFG->dbhost    = 'localhost';" in content
        assert "$CFG->dbuser    = '';" in content
        assert "$CFG->dbpass    = '';" in content
        assert "$CFG->prefix    = 'mdl_';" in content
        assert "$CFG->dataroot  = 'moodledata';" in content

    def test_empty_database_name_reprompted(self, install_root: Path):
        io = ScriptedIO(["pgsql", "u", "p", "", "moodle", "", "", "https://example.org", ""])
        result = Scaffolder(io, install_root).generate_configuration_file()

        assert result.outcome == GENERATED
        assert io.messages_with_style("error") == ["Database name cannot be empty."]
        assert io.questions.count("Enter the database name: ") == 2
        assert "$CFG->dbname    = 'moodle';" in (install_root / "config.php").read_text()

    def test_malformed_wwwroot_reprompted_and_slash_stripped(self, install_root: Path):
        io = ScriptedIO([
            "pgsql", "u", "p", "moodle", "", "",
            "not-a-url", "https://example.org/",
            "",
        ])
        Scaffolder(io, install_root).generate_configuration_file()

        assert io.messages_with_style("error") == ["Please enter a valid URL for the web root."]
        content = (install_root / "config.php").read_text()
        assert "$CFG->wwwroot   = 'https://example.org';" in content

    def test_invalid_driver_reselected(self, install_root: Path):
        io = ScriptedIO(["oracle", "mysqli", "u", "p", "moodle", "", "", "https://example.org", ""])
        Scaffolder(io, install_root).generate_configuration_file()
        assert "$CFG->dbtype    = 'mysqli';" in (install_root / "config.php").read_text()

    def test_non_interactive_writes_nothing(self, install_root: Path):
        io = ScriptedIO(interactive=False)
        result = Scaffolder(io, install_root).generate_configuration_file()

        assert result.outcome == ABORTED
        assert result.ok is False
        assert "Non-interactive mode detected" in result.message
        assert io.questions == []
        assert list(install_root.iterdir()) == []

    def test_decline_overwrite_keeps_bytes(self, install_root: Path):
        existing = install_root / "config.php"
        existing.write_bytes(b"<?php // hand-tuned\n")

        io = ScriptedIO([False])
        result = Scaffolder(io, install_root).generate_configuration_file()

        assert result.outcome == ABORTED
        assert existing.read_bytes() == b"<?php // hand-tuned\n"
        assert io.questions == ["Do you want to overwrite the existing configuration file? (y/N) "]
        assert io.messages_with_style("error") == ["Aborting configuration file generation."]

    def test_overwrite_defaults_to_decline(self, install_root: Path):
        (install_root / "config.php").write_text("keep")
        result = Scaffolder(ScriptedIO([""]), install_root).generate_configuration_file()
        assert result.outcome == ABORTED
        assert (install_root / "config.php").read_text() == "keep"

    def test_accept_overwrite_regenerates(self, install_root: Path, reference_answers: list):
        (install_root / "config.php").write_text("old")
        io = ScriptedIO(["y", *reference_answers])
        result = Scaffolder(io, install_root).generate_configuration_file()

        assert result.outcome == GENERATED
        assert "Overwriting existing configuration file as per user request." in (
            io.messages_with_style("warning")
        )
        assert (install_root / "config.php").read_text().startswith("<?php\n\n/**")

    def test_dataroot_created_with_mode(self, install_root: Path):
        io = ScriptedIO(["pgsql", "u", "p", "moodle", "", "", "https://example.org", "data/moodle"])
        result = Scaffolder(io, install_root).generate_configuration_file()

        dataroot = install_root / "data" / "moodle"
        assert dataroot.is_dir()
        assert stat.S_IMODE(dataroot.stat().st_mode) == DATAROOT_MODE
        assert result.directories_created == [str(install_root / "data"), str(dataroot)]
        assert "Created dataroot directory at: data/moodle\n" in io.output

    def test_intermediate_dataroot_directories_get_mode(self, install_root: Path):
        """Each missing ancestor is created 0o750 too, whatever the umask."""
        io = ScriptedIO(
            ["pgsql", "u", "p", "moodle", "", "", "https://example.org", "data/nested/moodledata"]
        )
        previous = os.umask(0o022)
        try:
            Scaffolder(io, install_root).generate_configuration_file()
        finally:
            os.umask(previous)

        for directory in (
            install_root / "data",
            install_root / "data" / "nested",
            install_root / "data" / "nested" / "moodledata",
        ):
            assert stat.S_IMODE(directory.stat().st_mode) == DATAROOT_MODE, directory
            assert stat.S_IMODE(directory.stat().st_mode) & 0o007 == 0

    def test_existing_ancestors_keep_their_mode(self, install_root: Path):
        parent = install_root / "data"
        parent.mkdir()
        parent.chmod(0o755)
        io = ScriptedIO(["pgsql", "u", "p", "moodle", "", "", "https://example.org", "data/moodle"])
        result = Scaffolder(io, install_root).generate_configuration_file()

        assert stat.S_IMODE(parent.stat().st_mode) == 0o755
        assert result.directories_created == [str(parent / "moodle")]

    def test_existing_dataroot_left_alone(self, install_root: Path, reference_answers: list):
        (install_root / "moodledata").mkdir()
        io = ScriptedIO(reference_answers)
        result = Scaffolder(io, install_root).generate_configuration_file()
        assert result.directories_created == []
        assert "Created dataroot" not in io.output

    def test_absolute_dataroot(self, install_root: Path, tmp_path: Path):
        target = tmp_path / "elsewhere" / "moodledata"
        io = ScriptedIO(["pgsql", "u", "p", "moodle", "", "", "https://example.org", str(target)])
        Scaffolder(io, install_root).generate_configuration_file()
        assert target.is_dir()
        assert f"$CFG->dataroot  = '{target}';" in (install_root / "config.php").read_text()

    def test_prompts_finish_before_any_write(self, install_root: Path):
        """Running out of answers mid-way leaves the filesystem untouched."""
        from moodle_scaffold.adapters.io.scripted import ScriptExhaustedError

        io = ScriptedIO(["pgsql", "u", "p", "moodle", "", "", "https://example.org"])
        with pytest.raises(ScriptExhaustedError):
            Scaffolder(io, install_root).generate_configuration_file()
        assert list(install_root.iterdir()) == []

    def test_dataroot_failure_propagates(self, install_root: Path):
        (install_root / "blocker").write_text("a file, not a directory")
        io = ScriptedIO(["pgsql", "u", "p", "moodle", "", "", "https://example.org", "blocker/data"])
        with pytest.raises(OSError):
            Scaffolder(io, install_root).generate_configuration_file()
        assert not (install_root / "config.php").exists()


# ═══════════════════════════════════════════════════════════════════
#  scaffold
# ═══════════════════════════════════════════════════════════════════


class TestScaffold:
    def test_fresh_install(self, install_root: Path, reference_answers: list):
        io = ScriptedIO(reference_answers)
        result = Scaffolder(io, install_root).scaffold()

        assert result.outcome == GENERATED
        assert (install_root / "moodle" / "config.php").is_file()
        assert (install_root / "config.php").is_file()
        assert result.files_written == [
            str(install_root / "moodle" / "config.php"),
            str(install_root / "config.php"),
        ]
        assert "Scaffolding Moodle core files..." in io.messages_with_style("info")
        assert io.output.endswith("Moodle core files scaffolded successfully.\n")

    def test_existing_config_skipped_without_prompting(self, install_root: Path, monkeypatch):
        existing = install_root / "config.php"
        existing.write_bytes(b"<?php $CFG = 1;\n")

        def _fail(self):
            raise AssertionError("generate() must not run")

        monkeypatch.setattr(ConfigFile, "generate", _fail)

        io = ScriptedIO()
        result = Scaffolder(io, install_root).scaffold()

        assert result.outcome == SKIPPED
        assert io.questions == []
        assert existing.read_bytes() == b"<?php $CFG = 1;\n"
        assert "- Configuration file already exists. Skipping generation." in (
            io.messages_with_style("comment")
        )

    def test_shim_generated_even_when_skipping(self, install_root: Path):
        (install_root / "config.php").write_text("<?php\n")
        result = Scaffolder(ScriptedIO(), install_root).scaffold()
        assert (install_root / "moodle" / "config.php").is_file()
        assert result.files_written == [str(install_root / "moodle" / "config.php")]

    def test_repeat_run_is_noop(self, install_root: Path, reference_answers: list):
        Scaffolder(ScriptedIO(reference_answers), install_root).scaffold()
        before = (install_root / "config.php").read_bytes()

        result = Scaffolder(ScriptedIO(), install_root).scaffold()

        assert result.outcome == SKIPPED
        assert (install_root / "config.php").read_bytes() == before

    def test_non_interactive_fresh_install(self, install_root: Path):
        io = ScriptedIO(interactive=False)
        result = Scaffolder(io, install_root).scaffold()

        assert result.outcome == ABORTED
        assert not (install_root / "config.php").exists()
        assert (install_root / "moodle" / "config.php").is_file()

    def test_hooks_dispatched_around_run(self, install_root: Path):
        calls: list[tuple[str, bool]] = []
        hooks = HookRegistry()
        hooks.register(
            PRE_MOODLE_SCAFFOLD,
            lambda event, root: calls.append((event, (root / "moodle").exists())),
        )
        hooks.register(
            POST_MOODLE_SCAFFOLD,
            lambda event, root, result: calls.append((event, result.outcome == SKIPPED)),
        )
        (install_root / "config.php").write_text("<?php\n")

        Scaffolder(ScriptedIO(), install_root, hooks=hooks).scaffold()

        assert calls == [(PRE_MOODLE_SCAFFOLD, False), (POST_MOODLE_SCAFFOLD, True)]

    def test_failing_pre_hook_stops_run(self, install_root: Path):
        hooks = HookRegistry()

        def _boom(**_):
            raise RuntimeError("listener failed")

        hooks.register(PRE_MOODLE_SCAFFOLD, _boom)
        with pytest.raises(RuntimeError, match="listener failed"):
            Scaffolder(ScriptedIO(), install_root, hooks=hooks).scaffold()
        assert list(install_root.iterdir()) == []
