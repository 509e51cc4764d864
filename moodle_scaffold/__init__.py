"""Moodle scaffold — interactive generator for a Moodle installation's config.php."""

__version__ = "0.1.0"
