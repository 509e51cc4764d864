"""
Scaffold settings model — loaded from the optional scaffold.yml.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

# Lifecycle points a script may be attached to.
PRE_MOODLE_SCAFFOLD = "moodle-pre-scaffold"
POST_MOODLE_SCAFFOLD = "moodle-post-scaffold"

LIFECYCLE_EVENTS = (PRE_MOODLE_SCAFFOLD, POST_MOODLE_SCAFFOLD)


class ScaffoldSettings(BaseModel):
    """Per-installation scaffolder settings.

    ``scripts`` maps a lifecycle event name to shell commands that run,
    in order, in the installation root when that event is dispatched.
    """

    scripts: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("scripts")
    @classmethod
    def _known_events(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        unknown = sorted(set(value) - set(LIFECYCLE_EVENTS))
        if unknown:
            raise ValueError(
                f"Unknown lifecycle event(s): {', '.join(unknown)}. "
                f"Valid: {', '.join(LIFECYCLE_EVENTS)}"
            )
        return value

    def scripts_for(self, event: str) -> list[str]:
        """Commands registered for ``event`` (empty when none)."""
        return list(self.scripts.get(event, []))
