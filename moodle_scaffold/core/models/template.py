"""
Scaffolded file model — what a generator's ``render()`` hands to the writer.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GeneratedFile(BaseModel):
    """Complete content of one file under the installation root.

    ``overwrite`` is the generator's policy for an existing target:
    config.php is only rendered once the operator has agreed to replace
    it, and the shim is regenerated on every run.  A file rendered with
    ``overwrite=False`` is never written over an existing one.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    content: str
    overwrite: bool = False
    reason: str = ""
