"""
Generated file model — used by all generators.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file rendered from site configuration but not yet on disk.

    Attributes:
        path:      Relative path from the site root.
        content:   Full file content.
        overwrite: Whether an existing file may be replaced.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    overwrite: bool = False
    reason: str = ""
