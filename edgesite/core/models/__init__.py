"""
Domain models — Pydantic types for site build tooling.

All models are re-exported here for convenient access:

    from edgesite.core.models import SiteConfig, IndexNowSettings, GeneratedFile
"""

from edgesite.core.models.site import (
    DEFAULT_KEY_ENV_VAR,
    IndexNowSettings,
    OutputMode,
    SiteConfig,
)
from edgesite.core.models.template import GeneratedFile

__all__ = [
    "DEFAULT_KEY_ENV_VAR",
    # template.py
    "GeneratedFile",
    # site.py
    "IndexNowSettings",
    "OutputMode",
    "SiteConfig",
]
