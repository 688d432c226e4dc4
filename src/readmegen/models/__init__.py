"""readmegen data models.

- PLACEHOLDERS / MetadataMap: The closed key set rendered into templates
- Route: HTTP endpoint found in Java sources
"""

from readmegen.models.metadata import (
    PLACEHOLDERS,
    MetadataMap,
    ensure_complete,
    missing_keys,
)
from readmegen.models.route import Route

__all__ = [
    "PLACEHOLDERS",
    "MetadataMap",
    "ensure_complete",
    "missing_keys",
    "Route",
]
